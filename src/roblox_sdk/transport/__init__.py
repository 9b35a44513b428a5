"""
HTTP backends of the request engine.

The executor only talks to BaseTransport, so the HTTP library underneath is
interchangeable:

- httpx: default, installed with the SDK
- aiohttp: optional extra ``roblox-sdk[aiohttp]``
- requests: optional extra ``roblox-sdk[requests]``, run in a thread pool

A transport is bound to the client's proxy when it is built; no request made
through it can bypass that proxy.
"""

from .base import BaseTransport
from .base import UnifiedResponse
from .httpx import HttpxTransport

TRANSPORT_NAMES = ("httpx", "aiohttp", "requests")


def get_transport(
    name: str, timeout: float | None = None, proxy: str | None = None
) -> BaseTransport:
    """
    Build the backend called ``name`` (case-insensitive).

    Raises:
        ValueError: If ``name`` is not one of TRANSPORT_NAMES.
        ImportError: If the optional library of the backend is missing.
    """
    name = name.lower()
    if name == "httpx":
        return HttpxTransport(timeout, proxy=proxy)
    if name not in TRANSPORT_NAMES:
        raise ValueError(
            f"Unknown transport: {name}. Available: {', '.join(TRANSPORT_NAMES)}"
        )

    try:
        if name == "aiohttp":
            from .aiohttp import AiohttpTransport

            return AiohttpTransport(timeout, proxy=proxy)
        from .requests import RequestsTransport

        return RequestsTransport(timeout, proxy=proxy)
    except ImportError as err:
        raise ImportError(
            f"The {name} transport needs the {name} package. "
            f"Install with: pip install roblox-sdk[{name}]"
        ) from err


__all__ = [
    "BaseTransport",
    "UnifiedResponse",
    "HttpxTransport",
    "TRANSPORT_NAMES",
    "get_transport",
]
