import json
from collections.abc import Mapping
from typing import Any

import httpx


class UnifiedResponse:
    """
    Status, headers and body of one attempt, whatever library produced them.

    Transports read the whole body before building it, so a UnifiedResponse
    never holds an open connection. Header lookups are case-insensitive.
    """

    def __init__(
        self,
        status_code: int,
        headers: Mapping[str, str] | None = None,
        content: bytes = b"",
    ):
        self.status_code = status_code
        self.headers = httpx.Headers(list(headers.items()) if headers else None)
        self.content = content

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    async def json(self) -> Any:
        """
        Parse the body as JSON. Kept async so middleware written against any
        transport can await it.
        """
        return json.loads(self.content)

    def __repr__(self) -> str:
        return f"UnifiedResponse(status_code={self.status_code}, bytes={len(self.content)})"


class BaseTransport:
    """
    Interface the request executor sends attempts through.

    Every implementation routes all requests through ``proxy`` when one is
    configured and raises roblox_sdk.exceptions.TransportError for failures
    that happen before a status line is received.
    """

    proxy: str | None = None

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        content: bytes | None = None,
        timeout: float | None = None,
    ) -> UnifiedResponse:
        """Send one request and return the fully read response."""
        raise NotImplementedError(
            "Transport implementations must override this method."
        )

    async def close(self) -> None:
        """Release pooled connections."""
