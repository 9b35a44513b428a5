"""
LoggingMiddleware: one log line per request and per response.

The session cookie and the CSRF token are replaced by ``<redacted>`` before
anything reaches a handler, so the middleware is safe to leave on in
production logs.
"""

import contextvars
import logging
import time

from roblox_sdk.transport.base import UnifiedResponse

logger = logging.getLogger("roblox_sdk.middleware.logging")

REDACTED_HEADERS = frozenset({"cookie", "x-csrf-token"})

# Per task, so concurrent calls through one client time themselves independently.
_request_started: contextvars.ContextVar[float | None] = contextvars.ContextVar(
    "roblox_sdk_request_started", default=None
)


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    return {
        key: "<redacted>" if key.lower() in REDACTED_HEADERS else value
        for key, value in headers.items()
    }


class LoggingMiddleware:
    """
    Logs every attempt at ``level`` on the ``roblox_sdk.middleware.logging`` logger.

    Example:
        client = RobloxClient(middlewares=[LoggingMiddleware(logging.DEBUG)])
    """

    def __init__(self, level: int = logging.INFO):
        self.level = level

    async def on_request(
        self,
        method: str,
        url: str,
        headers: dict,
        params,
        content,
    ):
        _request_started.set(time.monotonic())
        logger.log(
            self.level,
            "Request: %s %s | headers=%s | params=%s | bytes=%d",
            method,
            url,
            redact_headers(headers),
            params,
            len(content or b""),
        )

    async def on_response(self, response: UnifiedResponse):
        started = _request_started.get()
        logger.log(
            self.level,
            "Response: %s%s",
            response.status_code,
            f" | elapsed={time.monotonic() - started:.3f}s" if started is not None else "",
        )
