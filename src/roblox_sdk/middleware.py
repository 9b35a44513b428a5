"""
Hooks around every HTTP attempt made by RobloxClient.

A middleware sees each attempt, not each logical call: a request that goes
through the CSRF retry reaches ``on_request``/``on_response`` twice, the
second time with the refreshed x-csrf-token header already in place.

Shipped implementation: LoggingMiddleware (redacted request/response logs).
"""

from typing import Any
from typing import Protocol

from roblox_sdk.transport.base import UnifiedResponse


class Middleware(Protocol):
    async def on_request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        params: dict[str, Any] | None,
        content: bytes | None,
    ) -> None:
        """
        Runs right before the attempt is handed to the transport.

        ``headers`` is the dict that will be sent, so adding a key (a trace
        id, say) changes the request. Raising aborts the call; the exception
        reaches the caller unchanged.

        Args:
            method (str): HTTP verb
            url (str): Absolute URL, without the query string
            headers (dict): Outgoing headers, cookie and CSRF token included
            params (dict | None): Query string parameters
            content (bytes | None): Already serialized body
        """

    async def on_response(self, response: UnifiedResponse) -> None:
        """
        Runs once the transport returned, before classification.

        Not called when the transport failed without a status.
        """
