from typing import Any

import httpx

from roblox_sdk.exceptions import TransportError

from .base import BaseTransport
from .base import UnifiedResponse


class HttpxTransport(BaseTransport):
    """
    Async transport implementation using httpx.AsyncClient.

    The proxy is bound to the AsyncClient itself, so no request made through
    this transport can bypass it.
    """

    def __init__(
        self,
        timeout: float | None = None,
        proxy: str | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self._timeout = timeout
        self.proxy = proxy
        self._client = client or httpx.AsyncClient(timeout=timeout, proxy=proxy)

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        content: bytes | None = None,
        timeout: float | None = None,
    ) -> UnifiedResponse:
        try:
            response = await self._client.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                content=content,
                timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
            )
        except httpx.RequestError as err:
            raise TransportError(f"{method} {url} failed: {err!r}", cause=err) from err
        return UnifiedResponse(response.status_code, response.headers, response.content)

    async def close(self):
        await self._client.aclose()
