"""
aiohttp backend, installed with the ``aiohttp`` extra.

aiohttp takes the proxy per request rather than per session, so the transport
passes it on every call. SOCKS proxies are not supported by this backend.
"""

import asyncio
from typing import Any

import aiohttp

from roblox_sdk.exceptions import TransportError

from .base import BaseTransport
from .base import UnifiedResponse


class AiohttpTransport(BaseTransport):
    """
    Transport over a lazily created aiohttp.ClientSession.

    The session is opened on first use, inside the running event loop.
    """

    def __init__(self, timeout: float | None = None, proxy: str | None = None):
        self._timeout = timeout
        self.proxy = proxy
        self._session: aiohttp.ClientSession | None = None

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        content: bytes | None = None,
        timeout: float | None = None,
    ) -> UnifiedResponse:
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout)
            )

        timeout_obj = aiohttp.ClientTimeout(
            total=timeout if timeout is not None else self._timeout
        )
        query = {key: str(value) for key, value in params.items()} if params else None
        try:
            async with self._session.request(
                method=method,
                url=url,
                headers=headers,
                params=query,
                data=content,
                proxy=self.proxy,
                timeout=timeout_obj,
            ) as response:
                body = await response.read()
                return UnifiedResponse(response.status, response.headers, body)
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            raise TransportError(f"{method} {url} failed: {err!r}", cause=err) from err

    async def close(self):
        if self._session:
            await self._session.close()
            self._session = None
