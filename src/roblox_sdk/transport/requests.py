import asyncio
from typing import Any

import requests

from roblox_sdk.exceptions import TransportError

from .base import BaseTransport
from .base import UnifiedResponse


class RequestsTransport(BaseTransport):
    """
    Blocking requests.Session driven from the default thread pool.

    Meant for environments where requests is already the vetted HTTP stack
    (corporate proxies, custom adapters). Every call occupies a worker thread,
    so httpx remains the better choice under concurrency.

    SOCKS proxy URLs need the PySocks extra of requests.
    """

    def __init__(self, timeout: float | None = None, proxy: str | None = None):
        self._timeout = timeout
        self.proxy = proxy
        self._proxies = {"http": proxy, "https": proxy} if proxy else None
        self._session = requests.Session()
        # HTTP(S)_PROXY from the environment must not override the configured proxy.
        self._session.trust_env = False

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        content: bytes | None = None,
        timeout: float | None = None,
    ) -> UnifiedResponse:
        send = self._session.request
        kwargs = {
            "method": method,
            "url": url,
            "headers": headers,
            "params": params,
            "data": content,
            "proxies": self._proxies,
            "timeout": timeout if timeout is not None else self._timeout,
        }

        try:
            response = await asyncio.get_running_loop().run_in_executor(
                None, lambda: send(**kwargs)
            )
        except requests.RequestException as err:
            raise TransportError(f"{method} {url} failed: {err!r}", cause=err) from err
        return UnifiedResponse(response.status_code, response.headers, response.content)

    async def close(self):
        await asyncio.get_running_loop().run_in_executor(None, self._session.close)
