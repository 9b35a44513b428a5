"""
Synchronous wrapper for RobloxClient.

This module provides a synchronous interface on top of the async RobloxClient
to support users who need sync operations.
"""

import asyncio

from .client import RobloxClient
from .config import RobloxAPISettings
from .models import ItemArgs
from .models import ItemDetails
from .models import Listing
from .models import Trade
from .models import TradeType
from .models import UserPresence
from .models import UserSale
from .pagination import Limit


class RobloxClientSync:
    """
    Synchronous wrapper for RobloxClient.

    The wrapper drives a private event loop for its whole lifetime, so the
    transport's connection pool and the cached CSRF token survive between
    calls.

    Example:
        with RobloxClientSync(roblosecurity="your-cookie") as client:
            print(client.robux())
    """

    def __init__(
        self,
        settings: RobloxAPISettings | None = None,
        *,
        roblosecurity: str | None = None,
        proxy: str | None = None,
        transport_name: str | None = None,
        retry_attempts: int | None = None,
    ):
        """
        Initialize the synchronous client.

        Args:
            settings: API configuration settings
            roblosecurity: Session cookie, overrides settings
            proxy: Proxy URL, overrides settings
            transport_name: HTTP transport to use (httpx, aiohttp, requests)
            retry_attempts: Attempts for calls failing with a transport error
        """
        self._async_client = RobloxClient(
            settings=settings,
            roblosecurity=roblosecurity,
            proxy=proxy,
            transport_name=transport_name,
            retry_attempts=retry_attempts,
        )
        self._loop = asyncio.new_event_loop()

    def _run(self, coro):
        return self._loop.run_until_complete(coro)

    def user_id(self) -> int:
        return self._run(self._async_client.user_id())

    def username(self) -> str:
        return self._run(self._async_client.username())

    def display_name(self) -> str:
        return self._run(self._async_client.display_name())

    def robux(self) -> int:
        """
        Synchronous robux balance.

        Raises:
            AuthRequired: If the session cookie is missing or invalid
        """
        return self._run(self._async_client.robux())

    def resellers(
        self, item_id: int, limit: Limit | int = Limit.TEN, cursor: str | None = None
    ) -> tuple[list[Listing], str | None]:
        return self._run(self._async_client.resellers(item_id, limit, cursor))

    def user_sales(
        self, limit: Limit | int = Limit.TEN, cursor: str | None = None
    ) -> tuple[list[UserSale], str | None]:
        return self._run(self._async_client.user_sales(limit, cursor))

    def put_limited_on_sale(self, item_id: int, uaid: int, price: int) -> None:
        self._run(self._async_client.put_limited_on_sale(item_id, uaid, price))

    def take_limited_off_sale(self, item_id: int, uaid: int) -> None:
        self._run(self._async_client.take_limited_off_sale(item_id, uaid))

    def purchase_limited(self, product_id: int, seller_id: int, uaid: int, price: int) -> None:
        """
        Synchronous limited purchase.

        Raises:
            PurchaseLimitedError: If the platform refused the purchase
        """
        self._run(self._async_client.purchase_limited(product_id, seller_id, uaid, price))

    def item_details(self, items: list[ItemArgs]) -> list[ItemDetails]:
        return self._run(self._async_client.item_details(items))

    def presence(self, user_ids: list[int]) -> list[UserPresence]:
        return self._run(self._async_client.presence(user_ids))

    def trades(
        self,
        trade_type: TradeType = TradeType.INBOUND,
        limit: Limit | int = Limit.TEN,
        cursor: str | None = None,
    ) -> tuple[list[Trade], str | None]:
        return self._run(self._async_client.trades(trade_type, limit, cursor))

    def close(self):
        """
        Synchronous cleanup of client resources.
        """
        if self._loop.is_closed():
            return
        try:
            self._run(self._async_client.aclose())
        finally:
            self._loop.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
