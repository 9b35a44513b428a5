from roblox_sdk.endpoints import EndpointMixin
from roblox_sdk.executor import RequestDescriptor
from roblox_sdk.models import Trade
from roblox_sdk.models import TradeType
from roblox_sdk.models import decode_model
from roblox_sdk.pagination import Limit

TRADES_API = "https://trades.roblox.com/v1/trades"


class TradesMixin(EndpointMixin):
    async def trades(
        self,
        trade_type: TradeType = TradeType.INBOUND,
        limit: Limit | int = Limit.TEN,
        cursor: str | None = None,
    ) -> tuple[list[Trade], str | None]:
        """
        One page of the authenticated account's trades of ``trade_type``.

        Returns:
            tuple[list[Trade], str | None]: Trades and the next page cursor.
        """
        self._require_credential()
        page = await self.next_page(
            RequestDescriptor("GET", f"{TRADES_API}/{TradeType(trade_type).value}"),
            cursor,
            limit,
        )
        return [decode_model(Trade, raw) for raw in page.items], page.next_cursor
