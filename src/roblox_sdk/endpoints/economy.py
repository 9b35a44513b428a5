"""
Economy endpoints: balance, resale listings, sales history and limited trading.

Write operations (listing, delisting, purchasing) are CSRF protected; the
engine refreshes the token and repeats them once when challenged.
"""

import logging

from roblox_sdk.endpoints.users import UsersMixin
from roblox_sdk.exceptions import PurchaseFailureReason
from roblox_sdk.exceptions import PurchaseLimitedError
from roblox_sdk.executor import RequestDescriptor
from roblox_sdk.models import CurrencyResponse
from roblox_sdk.models import Listing
from roblox_sdk.models import PurchaseLimitedResponse
from roblox_sdk.models import RawListing
from roblox_sdk.models import RawUserSale
from roblox_sdk.models import UserSale
from roblox_sdk.models import decode_model
from roblox_sdk.pagination import Limit

logger = logging.getLogger("roblox_sdk.endpoints.economy")

ECONOMY_API = "https://economy.roblox.com"
USER_SALES_TRANSACTION_TYPE = "Sale"
ROBUX_CURRENCY_TYPE = 1

PURCHASE_ERROR_MESSAGES = {
    "You have a pending transaction. Please wait 1 minute and try again.": PurchaseFailureReason.PENDING_TRANSACTION,
    "You already own this item.": PurchaseFailureReason.CANNOT_BUY_OWN_ITEM,
    "This item is not for sale.": PurchaseFailureReason.ITEM_NOT_FOR_SALE,
    "You do not have enough Robux to purchase this item.": PurchaseFailureReason.NOT_ENOUGH_ROBUX,
    "This item has changed price. Please try again.": PurchaseFailureReason.PRICE_CHANGED,
}


class EconomyMixin(UsersMixin):
    async def robux(self) -> int:
        """
        Robux balance of the authenticated account.

        Raises:
            AuthRequired: If no .ROBLOSECURITY is set or it is invalid.
        """
        self._require_credential()
        user_id = await self.user_id()
        response = await self.request(
            RequestDescriptor("GET", f"{ECONOMY_API}/v1/users/{user_id}/currency")
        )
        return decode_model(CurrencyResponse, response.json()).robux

    async def resellers(
        self,
        item_id: int,
        limit: Limit | int = Limit.TEN,
        cursor: str | None = None,
    ) -> tuple[list[Listing], str | None]:
        """
        Resale listings of a limited item, cheapest first.

        Args:
            item_id (int): Asset id of the limited.
            limit (Limit | int): Page size.
            cursor (str | None): Cursor of the page to fetch, None for the first.

        Returns:
            tuple[list[Listing], str | None]: Listings and the next page cursor.
        """
        self._require_credential()
        page = await self.next_page(
            RequestDescriptor("GET", f"{ECONOMY_API}/v1/assets/{item_id}/resellers"),
            cursor,
            limit,
        )
        listings = [decode_model(RawListing, raw).to_listing() for raw in page.items]
        return listings, page.next_cursor

    async def user_sales(
        self,
        limit: Limit | int = Limit.TEN,
        cursor: str | None = None,
    ) -> tuple[list[UserSale], str | None]:
        """Sales from the authenticated account's transaction history."""
        self._require_credential()
        user_id = await self.user_id()
        page = await self.next_page(
            RequestDescriptor(
                "GET",
                f"{ECONOMY_API}/v2/users/{user_id}/transactions",
                params={"transactionType": USER_SALES_TRANSACTION_TYPE},
            ),
            cursor,
            limit,
        )
        sales = [decode_model(RawUserSale, raw).to_user_sale() for raw in page.items]
        return sales, page.next_cursor

    async def put_limited_on_sale(self, item_id: int, uaid: int, price: int) -> None:
        """
        List one copy (``uaid``) of a limited item for ``price`` robux.

        Raises:
            PlatformError: If the platform refuses the listing.
        """
        self._require_credential()
        await self.request(
            RequestDescriptor.from_json(
                "PATCH",
                f"{ECONOMY_API}/v1/assets/{item_id}/resellable-copies/{uaid}",
                {"price": price},
                requires_csrf=True,
            )
        )
        logger.info("Listed uaid %s of item %s for %s robux", uaid, item_id, price)

    async def take_limited_off_sale(self, item_id: int, uaid: int) -> None:
        self._require_credential()
        await self.request(
            RequestDescriptor.from_json(
                "PATCH",
                f"{ECONOMY_API}/v1/assets/{item_id}/resellable-copies/{uaid}",
                {},
                requires_csrf=True,
            )
        )
        logger.info("Took uaid %s of item %s off sale", uaid, item_id)

    async def purchase_limited(
        self, product_id: int, seller_id: int, uaid: int, price: int
    ) -> None:
        """
        Buy a resale listing of a limited (including Limited U) item.

        Args:
            product_id (int): Product id of the limited, NOT the item id.
            seller_id (int): User id of the reseller.
            uaid (int): User asset id of the listed copy.
            price (int): Expected price in robux.

        Raises:
            PurchaseLimitedError: If the platform answered but did not complete
                the purchase. ``reason`` tells whether retrying makes sense.
        """
        self._require_credential()
        response = await self.request(
            RequestDescriptor.from_json(
                "POST",
                f"{ECONOMY_API}/v1/purchases/products/{product_id}",
                {
                    "expectedCurrency": ROBUX_CURRENCY_TYPE,
                    "expectedPrice": price,
                    "expectedSellerId": seller_id,
                    "userAssetId": uaid,
                },
                requires_csrf=True,
            )
        )
        result = decode_model(PurchaseLimitedResponse, response.json())
        if result.purchased:
            logger.info("Purchased uaid %s for %s robux", uaid, price)
            return

        message = result.error_msg or ""
        reason = PURCHASE_ERROR_MESSAGES.get(message, PurchaseFailureReason.UNKNOWN)
        raise PurchaseLimitedError(reason, message, status_code=response.status_code or 200)
