from collections.abc import Iterable

from roblox_sdk.endpoints import EndpointMixin
from roblox_sdk.executor import RequestDescriptor
from roblox_sdk.models import ItemArgs
from roblox_sdk.models import ItemDetails
from roblox_sdk.models import ItemDetailsResponse
from roblox_sdk.models import decode_model

ITEM_DETAILS_API = "https://catalog.roblox.com/v1/catalog/items/details"


class CatalogMixin(EndpointMixin):
    async def item_details(self, items: Iterable[ItemArgs]) -> list[ItemDetails]:
        """
        Catalog details of assets and bundles.

        The endpoint is a CSRF protected POST even though it only reads, and
        it works without a session cookie.

        Example:
            details = await client.item_details(
                [ItemArgs(item_type=ItemType.ASSET, id=1365767)]
            )
        """
        payload = {
            "items": [item.model_dump(mode="json", by_alias=True) for item in items]
        }
        response = await self.request(
            RequestDescriptor.from_json("POST", ITEM_DETAILS_API, payload, requires_csrf=True)
        )
        return decode_model(ItemDetailsResponse, response.json()).data
