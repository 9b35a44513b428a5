"""
Typed response shapes for the endpoint families.

Raw models mirror the JSON the platform sends (camelCase aliases); public
models are what the client methods return. Decoding goes through
``decode_model`` so shape mismatches surface as DecodeError.
"""

from datetime import datetime
from enum import Enum
from enum import IntEnum
from typing import Any
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from roblox_sdk.exceptions import DecodeError

ModelT = TypeVar("ModelT", bound=BaseModel)


class RobloxModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def decode_model(model: type[ModelT], payload: Any) -> ModelT:
    """Validate ``payload`` against ``model``, raising DecodeError on mismatch."""
    try:
        return model.model_validate(payload)
    except ValidationError as err:
        raise DecodeError(
            f"Unexpected {model.__name__} payload: {err.error_count()} error(s)",
            details=err.errors(include_url=False),
        ) from err


# === Users ===


class UserInformation(RobloxModel):
    """Account behind the session cookie (users/v1/users/authenticated)."""

    user_id: int = Field(alias="id")
    username: str = Field(alias="name")
    display_name: str


# === Economy ===


class CurrencyResponse(RobloxModel):
    robux: int


class Reseller(RobloxModel):
    user_id: int
    name: str


class Listing(RobloxModel):
    """A resale listing of a limited item."""

    uaid: int
    price: int
    reseller: Reseller
    # Only Limited U items carry a serial number.
    serial_number: int | None = None


class _RawSeller(RobloxModel):
    id: int
    name: str


class RawListing(RobloxModel):
    user_asset_id: int
    seller: _RawSeller
    price: int
    serial_number: int | None = None

    def to_listing(self) -> Listing:
        return Listing(
            uaid=self.user_asset_id,
            price=self.price,
            reseller=Reseller(user_id=self.seller.id, name=self.seller.name),
            serial_number=self.serial_number,
        )


class UserSale(RobloxModel):
    """
    A sale from the user's transaction history.

    ``robux_received`` is the amount after marketplace tax.
    """

    sale_id: int
    is_pending: bool
    user_id: int
    user_display_name: str
    robux_received: int
    asset_id: int
    asset_name: str


class _RawAgent(RobloxModel):
    id: int
    name: str


class _RawSaleDetails(RobloxModel):
    id: int
    name: str


class _RawCurrency(RobloxModel):
    amount: int


class RawUserSale(RobloxModel):
    id: int
    is_pending: bool
    agent: _RawAgent
    details: _RawSaleDetails
    currency: _RawCurrency

    def to_user_sale(self) -> UserSale:
        return UserSale(
            sale_id=self.id,
            is_pending=self.is_pending,
            user_id=self.agent.id,
            user_display_name=self.agent.name,
            robux_received=self.currency.amount,
            asset_id=self.details.id,
            asset_name=self.details.name,
        )


class PurchaseLimitedResponse(RobloxModel):
    purchased: bool
    error_msg: str | None = None


# === Catalog ===


class ItemType(str, Enum):
    ASSET = "Asset"
    BUNDLE = "Bundle"


class ItemArgs(RobloxModel):
    item_type: ItemType
    id: int


class ItemDetails(RobloxModel):
    """
    Catalog details of an asset or bundle.

    Limited items carry ``lowest_price`` instead of ``price``.
    """

    id: int | None = None
    item_type: ItemType | None = None
    bundle_type: int | None = None
    asset_type: int | None = None
    name: str | None = None
    description: str | None = None
    product_id: int | None = None
    genres: list[str] | None = None
    item_status: list[str] | None = None
    item_restrictions: list[str] | None = None
    creator_has_verified_badge: bool | None = None
    creator_type: str | None = None
    creator_target_id: int | None = None
    creator_name: str | None = None
    price: int | None = None
    lowest_price: int | None = None
    favorite_count: int | None = None
    price_status: str | None = None


class ItemDetailsResponse(RobloxModel):
    data: list[ItemDetails]


# === Presence ===


class PresenceType(IntEnum):
    OFFLINE = 0
    ONLINE = 1
    IN_GAME = 2
    IN_STUDIO = 3
    INVISIBLE = 4


class UserPresence(RobloxModel):
    user_id: int
    user_presence_type: PresenceType
    last_location: str | None = None
    place_id: int | None = None
    root_place_id: int | None = None
    game_id: str | None = None
    universe_id: int | None = None
    last_online: datetime | None = None


class PresenceResponse(RobloxModel):
    user_presences: list[UserPresence]


# === Trades ===


class TradeType(str, Enum):
    INBOUND = "Inbound"
    OUTBOUND = "Outbound"
    COMPLETED = "Completed"
    INACTIVE = "Inactive"


class TradePartner(RobloxModel):
    id: int
    name: str
    display_name: str | None = None


class Trade(RobloxModel):
    id: int
    user: TradePartner
    created: datetime
    expiration: datetime | None = None
    is_active: bool
    status: str
