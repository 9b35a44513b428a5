"""
Cursor pagination for list endpoints.

Roblox list endpoints take ``limit`` and ``cursor`` query parameters and answer
``{"data": [...], "nextPageCursor": "..." | null}``. A ``None`` cursor asks for
the first page; a ``None`` next cursor means there is nothing left. Items are
returned in service order, never reordered or deduplicated.
"""

import dataclasses
from collections.abc import AsyncIterator
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING
from typing import Any

from roblox_sdk.exceptions import ConfigError
from roblox_sdk.exceptions import DecodeError
from roblox_sdk.executor import RequestDescriptor

if TYPE_CHECKING:
    from roblox_sdk.client import RobloxClient


class Limit(IntEnum):
    """Page sizes accepted by Roblox list endpoints."""

    TEN = 10
    TWENTY_FIVE = 25
    FIFTY = 50
    HUNDRED = 100


@dataclass(frozen=True)
class Page:
    items: list[Any]
    next_cursor: str | None

    def __iter__(self):
        # Allows ``items, cursor = await client.next_page(...)``
        return iter((self.items, self.next_cursor))


def validate_limit(limit: Limit | int) -> Limit:
    """
    Coerce ``limit`` to a Limit.

    Raises:
        ConfigError: If the service does not accept this page size.
    """
    if isinstance(limit, bool):
        raise ConfigError(f"Invalid page limit {limit!r}")
    try:
        return Limit(limit)
    except ValueError as err:
        accepted = ", ".join(str(int(value)) for value in Limit)
        raise ConfigError(f"Invalid page limit {limit!r}. Accepted: {accepted}") from err


def page_descriptor(
    base: RequestDescriptor, cursor: str | None, limit: Limit
) -> RequestDescriptor:
    params = dict(base.params or {})
    params["limit"] = int(limit)
    if cursor is not None:
        params["cursor"] = cursor
    else:
        params.pop("cursor", None)
    return dataclasses.replace(base, params=params)


def parse_page(payload: Any) -> Page:
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
        raise DecodeError("Paged response has no 'data' list", details=payload)
    next_cursor = payload.get("nextPageCursor")
    if next_cursor is not None and not isinstance(next_cursor, str):
        raise DecodeError("Paged response has a non-string cursor", details=next_cursor)
    return Page(items=payload["data"], next_cursor=next_cursor or None)


async def next_page(
    client: "RobloxClient",
    base_descriptor: RequestDescriptor,
    cursor: str | None = None,
    limit: Limit | int = Limit.TEN,
) -> Page:
    """
    Fetch one page of a list endpoint.

    The limit is validated before any request is made.

    Args:
        client (RobloxClient): Client that performs the request.
        base_descriptor (RequestDescriptor): The list endpoint, without paging params.
        cursor (str | None): Cursor from a previous page, or None for the first page.
        limit (Limit | int): Page size.

    Returns:
        Page: The page items and the cursor of the following page (None at the end).

    Raises:
        ConfigError: If ``limit`` is not an accepted page size.
        DecodeError: If the payload is not a paged response.
    """
    limit = validate_limit(limit)
    response = await client.request(page_descriptor(base_descriptor, cursor, limit))
    return parse_page(response.json())


async def iter_pages(
    client: "RobloxClient",
    base_descriptor: RequestDescriptor,
    limit: Limit | int = Limit.TEN,
    cursor: str | None = None,
) -> AsyncIterator[Page]:
    """Yield pages from ``cursor`` until the service reports no next cursor."""
    limit = validate_limit(limit)
    while True:
        page = await next_page(client, base_descriptor, cursor, limit)
        yield page
        if page.next_cursor is None:
            return
        cursor = page.next_cursor
