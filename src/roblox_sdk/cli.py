"""
Command-line interface for Roblox SDK.

This module provides a small CLI for exercising the SDK against the live API.
All commands use async operations under the hood. The session cookie is read
from ROBLOX_API_ROBLOSECURITY (or a .env file), never from the command line.

Available commands:
- whoami: Show the account behind the session cookie
- robux: Show the robux balance
- resellers: List resale listings of a limited item
- user-sales: List recent sales
- trades: List trades of a given type
- presence: Show the online status of users
- item-details: Show catalog details of assets
"""

import asyncio
import logging
import sys

import click
from pydantic import ValidationError

from roblox_sdk.client import RobloxClient
from roblox_sdk.config import RobloxAPISettings
from roblox_sdk.exceptions import ConfigError
from roblox_sdk.exceptions import RobloxAPIError
from roblox_sdk.logging_middleware import LoggingMiddleware
from roblox_sdk.models import ItemArgs
from roblox_sdk.models import ItemType
from roblox_sdk.models import TradeType
from roblox_sdk.pagination import Limit

logger = logging.getLogger("roblox_sdk.cli")

LIMIT_CHOICE = click.Choice([str(int(limit)) for limit in Limit])


def _run(ctx: click.Context, operation):
    """Build a client from the CLI context, run ``operation(client)`` and close it."""

    async def _main():
        try:
            settings = RobloxAPISettings()
        except ValidationError as err:
            raise ConfigError(f"Invalid ROBLOX_API_* settings: {err}") from err
        middlewares = [LoggingMiddleware(logging.DEBUG)] if ctx.obj["verbose"] else []
        client = RobloxClient(settings, proxy=ctx.obj["proxy"], middlewares=middlewares)
        try:
            return await operation(client)
        finally:
            await client.aclose()

    try:
        return asyncio.run(_main())
    except RobloxAPIError as exc:
        logger.debug("Command failed", exc_info=True)
        click.echo(f"Error ({type(exc).__name__}): {exc}", err=True)
        sys.exit(1)


@click.group()
@click.option("--proxy", default=None, help="Proxy URL all requests are routed through")
@click.option("--verbose", "-v", is_flag=True, help="Log every request and response")
@click.pass_context
def cli(ctx, proxy, verbose):
    """Roblox SDK CLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["proxy"] = proxy
    ctx.obj["verbose"] = verbose


@cli.command()
@click.pass_context
def whoami(ctx):
    """Show the account behind the session cookie."""
    info = _run(ctx, lambda client: client.user_information())
    click.echo(f"{info.username} ({info.display_name}) id={info.user_id}")


@cli.command()
@click.pass_context
def robux(ctx):
    """Show the robux balance."""
    click.echo(_run(ctx, lambda client: client.robux()))


@cli.command()
@click.option("--item-id", required=True, type=int, help="Asset id of the limited")
@click.option("--limit", default="10", type=LIMIT_CHOICE, help="Page size")
@click.option("--cursor", default=None, help="Cursor of the page to fetch")
@click.pass_context
def resellers(ctx, item_id, limit, cursor):
    """List resale listings of a limited item."""
    listings, next_cursor = _run(
        ctx, lambda client: client.resellers(item_id, int(limit), cursor)
    )
    for listing in listings:
        click.echo(
            f"uaid={listing.uaid} price={listing.price} seller={listing.reseller.name}"
        )
    if next_cursor:
        click.echo(f"next cursor: {next_cursor}")


@cli.command()
@click.option("--limit", default="10", type=LIMIT_CHOICE, help="Page size")
@click.option("--cursor", default=None, help="Cursor of the page to fetch")
@click.pass_context
def user_sales(ctx, limit, cursor):
    """List recent sales of the authenticated account."""
    sales, next_cursor = _run(ctx, lambda client: client.user_sales(int(limit), cursor))
    for sale in sales:
        pending = " (pending)" if sale.is_pending else ""
        click.echo(
            f"{sale.asset_name}: {sale.robux_received} robux from {sale.user_display_name}{pending}"
        )
    if next_cursor:
        click.echo(f"next cursor: {next_cursor}")


@cli.command()
@click.option(
    "--type",
    "trade_type",
    default=TradeType.INBOUND.value,
    type=click.Choice([trade_type.value for trade_type in TradeType]),
    help="Trade type",
)
@click.option("--limit", default="10", type=LIMIT_CHOICE, help="Page size")
@click.option("--cursor", default=None, help="Cursor of the page to fetch")
@click.pass_context
def trades(ctx, trade_type, limit, cursor):
    """List trades of the authenticated account."""
    items, next_cursor = _run(
        ctx, lambda client: client.trades(TradeType(trade_type), int(limit), cursor)
    )
    for trade in items:
        click.echo(f"{trade.id} with {trade.user.name}: {trade.status}")
    if next_cursor:
        click.echo(f"next cursor: {next_cursor}")


@cli.command()
@click.argument("user_ids", nargs=-1, required=True, type=int)
@click.pass_context
def presence(ctx, user_ids):
    """Show the online status of USER_IDS."""
    presences = _run(ctx, lambda client: client.presence(user_ids))
    for entry in presences:
        click.echo(f"{entry.user_id}: {entry.user_presence_type.name.lower()}")


@cli.command()
@click.argument("asset_ids", nargs=-1, required=True, type=int)
@click.pass_context
def item_details(ctx, asset_ids):
    """Show catalog details of ASSET_IDS."""
    items = [ItemArgs(item_type=ItemType.ASSET, id=asset_id) for asset_id in asset_ids]
    details = _run(ctx, lambda client: client.item_details(items))
    for item in details:
        price = item.price if item.price is not None else item.lowest_price
        click.echo(f"{item.id}: {item.name} price={price}")


if __name__ == "__main__":
    cli()
