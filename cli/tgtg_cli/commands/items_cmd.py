from __future__ import annotations

import httpx
import typer
from rich.table import Table

from tgtg_client import TgtgClientError
from tgtg_client.items_types import FavoriteItemRequest, GetItemRequest, ListItemsRequest, Origin

from .. import console
from ..config import load_config
from ..formatting import format_interval, format_price
from ..http import fail, make_client

app = typer.Typer(help="Item discovery commands.")


def _origin(lat: float | None, lng: float | None) -> Origin | None:
    if lat is None and lng is None:
        return None
    if lat is None or lng is None:
        console.err("--lat and --lng must be given together.")
        raise typer.Exit(code=2)
    return Origin(latitude=lat, longitude=lng)


@app.command("list")
def list_items(
    lat: float | None = typer.Option(None, "--lat", help="Latitude of the search origin."),
    lng: float | None = typer.Option(None, "--lng", help="Longitude of the search origin."),
    radius: int = typer.Option(1, "--radius", help="Search radius in km."),
    page: int = typer.Option(1, "--page", help="Page number (1-based)."),
    page_size: int = typer.Option(20, "--page-size", help="Items per page."),
    favorites_only: bool = typer.Option(False, "--favorites-only", help="Only favorite items."),
    with_stock_only: bool = typer.Option(False, "--with-stock-only", help="Only items with bags left."),
    search: str = typer.Option("", "--search", help="Search phrase."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
    json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    if page < 1:
        console.err("--page must be >= 1.")
        raise typer.Exit(code=2)
    if page_size < 1:
        console.err("--page-size must be >= 1.")
        raise typer.Exit(code=2)

    request = ListItemsRequest(
        page=page,
        page_size=page_size,
        radius=radius,
        origin=_origin(lat, lng),
        favorites_only=favorites_only,
        with_stock_only=with_stock_only,
        search_phrase=search,
    )
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)
    try:
        resp = client.items.list(request)
    except (TgtgClientError, httpx.HTTPError) as e:
        fail("Listing items", e)
    finally:
        client.close()

    if json_out:
        console.print_model(resp)
        return

    table = Table(title="Items")
    table.add_column("item_id", style="bold")
    table.add_column("name")
    table.add_column("available")
    table.add_column("price")
    table.add_column("pickup")
    table.add_column("distance")
    for entry in resp.items:
        table.add_row(
            entry.item.item_id or "-",
            entry.display_name or entry.store.store_name or "-",
            str(entry.items_available),
            format_price(entry.item.price_including_taxes),
            format_interval(entry.pickup_interval),
            f"{entry.distance:.1f}",
        )
    console.print(table)


@app.command("get")
def get_item(
    item_id: str = typer.Argument(..., help="Item ID."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
    json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)
    try:
        resp = client.items.get(GetItemRequest(), item_id)
    except (TgtgClientError, httpx.HTTPError) as e:
        fail("Getting item", e)
    finally:
        client.close()

    if json_out:
        console.print_model(resp)
        return

    address = resp.pickup_location.address
    console.print(f"[bold]{resp.display_name or resp.item.name}[/] ({resp.item.item_id})")
    console.print(f"store:     {resp.store.store_name} {resp.store.branch}".rstrip())
    console.print(f"available: {resp.items_available}")
    console.print(f"price:     {format_price(resp.item.price_including_taxes)}")
    console.print(f"pickup:    {format_interval(resp.pickup_interval)}")
    console.print(f"address:   {address.address_line or '-'}")
    console.print(f"favorite:  {'yes' if resp.favorite else 'no'}")


@app.command("favorite")
def favorite_item(
    item_id: str = typer.Argument(..., help="Item ID."),
    unset: bool = typer.Option(False, "--unset", help="Remove from favorites instead."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)
    try:
        client.items.favorite(FavoriteItemRequest(is_favorite=not unset), item_id)
    except (TgtgClientError, httpx.HTTPError) as e:
        fail("Setting favorite", e)
    finally:
        client.close()

    console.ok(f"Item {item_id} {'removed from' if unset else 'added to'} favorites.")
