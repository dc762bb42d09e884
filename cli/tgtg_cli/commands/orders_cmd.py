from __future__ import annotations

import httpx
import typer
from rich.table import Table

from tgtg_client import TgtgClientError
from tgtg_client.orders_types import InactiveOrdersRequest, OrdersResponse, Paging

from .. import console
from ..config import load_config
from ..formatting import format_interval, format_price
from ..http import fail, make_client

app = typer.Typer(help="Order commands.")


def _print_orders(resp: OrdersResponse, title: str) -> None:
    table = Table(title=title)
    table.add_column("order_id", style="bold")
    table.add_column("state")
    table.add_column("store")
    table.add_column("item")
    table.add_column("qty")
    table.add_column("price")
    table.add_column("pickup")
    for o in resp.orders:
        table.add_row(
            o.order_id or "-",
            o.state or "-",
            f"{o.store_name} {o.store_branch}".strip() or "-",
            o.item_name or "-",
            str(o.quantity),
            format_price(o.price_including_taxes),
            format_interval(o.pickup_interval),
        )
    console.print(table)


@app.command("active")
def active_orders(
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
    json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)
    try:
        resp = client.orders.active()
    except (TgtgClientError, httpx.HTTPError) as e:
        fail("Listing active orders", e)
    finally:
        client.close()

    if json_out:
        console.print_model(resp)
        return
    _print_orders(resp, "Active orders")


@app.command("inactive")
def inactive_orders(
    page: int = typer.Option(0, "--page", help="Page number (0-based, as the API counts)."),
    size: int = typer.Option(20, "--size", help="Orders per page."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
    json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    if page < 0:
        console.err("--page must be >= 0.")
        raise typer.Exit(code=2)
    if size < 1:
        console.err("--size must be >= 1.")
        raise typer.Exit(code=2)

    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)
    try:
        resp = client.orders.inactive(InactiveOrdersRequest(paging=Paging(page=page, size=size)))
    except (TgtgClientError, httpx.HTTPError) as e:
        fail("Listing past orders", e)
    finally:
        client.close()

    if json_out:
        console.print_model(resp)
        return
    _print_orders(resp, "Past orders")
    if resp.has_more:
        console.info(f"More orders available: --page {page + 1}")
