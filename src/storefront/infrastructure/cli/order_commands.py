"""CLI commands for the cart checkout and the Order aggregate."""

from __future__ import annotations

from datetime import datetime

import click

from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import CartLineSpec
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.infrastructure.bootstrap import unit_of_work
from storefront.infrastructure.cli.errors import fail
from storefront.infrastructure.cli.formatting import echo_order, money


def _parse_items(raw: str) -> list[CartLineSpec]:
    """Parse '1:3,2:5' (product ID : quantity) into CartLineSpec list."""
    specs: list[CartLineSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        id_str, qty_str = pair.split(":", 1)
        try:
            specs.append(CartLineSpec(product_id=int(id_str), quantity=int(qty_str)))
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Product ID and quantity must be integers."
            )
    return specs


@click.command("checkout")
@click.option("--items", required=True, help="Cart lines as 'ProductId:Qty,ProductId:Qty'.")
@click.pass_obj
def cart_checkout(settings, items: str) -> None:
    """Check out a cart: takes stock and creates a confirmed order."""
    specs = _parse_items(items)
    handler = CheckoutHandler(unit_of_work(settings))

    try:
        dto = handler.handle(specs)
    except Exception as exc:
        fail(exc)

    click.echo(f"Order #{dto.id} created  (status={dto.status})")
    click.echo()
    echo_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(settings, order_id: int) -> None:
    """Show details of an existing order."""
    try:
        dto = ShowOrderHandler(unit_of_work(settings)).handle(order_id)
    except Exception as exc:
        fail(exc)

    echo_order(dto)


@click.command("list")
@click.option("--status", default=None, help="PENDING, CONFIRMED or CANCELLED.")
@click.option("--after", "created_after", type=click.DateTime(), default=None,
              help="Only orders created after this moment (UTC).")
@click.option("--before", "created_before", type=click.DateTime(), default=None,
              help="With --after: only orders created up to this moment (UTC).")
@click.pass_obj
def order_list(
    settings,
    status: str | None,
    created_after: datetime | None,
    created_before: datetime | None,
) -> None:
    """List orders, most recent first."""
    handler = ListOrdersHandler(unit_of_work(settings))

    try:
        orders = handler.handle(
            status=status, created_after=created_after, created_before=created_before
        )
    except Exception as exc:
        fail(exc)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Status':<10} {'Created':<22} {'Lines':>5} {'Total':>14}")
    click.echo("-" * 61)
    for dto in orders:
        click.echo(
            f"{dto.id:<6} {dto.status:<10} {dto.created_at:<22} "
            f"{len(dto.lines):>5} {money(dto.total):>14}"
        )


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@click.pass_obj
def order_cancel(settings, order_id: int) -> None:
    """Cancel an order and put its items back in stock."""
    try:
        CancelOrderHandler(unit_of_work(settings)).handle(order_id)
    except Exception as exc:
        fail(exc)

    click.echo(f"Order #{order_id} cancelled, stock restored.")
