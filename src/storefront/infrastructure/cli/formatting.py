"""Plain-text rendering helpers for CLI output."""

from __future__ import annotations

from decimal import Decimal

import click

from storefront.application.dto import OrderDTO, ProductDTO


def money(amount: Decimal) -> str:
    return f"R$ {amount:.2f}"


def echo_products(products: list[ProductDTO]) -> None:
    click.echo(f"{'ID':<6} {'Name':<40} {'Category':<28} {'Price':>12} {'Stock':>6}")
    click.echo("-" * 96)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name[:40]:<40} {p.category[:28]:<28} {money(p.price):>12} {p.stock:>6}"
        )


def echo_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<40} {'Qty':>5} {'Price':>12} {'Subtotal':>12}")
    click.echo(f"  {'-'*72}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_name[:40]:<40} {line.quantity:>5} "
            f"{money(line.unit_price):>12} {money(line.subtotal):>12}"
        )
    click.echo(f"  {'-'*72}")
    click.echo(f"  {'Order Total':<46} {money(dto.total):>26}")
