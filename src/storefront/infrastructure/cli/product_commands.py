"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.dto import ProductSpec
from storefront.application.list_products import ListProductsHandler, SearchProductsHandler
from storefront.application.show_product import ShowProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.model.pagination import DEFAULT_SORT, PageRequest
from storefront.infrastructure.bootstrap import unit_of_work
from storefront.infrastructure.cli.errors import fail
from storefront.infrastructure.cli.formatting import echo_products, money


def _product_options(func):
    func = click.option("--image", default=None, help="Image reference (e.g. base64 data URL).")(func)
    func = click.option("--stock", required=True, type=int, help="Units in stock.")(func)
    func = click.option("--price", required=True, help="Price (e.g. 99.90).")(func)
    func = click.option("--category", default="", help="Product category.")(func)
    func = click.option("--name", required=True, help="Product name.")(func)
    return func


@click.command("add")
@_product_options
@click.pass_obj
def product_add(settings, name: str, category: str, price: str, stock: int, image: str | None) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(unit_of_work(settings))
    spec = ProductSpec(name=name, category=category, price=price, stock=stock, image=image)

    try:
        product = handler.handle(spec)
    except Exception as exc:
        fail(exc)

    click.echo(f"Product #{product.id} '{product.name}' added at {money(product.price)}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@_product_options
@click.pass_obj
def product_update(
    settings, product_id: int, name: str, category: str, price: str, stock: int, image: str | None
) -> None:
    """Replace all fields of a product."""
    handler = UpdateProductHandler(unit_of_work(settings))
    spec = ProductSpec(name=name, category=category, price=price, stock=stock, image=image)

    try:
        product = handler.handle(product_id, spec)
    except Exception as exc:
        fail(exc)

    click.echo(f"Product #{product.id} updated: {money(product.price)}, stock {product.stock}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_delete(settings, product_id: int) -> None:
    """Remove a product from the catalog."""
    try:
        DeleteProductHandler(unit_of_work(settings)).handle(product_id)
    except Exception as exc:
        fail(exc)

    click.echo(f"Product #{product_id} deleted.")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(settings, product_id: int) -> None:
    """Show a single product."""
    try:
        product = ShowProductHandler(unit_of_work(settings)).handle(product_id)
    except Exception as exc:
        fail(exc)

    echo_products([product])


@click.command("list")
@click.option("--page", default=0, type=int, show_default=True, help="Zero-based page number.")
@click.option("--size", default=10, type=int, show_default=True, help="Products per page.")
@click.option("--sort", default=DEFAULT_SORT, show_default=True, help="'field,asc' or 'field,desc'.")
@click.option("--all", "show_all", is_flag=True, default=False, help="List every product, unpaginated.")
@click.option("--in-stock", is_flag=True, default=False, help="Only products with stock available.")
@click.pass_obj
def product_list(settings, page: int, size: int, sort: str, show_all: bool, in_stock: bool) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(unit_of_work(settings))

    try:
        if in_stock:
            products = handler.handle_in_stock()
            footer = None
        elif show_all:
            products = handler.handle_all()
            footer = None
        else:
            result = handler.handle(PageRequest.of(page, size, sort))
            products = result.items
            footer = (
                f"Page {result.page + 1} of {max(result.total_pages, 1)} "
                f"({result.total_elements} products)"
            )
    except Exception as exc:
        fail(exc)

    if not products:
        click.echo("No products found.")
        return

    echo_products(products)
    if footer:
        click.echo(footer)


@click.command("search")
@click.option("--name", required=True, help="Text contained in the product name.")
@click.option("--page", default=0, type=int, show_default=True, help="Zero-based page number.")
@click.option("--size", default=10, type=int, show_default=True, help="Products per page.")
@click.option("--all", "show_all", is_flag=True, default=False, help="Every match, unpaginated.")
@click.pass_obj
def product_search(settings, name: str, page: int, size: int, show_all: bool) -> None:
    """Search products by name (case-insensitive)."""
    handler = SearchProductsHandler(unit_of_work(settings))

    try:
        if show_all:
            products = handler.handle_all(name)
        else:
            products = handler.handle(name, page=page, size=size).items
    except Exception as exc:
        fail(exc)

    if not products:
        click.echo(f"No products matching '{name}'.")
        return

    echo_products(products)
