import click

from storefront.application.seed_data import SeedDataHandler
from storefront.infrastructure.bootstrap import password_hasher, unit_of_work
from storefront.infrastructure.cli.auth_commands import auth_login, auth_register
from storefront.infrastructure.cli.errors import fail
from storefront.infrastructure.cli.order_commands import (
    cart_checkout,
    order_cancel,
    order_list,
    order_show,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_search,
    product_show,
    product_update,
)
from storefront.infrastructure.config import load_settings
from storefront.infrastructure.logging import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Storefront: products, cart checkout and orders."""
    settings = load_settings()
    configure_logging(settings)
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def cart() -> None:
    """Check out carts."""


@cli.group()
def order() -> None:
    """Inspect and cancel orders."""


@cli.group()
def auth() -> None:
    """Log in and register users."""


@cli.command("seed")
@click.pass_obj
def seed(settings) -> None:
    """Create default users and a sample catalog."""
    handler = SeedDataHandler(unit_of_work(settings), password_hasher(settings))

    try:
        result = handler.handle()
    except Exception as exc:
        fail(exc)

    users = ", ".join(result.users_created) or "none"
    click.echo(f"Users created: {users}")
    click.echo(f"Products created: {result.products_created}")


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_search)
product.add_command(product_show)
product.add_command(product_update)
cart.add_command(cart_checkout)
order.add_command(order_cancel)
order.add_command(order_list)
order.add_command(order_show)
auth.add_command(auth_login)
auth.add_command(auth_register)
