"""CLI commands for logging in and registering users."""

from __future__ import annotations

import click

from storefront.application.login import LoginHandler
from storefront.application.register_user import RegisterUserHandler
from storefront.infrastructure.bootstrap import password_hasher, unit_of_work
from storefront.infrastructure.cli.errors import fail


@click.command("login")
@click.option("--username", required=True, help="Login name.")
@click.option("--password", prompt=True, hide_input=True, help="Password.")
@click.pass_obj
def auth_login(settings, username: str, password: str) -> None:
    """Check a username/password pair."""
    handler = LoginHandler(unit_of_work(settings), password_hasher(settings))

    try:
        user = handler.handle(username, password)
    except Exception as exc:
        fail(exc)

    click.echo(f"Welcome, {user.name} (id={user.id}, role={user.role})")


@click.command("register")
@click.option("--name", required=True, help="Login name.")
@click.option("--email", required=True, help="E-mail address.")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True, help="Password.")
@click.option("--role", default="CLIENT", show_default=True, help="ADMIN or CLIENT.")
@click.pass_obj
def auth_register(settings, name: str, email: str, password: str, role: str) -> None:
    """Register a new user."""
    handler = RegisterUserHandler(unit_of_work(settings), password_hasher(settings))

    try:
        user = handler.handle(name=name, email=email, password=password, role=role)
    except Exception as exc:
        fail(exc)

    click.echo(f"User #{user.id} '{user.name}' registered as {user.role}")
