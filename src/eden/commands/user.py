"""Command group: user accounts and favorites."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from eden.commands._base import EdenGroup, parse_patch

if TYPE_CHECKING:
    from eden.commands._context import AppContext


@click.group(
    cls=EdenGroup,
    examples="""\
  eden user register --name Alice --user-name alice --cpf 11111111111 \\
      --email a@x.com --password s3cret
  eden user get --email a@x.com
  eden user update 1 --set name='"Alice B."' --set cellphone='"11999990000"'
  eden user favorite add 1 5""",
)
def user() -> None:
    """Register, look up, update, and delete users."""


@user.command()
@click.option("--name", required=True, help="Display name.")
@click.option("--user-name", required=True, help="Unique handle.")
@click.option("--cpf", required=True, help="Unique national ID.")
@click.option("--email", required=True, help="Unique email.")
@click.option("--password", required=True, help="Plaintext password (stored hashed).")
@click.option("--cellphone", default=None, help="Unique phone number.")
@click.pass_obj
def register(
    app: AppContext,
    name: str,
    user_name: str,
    cpf: str,
    email: str,
    password: str,
    cellphone: str | None,
) -> None:
    """Register a new user and create their cart."""
    from eden.services.users import UserService

    app.emit(
        UserService(app.store).register(
            name=name,
            user_name=user_name,
            cpf=cpf,
            email=email,
            password=password,
            cellphone=cellphone,
        )
    )


@user.command("get")
@click.option("--id", "user_id", type=int, default=None, help="Look up by id.")
@click.option("--cpf", default=None, help="Look up by cpf.")
@click.option("--email", default=None, help="Look up by email.")
@click.pass_obj
def get_user(app: AppContext, user_id: int | None, cpf: str | None, email: str | None) -> None:
    """Fetch one user (id wins over cpf, cpf over email)."""
    from eden.services.users import UserService

    app.emit(UserService(app.store).find_by_parameter(user_id=user_id, cpf=cpf, email=email))


@user.command("list")
@click.pass_obj
def list_users(app: AppContext) -> None:
    """List all users."""
    from eden.services.users import UserService

    app.emit(UserService(app.store).list_users())


@user.command()
@click.argument("user_id", type=int)
@click.option("--patch", "raw_patch", default=None, help="JSON object of fields to change.")
@click.option("--set", "assignments", multiple=True, help="KEY=VALUE (JSON value), repeatable.")
@click.pass_obj
def update(
    app: AppContext,
    user_id: int,
    raw_patch: str | None,
    assignments: tuple[str, ...],
) -> None:
    """Partially update a user: name, userName, password, cellphone."""
    from eden.services.users import UserService

    app.emit(UserService(app.store).partial_update(user_id, parse_patch(raw_patch, assignments)))


@user.command()
@click.argument("user_id", type=int)
@click.pass_obj
def delete(app: AppContext, user_id: int) -> None:
    """Delete a user."""
    from eden.services.users import UserService

    app.emit(UserService(app.store).delete(user_id))


# ── favorites ─────────────────────────────────────────────────────────


@user.group(cls=EdenGroup)
def favorite() -> None:
    """Manage a user's favorite products."""


@favorite.command("add")
@click.argument("user_id", type=int)
@click.argument("product_id", type=int)
@click.pass_obj
def add_favorite(app: AppContext, user_id: int, product_id: int) -> None:
    """Mark a product as favorite."""
    from eden.services.users import UserService

    app.emit(UserService(app.store).register_favorite(user_id, product_id))


@favorite.command("list")
@click.argument("user_id", type=int)
@click.pass_obj
def list_favorites(app: AppContext, user_id: int) -> None:
    """List a user's favorite products."""
    from eden.services.users import UserService

    app.emit(UserService(app.store).get_favorites(user_id))


@favorite.command("remove")
@click.argument("user_id", type=int)
@click.argument("product_id", type=int)
@click.pass_obj
def remove_favorite(app: AppContext, user_id: int, product_id: int) -> None:
    """Unmark a favorite product."""
    from eden.services.users import UserService

    app.emit(UserService(app.store).delete_favorite(user_id, product_id))
