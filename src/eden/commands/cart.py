"""Command group: the per-user cart."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from eden.commands._base import EdenGroup

if TYPE_CHECKING:
    from eden.commands._context import AppContext


@click.group(
    cls=EdenGroup,
    examples="""\
  eden cart show 1
  eden cart add 1 5
  eden cart remove 1 5""",
)
def cart() -> None:
    """Show and change a user's cart."""


@cart.command()
@click.argument("user_id", type=int)
@click.pass_obj
def show(app: AppContext, user_id: int) -> None:
    """Show the cart of USER_ID."""
    from eden.services.carts import CartService

    app.emit(CartService(app.store).get_for_user(user_id))


@cart.command()
@click.argument("user_id", type=int)
@click.argument("product_id", type=int)
@click.pass_obj
def add(app: AppContext, user_id: int, product_id: int) -> None:
    """Put PRODUCT_ID in the cart of USER_ID."""
    from eden.services.carts import CartService

    app.emit(CartService(app.store).add_product(user_id, product_id))


@cart.command()
@click.argument("user_id", type=int)
@click.argument("product_id", type=int)
@click.pass_obj
def remove(app: AppContext, user_id: int, product_id: int) -> None:
    """Take PRODUCT_ID out of the cart of USER_ID."""
    from eden.services.carts import CartService

    app.emit(CartService(app.store).remove_product(user_id, product_id))
