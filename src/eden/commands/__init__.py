"""Subcommand modules for eden.

Provides register_commands() which uses deferred imports to keep
``eden --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from eden.commands.cart import cart
    from eden.commands.comment import comment
    from eden.commands.product import product
    from eden.commands.token import token
    from eden.commands.user import user

    cli.add_command(user)
    cli.add_command(product)
    cli.add_command(comment)
    cli.add_command(cart)
    cli.add_command(token)

    # --- Standalone commands ---
    from eden.commands.init_cmd import init_cmd
    from eden.commands.lookup import lookup

    cli.add_command(init_cmd)
    cli.add_command(lookup)
