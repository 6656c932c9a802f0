"""Command: list reference data accepted by products."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from eden.commands._base import EdenCommand

if TYPE_CHECKING:
    from eden.commands._context import AppContext


@click.command(cls=EdenCommand, examples="  eden lookup\n  eden --json lookup")
@click.pass_obj
def lookup(app: AppContext) -> None:
    """List usage times and condition types."""
    from eden.services.products import ProductService

    app.emit(ProductService(app.store).list_lookups())
