"""Command: initialize the database and seed reference data."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from eden.commands._base import EdenCommand
from eden.services.result import ServiceResult

if TYPE_CHECKING:
    from eden.commands._context import AppContext


@click.command("init", cls=EdenCommand, examples="  eden init\n  eden -c ./eden.toml init")
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create tables and seed usage times and condition types (idempotent)."""
    store = app.store
    app.emit(
        ServiceResult(
            ok=True,
            op="init",
            data={"database": store.engine.url.render_as_string(hide_password=True)},
        )
    )
