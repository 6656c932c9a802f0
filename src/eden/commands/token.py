"""Command group: bearer tokens."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from eden.commands._base import EdenGroup

if TYPE_CHECKING:
    from eden.commands._context import AppContext


@click.group(
    cls=EdenGroup,
    examples="""\
  eden token issue a@x.com
  eden token issue a@x.com --password s3cret
  eden token verify eyJhbGciOiJIUzUxMiJ9...""",
)
def token() -> None:
    """Issue and verify identity tokens."""


@token.command()
@click.argument("email")
@click.option(
    "--password",
    default=None,
    help="Check this password before issuing. Without it, any registered email gets a token.",
)
@click.pass_obj
def issue(app: AppContext, email: str, password: str | None) -> None:
    """Issue a 24-hour token for EMAIL."""
    from eden.services.auth import TokenService

    service = TokenService(app.store)
    if password is None:
        app.emit(service.issue(email))
    else:
        app.emit(service.authenticate(email, password))


@token.command()
@click.argument("value")
@click.pass_obj
def verify(app: AppContext, value: str) -> None:
    """Check a token's signature and expiration."""
    from eden.services.auth import TokenService

    app.emit(TokenService(app.store).verify(value))
