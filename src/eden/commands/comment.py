"""Command group: comments on products."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from eden.commands._base import EdenGroup, parse_patch

if TYPE_CHECKING:
    from eden.commands._context import AppContext


@click.group(
    cls=EdenGroup,
    examples="""\
  eden comment create 5 --user 1 --text "Still available?"
  eden comment list 5
  eden comment update 3 --set comment='"Sold, thanks"'""",
)
def comment() -> None:
    """Comment on products."""


@comment.command()
@click.argument("product_id", type=int)
@click.option("--user", "user_id", type=int, required=True, help="Author's user id.")
@click.option("--text", required=True, help="Comment body.")
@click.pass_obj
def create(app: AppContext, product_id: int, user_id: int, text: str) -> None:
    """Add a comment to PRODUCT_ID."""
    from eden.services.comments import CommentService

    app.emit(
        CommentService(app.store).create(product_id=product_id, user_id=user_id, comment=text)
    )


@comment.command("list")
@click.argument("product_id", type=int)
@click.pass_obj
def list_comments(app: AppContext, product_id: int) -> None:
    """List comments on PRODUCT_ID."""
    from eden.services.comments import CommentService

    app.emit(CommentService(app.store).list_for_product(product_id))


@comment.command()
@click.argument("comment_id", type=int)
@click.option("--patch", "raw_patch", default=None, help="JSON object of fields to change.")
@click.option("--set", "assignments", multiple=True, help="KEY=VALUE (JSON value), repeatable.")
@click.pass_obj
def update(
    app: AppContext,
    comment_id: int,
    raw_patch: str | None,
    assignments: tuple[str, ...],
) -> None:
    """Edit a comment's text."""
    from eden.services.comments import CommentService

    patch = parse_patch(raw_patch, assignments)
    app.emit(CommentService(app.store).partial_update(comment_id, patch))


@comment.command()
@click.argument("comment_id", type=int)
@click.pass_obj
def delete(app: AppContext, comment_id: int) -> None:
    """Delete a comment."""
    from eden.services.comments import CommentService

    app.emit(CommentService(app.store).delete(comment_id))
