"""Command group: product listings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from eden.commands._base import EdenGroup, parse_patch

if TYPE_CHECKING:
    from eden.commands._context import AppContext


@click.group(
    cls=EdenGroup,
    examples="""\
  eden product create --title Phone --description "Barely used" --price 900 \\
      --zip 01001000 --usage-time 1 --condition-type 2 --email a@x.com
  eden product search phone
  eden product update 5 --set price=19.99
  eden product update 5 --patch '{"title": "Phone X", "usageTime": 3}'""",
)
def product() -> None:
    """Create, search, update, and delete products."""


@product.command()
@click.option("--title", required=True)
@click.option("--description", required=True)
@click.option("--price", type=float, required=True)
@click.option("--max-price", type=float, default=None)
@click.option("--zip", "sender_zip_code", required=True, help="Sender zip code.")
@click.option("--rating", type=float, default=None)
@click.option("--usage-time", "usage_time_id", type=int, required=True)
@click.option("--condition-type", "condition_type_id", type=int, required=True)
@click.option("--email", required=True, help="Owner's email.")
@click.pass_obj
def create(
    app: AppContext,
    title: str,
    description: str,
    price: float,
    max_price: float | None,
    sender_zip_code: str,
    rating: float | None,
    usage_time_id: int,
    condition_type_id: int,
    email: str,
) -> None:
    """Register a product for the user owning --email."""
    from eden.services.products import ProductService

    app.emit(
        ProductService(app.store).register(
            title=title,
            description=description,
            price=price,
            max_price=max_price,
            sender_zip_code=sender_zip_code,
            rating=rating,
            usage_time_id=usage_time_id,
            condition_type_id=condition_type_id,
            email=email,
        )
    )


@product.command("get")
@click.argument("product_id", type=int)
@click.pass_obj
def get_product(app: AppContext, product_id: int) -> None:
    """Fetch one product."""
    from eden.services.products import ProductService

    app.emit(ProductService(app.store).get(product_id))


@product.command("list")
@click.pass_obj
def list_products(app: AppContext) -> None:
    """List all products."""
    from eden.services.products import ProductService

    app.emit(ProductService(app.store).list_products())


@product.command()
@click.argument("title")
@click.pass_obj
def search(app: AppContext, title: str) -> None:
    """Find products whose title contains TITLE."""
    from eden.services.products import ProductService

    app.emit(ProductService(app.store).search(title))


@product.command()
@click.argument("product_id", type=int)
@click.option("--patch", "raw_patch", default=None, help="JSON object of fields to change.")
@click.option("--set", "assignments", multiple=True, help="KEY=VALUE (JSON value), repeatable.")
@click.pass_obj
def update(
    app: AppContext,
    product_id: int,
    raw_patch: str | None,
    assignments: tuple[str, ...],
) -> None:
    """Partially update a product."""
    from eden.services.products import ProductService

    patch = parse_patch(raw_patch, assignments)
    app.emit(ProductService(app.store).partial_update(product_id, patch))


@product.command()
@click.argument("product_id", type=int)
@click.pass_obj
def delete(app: AppContext, product_id: int) -> None:
    """Delete a product."""
    from eden.services.products import ProductService

    app.emit(ProductService(app.store).delete(product_id))
