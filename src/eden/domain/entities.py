"""Entity models with their declarative constraints.

Entities are mutable pydantic models. Field types describe storage shape
only; business rules live in each class's ``constraints`` tuple and are
checked by :mod:`eden.domain.constraints` before anything is persisted.

INVARIANT: ``id`` is assigned by the store on first save and never changes.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, Field

from eden.domain.constraints import Constraint, MaxLength, Range, Required


class Entity(BaseModel):
    """Base for persisted records."""

    model_config = {"validate_assignment": False}

    constraints: ClassVar[tuple[Constraint, ...]] = ()

    id: int | None = None


class User(Entity):
    """Marketplace account. ``password`` always holds a hash once saved."""

    constraints: ClassVar[tuple[Constraint, ...]] = (
        Required("name", "The 'name' field must be passed"),
        MaxLength("name", 100, "The 'name' must not pass the 100 characters limit"),
        Required("user_name", "The 'userName' field must be passed"),
        MaxLength("user_name", 50, "The 'userName' must not pass the 50 characters limit"),
        Required("cpf", "The 'cpf' field must be passed"),
        MaxLength("cpf", 11, "The 'cpf' must not pass the 11 digits limit"),
        Required("email", "The 'email' field must be passed"),
        MaxLength("email", 100, "The 'email' must not pass the 100 characters limit"),
        Required("password", "The 'password' field must be passed"),
        MaxLength("cellphone", 15, "The 'cellphone' must not pass the 15 digits limit"),
    )

    name: str | None = None
    user_name: str | None = None
    cpf: str | None = None
    email: str | None = None
    password: str | None = None
    cellphone: str | None = None


class UsageTime(Entity):
    """Seeded reference data: how long a product has been used."""

    description: str


class ConditionType(Entity):
    """Seeded reference data: product condition."""

    description: str


class Product(Entity):
    """A listing owned by a user."""

    constraints: ClassVar[tuple[Constraint, ...]] = (
        Required("title", "The 'title' field must be passed"),
        MaxLength("title", 80, "The 'title' must not pass the 80 characters limit"),
        Required("description", "The 'description' field must be passed"),
        MaxLength("description", 500, "The 'description' must not pass the 500 characters limit"),
        Required("price", "The 'price' field must be passed"),
        Range("price", "The 'price' must not be negative", minimum=0),
        Range("max_price", "The 'maxPrice' must not be negative", minimum=0),
        Required("sender_zip_code", "The 'senderZipCode' field must be passed"),
        MaxLength("sender_zip_code", 9, "The 'senderZipCode' must not pass the 9 digits limit"),
        Range("rating", "The 'rating' must be between 0 and 5", minimum=0, maximum=5),
        Required("usage_time_id", "The 'usageTime' field must be passed"),
        Required("condition_type_id", "The 'conditionType' field must be passed"),
        Required("user_id", "The 'user' field must be passed"),
    )

    title: str | None = None
    description: str | None = None
    price: float | None = None
    max_price: float | None = None
    sender_zip_code: str | None = None
    rating: float | None = None
    usage_time_id: int | None = None
    condition_type_id: int | None = None
    user_id: int | None = None


class Comment(Entity):
    """A user's comment on a product."""

    constraints: ClassVar[tuple[Constraint, ...]] = (
        Required("product_id", "The 'product' field must be passed"),
        Required("user_id", "The 'user' field must be passed"),
        Required("comment", "The 'comment' field must be passed"),
        MaxLength("comment", 90, "The 'comment' must not pass the 90 characters limit"),
    )

    product_id: int | None = None
    user_id: int | None = None
    comment: str | None = None


class Cart(Entity):
    """Shopping cart; one per user, created at registration."""

    constraints: ClassVar[tuple[Constraint, ...]] = (
        Required("user_id", "The 'user' field must be passed"),
    )

    user_id: int | None = None
    product_ids: list[int] = Field(default_factory=list)
