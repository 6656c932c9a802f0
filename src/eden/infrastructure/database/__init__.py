"""Relational store: engine and schema via SQLAlchemy Core."""

from eden.infrastructure.database.engine import create_db_engine, init_database
from eden.infrastructure.database.schema import (
    cart_products,
    carts,
    comments,
    condition_types,
    metadata,
    products,
    usage_times,
    user_favorites,
    users,
)

__all__ = [
    "cart_products",
    "carts",
    "comments",
    "condition_types",
    "create_db_engine",
    "init_database",
    "metadata",
    "products",
    "usage_times",
    "user_favorites",
    "users",
]
