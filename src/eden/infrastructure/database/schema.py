"""SQLAlchemy Core table definitions for the eden database.

UNIQUE constraints on ``users`` back the service-level uniqueness check;
a concurrent registration that slips past the check fails here at commit.
"""

from __future__ import annotations

from sqlalchemy import (
    REAL,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
)

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column("user_name", Text, nullable=False, unique=True),
    Column("cpf", Text, nullable=False, unique=True),
    Column("email", Text, nullable=False, unique=True),
    Column("password", Text, nullable=False),
    Column("cellphone", Text, unique=True),
)

usage_times = Table(
    "usage_times",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("description", Text, nullable=False),
)

condition_types = Table(
    "condition_types",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("description", Text, nullable=False),
)

products = Table(
    "products",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", Text, nullable=False),
    Column("description", Text, nullable=False),
    Column("price", REAL, nullable=False),
    Column("max_price", REAL),
    Column("sender_zip_code", Text, nullable=False),
    Column("rating", REAL),
    Column("usage_time_id", Integer, ForeignKey("usage_times.id"), nullable=False),
    Column("condition_type_id", Integer, ForeignKey("condition_types.id"), nullable=False),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
)

comments = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("product_id", Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("comment", Text, nullable=False),
)

carts = Table(
    "carts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    ),
)

cart_products = Table(
    "cart_products",
    metadata,
    Column("cart_id", Integer, ForeignKey("carts.id", ondelete="CASCADE"), nullable=False),
    Column("product_id", Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False),
    UniqueConstraint("cart_id", "product_id"),
)

user_favorites = Table(
    "user_favorites",
    metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("product_id", Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False),
    UniqueConstraint("user_id", "product_id"),
)

# ---------------------------------------------------------------------------
# Indexes for frequently filtered columns
# ---------------------------------------------------------------------------

Index("ix_products_user", products.c.user_id)
Index("ix_products_title", products.c.title)
Index("ix_comments_product", comments.c.product_id)
Index("ix_user_favorites_user", user_favorites.c.user_id)

# Seed rows for the reference tables, inserted once at initialization.
USAGE_TIME_SEED: tuple[str, ...] = (
    "Less than 6 months",
    "6 months to 1 year",
    "1 to 2 years",
    "More than 2 years",
)

CONDITION_TYPE_SEED: tuple[str, ...] = (
    "New",
    "Like new",
    "Used",
    "Needs repair",
)
