"""Product repository."""

from __future__ import annotations

from sqlalchemy import select

from eden.domain.entities import Product
from eden.infrastructure.database.schema import products
from eden.infrastructure.repositories.base import TableRepository


class ProductRepository(TableRepository[Product]):
    table = products
    entity = Product

    def find_by_title_like(self, pattern: str) -> list[Product]:
        """Products whose title matches a SQL LIKE *pattern*."""
        stmt = select(products).where(products.c.title.like(pattern)).order_by(products.c.id)
        return [self._to_entity(row) for row in self._conn.execute(stmt).mappings().all()]

    def find_by_user_id(self, user_id: int) -> list[Product]:
        stmt = select(products).where(products.c.user_id == user_id).order_by(products.c.id)
        return [self._to_entity(row) for row in self._conn.execute(stmt).mappings().all()]
