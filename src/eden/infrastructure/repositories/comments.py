"""Comment repository."""

from __future__ import annotations

from sqlalchemy import select

from eden.domain.entities import Comment
from eden.infrastructure.database.schema import comments
from eden.infrastructure.repositories.base import TableRepository


class CommentRepository(TableRepository[Comment]):
    table = comments
    entity = Comment

    def find_by_product_id(self, product_id: int) -> list[Comment]:
        stmt = select(comments).where(comments.c.product_id == product_id).order_by(comments.c.id)
        return [self._to_entity(row) for row in self._conn.execute(stmt).mappings().all()]
