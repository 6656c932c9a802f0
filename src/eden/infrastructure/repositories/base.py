"""Shared table-backed repository.

Repositories are bound to a ``Connection``; the caller owns the
transaction (see :meth:`eden.infrastructure.store.Store.transaction`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from sqlalchemy import delete, insert, select, update

if TYPE_CHECKING:
    from sqlalchemy import Connection, Table
    from sqlalchemy.engine import RowMapping

    from eden.domain.entities import Entity


class TableRepository[E: Entity]:
    """CRUD over one table whose columns mirror the entity's fields."""

    table: ClassVar[Table]
    entity: ClassVar[type[Entity]]
    # Entity fields with no column of their own.
    detached_fields: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def _to_entity(self, row: RowMapping) -> E:
        return self.entity.model_validate(dict(row))  # type: ignore[return-value]

    def _values(self, item: E) -> dict[str, Any]:
        return item.model_dump(exclude={"id", *self.detached_fields})

    def _find_one(self, column: str, value: Any) -> E | None:
        if value is None:
            return None
        stmt = select(self.table).where(self.table.c[column] == value)
        row = self._conn.execute(stmt).mappings().first()
        return self._to_entity(row) if row is not None else None

    def find_by_id(self, item_id: int) -> E | None:
        return self._find_one("id", item_id)

    def find_all(self) -> list[E]:
        rows = self._conn.execute(select(self.table).order_by(self.table.c.id)).mappings().all()
        return [self._to_entity(row) for row in rows]

    def save(self, item: E) -> E:
        """Insert *item* (assigning ``id``) or update it in place."""
        values = self._values(item)
        if item.id is None:
            result = self._conn.execute(insert(self.table).values(**values))
            item.id = int(result.inserted_primary_key[0])
        else:
            self._conn.execute(
                update(self.table).where(self.table.c.id == item.id).values(**values)
            )
        return item

    def delete_by_id(self, item_id: int) -> bool:
        """Delete a row. Returns False when nothing matched."""
        result = self._conn.execute(delete(self.table).where(self.table.c.id == item_id))
        return result.rowcount > 0
