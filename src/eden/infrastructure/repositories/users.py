"""User repository: natural-key lookups and favorites."""

from __future__ import annotations

from sqlalchemy import delete, insert, select

from eden.domain.entities import User
from eden.infrastructure.database.schema import user_favorites, users
from eden.infrastructure.repositories.base import TableRepository


class UserRepository(TableRepository[User]):
    """Encapsulates SQL for the ``users`` and ``user_favorites`` tables."""

    table = users
    entity = User

    def find_by_cpf(self, cpf: str | None) -> User | None:
        return self._find_one("cpf", cpf)

    def find_by_email(self, email: str | None) -> User | None:
        return self._find_one("email", email)

    def find_by_user_name(self, user_name: str | None) -> User | None:
        return self._find_one("user_name", user_name)

    def find_by_cellphone(self, cellphone: str | None) -> User | None:
        return self._find_one("cellphone", cellphone)

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    def find_favorites(self, user_id: int) -> list[int]:
        """Product ids favorited by *user_id*, in insertion order."""
        stmt = select(user_favorites.c.product_id).where(user_favorites.c.user_id == user_id)
        return [int(row.product_id) for row in self._conn.execute(stmt).fetchall()]

    def add_favorite(self, user_id: int, product_id: int) -> bool:
        """Link a product to a user. Returns False if already linked."""
        if product_id in self.find_favorites(user_id):
            return False
        self._conn.execute(insert(user_favorites).values(user_id=user_id, product_id=product_id))
        return True

    def remove_favorite(self, user_id: int, product_id: int) -> bool:
        result = self._conn.execute(
            delete(user_favorites).where(
                user_favorites.c.user_id == user_id,
                user_favorites.c.product_id == product_id,
            )
        )
        return result.rowcount > 0
