"""Cart repository. ``Cart.product_ids`` is loaded from ``cart_products``."""

from __future__ import annotations

from sqlalchemy import delete, insert, select

from eden.domain.entities import Cart
from eden.infrastructure.database.schema import cart_products, carts
from eden.infrastructure.repositories.base import TableRepository


class CartRepository(TableRepository[Cart]):
    table = carts
    entity = Cart
    detached_fields = frozenset({"product_ids"})

    def _load_products(self, cart: Cart) -> Cart:
        stmt = select(cart_products.c.product_id).where(cart_products.c.cart_id == cart.id)
        cart.product_ids = [int(row.product_id) for row in self._conn.execute(stmt).fetchall()]
        return cart

    def find_by_id(self, item_id: int) -> Cart | None:
        cart = super().find_by_id(item_id)
        return self._load_products(cart) if cart is not None else None

    def find_by_user_id(self, user_id: int) -> Cart | None:
        cart = self._find_one("user_id", user_id)
        return self._load_products(cart) if cart is not None else None

    def add_product(self, cart_id: int, product_id: int) -> bool:
        """Put a product in the cart. Returns False if already present."""
        existing = self._conn.execute(
            select(cart_products.c.product_id).where(
                cart_products.c.cart_id == cart_id,
                cart_products.c.product_id == product_id,
            )
        ).first()
        if existing is not None:
            return False
        self._conn.execute(insert(cart_products).values(cart_id=cart_id, product_id=product_id))
        return True

    def remove_product(self, cart_id: int, product_id: int) -> bool:
        result = self._conn.execute(
            delete(cart_products).where(
                cart_products.c.cart_id == cart_id,
                cart_products.c.product_id == product_id,
            )
        )
        return result.rowcount > 0
