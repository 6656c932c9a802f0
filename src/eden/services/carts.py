"""CartService: the per-user cart created at registration."""

from __future__ import annotations

from eden.services._helpers import database_guard, dump, not_found
from eden.services.base import BaseService
from eden.services.result import ServiceResult
from eden.services.telemetry import traced


class CartService(BaseService):
    @traced
    @database_guard("get_cart")
    def get_for_user(self, user_id: int) -> ServiceResult:
        op = "get_cart"
        with self._store.transaction() as txn:
            cart = txn.carts.find_by_user_id(user_id)
        if cart is None:
            return not_found(op, "user", "Cart not found for user")
        return ServiceResult(ok=True, op=op, data=dump(cart))

    @traced
    @database_guard("add_to_cart")
    def add_product(self, user_id: int, product_id: int) -> ServiceResult:
        op = "add_to_cart"
        with self._store.transaction() as txn:
            cart = txn.carts.find_by_user_id(user_id)
            if cart is None or cart.id is None:
                return not_found(op, "user", "Cart not found for user")
            if txn.products.find_by_id(product_id) is None:
                return not_found(op, "product", "Product not found")
            added = txn.carts.add_product(cart.id, product_id)
            cart = txn.carts.find_by_id(cart.id)

        warnings = [] if added else [f"Product {product_id} already in cart"]
        assert cart is not None
        return ServiceResult(ok=True, op=op, data=dump(cart), warnings=warnings)

    @traced
    @database_guard("remove_from_cart")
    def remove_product(self, user_id: int, product_id: int) -> ServiceResult:
        op = "remove_from_cart"
        with self._store.transaction() as txn:
            cart = txn.carts.find_by_user_id(user_id)
            if cart is None or cart.id is None:
                return not_found(op, "user", "Cart not found for user")
            if not txn.carts.remove_product(cart.id, product_id):
                return not_found(op, "product", "Product not in cart")
            cart = txn.carts.find_by_id(cart.id)
        assert cart is not None
        return ServiceResult(ok=True, op=op, data=dump(cart))
