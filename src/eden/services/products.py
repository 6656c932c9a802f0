"""ProductService: listings: create, search, partial update, delete."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from eden.domain.constraints import format_violations, get_validator
from eden.domain.entities import Product
from eden.domain.errors import DomainError, ValidationFailedError
from eden.domain.patch import PRODUCT_PATCH, apply_patch
from eden.services._helpers import (
    database_guard,
    domain_error_result,
    dump,
    internal_error_result,
    not_found,
)
from eden.services.base import BaseService
from eden.services.result import ServiceResult
from eden.services.telemetry import traced

logger = logging.getLogger(__name__)


class ProductService(BaseService):
    """Handles product listings."""

    @traced
    def register(
        self,
        *,
        title: str,
        description: str,
        price: float,
        sender_zip_code: str,
        usage_time_id: int,
        condition_type_id: int,
        email: str,
        max_price: float | None = None,
        rating: float | None = None,
    ) -> ServiceResult:
        """Create a product owned by the user registered under *email*."""
        op = "register_product"
        try:
            with self._store.transaction() as txn:
                if txn.condition_types.find_by_id(condition_type_id) is None:
                    return not_found(op, "conditionType", "Condition type not found")
                if txn.usage_times.find_by_id(usage_time_id) is None:
                    return not_found(op, "usageTime", "Usage time not found")
                owner = txn.users.find_by_email(email)
                if owner is None:
                    return not_found(op, "email", "User not found")

                product = Product(
                    title=title,
                    description=description,
                    price=price,
                    max_price=max_price,
                    sender_zip_code=sender_zip_code,
                    rating=rating,
                    usage_time_id=usage_time_id,
                    condition_type_id=condition_type_id,
                    user_id=owner.id,
                )
                violations = get_validator().validate(product)
                if violations:
                    raise ValidationFailedError(violations, format_violations(violations))
                txn.products.save(product)
        except DomainError as exc:
            return domain_error_result(op, exc)
        except SQLAlchemyError:
            logger.exception("[PRODUCT] Persisting product failed")
            return internal_error_result(op)

        logger.info("[PRODUCT] Product %s registered", product.id)
        return ServiceResult(ok=True, op=op, data=dump(product))

    @traced
    @database_guard("get_product")
    def get(self, product_id: int) -> ServiceResult:
        op = "get_product"
        with self._store.transaction() as txn:
            product = txn.products.find_by_id(product_id)
        if product is None:
            return not_found(op, "id", "Product not found")
        return ServiceResult(ok=True, op=op, data=dump(product))

    @traced
    @database_guard("list_products")
    def list_products(self) -> ServiceResult:
        with self._store.transaction() as txn:
            items = [dump(p) for p in txn.products.find_all()]
        return ServiceResult(
            ok=True, op="list_products", data={"count": len(items), "items": items}
        )

    @traced
    @database_guard("search_products")
    def search(self, title: str) -> ServiceResult:
        """Products whose title contains *title* (case rules follow the database)."""
        with self._store.transaction() as txn:
            items = [dump(p) for p in txn.products.find_by_title_like(f"%{title}%")]
        return ServiceResult(
            ok=True,
            op="search_products",
            data={"query": title, "count": len(items), "items": items},
        )

    @traced
    def partial_update(self, product_id: int, patch: Mapping[str, Any]) -> ServiceResult:
        """Apply a merge-patch to a product; references are resolved first."""
        op = "update_product"
        try:
            with self._store.transaction() as txn:
                product = txn.products.find_by_id(product_id)
                if product is None:
                    return not_found(op, "id", "Product not found")

                changed = apply_patch(
                    product,
                    patch,
                    PRODUCT_PATCH,
                    resolvers={
                        "usageTime": txn.usage_times.find_by_id,
                        "conditionType": txn.condition_types.find_by_id,
                        "user": txn.users.find_by_id,
                    },
                )
                logger.info("[PRODUCT] Saving product %s in database", product_id)
                txn.products.save(product)
        except DomainError as exc:
            return domain_error_result(op, exc)
        except SQLAlchemyError:
            logger.exception("[PRODUCT] Updating product %s failed", product_id)
            return internal_error_result(op)

        return ServiceResult(ok=True, op=op, data={"id": product_id, "fields_changed": changed})

    @traced
    @database_guard("delete_product")
    def delete(self, product_id: int) -> ServiceResult:
        op = "delete_product"
        with self._store.transaction() as txn:
            if txn.products.find_by_id(product_id) is None:
                return not_found(op, "id", "Product not found")
            logger.info("[PRODUCT] Deleting product %s", product_id)
            txn.products.delete_by_id(product_id)
        return ServiceResult(ok=True, op=op, data={"id": product_id})

    @traced
    @database_guard("list_lookups")
    def list_lookups(self) -> ServiceResult:
        """Usage times and condition types accepted by products."""
        with self._store.transaction() as txn:
            usage = [dump(u) for u in txn.usage_times.find_all()]
            conditions = [dump(c) for c in txn.condition_types.find_all()]
        return ServiceResult(
            ok=True,
            op="list_lookups",
            data={"usage_times": usage, "condition_types": conditions},
        )
