"""CommentService: product comments."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from eden.domain.constraints import format_violations, get_validator
from eden.domain.entities import Comment
from eden.domain.errors import DomainError, ValidationFailedError
from eden.domain.patch import COMMENT_PATCH, apply_patch
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


class CommentService(BaseService):
    @traced
    def create(self, *, product_id: int, user_id: int, comment: str) -> ServiceResult:
        op = "create_comment"
        try:
            with self._store.transaction() as txn:
                if txn.products.find_by_id(product_id) is None:
                    return not_found(op, "product", "Product not found")
                if txn.users.find_by_id(user_id) is None:
                    return not_found(op, "user", "User not found")

                item = Comment(product_id=product_id, user_id=user_id, comment=comment)
                violations = get_validator().validate(item)
                if violations:
                    raise ValidationFailedError(violations, format_violations(violations))
                txn.comments.save(item)
        except DomainError as exc:
            return domain_error_result(op, exc)
        except SQLAlchemyError:
            logger.exception("Persisting comment failed")
            return internal_error_result(op)
        return ServiceResult(ok=True, op=op, data=dump(item))

    @traced
    @database_guard("list_comments")
    def list_for_product(self, product_id: int) -> ServiceResult:
        op = "list_comments"
        with self._store.transaction() as txn:
            if txn.products.find_by_id(product_id) is None:
                return not_found(op, "product", "Product not found")
            items = [dump(c) for c in txn.comments.find_by_product_id(product_id)]
        return ServiceResult(
            ok=True,
            op=op,
            data={"product_id": product_id, "count": len(items), "items": items},
        )

    @traced
    def partial_update(self, comment_id: int, patch: Mapping[str, Any]) -> ServiceResult:
        op = "update_comment"
        try:
            with self._store.transaction() as txn:
                item = txn.comments.find_by_id(comment_id)
                if item is None:
                    return not_found(op, "id", "Comment not found")
                changed = apply_patch(item, patch, COMMENT_PATCH)
                txn.comments.save(item)
        except DomainError as exc:
            return domain_error_result(op, exc)
        except SQLAlchemyError:
            logger.exception("Updating comment %s failed", comment_id)
            return internal_error_result(op)
        return ServiceResult(ok=True, op=op, data={"id": comment_id, "fields_changed": changed})

    @traced
    @database_guard("delete_comment")
    def delete(self, comment_id: int) -> ServiceResult:
        op = "delete_comment"
        with self._store.transaction() as txn:
            if not txn.comments.delete_by_id(comment_id):
                return not_found(op, "id", "Comment not found")
        return ServiceResult(ok=True, op=op, data={"id": comment_id})
