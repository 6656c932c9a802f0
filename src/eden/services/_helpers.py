"""Shared service-layer helpers: error results and entity payloads."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ParamSpec

from sqlalchemy.exc import SQLAlchemyError

from eden.domain.errors import ConflictError, NotFoundError, ValidationFailedError
from eden.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from eden.domain.entities import Entity
    from eden.domain.errors import DomainError

logger = logging.getLogger(__name__)

_P = ParamSpec("_P")

INTERNAL_ERROR_MESSAGE = "Internal error, contact technical support."


def error_result(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
    """Build a failed ServiceResult."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )


def domain_error_result(op: str, exc: DomainError) -> ServiceResult:
    """Convert a domain exception into its ServiceResult form."""
    detail: dict[str, Any] = {}
    if isinstance(exc, (ConflictError, NotFoundError)):
        detail["field"] = exc.field
    elif isinstance(exc, ValidationFailedError):
        detail["violations"] = [
            {"field": v.field, "message": v.message} for v in sorted(exc.violations)
        ]
    return error_result(op, exc.code, exc.message, **detail)


def internal_error_result(op: str) -> ServiceResult:
    """Opaque failure; the cause is logged by the caller, never returned."""
    return error_result(op, "INTERNAL_ERROR", INTERNAL_ERROR_MESSAGE)


def database_guard(
    op: str,
) -> Callable[[Callable[_P, ServiceResult]], Callable[_P, ServiceResult]]:
    """Decorator: report a database failure inside *func* as ``INTERNAL_ERROR``.

    For operations with no domain errors of their own to translate; the
    mutating pipelines catch ``SQLAlchemyError`` inline next to ``DomainError``.
    """

    def decorator(func: Callable[_P, ServiceResult]) -> Callable[_P, ServiceResult]:
        @functools.wraps(func)
        def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> ServiceResult:
            try:
                return func(*args, **kwargs)
            except SQLAlchemyError:
                logger.exception("Database failure in %s", op)
                return internal_error_result(op)

        return wrapper

    return decorator


def not_found(op: str, field: str, message: str) -> ServiceResult:
    return error_result(op, "NOT_FOUND", message, field=field)


def public_user(data: dict[str, Any]) -> dict[str, Any]:
    """Drop the password hash from a user payload."""
    return {k: v for k, v in data.items() if k != "password"}


def dump(entity: Entity) -> dict[str, Any]:
    return entity.model_dump(mode="json")
