"""Domain error taxonomy.

Domain components raise these; the service layer converts each one into a
``ServiceResult`` error with the matching ``code``. Nothing here knows
about transports or status codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from eden.domain.constraints import ConstraintViolation


class DomainError(Exception):
    """Base class for client-input failures raised by the domain layer."""

    code = "DOMAIN_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationFailedError(DomainError):
    """One or more declarative constraints are violated."""

    code = "VALIDATION_FAILED"

    def __init__(self, violations: frozenset[ConstraintViolation], message: str) -> None:
        super().__init__(message)
        self.violations = violations


class ConflictError(DomainError):
    """A uniqueness rule is violated by an existing record."""

    code = "CONFLICT"

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(DomainError):
    """A referenced record does not exist."""

    code = "NOT_FOUND"

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class NoRecognizedFieldError(DomainError):
    """A patch map carried no key the entity type accepts."""

    code = "NO_RECOGNIZED_FIELD"


class UnauthorizedError(DomainError):
    """A credential did not match the stored hash."""

    code = "UNAUTHORIZED"
