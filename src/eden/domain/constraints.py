"""Declarative field constraints and the constraint validator.

Entities declare their rules as a class-level ``constraints`` tuple::

    class Comment(Entity):
        constraints: ClassVar[tuple[Constraint, ...]] = (
            Required("comment", "The 'comment' field must be passed"),
            MaxLength("comment", 90, "The 'comment' must not pass the 90 characters limit"),
        )

:func:`get_validator` hands out one shared, stateless validator. It checks
*every* declared constraint so a caller can report all problems at once;
failures are returned, never raised.
"""

from __future__ import annotations

import functools
import math
from dataclasses import dataclass
from typing import Any, Protocol

# ---------------------------------------------------------------------------
# Violations
# ---------------------------------------------------------------------------


@dataclass(frozen=True, order=True)
class ConstraintViolation:
    """A single failed constraint: the field name and a readable message."""

    field: str
    message: str


def format_violations(violations: frozenset[ConstraintViolation]) -> str:
    """Join *violations* into one message, ordered by field then message."""
    return "Validation errors: " + "; ".join(v.message for v in sorted(violations))


# ---------------------------------------------------------------------------
# Constraint types
# ---------------------------------------------------------------------------


class Constraint(Protocol):
    field: str
    message: str

    def is_satisfied(self, value: Any) -> bool: ...


@dataclass(frozen=True)
class Required:
    """Value must not be ``None`` (blank strings count as missing)."""

    field: str
    message: str

    def is_satisfied(self, value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, str):
            return bool(value.strip())
        return True


@dataclass(frozen=True)
class MaxLength:
    """String value must be at most *limit* characters. ``None`` passes."""

    field: str
    limit: int
    message: str

    def is_satisfied(self, value: Any) -> bool:
        if value is None:
            return True
        return len(str(value)) <= self.limit


@dataclass(frozen=True)
class Range:
    """Numeric value must be finite and lie within ``[minimum, maximum]``. ``None`` passes."""

    field: str
    message: str
    minimum: float | None = None
    maximum: float | None = None

    def is_satisfied(self, value: Any) -> bool:
        if value is None:
            return True
        if isinstance(value, float) and not math.isfinite(value):
            return False
        if self.minimum is not None and value < self.minimum:
            return False
        return not (self.maximum is not None and value > self.maximum)


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------


class ConstraintValidator:
    """Evaluates an entity's declared constraints against its current values."""

    def validate(self, entity: Any) -> frozenset[ConstraintViolation]:
        declared: tuple[Constraint, ...] = getattr(type(entity), "constraints", ())
        violations: set[ConstraintViolation] = set()
        for constraint in declared:
            value = getattr(entity, constraint.field, None)
            if not constraint.is_satisfied(value):
                violations.add(ConstraintViolation(constraint.field, constraint.message))
        return frozenset(violations)


@functools.cache
def get_validator() -> ConstraintValidator:
    """Return the process-wide validator, creating it on first use."""
    return ConstraintValidator()
