"""Merge-patch engine: apply an untyped field map to an entity, then validate.

Each entity type publishes a :class:`PatchSchema`, an ordered allow-list
mapping wire keys (``"userName"``) to entity attributes (``user_name``)
and the value kind the key accepts. :func:`apply_patch` runs in three
phases:

1. STAGE: walk the allow-list in order, coerce every recognized value,
   resolve references, run transforms. Unknown keys and kind mismatches
   become violations. Nothing is assigned yet.
2. APPLY: assign every staged value (apply-all, not first-match).
3. VALIDATE: run the shared constraint validator on the mutated entity.

Persisting is the caller's job and happens only after a clean return.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from eden.domain.constraints import ConstraintViolation, format_violations, get_validator
from eden.domain.errors import NoRecognizedFieldError, NotFoundError, ValidationFailedError

logger = logging.getLogger(__name__)

Resolver = Callable[[int], Any | None]
Transform = Callable[[Any], Any]


class FieldKind(StrEnum):
    """Value variants a patch key may carry."""

    STRING = "string"
    NUMBER = "number"
    REFERENCE = "reference"


@dataclass(frozen=True)
class PatchField:
    """One patchable key.

    ``secret`` fields are never echoed in logs.
    """

    key: str
    attr: str
    kind: FieldKind
    secret: bool = False


@dataclass(frozen=True)
class PatchSchema:
    """Ordered allow-list of patchable fields for one entity type."""

    entity: str
    fields: tuple[PatchField, ...]

    @property
    def keys(self) -> frozenset[str]:
        return frozenset(f.key for f in self.fields)


USER_PATCH = PatchSchema(
    "user",
    (
        PatchField("name", "name", FieldKind.STRING),
        PatchField("userName", "user_name", FieldKind.STRING),
        PatchField("password", "password", FieldKind.STRING, secret=True),
        PatchField("cellphone", "cellphone", FieldKind.STRING),
    ),
)

PRODUCT_PATCH = PatchSchema(
    "product",
    (
        PatchField("usageTime", "usage_time_id", FieldKind.REFERENCE),
        PatchField("conditionType", "condition_type_id", FieldKind.REFERENCE),
        PatchField("user", "user_id", FieldKind.REFERENCE),
        PatchField("title", "title", FieldKind.STRING),
        PatchField("description", "description", FieldKind.STRING),
        PatchField("price", "price", FieldKind.NUMBER),
        PatchField("maxPrice", "max_price", FieldKind.NUMBER),
        PatchField("senderZipCode", "sender_zip_code", FieldKind.STRING),
        PatchField("rating", "rating", FieldKind.NUMBER),
    ),
)

COMMENT_PATCH = PatchSchema(
    "comment",
    (PatchField("comment", "comment", FieldKind.STRING),),
)


def _coerce(spec: PatchField, value: Any) -> tuple[Any, str | None]:
    """Return ``(coerced_value, error_message)`` for *value* under *spec*."""
    # bool is an int subclass; never accept it as a number or an id.
    if spec.kind is FieldKind.STRING:
        if value is None or isinstance(value, str):
            return value, None
        return None, f"The '{spec.key}' field must be a string"
    if spec.kind is FieldKind.NUMBER:
        if value is None:
            return None, None
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if not math.isfinite(value):
                return None, f"The '{spec.key}' field must be a finite number"
            return float(value), None
        return None, f"The '{spec.key}' field must be a number"
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value, None
    return None, f"The '{spec.key}' field must be a record id"


def apply_patch(
    entity: Any,
    patch: Mapping[str, Any],
    schema: PatchSchema,
    *,
    resolvers: Mapping[str, Resolver] | None = None,
    transforms: Mapping[str, Transform] | None = None,
) -> list[str]:
    """Apply every recognized key of *patch* to *entity* and validate it.

    Returns the changed attribute names in allow-list order.

    Raises:
        NoRecognizedFieldError: no allow-listed key present; *entity* untouched.
        ValidationFailedError: unknown keys, kind mismatches (entity untouched)
            or constraint violations on the mutated entity.
        NotFoundError: a reference key names a missing record; entity untouched.
    """
    resolvers = resolvers or {}
    transforms = transforms or {}

    # ── STAGE ────────────────────────────────────────────
    present = [spec for spec in schema.fields if spec.key in patch]
    if not present:
        logger.warning("[%s] No valid field passed", schema.entity.upper())
        raise NoRecognizedFieldError("None valid field has been passed.")

    violations: set[ConstraintViolation] = {
        ConstraintViolation(key, f"Unknown field '{key}'")
        for key in patch
        if key not in schema.keys
    }
    staged: list[tuple[PatchField, Any]] = []
    for spec in present:
        value, error = _coerce(spec, patch[spec.key])
        if error is not None:
            violations.add(ConstraintViolation(spec.attr, error))
            continue
        staged.append((spec, value))

    if violations:
        frozen = frozenset(violations)
        raise ValidationFailedError(frozen, format_violations(frozen))

    resolved: list[tuple[PatchField, Any]] = []
    for spec, value in staged:
        if spec.kind is FieldKind.REFERENCE:
            resolver = resolvers.get(spec.key)
            if resolver is None or resolver(value) is None:
                raise NotFoundError(spec.key, f"{spec.key} {value} not found")
        if spec.key in transforms:
            value = transforms[spec.key](value)
        resolved.append((spec, value))

    # ── APPLY ────────────────────────────────────────────
    changed: list[str] = []
    for spec, value in resolved:
        if spec.secret:
            logger.info("[%s] %s being updated", schema.entity.upper(), spec.key)
        else:
            logger.info(
                "[%s] %s %r being updated to %r",
                schema.entity.upper(),
                spec.key,
                getattr(entity, spec.attr, None),
                value,
            )
        setattr(entity, spec.attr, value)
        changed.append(spec.attr)

    # ── VALIDATE ─────────────────────────────────────────
    found = get_validator().validate(entity)
    if found:
        raise ValidationFailedError(found, format_violations(found))
    return changed
