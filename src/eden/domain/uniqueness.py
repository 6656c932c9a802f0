"""Ordered, short-circuiting uniqueness rules.

A rule pairs an entity attribute with a read-only lookup. Rules run in
declaration order and the first lookup that finds an existing record
aborts the whole check with a :class:`ConflictError` naming that field,
so callers get one unambiguous error instead of an aggregate.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from eden.domain.errors import ConflictError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UniqueRule:
    """One uniqueness rule.

    Attributes:
        field: Entity attribute holding the candidate value.
        lookup: Returns an existing record for a value, or ``None``.
        message: Conflict message reported to the caller.
        optional: Skip the rule when the candidate's value is ``None``.
    """

    field: str
    lookup: Callable[[Any], object | None]
    message: str
    optional: bool = False


def check_unique(candidate: object, rules: Sequence[UniqueRule]) -> None:
    """Raise :class:`ConflictError` on the first rule *candidate* violates."""
    for rule in rules:
        value = getattr(candidate, rule.field, None)
        if value is None and rule.optional:
            continue
        if rule.lookup(value) is not None:
            logger.warning("Uniqueness conflict on %s", rule.field)
            raise ConflictError(rule.field, rule.message)
