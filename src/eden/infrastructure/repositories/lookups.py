"""Read-only repositories for the seeded reference tables."""

from __future__ import annotations

from eden.domain.entities import ConditionType, UsageTime
from eden.infrastructure.database.schema import condition_types, usage_times
from eden.infrastructure.repositories.base import TableRepository


class UsageTimeRepository(TableRepository[UsageTime]):
    table = usage_times
    entity = UsageTime


class ConditionTypeRepository(TableRepository[ConditionType]):
    table = condition_types
    entity = ConditionType
