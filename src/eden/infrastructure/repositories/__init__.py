"""Connection-bound repositories mapping rows to domain entities."""

from eden.infrastructure.repositories.carts import CartRepository
from eden.infrastructure.repositories.comments import CommentRepository
from eden.infrastructure.repositories.lookups import ConditionTypeRepository, UsageTimeRepository
from eden.infrastructure.repositories.products import ProductRepository
from eden.infrastructure.repositories.users import UserRepository

__all__ = [
    "CartRepository",
    "CommentRepository",
    "ConditionTypeRepository",
    "ProductRepository",
    "UsageTimeRepository",
    "UserRepository",
]
