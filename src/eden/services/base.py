"""BaseService: foundation for all eden services.

Every service receives a :class:`Store` at construction time and owns its
transaction boundaries via ``self._store.transaction()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from eden.infrastructure.store import Store


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ProductService(BaseService):
            def delete(self, product_id: int) -> ServiceResult:
                with self._store.transaction() as txn:
                    ...
    """

    def __init__(self, store: Store) -> None:
        self._store = store
