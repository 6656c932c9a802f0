"""Store: the single dependency injected into every service.

The Store owns the database engine and the outbound collaborators
(password hasher, token signer, graph client). :meth:`transaction` is the
sole commit point for writes: repositories bound to the yielded
:class:`StoreTransaction` share one connection, committed on clean exit
and rolled back on any exception.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING

from eden.infrastructure.database.engine import init_database
from eden.infrastructure.graph_client import GraphClient
from eden.infrastructure.repositories import (
    CartRepository,
    CommentRepository,
    ConditionTypeRepository,
    ProductRepository,
    UsageTimeRepository,
    UserRepository,
)
from eden.infrastructure.security import PasswordHasher, TokenSigner

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from eden.config.settings import EdenSettings

logger = logging.getLogger(__name__)


@dataclass
class StoreTransaction:
    """Active unit of work: one connection, repositories bound to it."""

    conn: Connection

    @cached_property
    def users(self) -> UserRepository:
        return UserRepository(self.conn)

    @cached_property
    def products(self) -> ProductRepository:
        return ProductRepository(self.conn)

    @cached_property
    def comments(self) -> CommentRepository:
        return CommentRepository(self.conn)

    @cached_property
    def carts(self) -> CartRepository:
        return CartRepository(self.conn)

    @cached_property
    def usage_times(self) -> UsageTimeRepository:
        return UsageTimeRepository(self.conn)

    @cached_property
    def condition_types(self) -> ConditionTypeRepository:
        return ConditionTypeRepository(self.conn)


class Store:
    """Persistence plus collaborators, built from :class:`EdenSettings`.

    Collaborators may be passed explicitly (tests inject fakes); otherwise
    they are built from the settings. The graph client is ``None`` when
    ``[graph] enabled`` is false.
    """

    def __init__(
        self,
        settings: EdenSettings,
        *,
        hasher: PasswordHasher | None = None,
        signer: TokenSigner | None = None,
        graph_client: GraphClient | None = None,
    ) -> None:
        self._settings = settings
        self._engine: Engine = init_database(settings.data_root, settings.database.url)
        self.hasher = hasher or PasswordHasher(settings.auth.hash_scheme)
        self.signer = signer or TokenSigner(settings.auth.secret_key)
        if graph_client is None and settings.graph.enabled:
            graph_client = GraphClient(
                settings.graph.base_url,
                timeout=settings.graph.timeout_seconds,
            )
        self.graph_client = graph_client

    @property
    def settings(self) -> EdenSettings:
        return self._settings

    @property
    def engine(self) -> Engine:
        return self._engine

    @contextmanager
    def transaction(self) -> Iterator[StoreTransaction]:
        """Yield a unit of work; commit on success, roll back on error."""
        with self._engine.begin() as conn:
            yield StoreTransaction(conn)

    def close(self) -> None:
        """Dispose of the engine's connection pool."""
        self._engine.dispose()
        logger.debug("Store closed")
