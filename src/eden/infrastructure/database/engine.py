"""Database engine setup.

SQLite is the default store (``{data_root}/.eden/eden.db``, foreign keys
on). Any SQLAlchemy URL can be configured via ``[database] url``.

SQLAlchemy Core (not ORM) is used: every operation is one short
request-scoped unit of work, so identity maps and session state buy
nothing.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event, func, insert, select
from sqlalchemy.engine import Engine

from eden.infrastructure.database.schema import (
    CONDITION_TYPE_SEED,
    USAGE_TIME_SEED,
    condition_types,
    metadata,
    usage_times,
)


def create_db_engine(url: str) -> Engine:
    """Create an engine; SQLite connections get foreign keys enabled."""
    engine = create_engine(url, echo=False)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def default_database_url(data_root: Path) -> str:
    """SQLite URL under ``{data_root}/.eden/``, creating the directory."""
    eden_dir = data_root / ".eden"
    eden_dir.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{eden_dir / 'eden.db'}"


def init_database(data_root: Path, url: str | None = None) -> Engine:
    """Create all tables and seed reference data.

    Idempotent: safe to call on an existing database.

    Returns the engine ready for use.
    """
    engine = create_db_engine(url or default_database_url(data_root))
    metadata.create_all(engine)
    _seed_lookups(engine)
    return engine


def _seed_lookups(engine: Engine) -> None:
    """Insert usage-time and condition-type rows into empty tables."""
    with engine.begin() as conn:
        for table, seed in ((usage_times, USAGE_TIME_SEED), (condition_types, CONDITION_TYPE_SEED)):
            count = conn.execute(select(func.count()).select_from(table)).scalar_one()
            if count == 0:
                conn.execute(insert(table), [{"description": d} for d in seed])
