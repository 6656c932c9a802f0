"""Shared pytest fixtures and test helpers for eden tests."""

from __future__ import annotations

import os
from collections.abc import Iterator
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from eden.config.settings import EdenSettings
from eden.infrastructure.graph_client import GraphClientError
from eden.infrastructure.security import TokenSigner
from eden.infrastructure.store import Store

TEST_SECRET_KEY = "test-secret-key-0123456789abcdef0123456789abcdef0123456789abcdef0123"

# 2026-01-01T00:00:00Z
FIXED_NOW = datetime(2026, 1, 1, tzinfo=UTC)


class FixedClock:
    """Mutable clock for token tests."""

    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class FakeGraphClient:
    """Records calls; raises *error* when set."""

    def __init__(self, error: GraphClientError | None = None) -> None:
        self.error = error
        self.calls: list[tuple[int, str | None]] = []

    def create_user(self, user_id: int, user_name: str | None) -> dict[str, Any]:
        self.calls.append((user_id, user_name))
        if self.error is not None:
            raise self.error
        return {"userId": user_id}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer EDEN_* variables out of the tests."""
    for key in list(os.environ):
        if key.startswith("EDEN_"):
            monkeypatch.delenv(key)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> EdenSettings:
    return EdenSettings.from_cli(data_root=tmp_path)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def graph() -> FakeGraphClient:
    return FakeGraphClient()


@pytest.fixture
def store(settings: EdenSettings, clock: FixedClock, graph: FakeGraphClient) -> Iterator[Store]:
    """Initialized store on a temp directory with a fixed clock and fake graph client."""
    s = Store(
        settings,
        signer=TokenSigner(TEST_SECRET_KEY, clock=clock),
        graph_client=graph,  # type: ignore[arg-type]
    )
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI creates an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test classes.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers (used across service test modules)
# ---------------------------------------------------------------------------


def register_user(store: Store, **overrides: Any) -> dict[str, Any]:
    """Register a user via UserService, asserting success."""
    from eden.services.users import UserService

    fields: dict[str, Any] = {
        "name": "Alice",
        "user_name": "alice",
        "cpf": "11111111111",
        "email": "alice@example.com",
        "password": "s3cret",
        "cellphone": None,
    }
    fields.update(overrides)
    result = UserService(store).register(**fields)
    assert result.ok, result.error
    return result.data


def register_product(store: Store, email: str, **overrides: Any) -> dict[str, Any]:
    """Register a product owned by *email* via ProductService, asserting success."""
    from eden.services.products import ProductService

    fields: dict[str, Any] = {
        "title": "Bicycle",
        "description": "City bike, 21 gears",
        "price": 100.0,
        "sender_zip_code": "01001000",
        "usage_time_id": 1,
        "condition_type_id": 1,
        "email": email,
    }
    fields.update(overrides)
    result = ProductService(store).register(**fields)
    assert result.ok, result.error
    return result.data
