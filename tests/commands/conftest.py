"""Fixtures for CLI command tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from eden.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo the logging and telemetry setup each CLI invocation performs."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    disable_telemetry()
