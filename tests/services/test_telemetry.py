"""Tests for the @traced decorator."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from eden.services.result import ServiceResult
from eden.services.telemetry import disable_telemetry, enable_telemetry, traced


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """Ensure clean telemetry state for every test."""
    yield
    disable_telemetry()


class _Service:
    @traced
    def run(self, ok: bool = True) -> ServiceResult:
        return ServiceResult(ok=ok, op="run")

    @traced
    def plain(self) -> int:
        return 42

    @traced
    def boom(self) -> ServiceResult:
        raise RuntimeError("boom")


class TestTraced:
    def test_disabled_leaves_result_alone(self) -> None:
        assert _Service().run().meta is None

    def test_enabled_adds_duration(self) -> None:
        enable_telemetry()
        result = _Service().run()
        assert result.meta is not None
        telemetry = result.meta["telemetry"]
        assert telemetry["span"] == "_Service.run"
        assert telemetry["duration_ms"] >= 0

    def test_failed_result_still_traced(self) -> None:
        enable_telemetry()
        result = _Service().run(ok=False)
        assert result.meta is not None

    def test_non_result_passthrough(self) -> None:
        enable_telemetry()
        assert _Service().plain() == 42

    def test_exceptions_propagate(self) -> None:
        enable_telemetry()
        with pytest.raises(RuntimeError, match="boom"):
            _Service().boom()

    def test_preserves_name(self) -> None:
        assert _Service.run.__name__ == "run"
