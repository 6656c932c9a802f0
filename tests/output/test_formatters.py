"""Tests for ServiceResult formatting."""

from __future__ import annotations

import json

from eden.output.formatters import format_result
from eden.services.result import ServiceError, ServiceResult


class TestJsonMode:
    def test_full_model(self) -> None:
        result = ServiceResult(ok=True, op="get_user", data={"id": 1}, warnings=["w"])
        parsed = json.loads(format_result(result, json_output=True))
        assert parsed["ok"] is True
        assert parsed["data"] == {"id": 1}
        assert parsed["warnings"] == ["w"]


class TestHumanMode:
    def test_success_pairs(self) -> None:
        out = format_result(ServiceResult(ok=True, op="get_user", data={"email": "a@x.com"}))
        assert out.splitlines()[0] == "OK get_user"
        assert "email:" in out
        assert "a@x.com" in out

    def test_items_table(self) -> None:
        result = ServiceResult(
            ok=True,
            op="list_products",
            data={"count": 1, "items": [{"id": 1, "title": "[bold]Lamp[/bold]"}]},
        )
        out = format_result(result)
        assert "title" in out
        assert "[bold]Lamp[/bold]" in out
        assert "count:" in out

    def test_error_lists_violations(self) -> None:
        result = ServiceResult(
            ok=False,
            op="update_product",
            error=ServiceError(
                code="VALIDATION_FAILED",
                message="Validation errors: too long",
                detail={"violations": [{"field": "title", "message": "too long"}]},
            ),
        )
        out = format_result(result)
        assert "ERROR update_product [VALIDATION_FAILED]" in out
        assert "- title:" in out

    def test_verbose_meta(self) -> None:
        result = ServiceResult(ok=True, op="x", meta={"telemetry": {"duration_ms": 1.0}})
        assert "meta:" in format_result(result, verbose=True)
        assert "meta:" not in format_result(result)
