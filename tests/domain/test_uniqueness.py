"""Tests for ordered, short-circuiting uniqueness rules."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from eden.domain.errors import ConflictError
from eden.domain.uniqueness import UniqueRule, check_unique


class _Lookup:
    """Lookup backed by a set of taken values; counts calls."""

    def __init__(self, taken: set[Any]) -> None:
        self.taken = taken
        self.calls = 0

    def __call__(self, value: Any) -> object | None:
        self.calls += 1
        return object() if value in self.taken else None


class TestCheckUnique:
    def test_passes_when_nothing_taken(self) -> None:
        candidate = SimpleNamespace(cpf="1", email="a@x")
        check_unique(
            candidate,
            [UniqueRule("cpf", _Lookup(set()), "cpf"), UniqueRule("email", _Lookup(set()), "e")],
        )

    def test_first_conflict_wins(self) -> None:
        candidate = SimpleNamespace(cpf="1", email="a@x")
        email_lookup = _Lookup({"a@x"})
        rules = [
            UniqueRule("cpf", _Lookup({"1"}), "Cpf is already registered"),
            UniqueRule("email", email_lookup, "Email is already registered"),
        ]
        with pytest.raises(ConflictError) as exc_info:
            check_unique(candidate, rules)
        assert exc_info.value.field == "cpf"
        assert exc_info.value.message == "Cpf is already registered"
        assert email_lookup.calls == 0

    def test_optional_rule_skips_none(self) -> None:
        lookup = _Lookup({None})
        candidate = SimpleNamespace(cellphone=None)
        check_unique(candidate, [UniqueRule("cellphone", lookup, "taken", optional=True)])
        assert lookup.calls == 0

    def test_optional_rule_checks_value(self) -> None:
        candidate = SimpleNamespace(cellphone="119")
        with pytest.raises(ConflictError, match="Phone"):
            check_unique(
                candidate,
                [UniqueRule("cellphone", _Lookup({"119"}), "Phone is already registered", True)],
            )
