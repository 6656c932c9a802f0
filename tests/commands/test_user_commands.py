"""Tests for the user and token CLI commands."""

from __future__ import annotations

import json
from typing import Any

import pytest
from click.testing import CliRunner

from eden.cli import cli

ALICE = [
    "--name", "Alice",
    "--user-name", "alice",
    "--cpf", "11111111111",
    "--email", "alice@example.com",
    "--password", "s3cret",
]  # fmt: skip


def _invoke_json(runner: CliRunner, *args: str) -> dict[str, Any]:
    result = runner.invoke(cli, ["--json", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


@pytest.mark.usefixtures("_isolated_root")
class TestUserCommands:
    def test_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["user", "--help"])
        assert result.exit_code == 0
        for name in ("register", "get", "update", "delete", "favorite"):
            assert name in result.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["user", "--examples"])
        assert result.exit_code == 0
        assert "eden user register" in result.output

    def test_register_and_get(self, cli_runner: CliRunner) -> None:
        data = _invoke_json(cli_runner, "user", "register", *ALICE)["data"]
        assert "password" not in data
        fetched = _invoke_json(cli_runner, "user", "get", "--email", "alice@example.com")
        assert fetched["data"]["id"] == data["id"]

    def test_duplicate_exits_nonzero(self, cli_runner: CliRunner) -> None:
        _invoke_json(cli_runner, "user", "register", *ALICE)
        result = cli_runner.invoke(cli, ["--json", "user", "register", *ALICE])
        assert result.exit_code == 1
        assert "CONFLICT" in result.output
        assert "Cpf is already registered" in result.output

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["user", "register", *ALICE])
        assert result.exit_code == 0
        assert "OK register_user" in result.output

    def test_update_with_set(self, cli_runner: CliRunner) -> None:
        user_id = _invoke_json(cli_runner, "user", "register", *ALICE)["data"]["id"]
        data = _invoke_json(
            cli_runner, "user", "update", str(user_id), "--set", "name=Alicia", "--set",
            'cellphone="11999990000"',
        )  # fmt: skip
        assert data["data"]["fields_changed"] == ["name", "cellphone"]

    def test_update_bad_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["user", "update", "1", "--patch", "{nope"])
        assert result.exit_code == 2
        assert "Invalid JSON" in result.output

    def test_get_without_parameter(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "user", "get"])
        assert result.exit_code == 1
        assert "NO_PARAMETER" in result.output


@pytest.mark.usefixtures("_isolated_root")
class TestTokenCommands:
    def test_issue_and_verify(self, cli_runner: CliRunner) -> None:
        _invoke_json(cli_runner, "user", "register", *ALICE)
        issued = _invoke_json(cli_runner, "token", "issue", "alice@example.com")["data"]
        assert issued["expires_at_ms"] - issued["issued_at_ms"] == 86_400_000
        verified = _invoke_json(cli_runner, "token", "verify", issued["token"])["data"]
        assert verified["subject"] == "alice@example.com"

    def test_issue_with_wrong_password(self, cli_runner: CliRunner) -> None:
        _invoke_json(cli_runner, "user", "register", *ALICE)
        result = cli_runner.invoke(
            cli, ["--json", "token", "issue", "alice@example.com", "--password", "nope"]
        )
        assert result.exit_code == 1
        assert "UNAUTHORIZED" in result.output
