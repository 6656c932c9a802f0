"""Tests for the product, comment, cart, lookup and init CLI commands."""

from __future__ import annotations

import json
from typing import Any

import pytest
from click.testing import CliRunner

from eden.cli import cli


def _invoke_json(runner: CliRunner, *args: str) -> dict[str, Any]:
    result = runner.invoke(cli, ["--json", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


def _seed(runner: CliRunner) -> tuple[int, int]:
    """Register a user and one product; return (user_id, product_id)."""
    user = _invoke_json(
        runner, "user", "register", "--name", "Alice", "--user-name", "alice",
        "--cpf", "11111111111", "--email", "alice@example.com", "--password", "pw",
    )  # fmt: skip
    product = _invoke_json(
        runner, "product", "create", "--title", "Red bike", "--description", "Road bike",
        "--price", "100", "--zip", "01001000", "--usage-time", "1", "--condition-type", "2",
        "--email", "alice@example.com",
    )  # fmt: skip
    return user["data"]["id"], product["data"]["id"]


@pytest.mark.usefixtures("_isolated_root")
class TestProductCommands:
    def test_create_and_search(self, cli_runner: CliRunner) -> None:
        _seed(cli_runner)
        found = _invoke_json(cli_runner, "product", "search", "bike")["data"]
        assert found["count"] == 1

    def test_update_price(self, cli_runner: CliRunner) -> None:
        _, product_id = _seed(cli_runner)
        data = _invoke_json(
            cli_runner, "product", "update", str(product_id), "--set", "price=19.99"
        )
        assert data["data"]["fields_changed"] == ["price"]
        fetched = _invoke_json(cli_runner, "product", "get", str(product_id))
        assert fetched["data"]["price"] == 19.99

    def test_update_unknown_field(self, cli_runner: CliRunner) -> None:
        _, product_id = _seed(cli_runner)
        result = cli_runner.invoke(
            cli, ["--json", "product", "update", str(product_id), "--patch", '{"colour": "red"}']
        )
        assert result.exit_code == 1
        assert "NO_RECOGNIZED_FIELD" in result.output

    def test_delete(self, cli_runner: CliRunner) -> None:
        _, product_id = _seed(cli_runner)
        _invoke_json(cli_runner, "product", "delete", str(product_id))
        result = cli_runner.invoke(cli, ["--json", "product", "get", str(product_id)])
        assert result.exit_code == 1


@pytest.mark.usefixtures("_isolated_root")
class TestCommentAndCartCommands:
    def test_comment_flow(self, cli_runner: CliRunner) -> None:
        user_id, product_id = _seed(cli_runner)
        _invoke_json(
            cli_runner, "comment", "create", str(product_id), "--user", str(user_id),
            "--text", "Still available?",
        )  # fmt: skip
        listed = _invoke_json(cli_runner, "comment", "list", str(product_id))["data"]
        assert listed["items"][0]["comment"] == "Still available?"

    def test_cart_flow(self, cli_runner: CliRunner) -> None:
        user_id, product_id = _seed(cli_runner)
        added = _invoke_json(cli_runner, "cart", "add", str(user_id), str(product_id))
        assert added["data"]["product_ids"] == [product_id]
        shown = _invoke_json(cli_runner, "cart", "show", str(user_id))
        assert shown["data"]["product_ids"] == [product_id]

    def test_favorites(self, cli_runner: CliRunner) -> None:
        user_id, product_id = _seed(cli_runner)
        _invoke_json(cli_runner, "user", "favorite", "add", str(user_id), str(product_id))
        listed = _invoke_json(cli_runner, "user", "favorite", "list", str(user_id))
        assert listed["data"]["count"] == 1


@pytest.mark.usefixtures("_isolated_root")
class TestStandaloneCommands:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "eden" in result.output

    def test_init(self, cli_runner: CliRunner) -> None:
        data = _invoke_json(cli_runner, "init")
        assert data["data"]["database"].endswith("eden.db")

    def test_lookup(self, cli_runner: CliRunner) -> None:
        data = _invoke_json(cli_runner, "lookup")["data"]
        assert [c["description"] for c in data["condition_types"]][0] == "New"

    def test_verbose_adds_telemetry(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "-v", "lookup"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["meta"]["telemetry"]["span"] == (
            "ProductService.list_lookups"
        )
