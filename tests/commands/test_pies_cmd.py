"""Tests for the pies command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from pieshop.cli import cli


@pytest.mark.usefixtures("_isolated_shop")
class TestPiesCommand:
    def test_list_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "pies", "list"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["op"] == "list_pies"
        assert data["data"]["count"] == 6
        assert data["data"]["items"][0]["price"] == "15.95"

    def test_list_week(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "pies", "list", "--week"])
        assert result.exit_code == 0
        assert result.output.split() == ["1", "3"]

    def test_list_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["pies", "list"])
        assert result.exit_code == 0
        assert "Christmas Apple Pie" in result.output
        assert "sold out" in result.output

    def test_show(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["pies", "show", "6"])
        assert result.exit_code == 0
        assert "Cranberry Pie" in result.output
        assert "A Christmas favorite" in result.output

    def test_show_missing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "pies", "show", "42"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "NOT_FOUND"

    def test_categories(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "pies", "categories"])
        assert result.exit_code == 0
        names = [c["name"] for c in json.loads(result.output)["data"]["items"]]
        assert names == ["Fruit pies", "Cheese cakes", "Seasonal pies"]
