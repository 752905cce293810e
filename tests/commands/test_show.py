"""Tests for the show CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from exclctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestShowCommand:
    def test_dump(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["show", "-r", "exc day on 2024-12-28", "-r", "exc friday >16:00:00"]
        )
        assert result.exit_code == 0
        assert "Exclusion exc day on 2024-12-28" in result.stdout
        assert "Exclusion exc friday >16:00:00" in result.stdout

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "show", "-r", "exc day off 2024-12-25"])
        data = json.loads(result.stdout)
        assert data["data"]["dump"] == "Exclusion exc day off 2024-12-25\n"

    def test_syntax_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "show", "-r", "exc"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["error"]["code"] == "SYNTAX_ERROR"
