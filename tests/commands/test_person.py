"""Tests for the ``person`` command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from stargate.cli import cli


def _json(runner: CliRunner, *args: str) -> dict:
    result = runner.invoke(cli, ["--json", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.output)


@pytest.mark.usefixtures("_isolated_root")
class TestPersonCreate:
    def test_create_json(self, cli_runner: CliRunner) -> None:
        data = _json(cli_runner, "person", "create", "Jane Doe")
        assert data["ok"] is True
        assert data["op"] == "create_person"
        assert data["data"]["id"] > 0

    def test_create_quiet_prints_id(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "person", "create", "Jane Doe"])
        assert result.exit_code == 0
        assert result.output.strip().isdigit()

    def test_duplicate_exits_1(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["person", "create", "Jane Doe"])
        result = cli_runner.invoke(cli, ["person", "create", "Jane Doe"])
        assert result.exit_code == 1
        assert "CONFLICT" in result.output

    def test_database_created_in_cwd(self, cli_runner: CliRunner, tmp_path) -> None:
        cli_runner.invoke(cli, ["person", "create", "Jane Doe"])
        assert (tmp_path / ".stargate" / "starbase.db").exists()


@pytest.mark.usefixtures("_isolated_root")
class TestPersonRename:
    def test_rename(self, cli_runner: CliRunner) -> None:
        created = _json(cli_runner, "person", "create", "Jane Doe")
        data = _json(cli_runner, "person", "rename", "Jane Doe", "Jane Smith")
        assert data["data"]["id"] == created["data"]["id"]
        assert data["data"]["name"] == "Jane Smith"

    def test_rename_unknown(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["person", "rename", "Nobody", "Somebody"])
        assert result.exit_code == 1
        assert "NOT_FOUND" in result.output


@pytest.mark.usefixtures("_isolated_root")
class TestPersonGet:
    def test_get(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["person", "create", "Jane Doe"])
        data = _json(cli_runner, "person", "get", "Jane Doe")
        assert data["data"]["person"]["name"] == "Jane Doe"
        assert data["data"]["person"]["current_rank"] is None

    def test_get_human(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["person", "create", "Jane Doe"])
        result = cli_runner.invoke(cli, ["person", "get", "Jane Doe"])
        assert result.exit_code == 0
        assert "name: Jane Doe" in result.output

    def test_get_unknown(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["person", "get", "Nobody"])
        assert result.exit_code == 1
        assert "NOT_FOUND" in result.output


@pytest.mark.usefixtures("_isolated_root")
class TestPersonList:
    def test_list(self, cli_runner: CliRunner) -> None:
        for name in ("Jane Doe", "John Doe"):
            cli_runner.invoke(cli, ["person", "create", name])
        data = _json(cli_runner, "person", "list")
        assert data["data"]["count"] == 2
        assert [p["name"] for p in data["data"]["people"]] == ["Jane Doe", "John Doe"]

    def test_list_quiet(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["person", "create", "Jane Doe"])
        result = cli_runner.invoke(cli, ["-q", "person", "list"])
        assert result.output.strip() == "Jane Doe"

    def test_list_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["person", "list"])
        assert result.exit_code == 0
        assert "No people found." in result.output
