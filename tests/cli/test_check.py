"""Tests for ``locksat check``.

Verifies:
    - A satisfying lock exits 0 in text and JSON formats.
    - Constraint violations and import drift exit 1 and are reported.
    - A missing lock file reports "no lock" and exits 1.
    - A missing manifest file means no rules.
    - Malformed or unreadable input documents exit 2.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from locksat.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


class TestSatisfied:
    def test_exit_code_0(self, runner: CliRunner, cli_args: list[str]) -> None:
        result = runner.invoke(cli, cli_args)
        assert result.exit_code == 0
        assert "Lock satisfies all inputs" in result.output

    def test_json_output(self, runner: CliRunner, cli_args: list[str]) -> None:
        result = runner.invoke(cli, cli_args + ["--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["passed"] is True
        assert data["missing_imports"] == []


class TestNotSatisfied:
    def test_constraint_violation(
        self, runner: CliRunner, project_dir: Path, cli_args: list[str]
    ) -> None:
        (project_dir / "locksat.yaml").write_text(
            'constraints:\n  github.com/pkg/errors: "^0.9.0"\n', encoding="utf-8"
        )
        result = runner.invoke(cli, cli_args + ["--format", "json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["unmatched_constraints"]["github.com/pkg/errors"]["version"] == "v0.8.1"

    def test_override_reported_in_text(
        self, runner: CliRunner, project_dir: Path, cli_args: list[str]
    ) -> None:
        (project_dir / "locksat.yaml").write_text(
            "overrides:\n  github.com/stretchr/testify: 'branch:master'\n", encoding="utf-8"
        )
        result = runner.invoke(cli, cli_args)
        assert result.exit_code == 1
        assert "Unmatched overrides" in result.output
        assert "github.com/stretchr/testify" in result.output

    def test_import_drift(
        self, runner: CliRunner, project_dir: Path, cli_args: list[str]
    ) -> None:
        lock = json.loads((project_dir / "locksat-lock.json").read_text())
        lock["input_imports"] = ["github.com/pkg/errors", "github.com/old/dep"]
        (project_dir / "locksat-lock.json").write_text(json.dumps(lock), encoding="utf-8")
        result = runner.invoke(cli, cli_args + ["--format", "json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["missing_imports"] == ["github.com/stretchr/testify/assert"]
        assert data["excess_imports"] == ["github.com/old/dep"]

    def test_no_lock(
        self, runner: CliRunner, project_dir: Path, cli_args: list[str]
    ) -> None:
        (project_dir / "locksat-lock.json").unlink()
        result = runner.invoke(cli, cli_args)
        assert result.exit_code == 1
        assert "No lock found" in result.output


class TestInputs:
    def test_missing_manifest_means_no_rules(
        self, runner: CliRunner, project_dir: Path, cli_args: list[str]
    ) -> None:
        (project_dir / "locksat.yaml").unlink()
        result = runner.invoke(cli, cli_args)
        assert result.exit_code == 0

    def test_malformed_lock_exits_2(
        self, runner: CliRunner, project_dir: Path, cli_args: list[str]
    ) -> None:
        (project_dir / "locksat-lock.json").write_text("{", encoding="utf-8")
        result = runner.invoke(cli, cli_args)
        assert result.exit_code == 2
        assert "Error:" in result.output

    def test_malformed_manifest_exits_2_json(
        self, runner: CliRunner, project_dir: Path, cli_args: list[str]
    ) -> None:
        (project_dir / "locksat.yaml").write_text("constraints: [x]\n", encoding="utf-8")
        result = runner.invoke(cli, cli_args + ["--format", "json"])
        assert result.exit_code == 2
        assert "error" in json.loads(result.output)

    def test_undecodable_lock_exits_2(
        self, runner: CliRunner, project_dir: Path, cli_args: list[str]
    ) -> None:
        (project_dir / "locksat-lock.json").write_bytes(b'{"input_imports": ["\xff"]}')
        result = runner.invoke(cli, cli_args)
        assert result.exit_code == 2
        assert "Error:" in result.output
        assert "not valid UTF-8" in result.output

    def test_tree_required(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["check"])
        assert result.exit_code == 2
