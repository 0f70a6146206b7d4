"""Integration tests for the arlo CLI."""

from __future__ import annotations

import ast
from pathlib import Path
import sys
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

import arlo
from arlo.cli import app
from arlo.cli._errors import (
    CommandError,
    MissingDependencies,
    ProjectConfigError,
    WizardAborted,
)
from arlo.cli._provision import NextSteps

runner = CliRunner()


class TestDispatch:
    def test_no_arguments_prints_hint(self) -> None:
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "No Commands Passed" in result.output
        assert "arlo help or arlo -h" in result.output

    def test_invalid_command(self) -> None:
        result = runner.invoke(app, ["frobnicate"])

        assert result.exit_code == 1
        assert "Invalid Commands" in result.output
        assert "To get a list of commands" in result.output

    @patch("arlo.cli.app.init_project")
    def test_invalid_command_runs_nothing(self, mock_init: MagicMock) -> None:
        result = runner.invoke(app, ["bogus", "init"])

        assert result.exit_code == 1
        assert "Invalid Commands" in result.output
        assert "No such command" not in result.output
        mock_init.assert_not_called()

    @pytest.mark.parametrize("args", [["help"], ["-h"], ["--help"]])
    def test_help_lists_commands(self, args: list[str]) -> None:
        result = runner.invoke(app, args)

        assert result.exit_code == 0
        assert "arlo <command> [shorthand]" in result.output
        for line in [
            "init     (-i)    initialize a new arlo project",
            "dev      (-d)    starts your development environment",
            "build    (-b)    builds the final binary for distribution",
            "upgrade  (-u)    upgrades arlo to the latest version",
            "version  (-v)    prints app version",
        ]:
            assert line in result.output

    @pytest.mark.parametrize("args", [["version"], ["-v"]])
    def test_version(self, args: list[str]) -> None:
        result = runner.invoke(app, args)

        assert result.exit_code == 0
        assert result.output.strip() == arlo.__version__


class TestInitCommand:
    @pytest.mark.parametrize("args", [["init"], ["-i"]])
    @patch("arlo.cli.app.init_project")
    def test_prints_next_steps(self, mock_init: MagicMock, args: list[str]) -> None:
        mock_init.return_value = NextSteps(directory="myapp", install="npm install")

        result = runner.invoke(app, args)

        assert result.exit_code == 0, result.output
        mock_init.assert_called_once_with()
        assert "Done!" in result.output
        for command in ["cd myapp", "npm install", "arlo dev"]:
            assert command in result.output

    @patch("arlo.cli.app.init_project", side_effect=MissingDependencies(["air"]))
    def test_missing_dependencies_exit_1(self, mock_init: MagicMock) -> None:
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1
        assert "Some dependencies are missing: air" in result.output
        assert "Done!" not in result.output

    @patch("arlo.cli.app.init_project", side_effect=WizardAborted())
    def test_cancelled(self, mock_init: MagicMock) -> None:
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1
        assert "Prompt cancelled." in result.output

    @patch("arlo.cli.app.init_project", side_effect=FileExistsError("src-backend exists"))
    def test_filesystem_error_exit_1(self, mock_init: MagicMock) -> None:
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1
        assert "src-backend exists" in result.output


class TestDevAndBuild:
    @pytest.mark.parametrize("args", [["dev"], ["-d"]])
    @patch("arlo.cli.app.run_dev")
    def test_dev(self, mock_dev: MagicMock, args: list[str]) -> None:
        result = runner.invoke(app, args)

        assert result.exit_code == 0
        mock_dev.assert_called_once_with()

    @pytest.mark.parametrize("args", [["build"], ["-b"]])
    @patch("arlo.cli.app.run_build")
    def test_build(self, mock_build: MagicMock, args: list[str]) -> None:
        result = runner.invoke(app, args)

        assert result.exit_code == 0
        mock_build.assert_called_once_with()

    @patch("arlo.cli.app.run_dev", side_effect=ProjectConfigError("No arlo.config.json"))
    def test_dev_outside_project(self, mock_dev: MagicMock) -> None:
        result = runner.invoke(app, ["dev"])

        assert result.exit_code == 1
        assert "No arlo.config.json" in result.output

    @patch("arlo.cli.app.run_build", side_effect=CommandError(["go", "run", "build.go"], 2))
    def test_build_failure(self, mock_build: MagicMock) -> None:
        result = runner.invoke(app, ["build"])

        assert result.exit_code == 1
        assert "exit code 2" in result.output


class TestUpgrade:
    @pytest.mark.parametrize("args", [["upgrade"], ["-u"]])
    @patch("arlo.cli.app.run_command")
    def test_runs_pip(self, mock_run: MagicMock, args: list[str]) -> None:
        result = runner.invoke(app, args)

        assert result.exit_code == 0
        mock_run.assert_called_once_with(
            sys.executable, "-m", "pip", "install", "--upgrade", "arlo"
        )
        assert "Arlo Upgraded" in result.output

    @patch("arlo.cli.app.run_command", side_effect=CommandError(["pip"], 1))
    def test_failure(self, mock_run: MagicMock) -> None:
        result = runner.invoke(app, ["upgrade"])

        assert result.exit_code == 1
        assert "Arlo Upgraded" not in result.output


class TestDeclaredDependencies:
    def test_imports_are_declared(self) -> None:
        """Every third-party module imported by arlo is a declared dependency."""
        declared = {"typer", "rich", "readchar"}
        src = Path(arlo.__file__).parent

        imported: set[str] = set()
        for py_file in src.rglob("*.py"):
            for node in ast.walk(ast.parse(py_file.read_text())):
                if isinstance(node, ast.Import):
                    imported.update(alias.name.split(".")[0] for alias in node.names)
                elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
                    imported.add(node.module.split(".")[0])

        third_party = imported - set(sys.stdlib_module_names) - {"arlo", "__future__"}
        assert third_party <= declared, third_party - declared
