"""
Tests for CLI commands.

Uses typer's CliRunner to test CLI commands without touching the real
process environment.
"""

import logging
import os

import pytest
from typer.testing import CliRunner

from envcascade.cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    yield
    logger = logging.getLogger("envcascade")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def write_env(directory, name, *lines):
    path = directory / name
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


class TestVersion:
    """Tests for --version flag."""

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "envcascade version" in result.output

    def test_version_short_flag(self):
        result = runner.invoke(app, ["-v"])
        assert result.exit_code == 0
        assert "envcascade version" in result.output


class TestHelp:
    """Tests for help output."""

    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "envcascade" in result.output.lower()

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "files" in result.output
        assert "show" in result.output

    def test_files_help(self):
        result = runner.invoke(app, ["files", "--help"])
        assert result.exit_code == 0

    def test_show_help(self):
        result = runner.invoke(app, ["show", "--help"])
        assert result.exit_code == 0


class TestFiles:
    """Tests for the files command."""

    def test_lists_candidates(self, tmp_path):
        write_env(tmp_path, ".env", "A=1")
        write_env(tmp_path, ".env.prod", "A=2")

        result = runner.invoke(app, ["files", "--mode", "production", "--dir", str(tmp_path)])

        assert result.exit_code == 0
        assert ".env.production.local" in result.output
        assert "first choice" in result.output
        assert "missing" in result.output

    def test_reports_when_nothing_exists(self, tmp_path):
        result = runner.invoke(app, ["files", "-m", "test", "-d", str(tmp_path)])

        assert result.exit_code == 0
        assert ".env.testing" in result.output
        assert "None of the candidate files exist" in result.output

    def test_unreadable_directory(self, tmp_path):
        result = runner.invoke(app, ["files", "-m", "test", "-d", str(tmp_path / "gone")])

        assert result.exit_code == 1


class TestShow:
    """Tests for the show command."""

    def test_shows_exported_variables(self, tmp_path):
        write_env(tmp_path, ".env.local", "$host=db", "DATABASE_HOST={$host}", "$hidden=x")

        result = runner.invoke(app, ["show", "--mode", "development", "--dir", str(tmp_path)])

        assert result.exit_code == 0
        assert ".env.local" in result.output
        assert "DATABASE_HOST" in result.output
        assert "$hidden" not in result.output

    def test_does_not_touch_process_environment(self, tmp_path, monkeypatch):
        monkeypatch.delenv("ENVCASCADE_CLI_TEST", raising=False)
        write_env(tmp_path, ".env", "ENVCASCADE_CLI_TEST=1")

        result = runner.invoke(app, ["show", "-m", "development", "-d", str(tmp_path)])

        assert result.exit_code == 0
        assert "ENVCASCADE_CLI_TEST" not in os.environ

    def test_exit_code_when_nothing_loads(self, tmp_path):
        result = runner.invoke(app, ["show", "-m", "development", "-d", str(tmp_path)])

        assert result.exit_code == 1
        assert "No env file was loaded" in result.output

    def test_file_without_exports(self, tmp_path):
        write_env(tmp_path, ".env", "# only comments", "$local=1")

        result = runner.invoke(app, ["show", "-m", "development", "-d", str(tmp_path)])

        assert result.exit_code == 0
        assert "No variables exported" in result.output
