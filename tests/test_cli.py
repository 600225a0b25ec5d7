from __future__ import annotations

import sys

import pytest
from typer.testing import CliRunner

from conftest import python_invocation
from proctime.cli import main as cli


runner = CliRunner()


@pytest.fixture()
def invocation(monkeypatch, clean_env):
    def _set(line: str) -> None:
        monkeypatch.setattr(cli, "read_invocation", lambda: line)

    return _set


@pytest.mark.timeout(60)
def test_cli_reports_and_propagates_exit_code(invocation):
    invocation(python_invocation("import sys; sys.exit(7)"))
    result = runner.invoke(cli.app, [])
    assert result.exit_code == 7
    assert "real    " in result.output
    assert "system  " in result.output
    assert "user    " in result.output


def test_cli_usage_error(invocation):
    invocation("proctime")
    result = runner.invoke(cli.app, [])
    assert result.exit_code == 1
    assert "Usage: proctime <command>" in result.output


def test_cli_resolution_error(invocation, tmp_path, monkeypatch):
    monkeypatch.setenv("PATH", str(tmp_path))
    invocation("proctime no-such-tool --x")
    result = runner.invoke(cli.app, [])
    assert result.exit_code == 1
    assert "`no-such-tool' not found." in result.output


@pytest.mark.timeout(60)
def test_cli_has_no_options_of_its_own(invocation):
    invocation(python_invocation("import sys; sys.exit(len(sys.argv))") + " --help")
    result = runner.invoke(cli.app, [sys.executable, "-c", "import sys; sys.exit(len(sys.argv))", "--help"])
    assert result.exit_code == 2
    assert "real    " in result.output
