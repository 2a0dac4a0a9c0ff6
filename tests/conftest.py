"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from funclog.cli.main import app


@pytest.fixture
def write_go(tmp_path):
    """Write a Go source into tmp_path and return its path."""

    def _write(text: str, name: str = "main.go") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Invoke the CLI with args."""

    def _invoke(args):
        return cli_runner.invoke(app, args)

    return _invoke
