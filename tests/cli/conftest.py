"""Fixtures for CLI tests: isolated working directory and database file."""

from loguru import logger
import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner():
    """CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_cli(monkeypatch, tmp_path):
    """Run each CLI test in a temp directory and drop log sinks afterwards."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("USERDESK_DATABASE_URL", raising=False)
    yield
    logger.remove()


@pytest.fixture
def db_args(tmp_path):
    """Global options pointing the CLI at a throwaway SQLite file."""
    return ["--database-url", f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"]
