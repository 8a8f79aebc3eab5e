"""Pytest configuration and fixtures."""

import pytest
from rich.console import Console

from pwnedcheck import cli


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep tests independent of the caller's environment."""
    for key in ("PWNEDCHECK_API_URL", "PWNEDCHECK_USER_AGENT", "PWNEDCHECK_ADD_PADDING"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def plain_console(monkeypatch):
    """Swap the CLI console for one without colour or highlighting."""
    console = Console(force_terminal=False, highlight=False, width=200)
    monkeypatch.setattr(cli, "console", console)
    return console
