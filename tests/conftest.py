"""
Shared pytest configuration for the quick-notes test suite.

This file centralizes reusable testing utilities so that:
    • CLI tests share one Typer CliRunner setup
    • every test gets its own throwaway SQLite file
    • handler output can be captured without ANSI colour codes
"""

import io
from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from quick_notes.storage import NotesStorage


# ============================================================================
# SHARED TEST INFRASTRUCTURE
# ============================================================================


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provides a fresh Typer CliRunner instance for CLI tests."""
    return CliRunner()


@pytest.fixture
def db_path(tmp_path) -> Path:
    """Path to a not-yet-created SQLite file inside the test's tmp dir."""
    return tmp_path / "notes" / "app.db"


@pytest.fixture
def storage(db_path):
    """A NotesStorage bound to a fresh database file, closed after the test."""
    handle = NotesStorage(db_path)
    yield handle
    handle.close()


# ---------------------------------------------------------------------------
# Fixture: console
# ---------------------------------------------------------------------------
@pytest.fixture
def console() -> Console:
    """
    Rich console writing to an in-memory buffer.

    Colour is disabled and the width is fixed so assertions on rendered
    tables are stable across terminals. Read output with:

        console.file.getvalue()
    """
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)
