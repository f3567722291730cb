"""
Root entrypoint for the quick-notes CLI.

This module defines the top-level `quick-notes` command and its six
subcommands, each with a one-letter alias:

    • quick-notes list   | l   [--limit N]
    • quick-notes add    | a   [TITLE] CONTENT [--priority low|medium|high]
    • quick-notes delete | d   ID
    • quick-notes edit   | e   ID [TITLE] CONTENT
    • quick-notes clear  | c
    • quick-notes search | s   VALUE [--first]

The commands here only parse arguments and dispatch. All business logic
lives in quick_notes/handlers.py; the root callback builds the storage
handle once and hands it to whichever handler runs.
"""

# ---------------------------------------------------------------------------
# Imports (must be at top to satisfy flake8 E402)
# ---------------------------------------------------------------------------
from functools import partial
from pathlib import Path
from typing import List, Optional, Tuple

from dotenv import load_dotenv
import typer

from quick_notes import handlers
from quick_notes.config import APP_NAME, APP_VERSION
from quick_notes.logging_utils import log_debug, log_verbose
from quick_notes.output import print_error
from quick_notes.storage import NotesStorage
from quick_notes.types import DEFAULT_PRIORITY, Priority

# Load environment variables
load_dotenv()

# ---------------------------------------------------------------------------
# Root CLI application
# ---------------------------------------------------------------------------
cli = typer.Typer(
    name=APP_NAME,
    help="A notes app for productive people.",
    no_args_is_help=True,
    add_completion=False,
)


class CliState:
    """Per-invocation objects shared with every subcommand via ctx.obj."""

    def __init__(self, storage: NotesStorage, verbose: bool) -> None:
        self.storage = storage
        self.verbose = verbose


def _state(ctx: typer.Context) -> CliState:
    state = ctx.find_object(CliState)
    if state is None:
        raise RuntimeError("CLI state is not initialized; invoke through the root command")
    return state


def _finish(ok: bool) -> None:
    """
    Map a handler outcome to the process exit code.

    Validation and storage failures exit with 1 rather than the parser's
    default of 0, so scripts can detect a rejected command.
    """
    if not ok:
        raise typer.Exit(code=1)


def _split_title_content(texts: List[str]) -> Optional[Tuple[str, str]]:
    """
    Interpret the trailing text arguments of `add` and `edit`.

    One value is the content (empty title); two values are title, content.
    """
    if len(texts) == 1:
        return "", texts[0]
    if len(texts) == 2:
        return texts[0], texts[1]
    print_error("Expected [TITLE] CONTENT")
    return None


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {APP_VERSION}")
        raise typer.Exit()


# ---------------------------------------------------------------------------
# Global options
# ---------------------------------------------------------------------------
@cli.callback()
def main(
    ctx: typer.Context,
    db_path: Optional[Path] = typer.Option(
        None,
        "--db-path",
        dir_okay=False,
        help="SQLite file to use (overrides QUICK_NOTES_DB).",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show high-level progress logs.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Show SQL statements and bound parameters.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """
    A notes app for productive people.

    Notes are stored in a local SQLite file. The location is taken from
    --db-path, then the QUICK_NOTES_DB environment variable (a .env file
    is honoured), then ~/.quick_notes/app.db.
    """
    storage = NotesStorage.from_config(db_path, debug_hook=partial(log_debug, debug=debug))
    log_verbose(f"Using database {storage.db_path}", verbose)

    ctx.obj = CliState(storage=storage, verbose=verbose)
    ctx.call_on_close(storage.close)


# ---------------------------------------------------------------------------
# Command: list
# ---------------------------------------------------------------------------
def list_command(
    ctx: typer.Context,
    limit: Optional[str] = typer.Option(
        None,
        "--limit",
        "-l",
        metavar="AMOUNT",
        help="Limit the number of notes shown.",
    ),
) -> None:
    """List all your notes, highest priority first (alias: l)."""
    state = _state(ctx)
    notes = handlers.handle_list(state.storage, limit=limit, verbose=state.verbose)
    _finish(notes is not None)


# ---------------------------------------------------------------------------
# Command: add
# ---------------------------------------------------------------------------
def add_command(
    ctx: typer.Context,
    texts: List[str] = typer.Argument(
        ...,
        metavar="TITLE CONTENT",
        help="Content of the note, optionally preceded by a title.",
    ),
    priority: Priority = typer.Option(
        DEFAULT_PRIORITY,
        "--priority",
        "-p",
        case_sensitive=False,
        help="Priority of the note.",
    ),
) -> None:
    """Add a note (alias: a)."""
    state = _state(ctx)
    parsed = _split_title_content(texts)
    if parsed is None:
        raise typer.Exit(code=1)

    title, content = parsed
    _finish(
        handlers.handle_add(
            state.storage, title, content, priority=priority, verbose=state.verbose
        )
    )


# ---------------------------------------------------------------------------
# Command: delete
# ---------------------------------------------------------------------------
def delete_command(
    ctx: typer.Context,
    note_id: str = typer.Argument(..., metavar="ID", help="Id of the note you want to remove."),
) -> None:
    """Remove a note (alias: d)."""
    state = _state(ctx)
    _finish(handlers.handle_delete(state.storage, note_id, verbose=state.verbose))


# ---------------------------------------------------------------------------
# Command: edit
# ---------------------------------------------------------------------------
def edit_command(
    ctx: typer.Context,
    note_id: str = typer.Argument(..., metavar="ID", help="Id of the note you want to edit."),
    texts: List[str] = typer.Argument(
        ...,
        metavar="TITLE CONTENT",
        help="New content, optionally preceded by a new title.",
    ),
) -> None:
    """Edit the title and content of a note (alias: e)."""
    state = _state(ctx)
    parsed = _split_title_content(texts)
    if parsed is None:
        raise typer.Exit(code=1)

    title, content = parsed
    _finish(handlers.handle_edit(state.storage, note_id, title, content, verbose=state.verbose))


# ---------------------------------------------------------------------------
# Command: clear
# ---------------------------------------------------------------------------
def clear_command(ctx: typer.Context) -> None:
    """Clear all notes (alias: c)."""
    state = _state(ctx)
    _finish(handlers.handle_clear(state.storage, verbose=state.verbose))


# ---------------------------------------------------------------------------
# Command: search
# ---------------------------------------------------------------------------
def search_command(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Text to look for in id, title or content."),
    first: bool = typer.Option(
        False,
        "--first",
        "-f",
        help="Only show the first matching note.",
    ),
) -> None:
    """Search notes by substring, case-sensitive (alias: s)."""
    state = _state(ctx)
    matches = handlers.handle_search(state.storage, value, first=first, verbose=state.verbose)
    _finish(matches is not None)


# ---------------------------------------------------------------------------
# Register commands and their hidden one-letter aliases
# ---------------------------------------------------------------------------
COMMANDS = (
    ("list", "l", list_command),
    ("add", "a", add_command),
    ("delete", "d", delete_command),
    ("edit", "e", edit_command),
    ("clear", "c", clear_command),
    ("search", "s", search_command),
)

for _name, _alias, _command in COMMANDS:
    cli.command(_name)(_command)
    cli.command(_alias, hidden=True)(_command)


# ---------------------------------------------------------------------------
# Entry point for `python -m quick_notes.cli.main`
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    cli()
