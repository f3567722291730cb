"""
Command handlers for quick-notes.

One function per CLI subcommand. Every handler follows the same shape:

    validate input  →  one storage call  →  print result or error

Handlers are stateless. The storage object is always passed in by the
caller (the Typer layer builds it once per invocation), and an optional
Rich console can be supplied to capture output.

Failures are reported, not raised: validation problems print the reason,
StorageError prints the command's failure message. Handlers signal the
outcome through their return value so the CLI can set the exit code.
"""

from functools import partial
from typing import List, Optional

from rich.console import Console

from quick_notes.formatting import render_notes
from quick_notes.logging_utils import log_verbose
from quick_notes.output import print_error, print_failure, print_info, print_success
from quick_notes.storage import StorageError
from quick_notes.types import DEFAULT_PRIORITY, NoteRecord, NotesStorageInterface, Priority
from quick_notes.validation import validate_id, validate_limit, validate_note, validate_priority


def _report_storage_error(
    message: str, error: StorageError, console: Optional[Console], verbose: bool
) -> None:
    print_failure(message, console)
    log_verbose(f"Storage error: {error}", verbose)


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------
def handle_add(
    storage: NotesStorageInterface,
    title: str,
    content: str,
    priority: "Priority | str" = DEFAULT_PRIORITY,
    console: Optional[Console] = None,
    verbose: bool = False,
) -> bool:
    """
    Validate and insert a new note.

    Title and content are stored trimmed; priority is stored as its ordinal.
    Returns True when the note was written.
    """
    report = partial(print_error, out=console)
    title = title.strip()
    content = content.strip()

    if not validate_note(title, content, report):
        return False

    if not validate_priority(priority, report):
        return False

    try:
        note_id = storage.insert_note(title, content, Priority(priority))
    except StorageError as e:
        _report_storage_error("Error when adding note", e, console, verbose)
        return False

    print_success(f"Note has been added successfully (id {note_id})", console)
    return True


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------
def handle_list(
    storage: NotesStorageInterface,
    limit: Optional[str] = None,
    console: Optional[Console] = None,
    verbose: bool = False,
) -> Optional[List[NoteRecord]]:
    """
    Render notes ordered by priority (high first), optionally capped.

    Returns the rendered rows, or None if validation or storage failed.
    """
    row_limit: Optional[int] = None

    if limit is not None:
        if not validate_limit(limit, partial(print_error, out=console)):
            return None
        row_limit = int(str(limit).strip())

    try:
        notes = storage.list_notes(row_limit)
    except StorageError as e:
        _report_storage_error("Error when showing notes", e, console, verbose)
        return None

    log_verbose(f"Showing {len(notes)} note(s).", verbose)
    render_notes(notes, console)
    return notes


# ---------------------------------------------------------------------------
# edit
# ---------------------------------------------------------------------------
def handle_edit(
    storage: NotesStorageInterface,
    note_id: str,
    title: str,
    content: str,
    console: Optional[Console] = None,
    verbose: bool = False,
) -> bool:
    """
    Replace the title and content of an existing note.

    Priority and id are left untouched. An id that matches no row still
    reports success; verbose mode shows how many rows changed.
    """
    report = partial(print_error, out=console)
    title = title.strip()
    content = content.strip()

    if not validate_note(title, content, report):
        return False

    if not validate_id(note_id, report):
        return False

    try:
        changed = storage.update_note(int(str(note_id).strip()), title, content)
    except StorageError as e:
        _report_storage_error("Error when editing the note", e, console, verbose)
        return False

    log_verbose(f"{changed} row(s) updated.", verbose)
    print_success("Note has been successfully edited", console)
    return True


# ---------------------------------------------------------------------------
# delete
# ---------------------------------------------------------------------------
def handle_delete(
    storage: NotesStorageInterface,
    note_id: str,
    console: Optional[Console] = None,
    verbose: bool = False,
) -> bool:
    """Delete one note by id. No existence check is made."""
    if not validate_id(note_id, partial(print_error, out=console)):
        return False

    try:
        removed = storage.delete_note(int(str(note_id).strip()))
    except StorageError as e:
        _report_storage_error("Error when removing note", e, console, verbose)
        return False

    log_verbose(f"{removed} row(s) deleted.", verbose)
    print_success("Note has been successfully removed", console)
    return True


# ---------------------------------------------------------------------------
# clear
# ---------------------------------------------------------------------------
def handle_clear(
    storage: NotesStorageInterface,
    console: Optional[Console] = None,
    verbose: bool = False,
) -> bool:
    """Delete every note."""
    try:
        removed = storage.clear_notes()
    except StorageError as e:
        _report_storage_error("Error when clearing all notes", e, console, verbose)
        return False

    log_verbose(f"{removed} row(s) deleted.", verbose)
    print_success("Notes have been successfully cleared", console)
    return True


# ---------------------------------------------------------------------------
# search
# ---------------------------------------------------------------------------
def find_matches(notes: List[NoteRecord], value: str) -> List[NoteRecord]:
    """Case-sensitive substring match against id, title and content."""
    return [
        note
        for note in notes
        if value in str(note["id"]) or value in note["title"] or value in note["content"]
    ]


def handle_search(
    storage: NotesStorageInterface,
    value: str,
    first: bool = False,
    console: Optional[Console] = None,
    verbose: bool = False,
) -> Optional[List[NoteRecord]]:
    """
    Render every note containing `value`, or only the first one with `first`.

    Notes are scanned in listing order (priority first), so "first" means
    the first match in that order. No matches renders a header-only table.
    """
    try:
        notes = storage.list_notes()
    except StorageError as e:
        _report_storage_error("Error when searching notes", e, console, verbose)
        return None

    matches = find_matches(notes, value)
    log_verbose(f"{len(matches)} note(s) matched '{value}'.", verbose)

    if not matches:
        print_info(f"No notes contain '{value}'", console)
    elif first:
        matches = matches[:1]

    render_notes(matches, console)
    return matches
