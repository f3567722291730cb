"""
quick_notes/types.py

Centralized type definitions for quick-notes.

This module defines the TypedDicts, the Priority enum, and the storage
Protocol shared by the CLI, the command handlers, and the test suite.
Keeping them together gives one source of truth for the note schema and
for the priority <-> ordinal encoding used by the database.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Protocol, Sequence, TypedDict


# ---------------------------------------------------------------------------
# Priority
# ---------------------------------------------------------------------------
# Priorities are exposed to users by name and persisted by ordinal so that
# `ORDER BY priority DESC` puts high-priority notes first.
#
# The str mixin lets Typer render the members as an enumerated choice
# (`--priority low|medium|high`).
# ---------------------------------------------------------------------------
class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


DEFAULT_PRIORITY = Priority.MEDIUM

# Explicit bidirectional mapping. Member declaration order is irrelevant.
PRIORITY_TO_ORDINAL: Dict[Priority, int] = {
    Priority.LOW: 1,
    Priority.MEDIUM: 2,
    Priority.HIGH: 3,
}

ORDINAL_TO_PRIORITY: Dict[int, Priority] = {
    ordinal: priority for priority, ordinal in PRIORITY_TO_ORDINAL.items()
}


def priority_to_ordinal(priority: "Priority | str") -> int:
    """
    Return the stored ordinal for a priority name or member.

    Raises
    ------
    ValueError
        If `priority` is not one of low, medium, high.
    """
    return PRIORITY_TO_ORDINAL[Priority(priority)]


def priority_from_ordinal(ordinal: int) -> Priority:
    """
    Return the Priority for a stored ordinal.

    Raises
    ------
    ValueError
        If the ordinal is not 1, 2 or 3.
    """
    try:
        return ORDINAL_TO_PRIORITY[ordinal]
    except KeyError:
        raise ValueError(f"Unknown priority ordinal: {ordinal!r}") from None


# ---------------------------------------------------------------------------
# NoteRecord
# ---------------------------------------------------------------------------
# Represents a single row of the `notes` table.
#
# `priority` holds the ordinal exactly as persisted; use
# priority_from_ordinal() to get the user-facing name.
# ---------------------------------------------------------------------------
class NoteRecord(TypedDict):
    id: int
    title: str
    content: str
    priority: int


# ---------------------------------------------------------------------------
# ExecuteResult
# ---------------------------------------------------------------------------
# Acknowledgment returned by NotesStorage.execute() for row-affecting
# statements. `lastrowid` is only meaningful after an INSERT.
# ---------------------------------------------------------------------------
class ExecuteResult(TypedDict):
    rowcount: int
    lastrowid: Optional[int]


# ---------------------------------------------------------------------------
# NotesStorageInterface
# ---------------------------------------------------------------------------
# Structural interface the command handlers depend on. NotesStorage
# implements it; tests may inject any object with the same surface.
# ---------------------------------------------------------------------------
class NotesStorageInterface(Protocol):
    def query_all(self, sql: str, params: Sequence[Any] = ()) -> List[NoteRecord]: ...

    def execute(self, sql: str, params: Sequence[Any] = ()) -> ExecuteResult: ...

    def list_notes(self, limit: Optional[int] = None) -> List[NoteRecord]: ...

    def insert_note(self, title: str, content: str, priority: "Priority | str") -> int: ...

    def update_note(self, note_id: int, title: str, content: str) -> int: ...

    def delete_note(self, note_id: int) -> int: ...

    def clear_notes(self) -> int: ...
