"""
SQLite storage handle for quick-notes.

NotesStorage owns the single connection a CLI invocation uses. It is
constructed explicitly and passed into every command handler rather than
living as a module-level singleton.

Behavior:
    • the database file (and its parent directory) is opened lazily, on the
      first query, so `--help` and `--version` never touch the disk
    • opening the connection creates the `notes` table if it is missing
    • every user-supplied value, including LIMIT, is bound as a parameter
    • any sqlite3.Error is normalized into StorageError (message only)

Each public method runs exactly one statement; there are no multi-statement
transactions and no retries.
"""

import sqlite3
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence

from quick_notes.config import resolve_db_path
from quick_notes.types import ExecuteResult, NoteRecord, Priority, priority_to_ordinal

CREATE_NOTES_TABLE = """
    CREATE TABLE IF NOT EXISTS notes (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT NOT NULL DEFAULT '',
        content TEXT NOT NULL,
        priority INTEGER NOT NULL DEFAULT 2 CHECK (priority IN (1, 2, 3))
    );
"""

DebugHook = Callable[[str], None]

SELECT_NOTES = "SELECT id, title, content, priority FROM notes ORDER BY priority DESC, id ASC"


class StorageError(RuntimeError):
    """Raised for any failure reported by the SQLite driver."""


# ---------------------------------------------------------------------------
# Helper: normalize sqlite3 rows
# ---------------------------------------------------------------------------


def _row_to_note(row: sqlite3.Row) -> NoteRecord:
    return {
        "id": row["id"],
        "title": row["title"] if row["title"] is not None else "",
        "content": row["content"],
        "priority": row["priority"],
    }


# ---------------------------------------------------------------------------
# Main storage class
# ---------------------------------------------------------------------------


class NotesStorage:
    """
    Thin wrapper around a sqlite3 connection to the notes database.

    Parameters
    ----------
    db_path : Path | str
        Location of the SQLite file. ":memory:" is accepted for throwaway
        databases.
    debug_hook : callable, optional
        Called with a description of every statement before it runs. The
        CLI wires this to log_debug when `--debug` is set.
    """

    def __init__(self, db_path: "Path | str", debug_hook: Optional[DebugHook] = None) -> None:
        self.db_path = db_path if str(db_path) == ":memory:" else Path(db_path)
        self.debug_hook = debug_hook
        self._conn: Optional[sqlite3.Connection] = None

    @classmethod
    def from_config(
        cls,
        db_path: Optional[Path] = None,
        debug_hook: Optional[DebugHook] = None,
    ) -> "NotesStorage":
        """Build a storage handle for the configured database path."""
        return cls(resolve_db_path(db_path), debug_hook=debug_hook)

    # -----------------------------------------------------------------------
    # Connection management
    # -----------------------------------------------------------------------

    def _require_connection(self) -> sqlite3.Connection:
        """
        Return the open connection, opening it and ensuring the schema on
        first use.

        Raises
        ------
        StorageError
            If the file cannot be opened or the table cannot be created.
        """
        if self._conn is not None:
            return self._conn

        try:
            if isinstance(self.db_path, Path):
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self.db_path))
            conn.row_factory = sqlite3.Row
            conn.executescript(CREATE_NOTES_TABLE)
        except (sqlite3.Error, OSError) as e:
            raise StorageError(f"Could not open database {self.db_path}: {e}") from e

        self._conn = conn
        return conn

    def close(self) -> None:
        """Close the connection if it was opened. Safe to call repeatedly."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def _trace(self, sql: str, params: Sequence[Any]) -> None:
        if self.debug_hook is not None:
            self.debug_hook(f"SQL: {' '.join(sql.split())} | params: {tuple(params)}")

    # -----------------------------------------------------------------------
    # Generic query execution
    # -----------------------------------------------------------------------

    def query_all(self, sql: str, params: Sequence[Any] = ()) -> List[NoteRecord]:
        """
        Run a note-shaped SELECT and return every row as a NoteRecord.

        The statement must return the columns id, title, content and
        priority (as SELECT_NOTES does); other row shapes are rejected.

        Raises
        ------
        StorageError
            On any driver error, an integer parameter SQLite cannot bind,
            or a result row missing one of the note columns.
        """
        conn = self._require_connection()
        self._trace(sql, params)

        try:
            rows = conn.execute(sql, tuple(params)).fetchall()
        except (sqlite3.Error, OverflowError) as e:
            raise StorageError(str(e)) from e

        try:
            return [_row_to_note(row) for row in rows]
        except IndexError as e:
            raise StorageError(f"Query did not return note columns: {e}") from e

    def execute(self, sql: str, params: Sequence[Any] = ()) -> ExecuteResult:
        """
        Run a row-affecting statement and commit it.

        Returns
        -------
        ExecuteResult
            The number of affected rows and, for inserts, the new row id.

        Raises
        ------
        StorageError
            On any driver error or an integer parameter SQLite cannot
            bind; the statement is rolled back.
        """
        conn = self._require_connection()
        self._trace(sql, params)

        try:
            with conn:
                cursor = conn.execute(sql, tuple(params))
        except (sqlite3.Error, OverflowError) as e:
            raise StorageError(str(e)) from e

        return {"rowcount": cursor.rowcount, "lastrowid": cursor.lastrowid}

    # -----------------------------------------------------------------------
    # Note helpers (one statement each)
    # -----------------------------------------------------------------------

    def list_notes(self, limit: Optional[int] = None) -> List[NoteRecord]:
        """All notes, highest priority first, oldest first within a priority."""
        if limit is None:
            return self.query_all(SELECT_NOTES)
        return self.query_all(f"{SELECT_NOTES} LIMIT ?", (int(limit),))

    def insert_note(self, title: str, content: str, priority: "Priority | str") -> int:
        """Insert a note and return the id assigned by SQLite."""
        result = self.execute(
            "INSERT INTO notes (title, content, priority) VALUES (?, ?, ?)",
            (title, content, priority_to_ordinal(priority)),
        )
        if result["lastrowid"] is None:
            raise StorageError("Insert did not return a row id")
        return result["lastrowid"]

    def update_note(self, note_id: int, title: str, content: str) -> int:
        """Replace title and content of one note. Returns rows affected."""
        result = self.execute(
            "UPDATE notes SET title = ?, content = ? WHERE id = ?",
            (title, content, note_id),
        )
        return result["rowcount"]

    def delete_note(self, note_id: int) -> int:
        """Delete one note. Returns rows affected."""
        return self.execute("DELETE FROM notes WHERE id = ?", (note_id,))["rowcount"]

    def clear_notes(self) -> int:
        """Delete every note. Returns rows affected."""
        return self.execute("DELETE FROM notes")["rowcount"]
