"""
Table rendering for note listings.

Notes are rendered as an ASCII-bordered Rich table:

    +------+----------------------+------------------------------------+----------+
    | id   | title                | content                            | priority |
    +------+----------------------+------------------------------------+----------+
    | 3    | Groceries            | milk, eggs                         | high     |
    ...

The header row is green and each priority label is coloured
(low=green, medium=yellow, high=red). Long titles and contents fold onto
additional lines inside their column. This output is purely visual; no
other component parses it.
"""

from typing import Dict, Iterable, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from quick_notes.output import console as default_console
from quick_notes.types import NoteRecord, Priority, priority_from_ordinal

PRIORITY_COLORS: Dict[Priority, str] = {
    Priority.LOW: "green",
    Priority.MEDIUM: "yellow",
    Priority.HIGH: "red",
}

# (header, width)
COLUMNS = (
    ("id", 4),
    ("title", 20),
    ("content", 34),
    ("priority", 8),
)


def priority_label(ordinal: int) -> Text:
    """Map a stored ordinal back to its coloured label."""
    priority = priority_from_ordinal(ordinal)
    return Text(priority.value, style=PRIORITY_COLORS[priority])


def build_notes_table(notes: Iterable[NoteRecord]) -> Table:
    """
    Build the Rich table for a set of notes.

    An empty iterable yields a table with only the header row.
    """
    table = Table(box=box.ASCII, show_lines=True, header_style="green")

    for header, width in COLUMNS:
        table.add_column(header, width=width, overflow="fold", no_wrap=False)

    for note in notes:
        # Text cells keep user input from being parsed as Rich markup.
        table.add_row(
            Text(str(note["id"])),
            Text(note["title"]),
            Text(note["content"]),
            priority_label(note["priority"]),
        )

    return table


def render_notes(notes: Iterable[NoteRecord], console: Optional[Console] = None) -> None:
    """Print the notes table to `console` (the shared CLI console by default)."""
    target = console if console is not None else default_console
    target.print(build_notes_table(notes))
