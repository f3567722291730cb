"""
Public API surface for quick-notes.

External callers (the CLI, scripts, tests) can rely on:

    from quick_notes import NotesStorage, StorageError, Priority

without reaching into submodules. Command handlers live in
quick_notes.handlers and are intentionally not re-exported here.
"""

from .config import APP_VERSION as __version__
from .storage import NotesStorage, StorageError
from .types import NoteRecord, Priority

__all__ = [
    "__version__",
    "NotesStorage",
    "StorageError",
    "NoteRecord",
    "Priority",
]
