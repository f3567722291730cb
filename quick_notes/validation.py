"""
Input validation for note commands.

Every validator returns a bool and, on failure, hands a human-readable
reason to `report` (by default the red CLI error printer). Validation
failures are an expected outcome of user input, so nothing here raises;
the calling handler simply aborts before touching storage.
"""

from typing import Callable

from quick_notes.output import print_error
from quick_notes.types import Priority

Reporter = Callable[[str], None]

MAX_TITLE_LENGTH = 100
MAX_CONTENT_LENGTH = 255

# SQLite INTEGER is a signed 64-bit value.
MAX_SQLITE_INTEGER = 2**63 - 1


def _is_positive_int(value: str) -> bool:
    stripped = value.strip()
    if not (stripped.isascii() and stripped.isdecimal()):
        return False

    digits = stripped.lstrip("0")
    # Length check first so int() never sees an oversized digit string.
    return 0 < len(digits) <= len(str(MAX_SQLITE_INTEGER)) and int(digits) <= MAX_SQLITE_INTEGER


def validate_title(title: str, report: Reporter = print_error) -> bool:
    """Reject titles longer than MAX_TITLE_LENGTH after trimming. Empty is fine."""
    if len(title.strip()) > MAX_TITLE_LENGTH:
        report(f"The title is too big (max. {MAX_TITLE_LENGTH} characters)")
        return False
    return True


def validate_content(content: str, report: Reporter = print_error) -> bool:
    """Reject empty (after trimming) or over-long content."""
    stripped = content.strip()

    if not stripped:
        report("The note must have content")
        return False

    if len(stripped) > MAX_CONTENT_LENGTH:
        report(f"The content is too big (max. {MAX_CONTENT_LENGTH} characters)")
        return False

    return True


def validate_note(title: str, content: str, report: Reporter = print_error) -> bool:
    """Validate title then content, stopping at the first failure."""
    return validate_title(title, report) and validate_content(content, report)


def validate_id(value: str, report: Reporter = print_error) -> bool:
    """Accept only decimal positive integers (surrounding whitespace allowed)."""
    if not _is_positive_int(str(value)):
        report("Id must be a positive integer")
        return False
    return True


def validate_priority(value: str, report: Reporter = print_error) -> bool:
    """Accept only the names of Priority members."""
    allowed = [p.value for p in Priority]
    if value not in allowed:
        report(f"Priority must be one of: {', '.join(allowed)}")
        return False
    return True


def validate_limit(value: str, report: Reporter = print_error) -> bool:
    """
    Accept only decimal positive integers for `list --limit`.

    The limit is also bound as a query parameter by the storage layer;
    this check keeps obviously bad input from reaching it at all.
    """
    if not _is_positive_int(str(value)):
        report("Limit must be a positive integer")
        return False
    return True
