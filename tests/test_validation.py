"""
Unit tests for quick_notes.validation.

Validators never raise; they return a bool and pass the failure reason
to the `report` callable. Each test collects reported messages in a list.
"""

import pytest

from quick_notes.validation import (
    validate_content,
    validate_id,
    validate_limit,
    validate_note,
    validate_priority,
    validate_title,
)


@pytest.fixture
def messages():
    return []


# ---------------------------------------------------------------------------
# Title
# ---------------------------------------------------------------------------
def test_title_at_limit_is_accepted(messages) -> None:
    assert validate_title("x" * 100, messages.append) is True
    assert messages == []


def test_empty_title_is_accepted(messages) -> None:
    assert validate_title("", messages.append) is True


def test_title_over_limit_is_rejected(messages) -> None:
    assert validate_title("x" * 101, messages.append) is False
    assert messages == ["The title is too big (max. 100 characters)"]


def test_title_length_is_measured_after_trimming(messages) -> None:
    assert validate_title("   " + "x" * 100 + "   ", messages.append) is True


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("content", ["", "   ", "\n\t "])
def test_blank_content_is_rejected(messages, content) -> None:
    assert validate_content(content, messages.append) is False
    assert messages == ["The note must have content"]


def test_content_over_limit_is_rejected(messages) -> None:
    assert validate_content("y" * 256, messages.append) is False
    assert messages == ["The content is too big (max. 255 characters)"]


def test_content_at_limit_with_padding_is_accepted(messages) -> None:
    assert validate_content("  " + "y" * 255 + "  ", messages.append) is True


def test_validate_note_stops_at_first_failure(messages) -> None:
    assert validate_note("x" * 101, "", messages.append) is False
    assert len(messages) == 1
    assert "title" in messages[0]


# ---------------------------------------------------------------------------
# Id and limit
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("value", ["1", "42", " 7 "])
def test_positive_integer_ids_are_accepted(messages, value) -> None:
    assert validate_id(value, messages.append) is True


@pytest.mark.parametrize("value", ["0", "-1", "1.5", "abc", "", "1; DROP TABLE notes"])
def test_malformed_ids_are_rejected(messages, value) -> None:
    assert validate_id(value, messages.append) is False
    assert messages == ["Id must be a positive integer"]


@pytest.mark.parametrize("value", ["0", "two", "2 OR 1=1", "-3"])
def test_malformed_limits_are_rejected(messages, value) -> None:
    assert validate_limit(value, messages.append) is False
    assert messages == ["Limit must be a positive integer"]


def test_numeric_limit_is_accepted(messages) -> None:
    assert validate_limit("2", messages.append) is True


# ---------------------------------------------------------------------------
# Priority
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("value", ["low", "medium", "high"])
def test_known_priorities_are_accepted(messages, value) -> None:
    assert validate_priority(value, messages.append) is True


def test_unknown_priority_is_rejected(messages) -> None:
    assert validate_priority("urgent", messages.append) is False
    assert messages == ["Priority must be one of: low, medium, high"]


# ---------------------------------------------------------------------------
# Values SQLite cannot store
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("value", ["9223372036854775808", "99999999999999999999", "9" * 5000])
def test_ids_beyond_sqlite_integer_range_are_rejected(messages, value) -> None:
    assert validate_id(value, messages.append) is False
    assert messages == ["Id must be a positive integer"]


def test_largest_sqlite_integer_is_accepted(messages) -> None:
    assert validate_id("9223372036854775807", messages.append) is True
    assert validate_limit("9223372036854775807", messages.append) is True


def test_leading_zeros_do_not_count_towards_length(messages) -> None:
    assert validate_id("0" * 30 + "5", messages.append) is True


def test_limit_beyond_sqlite_integer_range_is_rejected(messages) -> None:
    assert validate_limit("99999999999999999999", messages.append) is False
    assert messages == ["Limit must be a positive integer"]


def test_non_ascii_digits_are_rejected(messages) -> None:
    assert validate_id("٣", messages.append) is False
