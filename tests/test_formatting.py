"""Tests for the Rich note table in quick_notes.formatting."""

import pytest

from quick_notes.formatting import build_notes_table, priority_label, render_notes


def _note(note_id, title, content, priority):
    return {"id": note_id, "title": title, "content": content, "priority": priority}


def test_empty_table_has_header_only(console) -> None:
    table = build_notes_table([])
    render_notes([], console)
    output = console.file.getvalue()

    assert table.row_count == 0
    assert [column.header for column in table.columns] == ["id", "title", "content", "priority"]
    for header in ("id", "title", "content", "priority"):
        assert header in output


def test_rows_are_rendered_with_priority_labels(console) -> None:
    render_notes([_note(1, "Shopping", "milk", 3), _note(2, "", "call mom", 1)], console)
    output = console.file.getvalue()

    assert "Shopping" in output
    assert "milk" in output
    assert "high" in output
    assert "low" in output
    assert output.lstrip().startswith("+")


@pytest.mark.parametrize(
    "ordinal, label, colour",
    [(1, "low", "green"), (2, "medium", "yellow"), (3, "high", "red")],
)
def test_priority_label_maps_ordinal_to_coloured_text(ordinal, label, colour) -> None:
    text = priority_label(ordinal)

    assert text.plain == label
    assert str(text.style) == colour


def test_unknown_ordinal_is_an_error() -> None:
    with pytest.raises(ValueError):
        priority_label(9)


def test_markup_in_user_text_is_printed_literally(console) -> None:
    render_notes([_note(1, "[bold]x[/bold]", "[red]y", 2)], console)

    assert "[bold]x[/bold]" in console.file.getvalue()


def test_long_content_is_folded_not_dropped(console) -> None:
    content = "abcdefghij" * 10
    render_notes([_note(1, "", content, 2)], console)

    # Folded across several lines inside the 34-wide column.
    joined = "".join(
        line.split("|")[3].strip() for line in console.file.getvalue().splitlines() if line.count("|") == 5
    )
    assert content in joined
