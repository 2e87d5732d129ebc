"""Tests for card indicator pure functions."""

from datetime import datetime, timedelta

from taskban.model.column import Column
from taskban.model.task import Assignee, Priority, Task
from taskban.ui.card_indicators import (
    build_footer_text,
    build_header_text,
    column_count_text,
    format_due,
    priority_text,
)
from taskban.ui.constants import ICON_CALENDAR, ICON_USER, ICON_WARNING

from tests.conftest import NOW, _make_column


def _make_task(**kwargs):
    return Task(id="task-1", title="Ship it", column_id="todo", **kwargs)


def _has_red(text):
    """Check if a Rich Text has red styling (on .style or in spans)."""
    if "red" in str(text.style):
        return True
    return any("red" in str(span.style) for span in text._spans)


def test_header_has_priority_and_title():
    result = build_header_text(_make_task(priority=Priority.HIGH))
    assert result.plain == "high Ship it"


def test_priority_styles_differ():
    assert str(priority_text(Priority.URGENT).style) != str(priority_text(Priority.LOW).style)
    assert _has_red(priority_text(Priority.URGENT))


def test_footer_empty_task():
    """A task with no assignee, due date or tags has an empty footer."""
    assert build_footer_text(_make_task()).plain == ""


def test_footer_assignee_initials():
    result = build_footer_text(_make_task(assignee=Assignee("Jane Smith")))
    assert result.plain == f"{ICON_USER}JS"


def test_footer_tags():
    result = build_footer_text(_make_task(tags=("UI", "Bug")))
    assert result.plain == "#UI #Bug"


def test_format_due():
    assert format_due(datetime(2024, 3, 5)) == "Mar 5"
    assert format_due(datetime(2024, 12, 25)) == "Dec 25"


def test_footer_due_not_overdue():
    result = build_footer_text(_make_task(due_date=NOW + timedelta(days=2)), now=NOW)
    assert ICON_CALENDAR in result.plain
    assert not _has_red(result)


def test_footer_due_overdue_is_red():
    result = build_footer_text(_make_task(due_date=NOW - timedelta(days=1)), now=NOW)
    assert ICON_CALENDAR in result.plain
    assert _has_red(result)


def test_footer_joins_parts_in_order():
    task = _make_task(assignee=Assignee("Bob"), due_date=datetime(2024, 3, 12), tags=("x",))
    assert build_footer_text(task, now=NOW).plain == f"{ICON_USER}B {ICON_CALENDAR}Mar 12 #x"


def test_count_plain():
    assert column_count_text(_make_column("a", ["a1", "a2"])).plain == "2"


def test_count_filtered():
    assert column_count_text(_make_column("a", ["a1", "a2"]), shown=1).plain == "1/2"
    assert column_count_text(_make_column("a", ["a1", "a2"]), shown=2).plain == "2"


def test_count_with_wip_limit():
    result = column_count_text(_make_column("a", ["a1"], wip_limit=3))
    assert result.plain == "1 (max 3)"
    assert not _has_red(result)


def test_count_wip_exceeded():
    result = column_count_text(_make_column("a", ["a1", "a2"], wip_limit=1))
    assert result.plain == f"{ICON_WARNING} 2 (max 1)"
    assert _has_red(result)


def test_count_empty_column():
    assert column_count_text(Column(id="a", title="A")).plain == "0"
