from __future__ import annotations

from datetime import date, datetime, time, timedelta

import pytest

from daybook.domain.entities import TaskLogEntry
from daybook.domain.enums import Priority, RecurrenceRule

from helpers import NOW, TODAY, make_habit, make_task


def test_log_entry_copies_task_fields() -> None:
    task = make_task(
        id=42,
        title="Ship release",
        description="tag and publish",
        priority=Priority.HIGH,
        is_completed=True,
        completed_at=datetime(2026, 1, 10, 17, 0),
        created_at=datetime(2026, 1, 8, 9, 0),
        due_date=date(2026, 1, 9),
    )

    entry = TaskLogEntry.from_task(task)

    assert entry.id is None
    assert entry.task_id == 42
    assert entry.title == "Ship release"
    assert entry.description == "tag and publish"
    assert entry.priority is Priority.HIGH
    assert entry.completed_at == task.completed_at
    assert entry.created_at == task.created_at
    assert entry.was_overdue
    assert entry.completion_duration == timedelta(days=2, hours=8)


def test_log_entry_not_overdue_when_finished_on_due_day() -> None:
    task = make_task(
        is_completed=True,
        completed_at=datetime(2026, 1, 9, 23, 0),
        due_date=date(2026, 1, 9),
    )

    assert not TaskLogEntry.from_task(task).was_overdue


def test_log_entry_requires_completion_date() -> None:
    with pytest.raises(ValueError):
        TaskLogEntry.from_task(make_task(is_completed=True))


def test_log_entry_display_title_falls_back() -> None:
    entry = TaskLogEntry.from_task(make_task(title="", is_completed=True, completed_at=NOW))

    assert entry.display_title == "Untitled Task"


def test_task_overdue_rules() -> None:
    assert make_task(due_date=TODAY - timedelta(days=1)).is_overdue(NOW)
    assert not make_task(due_date=TODAY).is_overdue(NOW)
    assert make_task(due_date=TODAY, due_time=time(9, 30)).is_overdue(NOW)
    assert not make_task(due_date=TODAY, due_time=time(10, 30)).is_overdue(NOW)
    assert not make_task(
        due_date=TODAY - timedelta(days=1), is_completed=True, completed_at=NOW
    ).is_overdue(NOW)
    assert not make_task().is_overdue(NOW)


def test_habit_without_rule_is_due_every_day() -> None:
    habit = make_habit()

    assert habit.is_due_on(TODAY)
    assert habit.is_due_on(TODAY + timedelta(days=1))


def test_habit_daily_interval() -> None:
    habit = make_habit(
        recurrence_rule=RecurrenceRule.DAILY.value,
        recurrence_interval=3,
        created_at=datetime(2026, 3, 1, 8, 0),
    )

    assert habit.is_due_on(date(2026, 3, 1))
    assert habit.is_due_on(date(2026, 3, 4))
    assert not habit.is_due_on(date(2026, 3, 5))
    assert not habit.is_due_on(date(2026, 2, 26))


def test_habit_weekly_interval() -> None:
    habit = make_habit(
        recurrence_rule=RecurrenceRule.WEEKLY.value,
        recurrence_interval=2,
        created_at=datetime(2026, 3, 2, 8, 0),
    )

    assert habit.is_due_on(date(2026, 3, 16))
    assert not habit.is_due_on(date(2026, 3, 9))
    assert not habit.is_due_on(date(2026, 3, 17))


def test_habit_monthly_clamps_to_month_end() -> None:
    habit = make_habit(
        recurrence_rule=RecurrenceRule.MONTHLY.value,
        created_at=datetime(2026, 1, 31, 8, 0),
    )

    assert habit.is_due_on(date(2026, 2, 28))
    assert habit.is_due_on(date(2026, 3, 31))
    assert not habit.is_due_on(date(2026, 3, 30))


def test_habit_completed_on_day() -> None:
    habit = make_habit(last_completed_at=datetime(2026, 3, 15, 7, 0))

    assert habit.is_completed_on(TODAY)
    assert not habit.is_completed_on(TODAY + timedelta(days=1))
