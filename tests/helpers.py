from __future__ import annotations

from datetime import date, datetime, time, timedelta

from daybook.domain.entities import HabitEntity, TaskEntity, TaskLogEntry
from daybook.domain.enums import Priority

NOW = datetime(2026, 3, 15, 10, 0)
TODAY = NOW.date()


def make_task(
    id: int = 1,
    title: str = "Task",
    priority: Priority = Priority.NONE,
    is_completed: bool = False,
    completed_at: datetime | None = None,
    due_date: date | None = None,
    due_time: time | None = None,
    created_at: datetime | None = None,
    **extra,
) -> TaskEntity:
    created = created_at or NOW - timedelta(days=7)
    return TaskEntity(
        id=id,
        title=title,
        description=extra.pop("description", ""),
        priority=priority,
        is_completed=is_completed,
        completed_at=completed_at,
        due_date=due_date,
        due_time=due_time,
        created_at=created,
        updated_at=created,
        **extra,
    )


def completed_task(id: int, days_ago: int, title: str | None = None) -> TaskEntity:
    completed_at = NOW - timedelta(days=days_ago)
    return make_task(
        id=id,
        title=title or f"Task {id}",
        is_completed=True,
        completed_at=completed_at,
        created_at=completed_at - timedelta(days=5),
    )


def make_habit(
    id: int = 1,
    title: str = "Habit",
    priority: Priority = Priority.MEDIUM,
    created_at: datetime | None = None,
    recurrence_rule: str | None = None,
    recurrence_interval: int = 1,
    last_completed_at: datetime | None = None,
    last_replenished_at: datetime | None = None,
    **extra,
) -> HabitEntity:
    return HabitEntity(
        id=id,
        title=title,
        description=extra.pop("description", ""),
        priority=priority,
        created_at=created_at or NOW - timedelta(days=30),
        recurrence_rule=recurrence_rule,
        recurrence_interval=recurrence_interval,
        last_completed_at=last_completed_at,
        last_replenished_at=last_replenished_at,
        **extra,
    )


def make_log_entry(id: int, days_ago: int) -> TaskLogEntry:
    completed_at = NOW - timedelta(days=days_ago)
    return TaskLogEntry(
        id=id,
        task_id=100 + id,
        title=f"Entry {id}",
        description="",
        completed_at=completed_at,
        created_at=completed_at - timedelta(days=3),
        priority=Priority.MEDIUM,
    )
