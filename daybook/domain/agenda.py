"""Today's agenda: tasks and habits merged into one ordered list."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Union

from .entities import HabitEntity, TaskEntity
from .enums import AgendaKind, Priority


@dataclass(frozen=True)
class TaskItem:
    task: TaskEntity
    now: datetime

    kind = AgendaKind.TASK

    @property
    def id(self) -> int | None:
        return self.task.id

    @property
    def title(self) -> str:
        return self.task.title

    @property
    def priority(self) -> Priority:
        return self.task.priority

    @property
    def sort_time(self) -> datetime | None:
        return self.task.sort_time

    @property
    def is_overdue(self) -> bool:
        return self.task.is_overdue(self.now)

    @property
    def is_completed_today(self) -> bool:
        return self.task.is_completed


@dataclass(frozen=True)
class HabitItem:
    habit: HabitEntity
    now: datetime

    kind = AgendaKind.HABIT

    @property
    def id(self) -> int | None:
        return self.habit.id

    @property
    def title(self) -> str:
        return self.habit.title

    @property
    def priority(self) -> Priority:
        return self.habit.priority

    @property
    def sort_time(self) -> datetime | None:
        return None

    @property
    def is_overdue(self) -> bool:
        return False

    @property
    def is_completed_today(self) -> bool:
        return self.habit.is_completed_on(self.now.date())


AgendaItem = Union[TaskItem, HabitItem]

_KIND_ORDER = {AgendaKind.TASK: 0, AgendaKind.HABIT: 1}


def include_task(task: TaskEntity, now: datetime) -> bool:
    if task.due_date is None:
        return False
    today = now.date()
    if task.due_date == today:
        return True
    return task.due_date < today and not task.is_completed


def include_habit(habit: HabitEntity, now: datetime) -> bool:
    return habit.is_due_on(now.date())


def agenda_sort_key(item: AgendaItem) -> tuple:
    """Overdue first, then timed items by time, then untimed items by
    descending priority; tasks before habits, then title, then id."""
    sort_time = item.sort_time
    has_time = sort_time is not None
    return (
        0 if item.is_overdue else 1,
        0 if has_time else 1,
        sort_time if has_time else datetime.min,
        0 if has_time else -int(item.priority),
        _KIND_ORDER[item.kind],
        item.title,
        -1 if item.id is None else item.id,
    )


def build_agenda(
    tasks: Iterable[TaskEntity],
    habits: Iterable[HabitEntity],
    now: datetime,
) -> list[AgendaItem]:
    items: list[AgendaItem] = [TaskItem(task, now) for task in tasks if include_task(task, now)]
    items.extend(HabitItem(habit, now) for habit in habits if include_habit(habit, now))
    return sorted(items, key=agenda_sort_key)
