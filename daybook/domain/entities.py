from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional

from .alerts import AlertState
from .enums import Priority, RecurrenceRule
from .recurrence import clamp_day


@dataclass(frozen=True)
class TaskEntity:
    id: int | None
    title: str
    description: str
    priority: Priority
    is_completed: bool
    completed_at: Optional[datetime]
    due_date: Optional[date]
    due_time: Optional[time]
    created_at: datetime
    updated_at: datetime
    recurrence_rule: str | None = None
    recurrence_interval: int = 1
    alert_hour: int | None = None
    alert_minute: int | None = None
    notification_fired: bool = False
    snoozed_until: Optional[datetime] = None

    @property
    def due_at(self) -> datetime | None:
        if self.due_date is None or self.due_time is None:
            return None
        return datetime.combine(self.due_date, self.due_time)

    @property
    def sort_time(self) -> datetime | None:
        return self.due_at

    @property
    def current_instance_date(self) -> date | None:
        return self.due_date

    def is_due_on(self, day: date) -> bool:
        return self.due_date is not None and self.due_date == day

    def is_overdue(self, now: datetime) -> bool:
        if self.is_completed or self.due_date is None:
            return False
        due_at = self.due_at
        if due_at is not None:
            return due_at < now
        return self.due_date < now.date()

    def alert_state(self, now: datetime | None = None) -> AlertState:
        return AlertState(
            hour=self.alert_hour,
            minute=self.alert_minute,
            fired=self.notification_fired,
            snoozed_until=self.snoozed_until,
            instance_date=self.current_instance_date,
            is_completed=self.is_completed,
        )


@dataclass(frozen=True)
class HabitEntity:
    id: int | None
    title: str
    description: str
    priority: Priority
    created_at: datetime
    recurrence_rule: str | None
    recurrence_interval: int
    last_completed_at: Optional[datetime]
    last_replenished_at: Optional[datetime]
    alert_hour: int | None = None
    alert_minute: int | None = None
    notification_fired: bool = False
    snoozed_until: Optional[datetime] = None

    @property
    def current_instance_date(self) -> datetime | None:
        return self.last_replenished_at

    def is_due_on(self, day: date) -> bool:
        """Whether the habit's recurrence schedules an occurrence on ``day``.

        Habits without a rule are flexible and due every day. Otherwise the
        interval is counted from the day the habit was created, and no
        occurrence falls before that day.
        """
        if not self.recurrence_rule:
            return True

        start = self.created_at.date()
        if day < start:
            return False

        interval = max(int(self.recurrence_interval or 1), 1)
        rule = self.recurrence_rule
        if rule == RecurrenceRule.DAILY.value:
            return (day - start).days % interval == 0
        if rule == RecurrenceRule.WEEKLY.value:
            days_between = (day - start).days
            return day.weekday() == start.weekday() and (days_between // 7) % interval == 0
        if rule == RecurrenceRule.MONTHLY.value:
            months_between = (day.year - start.year) * 12 + day.month - start.month
            anchor_day = clamp_day(day.year, day.month, start.day)
            return months_between % interval == 0 and day.day == anchor_day
        return False

    def is_completed_on(self, day: date) -> bool:
        return self.last_completed_at is not None and self.last_completed_at.date() == day

    def alert_state(self, now: datetime) -> AlertState:
        return AlertState(
            hour=self.alert_hour,
            minute=self.alert_minute,
            fired=self.notification_fired,
            snoozed_until=self.snoozed_until,
            instance_date=self.current_instance_date,
            is_completed=self.is_completed_on(now.date()),
        )


@dataclass(frozen=True)
class TaskLogEntry:
    """Archived summary of a completed task.

    ``id`` is the logbook's own key and stays ``None`` until the entry is
    stored; ``task_id`` keeps the id of the task the entry was taken from.
    """

    id: int | None
    task_id: int | None
    title: str
    description: str
    completed_at: datetime
    created_at: datetime
    priority: Priority
    due_date: Optional[date] = None
    was_overdue: bool = False
    completion_duration: Optional[timedelta] = None

    @classmethod
    def from_task(cls, task: TaskEntity) -> TaskLogEntry:
        if task.completed_at is None:
            raise ValueError(f"Task {task.id} has no completion date")

        was_overdue = False
        if task.due_date is not None:
            deadline = task.due_at or datetime.combine(task.due_date, time.max)
            was_overdue = task.completed_at > deadline

        return cls(
            id=None,
            task_id=task.id,
            title=task.title,
            description=task.description,
            completed_at=task.completed_at,
            created_at=task.created_at,
            priority=task.priority,
            due_date=task.due_date,
            was_overdue=was_overdue,
            completion_duration=task.completed_at - task.created_at,
        )

    @property
    def display_title(self) -> str:
        return self.title or "Untitled Task"


@dataclass
class HousekeepingStats:
    archived_count: int = 0
    purged_original_count: int = 0
    purged_snapshot_count: int = 0

    @property
    def total(self) -> int:
        return self.archived_count + self.purged_original_count + self.purged_snapshot_count
