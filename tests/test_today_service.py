from __future__ import annotations

from datetime import time, timedelta

from daybook.domain.entities import HabitEntity, TaskEntity
from daybook.domain.enums import Priority
from daybook.services.today_service import TodayService

from helpers import NOW, TODAY, make_habit, make_task


class FakeTaskRepo:
    def __init__(self, tasks: list[TaskEntity]) -> None:
        self.tasks = tasks

    def list_tasks(self) -> list[TaskEntity]:
        return self.tasks


class FakeHabitRepo:
    def __init__(self, habits: list[HabitEntity]) -> None:
        self.habits = habits

    def list_habits(self) -> list[HabitEntity]:
        return self.habits


def test_agenda_merges_repositories() -> None:
    tasks = [
        make_task(id=1, title="Write", priority=Priority.HIGH, due_date=TODAY),
        make_task(id=2, title="Later", due_date=TODAY + timedelta(days=3)),
    ]
    habits = [make_habit(id=1, title="Walk", priority=Priority.LOW)]
    service = TodayService(FakeTaskRepo(tasks), FakeHabitRepo(habits), clock=lambda: NOW)

    agenda = service.agenda()

    assert [(item.kind.value, item.title) for item in agenda] == [("task", "Write"), ("habit", "Walk")]


def test_pending_alerts_are_ordered_by_reminder_time() -> None:
    tasks = [
        make_task(id=1, title="Evening", due_date=TODAY, alert_hour=19, alert_minute=0),
        make_task(
            id=2, title="Fired", due_date=TODAY, alert_hour=12, alert_minute=0, notification_fired=True
        ),
        make_task(id=3, title="Past", due_date=TODAY, alert_hour=8, alert_minute=0),
        make_task(
            id=4,
            title="Snoozed",
            due_date=TODAY,
            due_time=time(9, 0),
            alert_hour=8,
            snoozed_until=NOW + timedelta(minutes=20),
        ),
    ]
    habits = [
        make_habit(
            id=5, title="Meditate", alert_hour=13, alert_minute=30, last_replenished_at=NOW.replace(hour=3)
        ),
        make_habit(id=6, title="No instance", alert_hour=13, alert_minute=30),
    ]
    service = TodayService(FakeTaskRepo(tasks), FakeHabitRepo(habits), clock=lambda: NOW)

    assert [item.title for item in service.pending_alerts()] == ["Snoozed", "Meditate", "Evening"]
