from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from daybook.domain.entities import TaskEntity
from daybook.domain.recurrence import next_due_date
from daybook.infra.repository import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, repo: TaskRepository, clock: Callable[[], datetime] = datetime.now) -> None:
        self._repo = repo
        self._clock = clock

    def list_tasks(self) -> list[TaskEntity]:
        return self._repo.list_tasks()

    def get_task(self, task_id: int) -> TaskEntity | None:
        return self._repo.get_task(task_id)

    def create_task(self, data: dict) -> TaskEntity:
        return self._repo.create_task(data)

    def update_task(self, task_id: int, data: dict) -> TaskEntity | None:
        """Apply ``data``; a completion flip stamps or clears ``completed_at``.

        Setting ``is_completed`` to the value the task already has leaves the
        stored completion time alone.
        """
        changes = dict(data)
        if "is_completed" in changes:
            current = self._repo.get_task(task_id)
            if current is None:
                return None
            if current.is_completed == changes["is_completed"]:
                del changes["is_completed"]
            elif changes["is_completed"]:
                changes.setdefault("completed_at", self._clock())
            else:
                changes["completed_at"] = None
        if "due_date" in changes or "due_time" in changes:
            changes.setdefault("notification_fired", False)
            changes.setdefault("snoozed_until", None)
        return self._repo.update_task(task_id, changes)

    def delete_task(self, task_id: int) -> None:
        self._repo.delete_task(task_id)

    def mark_done(self, task_id: int) -> TaskEntity | None:
        task = self._repo.get_task(task_id)
        if task is None or task.is_completed:
            return task
        done = self.update_task(task_id, {"is_completed": True})
        if done is not None:
            self._spawn_next_instance(done)
        return done

    def reopen(self, task_id: int) -> TaskEntity | None:
        task = self._repo.get_task(task_id)
        if task is None or not task.is_completed:
            return task
        return self.update_task(task_id, {"is_completed": False})

    def snooze_alert(self, task_id: int, until: datetime) -> TaskEntity | None:
        return self._repo.update_task(task_id, {"snoozed_until": until, "notification_fired": False})

    def mark_alert_fired(self, task_id: int) -> TaskEntity | None:
        return self._repo.update_task(task_id, {"notification_fired": True})

    def _spawn_next_instance(self, done: TaskEntity) -> TaskEntity | None:
        if not done.recurrence_rule or done.due_date is None:
            return None

        interval = max(int(done.recurrence_interval or 1), 1)
        follow_up = self._repo.create_task({
            "title": done.title,
            "description": done.description,
            "priority": done.priority,
            "due_date": next_due_date(done.due_date, done.recurrence_rule, interval),
            "due_time": done.due_time,
            "recurrence_rule": done.recurrence_rule,
            "recurrence_interval": interval,
            "alert_hour": done.alert_hour,
            "alert_minute": done.alert_minute,
        })
        logger.debug("Task %s recurs as %s on %s", done.id, follow_up.id, follow_up.due_date)
        return follow_up
