from __future__ import annotations

from datetime import datetime
from typing import Callable, Union

from daybook.domain.agenda import AgendaItem, build_agenda
from daybook.domain.alerts import effective_reminder_date, has_pending_alert
from daybook.domain.entities import HabitEntity, TaskEntity
from daybook.infra.repository import HabitRepository, TaskRepository

Alertable = Union[TaskEntity, HabitEntity]


class TodayService:
    def __init__(
        self,
        task_repo: TaskRepository,
        habit_repo: HabitRepository,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._task_repo = task_repo
        self._habit_repo = habit_repo
        self._clock = clock

    def agenda(self) -> list[AgendaItem]:
        return build_agenda(self._task_repo.list_tasks(), self._habit_repo.list_habits(), self._clock())

    def pending_alerts(self) -> list[Alertable]:
        now = self._clock()
        pending: list[tuple[datetime, Alertable]] = []
        for item in [*self._task_repo.list_tasks(), *self._habit_repo.list_habits()]:
            state = item.alert_state(now)
            if has_pending_alert(state, now):
                pending.append((effective_reminder_date(state), item))
        pending.sort(key=lambda pair: pair[0])
        return [item for _, item in pending]
