from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from daybook.domain.entities import HabitEntity, TaskEntity, TaskLogEntry
from daybook.domain.enums import Priority
from daybook.domain.errors import StorageAccessError

from .db import SessionLocal
from .models import HabitModel, TaskLogEntryModel, TaskModel

logger = logging.getLogger(__name__)


def _to_task(model: TaskModel) -> TaskEntity:
    return TaskEntity(
        id=model.id,
        title=model.title,
        description=model.description,
        priority=Priority(model.priority),
        is_completed=model.is_completed,
        completed_at=model.completed_at,
        due_date=model.due_date,
        due_time=model.due_time,
        created_at=model.created_at,
        updated_at=model.updated_at,
        recurrence_rule=model.recurrence_rule,
        recurrence_interval=model.recurrence_interval,
        alert_hour=model.alert_hour,
        alert_minute=model.alert_minute,
        notification_fired=model.notification_fired,
        snoozed_until=model.snoozed_until,
    )


def _to_habit(model: HabitModel) -> HabitEntity:
    return HabitEntity(
        id=model.id,
        title=model.title,
        description=model.description,
        priority=Priority(model.priority),
        created_at=model.created_at,
        recurrence_rule=model.recurrence_rule,
        recurrence_interval=model.recurrence_interval,
        last_completed_at=model.last_completed_at,
        last_replenished_at=model.last_replenished_at,
        alert_hour=model.alert_hour,
        alert_minute=model.alert_minute,
        notification_fired=model.notification_fired,
        snoozed_until=model.snoozed_until,
    )


def _to_log_entry(model: TaskLogEntryModel) -> TaskLogEntry:
    return TaskLogEntry(
        id=model.id,
        task_id=model.task_id,
        title=model.title,
        description=model.description,
        completed_at=model.completed_at,
        created_at=model.created_at,
        priority=Priority(model.priority),
        due_date=model.due_date,
        was_overdue=model.was_overdue,
        completion_duration=model.completion_duration,
    )


def _to_log_model(entry: TaskLogEntry) -> TaskLogEntryModel:
    return TaskLogEntryModel(
        task_id=entry.task_id,
        title=entry.title,
        description=entry.description,
        priority=int(entry.priority),
        completed_at=entry.completed_at,
        created_at=entry.created_at,
        due_date=entry.due_date,
        was_overdue=entry.was_overdue,
        completion_duration=entry.completion_duration,
    )


def _normalize(data: dict) -> dict:
    normalized = dict(data)
    if isinstance(normalized.get("priority"), Priority):
        normalized["priority"] = int(normalized["priority"])
    return normalized


class TaskRepository:
    def __init__(self, session_factory=SessionLocal) -> None:
        self._session_factory = session_factory

    def list_tasks(self) -> list[TaskEntity]:
        with self._session_factory() as session:
            stmt = select(TaskModel).order_by(
                TaskModel.due_date.is_(None),
                TaskModel.due_date.asc(),
                TaskModel.priority.desc(),
                TaskModel.created_at.desc(),
            )
            return [_to_task(task) for task in session.scalars(stmt)]

    def get_task(self, task_id: int) -> Optional[TaskEntity]:
        with self._session_factory() as session:
            task = session.get(TaskModel, task_id)
            return _to_task(task) if task else None

    def create_task(self, data: dict) -> TaskEntity:
        with self._session_factory() as session:
            task = TaskModel(**_normalize(data))
            session.add(task)
            session.commit()
            session.refresh(task)
            return _to_task(task)

    def update_task(self, task_id: int, data: dict) -> Optional[TaskEntity]:
        with self._session_factory() as session:
            task = session.get(TaskModel, task_id)
            if not task:
                return None
            for key, value in _normalize(data).items():
                setattr(task, key, value)
            session.commit()
            session.refresh(task)
            return _to_task(task)

    def delete_task(self, task_id: int) -> None:
        with self._session_factory() as session:
            task = session.get(TaskModel, task_id)
            if not task:
                return
            session.delete(task)
            session.commit()


class HabitRepository:
    def __init__(self, session_factory=SessionLocal) -> None:
        self._session_factory = session_factory

    def list_habits(self) -> list[HabitEntity]:
        with self._session_factory() as session:
            stmt = select(HabitModel).order_by(HabitModel.priority.desc(), HabitModel.title.asc())
            return [_to_habit(habit) for habit in session.scalars(stmt)]

    def get_habit(self, habit_id: int) -> Optional[HabitEntity]:
        with self._session_factory() as session:
            habit = session.get(HabitModel, habit_id)
            return _to_habit(habit) if habit else None

    def create_habit(self, data: dict) -> HabitEntity:
        with self._session_factory() as session:
            habit = HabitModel(**_normalize(data))
            session.add(habit)
            session.commit()
            session.refresh(habit)
            return _to_habit(habit)

    def update_habit(self, habit_id: int, data: dict) -> Optional[HabitEntity]:
        with self._session_factory() as session:
            habit = session.get(HabitModel, habit_id)
            if not habit:
                return None
            for key, value in _normalize(data).items():
                setattr(habit, key, value)
            session.commit()
            session.refresh(habit)
            return _to_habit(habit)


class LogbookRepository:
    """SQL-backed logbook store.

    Inserts and deletes are collected in one session and written by
    ``commit``, so each housekeeping pass lands as a single transaction.
    """

    def __init__(self, session_factory=SessionLocal) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    def fetch_completed_tasks(self) -> list[TaskEntity]:
        try:
            with self._session_factory() as session:
                stmt = (
                    select(TaskModel)
                    .where(TaskModel.is_completed.is_(True))
                    .order_by(TaskModel.completed_at.desc())
                )
                return [_to_task(task) for task in session.scalars(stmt)]
        except SQLAlchemyError as exc:
            raise StorageAccessError("fetch", "completed tasks", str(exc)) from exc

    def fetch_log_entries(self) -> list[TaskLogEntry]:
        try:
            with self._session_factory() as session:
                stmt = select(TaskLogEntryModel).order_by(TaskLogEntryModel.completed_at.desc())
                return [_to_log_entry(entry) for entry in session.scalars(stmt)]
        except SQLAlchemyError as exc:
            raise StorageAccessError("fetch", "log entries", str(exc)) from exc

    def list_recent_completions(self, since: datetime) -> list[TaskEntity]:
        stmt = (
            select(TaskModel)
            .where(
                TaskModel.is_completed.is_(True),
                TaskModel.completed_at.is_not(None),
                TaskModel.completed_at >= since,
            )
            .order_by(TaskModel.completed_at.desc())
        )
        try:
            with self._session_factory() as session:
                return [_to_task(task) for task in session.scalars(stmt)]
        except SQLAlchemyError as exc:
            raise StorageAccessError("fetch", "recent completions", str(exc)) from exc

    def list_log_entries_between(self, start: datetime, end: datetime) -> list[TaskLogEntry]:
        stmt = (
            select(TaskLogEntryModel)
            .where(TaskLogEntryModel.completed_at.between(start, end))
            .order_by(TaskLogEntryModel.completed_at.desc())
        )
        try:
            with self._session_factory() as session:
                return [_to_log_entry(entry) for entry in session.scalars(stmt)]
        except SQLAlchemyError as exc:
            raise StorageAccessError("fetch", "log entries", str(exc)) from exc

    def insert_log_entry(self, entry: TaskLogEntry) -> None:
        try:
            self._unit_of_work().add(_to_log_model(entry))
        except SQLAlchemyError as exc:
            raise StorageAccessError("save", "log entry", str(exc)) from exc

    def delete_task(self, task: TaskEntity) -> None:
        self._delete(TaskModel, task.id, "task")

    def delete_log_entry(self, entry: TaskLogEntry) -> None:
        self._delete(TaskLogEntryModel, entry.id, "log entry")

    def commit(self) -> None:
        session = self._session
        if session is None:
            return
        try:
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            raise StorageAccessError("save", "logbook changes", str(exc)) from exc
        finally:
            session.close()
            self._session = None

    def rollback(self) -> None:
        session = self._session
        if session is None:
            return
        session.rollback()
        session.close()
        self._session = None
        logger.debug("Discarded pending logbook changes")

    def _unit_of_work(self) -> Session:
        if self._session is None:
            self._session = self._session_factory()
        return self._session

    def _delete(self, model_cls, key: int | None, entity_type: str) -> None:
        session = self._unit_of_work()
        try:
            model = session.get(model_cls, key)
        except SQLAlchemyError as exc:
            raise StorageAccessError("fetch", entity_type, str(exc)) from exc
        if model is not None:
            session.delete(model)
