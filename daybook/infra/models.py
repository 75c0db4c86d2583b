from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, Date, DateTime, Integer, Interval, String, Text, Time

from .db import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TaskModel(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    priority = Column(Integer, nullable=False, default=0)
    is_completed = Column(Boolean, nullable=False, default=False, index=True)
    completed_at = Column(DateTime, nullable=True)
    due_date = Column(Date, nullable=True)
    due_time = Column(Time, nullable=True)
    recurrence_rule = Column(String(20), nullable=True)
    recurrence_interval = Column(Integer, nullable=False, default=1)
    alert_hour = Column(Integer, nullable=True)
    alert_minute = Column(Integer, nullable=True)
    notification_fired = Column(Boolean, nullable=False, default=False)
    snoozed_until = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)


class HabitModel(Base):
    __tablename__ = "habits"

    id = Column(Integer, primary_key=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    priority = Column(Integer, nullable=False, default=2)
    recurrence_rule = Column(String(20), nullable=True)
    recurrence_interval = Column(Integer, nullable=False, default=1)
    last_completed_at = Column(DateTime, nullable=True)
    last_replenished_at = Column(DateTime, nullable=True)
    alert_hour = Column(Integer, nullable=True)
    alert_minute = Column(Integer, nullable=True)
    notification_fired = Column(Boolean, nullable=False, default=False)
    snoozed_until = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)


class TaskLogEntryModel(Base):
    __tablename__ = "task_log_entries"

    id = Column(Integer, primary_key=True)
    task_id = Column(Integer, nullable=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    priority = Column(Integer, nullable=False, default=0)
    completed_at = Column(DateTime, nullable=False, index=True)
    created_at = Column(DateTime, nullable=False)
    due_date = Column(Date, nullable=True)
    was_overdue = Column(Boolean, nullable=False, default=False)
    completion_duration = Column(Interval, nullable=True)
