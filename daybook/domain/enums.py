from __future__ import annotations

from enum import IntEnum, StrEnum


class Priority(IntEnum):
    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3


class RecurrenceRule(StrEnum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class RetentionAction(StrEnum):
    ACTIVE = "active"
    ARCHIVE = "archive"
    PURGE = "purge"


class AgendaKind(StrEnum):
    TASK = "task"
    HABIT = "habit"
