"""Age bands that decide what happens to a completed task.

With the default policy a task completed 0 to 90 days ago stays active,
91 to 365 days ago it is archived into a logbook entry, and anything older
is purged. Logbook entries themselves are purged once they pass 365 days.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from .entities import TaskLogEntry
from .enums import RetentionAction


@dataclass(frozen=True)
class RetentionPolicy:
    archive_after_days: int = 90
    purge_after_days: int = 365

    def __post_init__(self) -> None:
        if self.archive_after_days >= self.purge_after_days:
            raise ValueError("archive_after_days must be lower than purge_after_days")


def age_in_days(moment: date, now: datetime) -> int:
    if isinstance(moment, datetime):
        moment = moment.date()
    return max((now.date() - moment).days, 0)


def classify(
    completed_at: Optional[datetime],
    now: datetime,
    policy: RetentionPolicy | None = None,
) -> RetentionAction:
    policy = policy or RetentionPolicy()
    if completed_at is None:
        return RetentionAction.ACTIVE

    age = age_in_days(completed_at, now)
    if age <= policy.archive_after_days:
        return RetentionAction.ACTIVE
    if age <= policy.purge_after_days:
        return RetentionAction.ARCHIVE
    return RetentionAction.PURGE


def snapshot_expired(entry: TaskLogEntry, now: datetime, policy: RetentionPolicy | None = None) -> bool:
    policy = policy or RetentionPolicy()
    return age_in_days(entry.completed_at, now) > policy.purge_after_days
