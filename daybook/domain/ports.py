from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .entities import TaskEntity, TaskLogEntry


class LogbookStore(Protocol):
    """Storage behind the logbook and its housekeeping.

    Mutations are buffered until ``commit``; fetches and commits raise
    ``StorageAccessError`` when the store cannot be reached.
    """

    def fetch_completed_tasks(self) -> list[TaskEntity]: ...

    def fetch_log_entries(self) -> list[TaskLogEntry]: ...

    def list_recent_completions(self, since: datetime) -> list[TaskEntity]: ...

    def list_log_entries_between(self, start: datetime, end: datetime) -> list[TaskLogEntry]: ...

    def insert_log_entry(self, entry: TaskLogEntry) -> None: ...

    def delete_task(self, task: TaskEntity) -> None: ...

    def delete_log_entry(self, entry: TaskLogEntry) -> None: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
