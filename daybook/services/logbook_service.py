from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Callable

from daybook.domain.entities import HousekeepingStats, TaskEntity, TaskLogEntry
from daybook.domain.enums import RetentionAction
from daybook.domain.errors import HousekeepingError, StorageAccessError
from daybook.domain.ports import LogbookStore
from daybook.domain.retention import RetentionPolicy, classify, snapshot_expired

logger = logging.getLogger(__name__)

STAGE_ARCHIVE = "archive"
STAGE_PURGE_TASKS = "purge_tasks"
STAGE_PURGE_LOG_ENTRIES = "purge_log_entries"

PassObserver = Callable[[str, int], None]


class LogbookService:
    def __init__(
        self,
        store: LogbookStore,
        policy: RetentionPolicy | None = None,
        clock: Callable[[], datetime] = datetime.now,
        observer: PassObserver | None = None,
    ) -> None:
        self._store = store
        self._policy = policy or RetentionPolicy()
        self._clock = clock
        self._observer = observer

    def run_housekeeping(self, now: datetime | None = None) -> HousekeepingStats:
        """Archive, then purge, completed tasks and expired log entries.

        Every pass fetches fresh data, commits its own batch and is judged
        against the same ``now``. A storage failure stops the run with a
        ``HousekeepingError`` whose ``stats`` cover the committed passes.
        Callers must not run two housekeeping runs against one store at once.
        """
        now = now or self._clock()
        stats = HousekeepingStats()

        stats.archived_count = self._run_pass(
            STAGE_ARCHIVE, "tasks", stats, lambda: self._archive_tasks(now)
        )
        stats.purged_original_count = self._run_pass(
            STAGE_PURGE_TASKS, "tasks", stats, lambda: self._purge_tasks(now)
        )
        stats.purged_snapshot_count = self._run_pass(
            STAGE_PURGE_LOG_ENTRIES, "log entries", stats, lambda: self._purge_log_entries(now)
        )

        logger.info(
            "Housekeeping finished: archived=%s purged_tasks=%s purged_log_entries=%s",
            stats.archived_count,
            stats.purged_original_count,
            stats.purged_snapshot_count,
        )
        return stats

    def recent_completions(self, days: int = 30) -> list[TaskEntity]:
        since = self._clock() - timedelta(days=days)
        return self._store.list_recent_completions(since)

    def archived_completions(self, start: datetime, end: datetime) -> list[TaskLogEntry]:
        return self._store.list_log_entries_between(start, end)

    def search_completions(self, query: str, days: int = 90) -> list[TaskEntity]:
        recent = self.recent_completions(days)
        needle = query.strip().lower()
        if not needle:
            return recent
        return [
            task
            for task in recent
            if needle in task.title.lower() or needle in task.description.lower()
        ]

    def _run_pass(
        self,
        stage: str,
        entity_type: str,
        stats: HousekeepingStats,
        work: Callable[[], int],
    ) -> int:
        try:
            count = work()
        except StorageAccessError as exc:
            self._store.rollback()
            logger.error("Housekeeping %s pass failed: %s", stage, exc)
            raise HousekeepingError(stage, entity_type, stats) from exc
        except Exception:
            self._store.rollback()
            raise

        logger.debug("Housekeeping %s pass processed %s %s", stage, count, entity_type)
        if self._observer is not None:
            self._observer(stage, count)
        return count

    def _archive_tasks(self, now: datetime) -> int:
        archived = 0
        for task in self._store.fetch_completed_tasks():
            if task.completed_at is None:
                logger.warning("Completed task %s has no completion date; skipping", task.id)
                continue
            if classify(task.completed_at, now, self._policy) is not RetentionAction.ARCHIVE:
                continue
            self._store.insert_log_entry(TaskLogEntry.from_task(task))
            self._store.delete_task(task)
            archived += 1

        if archived:
            self._store.commit()
        return archived

    def _purge_tasks(self, now: datetime) -> int:
        purged = 0
        for task in self._store.fetch_completed_tasks():
            if classify(task.completed_at, now, self._policy) is not RetentionAction.PURGE:
                continue
            self._store.delete_task(task)
            purged += 1

        if purged:
            self._store.commit()
        return purged

    def _purge_log_entries(self, now: datetime) -> int:
        purged = 0
        for entry in self._store.fetch_log_entries():
            if not snapshot_expired(entry, now, self._policy):
                continue
            self._store.delete_log_entry(entry)
            purged += 1

        if purged:
            self._store.commit()
        return purged
