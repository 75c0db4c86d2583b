from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .entities import HousekeepingStats


class DaybookError(Exception):
    pass


class StorageAccessError(DaybookError):
    def __init__(self, operation: str, entity_type: str, message: str = "") -> None:
        self.operation = operation
        self.entity_type = entity_type
        detail = f": {message}" if message else ""
        super().__init__(f"Failed to {operation} {entity_type}{detail}")


class HousekeepingError(DaybookError):
    """Raised when a housekeeping run stops on a storage failure.

    ``stats`` holds the counts of the passes that committed before the
    failure; their effects stay in the store.
    """

    def __init__(self, stage: str, entity_type: str, stats: HousekeepingStats) -> None:
        self.stage = stage
        self.entity_type = entity_type
        self.stats = stats
        super().__init__(f"Housekeeping stopped during {stage} ({entity_type})")
