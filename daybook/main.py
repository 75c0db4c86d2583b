from __future__ import annotations

import logging
import sys

from daybook.config import SETTINGS
from daybook.domain.errors import HousekeepingError
from daybook.domain.retention import RetentionPolicy
from daybook.infra.db import init_db
from daybook.infra.logging import setup_logging
from daybook.infra.repository import LogbookRepository
from daybook.services.logbook_service import LogbookService

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging()
    try:
        init_db()
    except Exception as exc:  # noqa: BLE001
        logger.error("DB error: %s", exc)
        sys.exit(1)

    policy = RetentionPolicy(
        archive_after_days=SETTINGS.archive_after_days,
        purge_after_days=SETTINGS.purge_after_days,
    )
    service = LogbookService(LogbookRepository(), policy=policy)
    try:
        service.run_housekeeping()
    except HousekeepingError as exc:
        logger.error("%s (committed before failure: %s)", exc, exc.stats)
        sys.exit(1)


if __name__ == "__main__":
    main()
