from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from daybook.domain.enums import RetentionAction
from daybook.domain.retention import RetentionPolicy, age_in_days, classify, snapshot_expired

from helpers import NOW, make_log_entry


@pytest.mark.parametrize(
    ("days_ago", "expected"),
    [
        (0, RetentionAction.ACTIVE),
        (90, RetentionAction.ACTIVE),
        (91, RetentionAction.ARCHIVE),
        (200, RetentionAction.ARCHIVE),
        (365, RetentionAction.ARCHIVE),
        (366, RetentionAction.PURGE),
        (1000, RetentionAction.PURGE),
    ],
)
def test_classify_bands(days_ago: int, expected: RetentionAction) -> None:
    assert classify(NOW - timedelta(days=days_ago), NOW) is expected


def test_missing_completion_date_is_always_active() -> None:
    assert classify(None, NOW) is RetentionAction.ACTIVE


def test_future_completion_counts_as_age_zero() -> None:
    assert age_in_days(NOW + timedelta(days=3), NOW) == 0
    assert classify(NOW + timedelta(days=400), NOW) is RetentionAction.ACTIVE


def test_age_uses_calendar_days() -> None:
    late_evening = datetime(2026, 3, 14, 23, 59)
    early_morning = datetime(2026, 3, 15, 0, 1)

    assert age_in_days(late_evening, early_morning) == 1
    assert age_in_days(late_evening.date(), early_morning) == 1


def test_custom_policy_moves_the_bands() -> None:
    policy = RetentionPolicy(archive_after_days=30, purge_after_days=60)

    assert classify(NOW - timedelta(days=30), NOW, policy) is RetentionAction.ACTIVE
    assert classify(NOW - timedelta(days=31), NOW, policy) is RetentionAction.ARCHIVE
    assert classify(NOW - timedelta(days=61), NOW, policy) is RetentionAction.PURGE


def test_policy_rejects_overlapping_bands() -> None:
    with pytest.raises(ValueError):
        RetentionPolicy(archive_after_days=365, purge_after_days=365)


def test_snapshot_expires_after_purge_window() -> None:
    assert not snapshot_expired(make_log_entry(1, 365), NOW)
    assert snapshot_expired(make_log_entry(2, 366), NOW)
