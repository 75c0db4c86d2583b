from __future__ import annotations

import calendar
from datetime import date, timedelta

from .enums import RecurrenceRule


def clamp_day(year: int, month: int, day: int) -> int:
    """Pull ``day`` back to the last day of a shorter month."""
    return min(day, calendar.monthrange(year, month)[1])


def shift_months(base: date, months: int) -> date:
    index = base.month - 1 + months
    year, month = base.year + index // 12, index % 12 + 1
    return date(year, month, clamp_day(year, month, base.day))


def next_due_date(current: date, rule: str, interval: int = 1) -> date:
    """Due date of the instance that follows ``current``.

    Unknown rules fall back to a daily step.
    """
    step = max(int(interval or 1), 1)
    if rule == RecurrenceRule.MONTHLY.value:
        return shift_months(current, step)
    if rule == RecurrenceRule.WEEKLY.value:
        return current + timedelta(weeks=step)
    return current + timedelta(days=step)
