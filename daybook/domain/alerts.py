"""Alert eligibility for tasks and habits.

Both kinds of item carry the same alert configuration: a time of day, a
fired flag set by the notification layer and an optional snooze override.
The functions here take that configuration as an explicit ``AlertState``
so the policy stays independent of any concrete entity.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional


@dataclass(frozen=True)
class AlertState:
    hour: int | None = None
    minute: int | None = None
    fired: bool = False
    snoozed_until: Optional[datetime] = None
    instance_date: Optional[date] = None
    is_completed: bool = False

    @property
    def has_alert(self) -> bool:
        return self.hour is not None


def effective_reminder_date(state: AlertState) -> datetime | None:
    """Return when the reminder for the current instance should fire.

    A snooze replaces the configured time of day entirely. Without a snooze
    the configured time is applied to the instance's calendar day, so an
    item with no active instance has no reminder.
    """
    if not state.has_alert:
        return None
    if state.snoozed_until is not None:
        return state.snoozed_until
    if state.instance_date is None:
        return None
    day = state.instance_date
    if isinstance(day, datetime):
        day = day.date()
    return datetime.combine(day, time(state.hour, state.minute or 0))


def has_pending_alert(state: AlertState, now: datetime) -> bool:
    if state.is_completed or state.fired:
        return False
    reminder = effective_reminder_date(state)
    return reminder is not None and reminder > now


def reminder_display_text(state: AlertState) -> str | None:
    if not state.has_alert or state.instance_date is None:
        return None
    alert_time = time(state.hour, state.minute or 0)
    hour = alert_time.hour % 12 or 12
    suffix = "AM" if alert_time.hour < 12 else "PM"
    return f"{hour}:{alert_time.minute:02d} {suffix}"
