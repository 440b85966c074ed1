"""Consecutive-day study streaks."""

from __future__ import annotations

from datetime import date, datetime, timedelta, tzinfo
from typing import Iterable, Optional

from study_metrics.schema import ActivityRecord


def local_day(timestamp: datetime, tz: Optional[tzinfo] = None) -> date:
    """Return the local calendar day of a timestamp.

    Naive timestamps are taken as local wall time already. Aware timestamps
    are converted to ``tz``, or to the system zone when ``tz`` is None.
    """

    if timestamp.tzinfo is None:
        return timestamp.date()
    return timestamp.astimezone(tz).date()


def local_today(tz: Optional[tzinfo] = None) -> date:
    return datetime.now(tz).date()


def activity_days(records: Iterable[ActivityRecord], tz: Optional[tzinfo] = None) -> list[date]:
    """Distinct local days with any activity, most recent first."""

    return sorted({local_day(record.timestamp, tz) for record in records}, reverse=True)


def current_streak(
    records: Iterable[ActivityRecord],
    today: Optional[date] = None,
    tz: Optional[tzinfo] = None,
) -> int:
    """Count consecutive active days ending today or yesterday."""

    days = activity_days(records, tz)
    if not days:
        return 0

    today = today or local_today(tz)
    if days[0] not in (today, today - timedelta(days=1)):
        return 0

    streak = 1
    for current, previous in zip(days, days[1:]):
        if current - previous != timedelta(days=1):
            break
        streak += 1
    return streak


def longest_streak(records: Iterable[ActivityRecord], tz: Optional[tzinfo] = None) -> int:
    """Longest run of consecutive active days anywhere in the history."""

    days = activity_days(records, tz)
    if not days:
        return 0

    best = run = 1
    for current, previous in zip(days, days[1:]):
        run = run + 1 if current - previous == timedelta(days=1) else 1
        best = max(best, run)
    return best
