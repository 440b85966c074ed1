"""XP economy and single-pass activity aggregation."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date, tzinfo
from typing import Iterable, Optional

from study_metrics.schema import ActivityRecord, DayBucket, SubjectShare
from study_metrics.streak import local_day

TASK_ACCURACY_WEIGHT = 1
TASK_MINUTE_WEIGHT = 2
FLASHCARD_ACCURACY_WEIGHT = 2
FLASHCARD_MINUTE_WEIGHT = 2

DEFAULT_SUBJECT = "General"
DEFAULT_CHART_WINDOW = 14


@dataclass
class Aggregates:
    total_xp: float = 0
    total_minutes: float = 0
    total_flashcard_units: float = 0
    per_subject_minutes: dict[str, float] = field(default_factory=dict)
    subject_distribution: list[SubjectShare] = field(default_factory=list)
    per_day_buckets: list[DayBucket] = field(default_factory=list)


def record_xp(record: ActivityRecord) -> float:
    """XP earned by one record."""

    if record.is_task:
        return record.accuracy * TASK_ACCURACY_WEIGHT + record.minutes * TASK_MINUTE_WEIGHT
    return record.accuracy * FLASHCARD_ACCURACY_WEIGHT + record.minutes * FLASHCARD_MINUTE_WEIGHT


def normalize_subject(subject: Optional[str]) -> str:
    """Trim a subject and capitalize its first letter, leaving short acronyms alone.

    Only the first character changes, so "PHYSICS" and "Physics" stay distinct.
    """

    normalized = (subject or "").strip()
    if not normalized:
        return DEFAULT_SUBJECT
    if len(normalized) > 2:
        normalized = normalized[0].upper() + normalized[1:]
    return normalized


def day_label(day: date) -> str:
    return f"{day:%b} {day.day}"


def aggregate(
    records: Iterable[ActivityRecord],
    tz: Optional[tzinfo] = None,
    window: int = DEFAULT_CHART_WINDOW,
) -> Aggregates:
    """Fold all records into XP, minute totals, subject and day aggregates."""

    result = Aggregates()
    subject_minutes: dict[str, float] = defaultdict(int)
    flashcards_by_day: dict[date, float] = defaultdict(int)
    tasks_by_day: dict[date, int] = defaultdict(int)

    for record in sorted(records, key=lambda r: (r.timestamp.timestamp(), r.date)):
        day = local_day(record.timestamp, tz)
        result.total_xp += record_xp(record)
        result.total_minutes += record.minutes

        if record.is_task:
            tasks_by_day[day] += 1
        else:
            result.total_flashcard_units += record.accuracy
            flashcards_by_day[day] += record.accuracy

        subject_minutes[normalize_subject(record.subject)] += record.minutes

    result.per_subject_minutes = dict(sorted(subject_minutes.items()))
    result.subject_distribution = [
        SubjectShare(subject=subject, minutes=minutes)
        for subject, minutes in sorted(subject_minutes.items(), key=lambda item: (-item[1], item[0]))
        if minutes > 0
    ]

    days = sorted(set(flashcards_by_day) | set(tasks_by_day))
    buckets = [
        DayBucket(
            day=day,
            label=day_label(day),
            flashcard_units=flashcards_by_day.get(day, 0),
            task_count=tasks_by_day.get(day, 0),
        )
        for day in days
    ]
    result.per_day_buckets = buckets[-window:] if window > 0 else []
    return result
