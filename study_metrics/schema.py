"""Core data schema for study activity and derived metrics."""

from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from typing import Any, Mapping, Optional

TASK_CATEGORY = "task"


@dataclass(frozen=True)
class ActivityRecord:
    """Normalized study activity record used by all modules."""

    date: str
    timestamp: datetime
    subject: Optional[str]
    minutes: float
    accuracy: float
    category: Optional[str]
    # The stored row as read, kept for verbatim export.
    source: Optional[Mapping[str, Any]] = field(default=None, compare=False, repr=False)

    @property
    def is_task(self) -> bool:
        return self.category == TASK_CATEGORY


@dataclass(frozen=True)
class DayBucket:
    day: date
    label: str
    flashcard_units: float = 0
    task_count: int = 0


@dataclass(frozen=True)
class SubjectShare:
    subject: str
    minutes: float


@dataclass(frozen=True)
class LevelInfo:
    """Level position of a cumulative XP value."""

    level: int
    prev_level_xp: int
    next_level_xp: int
    progress: float
    rank_title: str


@dataclass(frozen=True)
class StudyMetrics:
    """Read-only view model derived from the full record set."""

    streak: int
    xp: float
    level: int
    prev_level_xp: int
    next_level_xp: int
    progress: float
    rank_title: str
    total_minutes: float
    total_flashcard_units: float
    per_subject_minutes: dict[str, float] = field(default_factory=dict)
    subject_distribution: list[SubjectShare] = field(default_factory=list)
    per_day_buckets: list[DayBucket] = field(default_factory=list)
    skipped_records: int = 0
    longest_streak: int = 0
    active_days: int = 0

    def as_dict(self) -> dict:
        payload = asdict(self)
        for bucket in payload["per_day_buckets"]:
            bucket["day"] = bucket["day"].isoformat()
        return payload
