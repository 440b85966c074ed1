"""Study metrics view model: streak, XP, level and chart aggregates."""

from __future__ import annotations

import logging
from datetime import date, tzinfo
from typing import Iterable, Optional

from study_metrics.level import resolve_level
from study_metrics.normalize import normalize_records
from study_metrics.schema import StudyMetrics
from study_metrics.streak import activity_days, current_streak, longest_streak
from study_metrics.xp import DEFAULT_CHART_WINDOW, aggregate

logger = logging.getLogger(__name__)


def compute_study_metrics(
    records: Iterable,
    today: Optional[date] = None,
    tz: Optional[tzinfo] = None,
    window: int = DEFAULT_CHART_WINDOW,
) -> StudyMetrics:
    """Derive every dashboard metric from the full record set.

    ``records`` may hold raw store rows (mappings), such as the adapters
    return, or ActivityRecord values; malformed rows are skipped and counted
    in ``skipped_records``. Nothing is cached, so calling again after the
    record set changes is always safe.
    """

    rows = list(records)
    normalized, skipped = normalize_records(rows)
    if skipped:
        logger.info("Computed metrics from %d of %d records, skipped %d", len(normalized), len(rows), skipped)

    totals = aggregate(normalized, tz=tz, window=window)
    level = resolve_level(totals.total_xp)

    return StudyMetrics(
        streak=current_streak(normalized, today=today, tz=tz),
        xp=totals.total_xp,
        level=level.level,
        prev_level_xp=level.prev_level_xp,
        next_level_xp=level.next_level_xp,
        progress=level.progress,
        rank_title=level.rank_title,
        total_minutes=totals.total_minutes,
        total_flashcard_units=totals.total_flashcard_units,
        per_subject_minutes=totals.per_subject_minutes,
        subject_distribution=totals.subject_distribution,
        per_day_buckets=totals.per_day_buckets,
        skipped_records=skipped,
        longest_streak=longest_streak(normalized, tz=tz),
        active_days=len(activity_days(normalized, tz)),
    )
