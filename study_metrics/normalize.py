"""Normalization of raw study-stat rows into activity records."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from datetime import datetime

from study_metrics.errors import MalformedRecordError
from study_metrics.schema import TASK_CATEGORY, ActivityRecord

logger = logging.getLogger(__name__)

# Flat bonus a task completion carries when the store row has no accuracy.
DEFAULT_TASK_ACCURACY = 10
DEFAULT_FLASHCARD_ACCURACY = 0


def parse_timestamp(value) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z`` for UTC."""

    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def _parse_number(value, name: str, index: int, default: float) -> float:
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise MalformedRecordError(index, f"non-numeric {name}")
    if isinstance(value, (int, float)):
        number = value
    else:
        text = str(value).strip()
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError as exc:
                raise MalformedRecordError(index, f"non-numeric {name} {value!r}") from exc

    if isinstance(number, float) and not math.isfinite(number):
        raise MalformedRecordError(index, f"non-finite {name}")
    if number < 0:
        raise MalformedRecordError(index, f"negative {name}")
    return number


def normalize_record(item: Mapping, index: int) -> ActivityRecord:
    """Normalize one raw store row, raising MalformedRecordError if unusable."""

    raw_date = item.get("date")
    if raw_date in (None, ""):
        raise MalformedRecordError(index, "missing date")
    try:
        timestamp = parse_timestamp(raw_date)
    except (TypeError, ValueError) as exc:
        raise MalformedRecordError(index, f"malformed date {raw_date!r}") from exc

    category_raw = item.get("category")
    category = str(category_raw).strip() if category_raw else None
    category = category or None

    default_accuracy = DEFAULT_TASK_ACCURACY if category == TASK_CATEGORY else DEFAULT_FLASHCARD_ACCURACY
    minutes = _parse_number(item.get("minutes"), "minutes", index, 0)
    accuracy = _parse_number(item.get("accuracy"), "accuracy", index, default_accuracy)

    subject = item.get("subject")
    return ActivityRecord(
        date=raw_date if isinstance(raw_date, str) else raw_date.isoformat(),
        timestamp=timestamp,
        subject=None if subject is None else str(subject),
        minutes=minutes,
        accuracy=accuracy,
        category=category,
        source=dict(item),
    )


def normalize_records(items: Iterable) -> tuple[list[ActivityRecord], int]:
    """Normalize every row, skipping malformed ones. Returns (records, skipped)."""

    records: list[ActivityRecord] = []
    skipped = 0
    for index, item in enumerate(items, start=1):
        if isinstance(item, ActivityRecord):
            records.append(item)
            continue
        try:
            if not isinstance(item, Mapping):
                raise MalformedRecordError(index, f"expected an object, got {type(item).__name__}")
            records.append(normalize_record(item, index))
        except MalformedRecordError as exc:
            logger.warning("Skipping activity record: %s", exc)
            skipped += 1
    return records, skipped
