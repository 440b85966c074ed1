"""CSV export of stored activity records."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Iterable

from study_metrics.schema import ActivityRecord

logger = logging.getLogger(__name__)

EXPORT_HEADER = "Date,Subject,Minutes,Score/Count,Category"
DEFAULT_EXPORT_CATEGORY = "flashcard"

_NEEDS_QUOTES = (",", '"', "\n", "\r")


def format_number(value) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _quote(value) -> str:
    text = "" if value is None else str(value)
    return '"' + text.replace('"', '""') + '"'


def _bare(text: str) -> str:
    """Unquoted field, quoted only when it would otherwise split the row."""

    if any(char in text for char in _NEEDS_QUOTES):
        return _quote(text)
    return text


def _stored_row(record) -> Mapping | None:
    if isinstance(record, ActivityRecord):
        if record.source is not None:
            return record.source
        return {
            "date": record.date,
            "subject": record.subject,
            "minutes": record.minutes,
            "accuracy": record.accuracy,
            "category": record.category,
        }
    if isinstance(record, Mapping):
        return record
    return None


def export_row(row: Mapping) -> str:
    """One CSV line with the stored values; an empty category reads as flashcard."""

    stored_date = row.get("date")
    if isinstance(stored_date, datetime):
        stored_date = stored_date.isoformat()
    return ",".join(
        [
            _quote(stored_date),
            _quote(row.get("subject")),
            _bare(format_number(row.get("minutes"))),
            _bare(format_number(row.get("accuracy"))),
            _bare(str(row.get("category") or DEFAULT_EXPORT_CATEGORY)),
        ]
    )


def export_csv(records: Iterable) -> str:
    """Render stored rows (or records) as the analytics CSV export.

    Values are written as stored, so rows that the metrics skip are exported
    too. Items that are not rows at all are left out.
    """

    lines = [EXPORT_HEADER]
    for index, record in enumerate(records, start=1):
        row = _stored_row(record)
        if row is None:
            logger.warning("Not exporting item %d: expected an object, got %s", index, type(record).__name__)
            continue
        lines.append(export_row(row))
    return "\n".join(lines) + "\n"
