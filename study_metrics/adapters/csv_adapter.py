"""CSV adapter reading the analytics export back into study-stat rows."""

from __future__ import annotations

import csv
import logging

logger = logging.getLogger(__name__)

_REQUIRED_COLUMNS = {"Date", "Subject", "Minutes", "Score/Count", "Category"}


def _row_to_item(row: dict) -> dict:
    return {
        "date": row.get("Date"),
        "subject": row.get("Subject"),
        "minutes": row.get("Minutes"),
        "accuracy": row.get("Score/Count"),
        "category": row.get("Category"),
    }


def parse(file_path: str) -> list[dict]:
    """Parse an exported CSV file into study-stat rows keyed like the store."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        missing = _REQUIRED_COLUMNS - set(reader.fieldnames)
        if missing:
            raise ValueError(f"CSV header is missing columns {sorted(missing)}")

        rows = [_row_to_item(row) for row in reader]

    logger.info("Loaded %d rows from %s", len(rows), file_path)
    return rows
