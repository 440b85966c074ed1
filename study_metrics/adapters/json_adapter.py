"""JSON adapter for study-stat rows."""

from __future__ import annotations

import json
import logging

logger = logging.getLogger(__name__)


def parse(file_path: str) -> list:
    """Read a JSON array of study-stat rows as stored.

    Rows are validated later by ``compute_study_metrics``, which skips and
    counts the malformed ones.
    """

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    logger.info("Loaded %d rows from %s", len(payload), file_path)
    return payload
