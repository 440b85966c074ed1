"""Compute study metrics from a CSV/JSON activity export."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from study_metrics.adapters import csv_adapter, json_adapter
from study_metrics.config import get_settings
from study_metrics.export import export_csv
from study_metrics.metrics import compute_study_metrics

logger = logging.getLogger("run_metrics")


def _load_records(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValueError("Unsupported input format, expected .csv or .json")


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Compute streak, XP and level from study activity")
    parser.add_argument("--data", required=True, help="Path to CSV/JSON activity file")
    parser.add_argument("--today", type=date.fromisoformat, default=None, help="Reference day (YYYY-MM-DD)")
    parser.add_argument("--export", default=None, help="Write the records as analytics CSV to this path")
    args = parser.parse_args()

    records = _load_records(Path(args.data))

    metrics = compute_study_metrics(
        records,
        today=args.today,
        tz=settings.zone(),
        window=settings.CHART_WINDOW_DAYS,
    )
    if metrics.skipped_records:
        logger.warning("Skipped %d malformed records", metrics.skipped_records)
    print(json.dumps(metrics.as_dict(), indent=2))

    if args.export:
        out_path = Path(args.export)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(export_csv(records), encoding="utf-8")
        print(f"Saved analytics export to {out_path}")


if __name__ == "__main__":
    main()
