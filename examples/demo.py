"""Demo script for study-metrics."""

import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from study_metrics.adapters.json_adapter import parse
from study_metrics.export import export_csv
from study_metrics.level import xp_to_next_level
from study_metrics.metrics import compute_study_metrics


def main() -> None:
    records = parse("examples/sample_stats.json")
    metrics = compute_study_metrics(records, today=date(2025, 3, 6))
    print(f"Streak: {metrics.streak} day(s)")
    print(f"XP: {metrics.xp} (level {metrics.level}, {metrics.rank_title})")
    print(f"To next level: {xp_to_next_level(metrics.xp)} XP")
    print("Subjects:", [(share.subject, share.minutes) for share in metrics.subject_distribution])
    print(export_csv(records))


if __name__ == "__main__":
    main()
