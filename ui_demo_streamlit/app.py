"""Streamlit demo UI for study-metrics."""

from __future__ import annotations

import logging
import os
import tempfile
from collections import Counter
from datetime import date
from pathlib import Path
from typing import Any, Optional

from study_metrics.adapters import csv_adapter, json_adapter
from study_metrics.config import Settings, get_settings
from study_metrics.export import export_csv
from study_metrics.level import xp_to_next_level
from study_metrics.metrics import compute_study_metrics

DEMO_DATASET = "examples/sample_stats.json"


def _parse_records_from_path(file_path: str) -> list:
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(file_path)
    if suffix == ".json":
        return json_adapter.parse(file_path)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _parse_uploaded(uploaded_file) -> list:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    try:
        return _parse_records_from_path(temp_path)
    finally:
        os.unlink(temp_path)


def _build_summary(rows: list, metrics) -> dict[str, Any]:
    category_counts = Counter(
        str(row.get("category") or "flashcard") for row in rows if isinstance(row, dict)
    )
    return {
        "total_records": len(rows),
        "skipped_records": metrics.skipped_records,
        "active_days": metrics.active_days,
        "category_counts": dict(category_counts),
    }


def build_dashboard(rows: list, settings: Settings, today: Optional[date] = None) -> dict[str, Any]:
    """Run the metrics pipeline and return a UI-friendly payload."""

    tz = settings.zone()
    metrics = compute_study_metrics(rows, today=today, tz=tz, window=settings.CHART_WINDOW_DAYS)
    return {
        "summary": _build_summary(rows, metrics),
        "metrics": metrics,
        "longest_streak": metrics.longest_streak,
        "xp_to_next_level": xp_to_next_level(metrics.xp),
        "activity_chart": [
            {"day": bucket.label, "flashcards": bucket.flashcard_units, "tasks": bucket.task_count}
            for bucket in metrics.per_day_buckets
        ],
        "subject_chart": [
            {"subject": share.subject, "minutes": share.minutes} for share in metrics.subject_distribution
        ],
        "export": export_csv(rows),
    }


def main() -> None:
    import streamlit as st

    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    st.set_page_config(page_title="Study Metrics Demo", layout="wide")
    st.title("Study Metrics: Streak, XP and Level")

    with st.sidebar:
        st.header("Controls")
        uploaded = st.file_uploader("Upload activity export", type=["csv", "json"])
        use_demo = st.checkbox("Load demo dataset", value=True)
        use_custom_today = st.checkbox("Override today", value=use_demo)
        today = st.date_input("Today", value=date(2025, 3, 6), disabled=not use_custom_today)
        run = st.button("Compute metrics", type="primary")

    if not run:
        st.info("Choose a dataset in the sidebar and click **Compute metrics**.")
        return

    try:
        if use_demo:
            records = json_adapter.parse(DEMO_DATASET)
            data_source = f"demo dataset ({DEMO_DATASET})"
        elif uploaded is not None:
            records = _parse_uploaded(uploaded)
            data_source = f"uploaded file ({uploaded.name})"
        else:
            st.error("Please upload a CSV/JSON file or enable 'Load demo dataset'.")
            return

        if not records:
            st.error("No activity records were found in the selected input.")
            return

        result = build_dashboard(records, settings, today=today if use_custom_today else None)
        metrics = result["metrics"]

        st.success(f"Loaded {len(records)} records from {data_source}.")
        if metrics.skipped_records:
            st.warning(f"Skipped {metrics.skipped_records} malformed record(s); they are still in the export.")

        st.subheader("A) Overview")
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Study streak", f"{metrics.streak} day{'s' if metrics.streak != 1 else ''}")
        c2.metric("Longest streak", result["longest_streak"])
        c3.metric("Knowledge XP", f"{metrics.xp:,}")
        c4.metric("Total minutes", metrics.total_minutes)

        st.subheader("B) Level")
        st.write(f"**Level {metrics.level}** · {metrics.rank_title}")
        st.progress(metrics.progress)
        st.caption(
            f"{metrics.xp - metrics.prev_level_xp:.0f} / {metrics.next_level_xp - metrics.prev_level_xp} XP"
            f" · to next rank: {result['xp_to_next_level']} XP"
        )

        st.subheader("C) Activity")
        if result["activity_chart"]:
            st.bar_chart(result["activity_chart"], x="day", y=["flashcards", "tasks"])
        st.table([result["summary"]["category_counts"]])

        st.subheader("D) Subject distribution")
        if result["subject_chart"]:
            st.table(result["subject_chart"])
        else:
            st.write("No timed activity yet.")

        st.download_button("Export CSV", result["export"], file_name="study_analytics.csv", mime="text/csv")

    except ValueError as exc:
        st.error(f"Input error: {exc}")


if __name__ == "__main__":
    main()
