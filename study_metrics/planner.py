"""Study-plan summaries: task durations, completion and CSV export."""

from __future__ import annotations

import re

DEFAULT_TASK_MINUTES = 30
PLAN_EXPORT_HEADER = "Day,Subject,Topic,Duration,Difficulty,Status"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def task_minutes(duration) -> int:
    """Leading integer of a duration such as "45m"; 30 when absent or not positive."""

    if isinstance(duration, (int, float)) and not isinstance(duration, bool):
        minutes = int(duration)
    else:
        match = _LEADING_INT.match(str(duration or ""))
        minutes = int(match.group(1)) if match else 0
    return minutes if minutes > 0 else DEFAULT_TASK_MINUTES


def _iter_tasks(plan: dict):
    for day in plan.get("schedule") or []:
        for task in day.get("tasks") or []:
            yield day, task


def plan_progress(plan: dict) -> dict:
    """Completed vs total tasks and the rounded completion percentage."""

    total = 0
    completed = 0
    for _, task in _iter_tasks(plan):
        total += 1
        completed += 1 if task.get("completed") else 0

    return {
        "completed": completed,
        "total": total,
        "completion_rate": round(completed / total * 100) if total else 0,
    }


def export_plan_csv(plan: dict) -> str:
    lines = [PLAN_EXPORT_HEADER]
    for day, task in _iter_tasks(plan):
        lines.append(
            f'{day.get("day", "")},"{task.get("subject", "")}","{task.get("topic", "")}",'
            f'{task.get("duration", "")},{task.get("difficulty", "")},'
            f'{"Done" if task.get("completed") else "Pending"}'
        )
    return "\n".join(lines) + "\n"
