"""Builders for the activity rows written when a study action completes."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Optional

from study_metrics.planner import task_minutes
from study_metrics.schema import TASK_CATEGORY

FLASHCARD_CATEGORY = "flashcard"

FOCUS_SUBJECT = "Deep Work Session"
FOCUS_MINUTES = 25
TASK_BONUS = 10
QUEST_SUBJECT = "Quest Completed"
MINUTES_PER_CARD = 0.5


def _stamp(now: Optional[datetime]) -> str:
    now = now or datetime.now(timezone.utc)
    return now.isoformat()


def focus_session_record(now: Optional[datetime] = None) -> dict:
    """Row for a finished focus-timer session."""

    return {
        "subject": FOCUS_SUBJECT,
        "minutes": FOCUS_MINUTES,
        "accuracy": TASK_BONUS,
        "category": TASK_CATEGORY,
        "date": _stamp(now),
    }


def planner_task_record(task: dict, now: Optional[datetime] = None) -> dict:
    """Row for a study-plan task that was just ticked off."""

    return {
        "subject": task.get("subject"),
        "minutes": task_minutes(task.get("duration")),
        "accuracy": TASK_BONUS,
        "category": TASK_CATEGORY,
        "date": _stamp(now),
    }


def flashcard_session_record(deck_title: str, cards_reviewed: int, now: Optional[datetime] = None) -> Optional[dict]:
    """Row for a finished flashcard session, or None if nothing was reviewed."""

    if cards_reviewed <= 0:
        return None
    return {
        "subject": deck_title,
        "minutes": math.ceil(cards_reviewed * MINUTES_PER_CARD),
        "accuracy": cards_reviewed,
        "category": FLASHCARD_CATEGORY,
        "date": _stamp(now),
    }


def quest_record(bonus: int, now: Optional[datetime] = None) -> dict:
    return {
        "subject": QUEST_SUBJECT,
        "minutes": 0,
        "accuracy": bonus,
        "category": TASK_CATEGORY,
        "date": _stamp(now),
    }
