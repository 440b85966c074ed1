"""Error types raised by the study metrics core."""

from __future__ import annotations


class StudyMetricsError(ValueError):
    """Base class for recoverable study-metrics errors."""


class MalformedRecordError(StudyMetricsError):
    """A single activity record cannot be used and should be skipped."""

    def __init__(self, index: int, reason: str):
        super().__init__(f"Record {index}: {reason}")
        self.index = index
        self.reason = reason


class DegenerateBoundaryError(StudyMetricsError):
    """Level boundaries do not span a positive XP range."""

    def __init__(self, prev_level_xp: int, next_level_xp: int):
        super().__init__(f"Degenerate level boundaries: {prev_level_xp} -> {next_level_xp}")
        self.prev_level_xp = prev_level_xp
        self.next_level_xp = next_level_xp
