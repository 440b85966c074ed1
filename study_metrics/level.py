"""Level curve, level progress and rank titles."""

from __future__ import annotations

import logging
import math
import sys
from fractions import Fraction

from study_metrics.errors import DegenerateBoundaryError
from study_metrics.schema import LevelInfo

logger = logging.getLogger(__name__)

XP_SCALE = 50
CURVE_EXPONENT = 0.6

RANK_TITLES = (
    (50, "Grandmaster"),
    (40, "Arch-Scholar"),
    (30, "Polymath"),
    (20, "Expert"),
    (10, "Apprentice"),
)
DEFAULT_RANK_TITLE = "Novice"


def _icbrt(value: int) -> int:
    """Integer cube root by Newton's method, starting above the root."""

    if value < 2:
        return value
    root = 1 << -(-value.bit_length() // 3)
    while True:
        smaller = (2 * root + value // (root * root)) // 3
        if smaller >= root:
            return root
        root = smaller


def xp_floor(level: int) -> int:
    """XP required to reach ``level``: floor(50 * (level - 1) ** (1 / 0.6)).

    50 * k ** (5 / 3) is the cube root of 125000 * k ** 5, so the floor is an
    exact integer cube root.
    """

    if level <= 1:
        return 0
    steps = level - 1
    return _icbrt(XP_SCALE**3 * steps**5)


def _estimate_level(total_xp) -> int:
    try:
        return max(1, int((total_xp / XP_SCALE) ** CURVE_EXPONENT) + 1)
    except OverflowError:
        return 1


def level_for_xp(total_xp) -> int:
    """Invert the curve: floor((xp / 50) ** 0.6) + 1, checked against xp_floor.

    The float estimate only seeds a search; the result is the largest level
    whose xp_floor does not exceed ``total_xp``.
    """

    if total_xp <= 0:
        return 1

    guess = _estimate_level(total_xp)
    if xp_floor(guess) <= total_xp:
        low, step = guess, 1
        high = guess + step
        while xp_floor(high) <= total_xp:
            low = high
            step *= 2
            high = guess + step
    else:
        high, step = guess, 1
        low = max(1, guess - step)
        while xp_floor(low) > total_xp:
            high = low
            step *= 2
            low = max(1, guess - step)

    # xp_floor(low) <= total_xp < xp_floor(high)
    while high - low > 1:
        middle = (low + high) // 2
        if xp_floor(middle) <= total_xp:
            low = middle
        else:
            high = middle
    return low


def _level_span(prev_level_xp: int, next_level_xp: int) -> int:
    span = next_level_xp - prev_level_xp
    if span <= 0:
        raise DegenerateBoundaryError(prev_level_xp, next_level_xp)
    return span


def progress_fraction(total_xp, prev_level_xp: int, next_level_xp: int) -> float:
    """Fraction of the current level completed, clamped to [0, 1]."""

    try:
        span = _level_span(prev_level_xp, next_level_xp)
    except DegenerateBoundaryError as exc:
        logger.debug("%s; reporting zero progress", exc)
        return 0.0
    fraction = (Fraction(total_xp) - prev_level_xp) / span
    return float(min(Fraction(1), max(Fraction(0), fraction)))


def rank_title(level: int) -> str:
    for threshold, title in RANK_TITLES:
        if level >= threshold:
            return title
    return DEFAULT_RANK_TITLE


def _clamp_xp(total_xp):
    if isinstance(total_xp, float) and not math.isfinite(total_xp):
        return sys.float_info.max if total_xp > 0 else 0
    return max(0, total_xp)


def resolve_level(total_xp) -> LevelInfo:
    """Map cumulative XP to its level, boundaries, progress and rank."""

    total_xp = _clamp_xp(total_xp)
    level = level_for_xp(total_xp)
    prev_level_xp = xp_floor(level)
    next_level_xp = xp_floor(level + 1)
    return LevelInfo(
        level=level,
        prev_level_xp=prev_level_xp,
        next_level_xp=next_level_xp,
        progress=progress_fraction(total_xp, prev_level_xp, next_level_xp),
        rank_title=rank_title(level),
    )


def xp_to_next_level(total_xp) -> int:
    info = resolve_level(total_xp)
    return math.floor(info.next_level_xp - Fraction(_clamp_xp(total_xp)))
