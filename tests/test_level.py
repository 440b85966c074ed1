import pytest

from study_metrics.level import (
    level_for_xp,
    progress_fraction,
    rank_title,
    resolve_level,
    xp_floor,
    xp_to_next_level,
)


def test_xp_floor_known_values():
    assert xp_floor(1) == 0
    assert xp_floor(2) == 50
    assert xp_floor(3) == 158
    assert xp_floor(4) == 312
    assert xp_floor(9) == 1600


@pytest.mark.parametrize("level", range(2, 101))
def test_level_boundaries_round_trip(level):
    assert resolve_level(xp_floor(level)).level == level
    assert resolve_level(xp_floor(level) - 1).level == level - 1


def test_zero_xp_is_level_one():
    info = resolve_level(0)
    assert info.level == 1
    assert info.prev_level_xp == 0
    assert info.next_level_xp == 50
    assert info.progress == 0.0
    assert info.rank_title == "Novice"


def test_boundaries_bracket_xp():
    for xp in list(range(0, 3000)) + [12345.5, 99999]:
        info = resolve_level(xp)
        assert info.prev_level_xp <= xp < info.next_level_xp


def test_progress_fraction_bounds():
    for xp in range(0, 5000, 7):
        info = resolve_level(xp)
        assert 0.0 <= info.progress < 1.0
    assert resolve_level(xp_floor(5)).progress == 0.0
    assert resolve_level(25).progress == 0.5


def test_degenerate_boundaries_report_zero_progress():
    assert progress_fraction(10, 50, 50) == 0.0
    assert progress_fraction(10, 50, 40) == 0.0


def test_progress_is_clamped():
    assert progress_fraction(500, 0, 50) == 1.0
    assert progress_fraction(-5, 0, 50) == 0.0


def test_level_for_xp_matches_inverse_formula_off_boundaries():
    assert level_for_xp(49) == 1
    assert level_for_xp(50) == 2
    assert level_for_xp(170) == 3


@pytest.mark.parametrize(
    "level,title",
    [
        (1, "Novice"),
        (9, "Novice"),
        (10, "Apprentice"),
        (19, "Apprentice"),
        (20, "Expert"),
        (30, "Polymath"),
        (40, "Arch-Scholar"),
        (49, "Arch-Scholar"),
        (50, "Grandmaster"),
        (120, "Grandmaster"),
    ],
)
def test_rank_title(level, title):
    assert rank_title(level) == title


def test_xp_to_next_level():
    assert xp_to_next_level(0) == 50
    assert xp_to_next_level(60) == 98


@pytest.mark.parametrize("xp", [10**20 + 7, 1e30, 1e200, 10**400, 1.7e308])
def test_huge_xp_keeps_boundaries_bracketing(xp):
    info = resolve_level(xp)
    assert info.prev_level_xp <= xp < info.next_level_xp
    assert info.rank_title == "Grandmaster"
    assert 0.0 <= info.progress <= 1.0


def test_infinite_xp_is_clamped():
    info = resolve_level(float("inf"))
    assert info.level > 1
    assert 0.0 <= info.progress <= 1.0
    assert resolve_level(float("nan")).level == 1


def test_xp_floor_for_huge_levels():
    level = 10**40
    floor = xp_floor(level)
    assert floor**3 <= 125000 * (level - 1) ** 5 < (floor + 1) ** 3
