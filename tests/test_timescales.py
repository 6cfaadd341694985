"""Unit tests for chart time scales."""

from __future__ import annotations

import pytest

from chartengine.timescales import TOTAL_HOURS, TimeScale

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("scale", "hours", "points"),
    [
        (TimeScale.one_hour, 1, 28),
        (TimeScale.three_hours, 3, 34),
        (TimeScale.six_hours, 6, 40),
        (TimeScale.twelve_hours, 12, 48),
        (TimeScale.one_day, 24, 56),
    ],
)
def test_scale_table(scale: TimeScale, hours: int, points: int) -> None:
    """Each scale maps to its fixed window length and point count."""

    assert scale.window_hours == hours
    assert scale.point_count == points
    assert scale.window_hours <= TOTAL_HOURS


def test_parse_is_case_insensitive() -> None:
    """Lower-case keys and surrounding whitespace are accepted."""

    assert TimeScale.parse(" 12h ") is TimeScale.twelve_hours
    assert TimeScale.parse("1d") is TimeScale.one_day


def test_parse_uses_default_for_empty_input() -> None:
    """Empty input falls back to the supplied default."""

    assert TimeScale.parse("", default=TimeScale.six_hours) is TimeScale.six_hours
    assert TimeScale.parse(None, default=TimeScale.one_hour) is TimeScale.one_hour


def test_parse_rejects_unknown_keys() -> None:
    """Unknown keys raise a ValueError naming the valid choices."""

    with pytest.raises(ValueError, match="1H, 3H, 6H, 12H, 1D"):
        TimeScale.parse("5H")


def test_parse_requires_value_without_default() -> None:
    """Empty input without a default is rejected."""

    with pytest.raises(ValueError, match="required"):
        TimeScale.parse("")
