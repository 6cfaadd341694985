"""Small numeric helpers shared by the series generator and layout engine."""

from __future__ import annotations

import math
from typing import Final

PROBABILITY_FLOOR: Final[float] = 0.02
PROBABILITY_CEILING: Final[float] = 0.98


def clamp(value: float, low: float, high: float) -> float:
    """Clamp `value` into `[low, high]` (`low` wins when the bounds cross)."""

    return max(low, min(high, value))


def clamp_probability(value: float) -> float:
    """Clamp a synthetic probability into `[0.02, 0.98]`."""

    return clamp(value, PROBABILITY_FLOOR, PROBABILITY_CEILING)


def smoothstep(u: float) -> float:
    """Cubic easing `u²(3 − 2u)` for `u` in `[0, 1]`."""

    return u * u * (3 - 2 * u)


def interpolate_at(values: tuple[float, ...] | list[float], position: float) -> float:
    """Linearly interpolate `values` at a fractional index.

    The bracketing indices are clamped to the sequence bounds, so positions
    outside `[0, len - 1]` read the nearest endpoint.
    """

    last = len(values) - 1
    left = int(clamp(math.floor(position), 0, last))
    right = int(clamp(math.ceil(position), left, last))
    mix = clamp(position - left, 0.0, 1.0)
    return values[left] + (values[right] - values[left]) * mix


def round_percent(probability: float) -> int:
    """Return a whole percentage, rounding halves up (`0.505` → 51)."""

    return math.floor(probability * 100 + 0.5)
