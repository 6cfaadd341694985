"""Selectable chart time scales.

Each scale maps to a fixed (window hours, display point count) pair. The
synthetic base history always covers `TOTAL_HOURS`; a scale only selects the
trailing window that is resampled for display.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final

TOTAL_HOURS: Final[int] = 24


class TimeScale(StrEnum):
    """Chart time scale selected in the view state."""

    one_hour = "1H"
    three_hours = "3H"
    six_hours = "6H"
    twelve_hours = "12H"
    one_day = "1D"

    @property
    def window_hours(self) -> int:
        """Return the trailing window length in hours."""

        return _SCALE_TABLE[self][0]

    @property
    def point_count(self) -> int:
        """Return the number of display points sampled from the window."""

        return _SCALE_TABLE[self][1]

    @classmethod
    def parse(cls, raw: str | None, *, default: "TimeScale | None" = None) -> "TimeScale":
        """Parse a scale key such as `"3h"` or `"1D"`.

        Args:
            raw: Raw key from a query string or settings value.
            default: Value returned when `raw` is empty.

        Returns:
            The matching TimeScale.

        Raises:
            ValueError: When the key is unknown, or empty without a default.
        """

        key = (raw or "").strip().upper()
        if not key:
            if default is None:
                raise ValueError("A time scale is required.")
            return default
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(scale.value for scale in cls)
            raise ValueError(f"Unknown time scale {raw!r}; expected one of {choices}.") from None


_SCALE_TABLE: Final[dict[TimeScale, tuple[int, int]]] = {
    TimeScale.one_hour: (1, 28),
    TimeScale.three_hours: (3, 34),
    TimeScale.six_hours: (6, 40),
    TimeScale.twelve_hours: (12, 48),
    TimeScale.one_day: (24, 56),
}

SCALE_CHOICES: Final[tuple[tuple[str, str], ...]] = tuple((scale.value, scale.value) for scale in TimeScale)
