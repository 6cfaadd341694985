"""Axis ticks and Eastern-time labels for the chart.

Tick timestamps are spread evenly over the display window; labels are always
rendered in US Eastern time regardless of server time zone.
"""

from __future__ import annotations

from datetime import datetime
from typing import Final
from zoneinfo import ZoneInfo

from .dto import AxisTick, ChartSeries

EASTERN: Final[ZoneInfo] = ZoneInfo("America/New_York")

QUARTER_FRACTIONS: Final[tuple[float, ...]] = (0.0, 0.25, 0.5, 0.75, 1.0)
THIRD_FRACTIONS: Final[tuple[float, ...]] = (0.0, 1 / 3, 2 / 3, 1.0)
QUARTER_TICKS_MIN_HOURS: Final[int] = 12


def _eastern(moment: datetime) -> datetime:
    return moment.astimezone(EASTERN)


def _clock(moment: datetime) -> str:
    hour = moment.hour % 12 or 12
    return f"{hour}:{moment.minute:02d}"


def format_eastern_time(moment: datetime) -> str:
    """Format a timestamp as a lower-case Eastern clock time (e.g. `3:05 pm`)."""

    local = _eastern(moment)
    return f"{_clock(local)} {local.strftime('%p').lower()}"


def format_hover_time(moment: datetime) -> str:
    """Format a hover timestamp (e.g. `Oct 18, 3:05 PM ET`)."""

    local = _eastern(moment)
    return f"{local.strftime('%b')} {local.day}, {_clock(local)} {local.strftime('%p')} ET"


def tick_fractions(window_hours: int) -> tuple[float, ...]:
    """Return tick positions: quarters for windows of 12h or more, thirds otherwise."""

    return QUARTER_FRACTIONS if window_hours >= QUARTER_TICKS_MIN_HOURS else THIRD_FRACTIONS


def time_at(series: ChartSeries, fraction: float) -> datetime:
    """Return the timestamp at `fraction` of the display window."""

    return series.window_start + (series.window_end - series.window_start) * fraction


def axis_ticks(series: ChartSeries) -> tuple[AxisTick, ...]:
    """Build the x-axis tick labels for a generated series."""

    ticks: list[AxisTick] = []
    for fraction in tick_fractions(series.scale_hours):
        moment = time_at(series, fraction)
        ticks.append(
            AxisTick(
                fraction=fraction,
                timestamp=moment,
                offset_hours=series.scale_hours * (1 - fraction),
                label=format_eastern_time(moment),
            )
        )
    return tuple(ticks)


def format_volume_label(volume_btc: float) -> str:
    """Format traded volume for the chart footer (e.g. `0.25 BTC vol`, `1,204.5 BTC vol`)."""

    text = f"{volume_btc:,.2f}"
    if volume_btc >= 1 and text.endswith("0"):
        text = text[:-1]
    return f"{text} BTC vol"
