"""Plot geometry: viewport sizing, probability mapping and curve separation.

Yes is drawn at `y(p)` and No at `y(1 - p)`, so the curves mirror each other
around the 50% line and meet there. Wherever they come closer than
`MIN_SEPARATION` they are pushed apart symmetrically and then shifted back
inside the plot as a pair, which keeps the gap intact.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from .dto import HoverPoint, PlotViewport, Point, SeparatedPoint
from .numeric import clamp, interpolate_at

CHART_HEIGHT: Final[float] = 100.0
MIN_ASPECT: Final[float] = 1.2
MAX_ASPECT: Final[float] = 8.0
PLOT_LEFT: Final[float] = 2.0
PLOT_INSET_Y: Final[float] = 2.5

MIN_SEPARATION: Final[float] = 6.2
CURVE_EDGE_INSET: Final[float] = 0.9

GUIDE_LEVELS: Final[tuple[int, ...]] = (0, 25, 50, 75, 100)

# (axis tick gutter, readout rail width)
_RIGHT_MARGINS: Final[dict[bool, tuple[float, float]]] = {
    True: (22.0, 18.0),
    False: (24.0, 22.0),
}


def build_viewport(aspect: float, *, is_home_variant: bool) -> PlotViewport:
    """Return the plot viewport for a chart aspect ratio.

    Args:
        aspect: Rendered width / height of the chart; clamped to `[1.2, 8]`.
        is_home_variant: Use the compact home-page right margins.

    Returns:
        PlotViewport with height 100 and a rounded width.
    """

    width = float(round(CHART_HEIGHT * clamp(aspect, MIN_ASPECT, MAX_ASPECT)))
    gutter, rail = _RIGHT_MARGINS[is_home_variant]
    return PlotViewport(
        width=width,
        height=CHART_HEIGHT,
        left=PLOT_LEFT,
        right=width - gutter - rail,
        top=PLOT_INSET_Y,
        bottom=CHART_HEIGHT - PLOT_INSET_Y,
        axis_tick_gutter=gutter,
    )


def y_from_probability(probability: float, viewport: PlotViewport) -> float:
    """Map a probability to a plot y-position (1 at the top, 0 at the bottom)."""

    return viewport.bottom - probability * viewport.y_span


def x_for_index(index: int, count: int, viewport: PlotViewport) -> float:
    """Return the x-position of display index `index` out of `count`."""

    t = 1.0 if count == 1 else index / (count - 1)
    return viewport.left + t * viewport.x_span


def enforce_min_gap(yes_y: float, no_y: float, *, min_gap: float = MIN_SEPARATION) -> tuple[float, float]:
    """Spread the pair symmetrically around its midpoint to exactly `min_gap` when closer.

    The Yes curve always ends up above (smaller y) the No curve after spreading.
    """

    if abs(no_y - yes_y) >= min_gap:
        return yes_y, no_y
    mid = (yes_y + no_y) / 2
    return mid - min_gap / 2, mid + min_gap / 2


def clamp_top(yes_y: float, no_y: float, viewport: PlotViewport) -> tuple[float, float]:
    """Shift both curves down when Yes sits above the top inset."""

    min_y = viewport.top + CURVE_EDGE_INSET
    if yes_y >= min_y:
        return yes_y, no_y
    shift = min_y - yes_y
    return yes_y + shift, no_y + shift


def clamp_bottom(yes_y: float, no_y: float, viewport: PlotViewport) -> tuple[float, float]:
    """Shift both curves up when No sits below the bottom inset."""

    max_y = viewport.bottom - CURVE_EDGE_INSET
    if no_y <= max_y:
        return yes_y, no_y
    shift = no_y - max_y
    return yes_y - shift, no_y - shift


def separate(yes_y_raw: float, no_y_raw: float, viewport: PlotViewport) -> tuple[float, float]:
    """Resolve the minimum gap first, then pull the pair back inside the plot.

    Returns:
        `(yes_y, no_y)` after separation and clamping.
    """

    yes_y, no_y = enforce_min_gap(yes_y_raw, no_y_raw)
    yes_y, no_y = clamp_top(yes_y, no_y, viewport)
    return clamp_bottom(yes_y, no_y, viewport)


def separate_probability(probability: float, viewport: PlotViewport) -> tuple[float, float]:
    """Map a Yes probability to separated `(yes_y, no_y)` positions."""

    return separate(
        y_from_probability(probability, viewport),
        y_from_probability(1 - probability, viewport),
        viewport,
    )


def separated_points(display_series: Sequence[float], viewport: PlotViewport) -> tuple[SeparatedPoint, ...]:
    """Return separated Yes/No positions for every display index."""

    count = len(display_series)
    points: list[SeparatedPoint] = []
    for idx, probability in enumerate(display_series):
        yes_y, no_y = separate_probability(probability, viewport)
        points.append(SeparatedPoint(x=x_for_index(idx, count, viewport), yes_y=yes_y, no_y=no_y))
    return tuple(points)


def split_curves(points: Sequence[SeparatedPoint]) -> tuple[tuple[Point, ...], tuple[Point, ...]]:
    """Split separated points into Yes and No polylines."""

    yes_points = tuple(Point(x=p.x, y=p.yes_y) for p in points)
    no_points = tuple(Point(x=p.x, y=p.no_y) for p in points)
    return yes_points, no_points


def hover_fraction(hover_x: float, viewport: PlotViewport) -> float:
    """Return the fraction of the plot span at `hover_x` (1 for a degenerate span)."""

    if viewport.x_span <= 0:
        return 1.0
    return clamp((hover_x - viewport.left) / viewport.x_span, 0.0, 1.0)


def resolve_hover(
    display_series: Sequence[float],
    viewport: PlotViewport,
    hover_x: float | None,
) -> HoverPoint:
    """Interpolate the series under the hover cursor.

    Args:
        display_series: Display probabilities (non-empty).
        viewport: Plot viewport.
        hover_x: Pointer x-position, or None to read the current (rightmost) value.

    Returns:
        HoverPoint carrying the interpolated probability and separated positions.
    """

    x = viewport.right if hover_x is None else clamp(hover_x, viewport.left, viewport.right)
    t = hover_fraction(x, viewport)
    probability = interpolate_at(tuple(display_series), t * (len(display_series) - 1))
    yes_y, no_y = separate_probability(probability, viewport)
    return HoverPoint(x=x, t=t, probability=probability, yes_y=yes_y, no_y=no_y)


def guide_line_ys(viewport: PlotViewport) -> tuple[float, ...]:
    """Return y-positions of the horizontal percentage guide lines."""

    return tuple(y_from_probability(level / 100, viewport) for level in GUIDE_LEVELS)
