"""Yes/No readout placement.

Each readout is a two-line block (outcome label over a percentage) drawn just
above its curve. Blocks must stay inside the plot and must not overlap; the
steps below run in a fixed order because clamping can undo spreading.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .dto import PlotViewport, ReadoutBlock, ReadoutLayout
from .numeric import clamp, round_percent

READOUT_EDGE_INSET: Final[float] = 0.6
READOUT_GAP_PADDING: Final[float] = 1.4
ANCHOR_LIFT: Final[float] = 0.8
LABEL_BASELINE_OFFSET: Final[float] = 0.96
READOUT_MIN_X_INSET: Final[float] = 4.0
READOUT_MAX_X_INSET: Final[float] = 2.2


@dataclass(frozen=True, slots=True)
class ReadoutMetrics:
    """Font and spacing metrics for a chart variant.

    Attributes:
        label_font_size: Font size of the YES/NO label.
        pct_font_size: Font size of the percentage.
        line_gap: Gap between label and percentage lines.
        hover_offset: Readout x offset from the hover cursor.
        rest_offset: Readout x offset from the current endpoint.
    """

    label_font_size: float
    pct_font_size: float
    line_gap: float
    hover_offset: float
    rest_offset: float

    @property
    def block_height(self) -> float:
        return self.label_font_size + self.line_gap + self.pct_font_size

    @property
    def min_gap(self) -> float:
        return self.block_height + READOUT_GAP_PADDING


HOME_METRICS: Final[ReadoutMetrics] = ReadoutMetrics(
    label_font_size=4.8,
    pct_font_size=9.6,
    line_gap=0.86,
    hover_offset=8.0,
    rest_offset=6.2,
)
DETAIL_METRICS: Final[ReadoutMetrics] = ReadoutMetrics(
    label_font_size=5.2,
    pct_font_size=10.4,
    line_gap=0.95,
    hover_offset=9.0,
    rest_offset=6.8,
)


def metrics_for(*, is_home_variant: bool) -> ReadoutMetrics:
    return HOME_METRICS if is_home_variant else DETAIL_METRICS


def clamp_readout_top(y: float, viewport: PlotViewport, metrics: ReadoutMetrics) -> float:
    """Clamp a block top so the whole block stays inside the plot."""

    return clamp(
        y,
        viewport.top + READOUT_EDGE_INSET,
        viewport.bottom - metrics.block_height - READOUT_EDGE_INSET,
    )


def spread_readouts(yes_top: float, no_top: float, metrics: ReadoutMetrics) -> tuple[float, float]:
    """Recentre both blocks around their midpoint when No sits less than `min_gap` below Yes."""

    if no_top - yes_top >= metrics.min_gap:
        return yes_top, no_top
    mid = (no_top + yes_top) / 2
    return mid - metrics.min_gap / 2, mid + metrics.min_gap / 2


def force_readout_gap(
    yes_top: float,
    no_top: float,
    viewport: PlotViewport,
    metrics: ReadoutMetrics,
) -> tuple[float, float]:
    """Push the No block below Yes when re-clamping collapsed the gap.

    When No would leave the plot, it stays at the lowest allowed top and Yes
    is lifted to restore the gap instead.
    """

    if no_top - yes_top >= metrics.min_gap:
        return yes_top, no_top
    forced_no_top = clamp_readout_top(yes_top + metrics.min_gap, viewport, metrics)
    if forced_no_top - yes_top >= metrics.min_gap:
        return yes_top, forced_no_top
    return forced_no_top - metrics.min_gap, forced_no_top


def readout_tops(
    *,
    yes_anchor_y: float,
    no_anchor_y: float,
    viewport: PlotViewport,
    metrics: ReadoutMetrics,
) -> tuple[float, float]:
    """Return `(yes_top, no_top)` for blocks anchored above the given curve points."""

    lift = metrics.label_font_size + ANCHOR_LIFT
    yes_top = clamp_readout_top(yes_anchor_y - lift, viewport, metrics)
    no_top = clamp_readout_top(no_anchor_y - lift, viewport, metrics)
    yes_top, no_top = spread_readouts(yes_top, no_top, metrics)
    yes_top = clamp_readout_top(yes_top, viewport, metrics)
    no_top = clamp_readout_top(no_top, viewport, metrics)
    return force_readout_gap(yes_top, no_top, viewport, metrics)


def readout_block(top_y: float, metrics: ReadoutMetrics) -> ReadoutBlock:
    """Derive text baselines from a block top."""

    label_y = top_y + metrics.label_font_size + LABEL_BASELINE_OFFSET
    return ReadoutBlock(top_y=top_y, label_y=label_y, pct_y=label_y + metrics.line_gap + metrics.pct_font_size)


def readout_x(anchor_x: float, viewport: PlotViewport, *, hover_active: bool, metrics: ReadoutMetrics) -> float:
    """Return the shared x-position of both readouts."""

    offset = metrics.hover_offset if hover_active else metrics.rest_offset
    return clamp(
        anchor_x + offset,
        viewport.left + READOUT_MIN_X_INSET,
        viewport.width - viewport.axis_tick_gutter - READOUT_MAX_X_INSET,
    )


def place_readouts(
    *,
    probability: float,
    yes_anchor: tuple[float, float],
    no_anchor_y: float,
    viewport: PlotViewport,
    hover_active: bool,
    is_home_variant: bool,
) -> ReadoutLayout:
    """Place the Yes/No readouts next to the hovered or current reading.

    Args:
        probability: Yes probability displayed in the readouts.
        yes_anchor: `(x, y)` of the Yes point the readouts follow.
        no_anchor_y: y-position of the matching No point.
        viewport: Plot viewport.
        hover_active: Whether the anchor comes from the hover cursor.
        is_home_variant: Use compact home-page metrics.

    Returns:
        ReadoutLayout with both blocks and the rounded percentages.
    """

    metrics = metrics_for(is_home_variant=is_home_variant)
    anchor_x, yes_anchor_y = yes_anchor
    yes_top, no_top = readout_tops(
        yes_anchor_y=yes_anchor_y,
        no_anchor_y=no_anchor_y,
        viewport=viewport,
        metrics=metrics,
    )
    yes_pct = round_percent(probability)
    return ReadoutLayout(
        x=readout_x(anchor_x, viewport, hover_active=hover_active, metrics=metrics),
        yes=readout_block(yes_top, metrics),
        no=readout_block(no_top, metrics),
        yes_pct=yes_pct,
        no_pct=100 - yes_pct,
        label_font_size=metrics.label_font_size,
        pct_font_size=metrics.pct_font_size,
    )
