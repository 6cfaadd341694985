"""DTO types produced by the chart engine.

DTOs are plain, immutable data containers handed to the presentation layer.
They intentionally avoid any Django/ORM dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .timescales import TimeScale


@dataclass(frozen=True, slots=True)
class MarketSnapshot:
    """Read-only market inputs for a single render.

    Attributes:
        id: Stable market identifier; also the seed source for the series.
        current_probability: Current Yes probability.
        is_live: Whether the market is currently trading live.
        volume_btc: Traded volume used by the footer label.
    """

    id: str
    current_probability: float = 0.5
    is_live: bool = False
    volume_btc: float = 0.0


@dataclass(frozen=True, slots=True)
class HoverState:
    """Pointer state owned by the surrounding application.

    Attributes:
        active_market_id: Market the pointer is currently over, if any.
        hover_x: Pointer x-position in plot units, if any.
    """

    active_market_id: str | None = None
    hover_x: float | None = None

    def hover_x_for(self, market_id: str) -> float | None:
        """Return the hover x-position when it applies to `market_id`."""

        if self.active_market_id != market_id or self.hover_x is None:
            return None
        return self.hover_x


@dataclass(frozen=True, slots=True)
class ChartSeries:
    """Synthetic history generated for one market and time scale.

    Attributes:
        scale: Time scale used to window the base series.
        seed: Seed derived from the market identifier.
        base_series: Dense 24h history at 5-minute resolution.
        display_series: Resampled trailing window shown on the chart.
        window_start: Timestamp of the first display point.
        window_end: Timestamp of the last display point.
    """

    scale: TimeScale
    seed: int
    base_series: tuple[float, ...]
    display_series: tuple[float, ...]
    window_start: datetime
    window_end: datetime

    @property
    def point_count(self) -> int:
        """Return the number of display points."""

        return len(self.display_series)

    @property
    def scale_hours(self) -> int:
        """Return the window length in hours."""

        return self.scale.window_hours


@dataclass(frozen=True, slots=True)
class PlotViewport:
    """Plot rectangle in abstract plot units.

    Attributes:
        width: Full chart width (the SVG viewBox width).
        height: Full chart height; always 100.
        left: Left edge of the plotted series.
        right: Right edge of the plotted series.
        top: Top edge of the plot (probability 1).
        bottom: Bottom edge of the plot (probability 0).
        axis_tick_gutter: Width reserved on the right for axis ticks.
    """

    width: float
    height: float
    left: float
    right: float
    top: float
    bottom: float
    axis_tick_gutter: float = 0.0

    @property
    def x_span(self) -> float:
        return self.right - self.left

    @property
    def y_span(self) -> float:
        return self.bottom - self.top


@dataclass(frozen=True, slots=True)
class Point:
    """A plot-space coordinate."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class SeparatedPoint:
    """Yes/No curve positions for one display index after separation."""

    x: float
    yes_y: float
    no_y: float


@dataclass(frozen=True, slots=True)
class HoverPoint:
    """The interpolated reading under the hover cursor.

    Attributes:
        x: Clamped hover x-position.
        t: Fraction of the plot span in `[0, 1]`.
        probability: Interpolated Yes probability.
        yes_y: Separated Yes curve y-position.
        no_y: Separated No curve y-position.
    """

    x: float
    t: float
    probability: float
    yes_y: float
    no_y: float


@dataclass(frozen=True, slots=True)
class ReadoutBlock:
    """Vertical placement of one label + percentage readout."""

    top_y: float
    label_y: float
    pct_y: float


@dataclass(frozen=True, slots=True)
class ReadoutLayout:
    """Placement of both readout blocks plus their shared x and font metrics."""

    x: float
    yes: ReadoutBlock
    no: ReadoutBlock
    yes_pct: int
    no_pct: int
    label_font_size: float
    pct_font_size: float


@dataclass(frozen=True, slots=True)
class ExclusionZone:
    """A circle inside which decorations are not drawn."""

    x: float
    y: float
    r: float

    def contains(self, x: float, y: float) -> bool:
        dx = x - self.x
        dy = y - self.y
        return dx * dx + dy * dy <= self.r * self.r


@dataclass(frozen=True, slots=True)
class Decoration:
    """A single decoration stamped along a curve.

    Attributes:
        x: Centre x after the lateral offset.
        y: Centre y after the lateral offset.
        angle: Rotation in degrees.
        base_x: Position on the polyline before the lateral offset.
        base_y: Position on the polyline before the lateral offset.
    """

    x: float
    y: float
    angle: float
    base_x: float
    base_y: float


@dataclass(frozen=True, slots=True)
class TooltipBox:
    """Hover-time tooltip rectangle and its centred text."""

    x: float
    y: float
    width: float
    height: float
    text_x: float
    text_y: float
    text: str
    font_size: float


@dataclass(frozen=True, slots=True)
class AxisTick:
    """An x-axis timestamp label.

    Attributes:
        fraction: Position along the window in `[0, 1]`.
        timestamp: Time represented by the tick.
        offset_hours: Hours before the window end.
        label: Formatted Eastern-time label.
    """

    fraction: float
    timestamp: datetime
    offset_hours: float
    label: str


@dataclass(frozen=True, slots=True)
class ChartGeometry:
    """Everything the presentation layer needs to draw one chart.

    Attributes:
        viewport: Plot rectangle.
        is_home_variant: Whether compact home-page metrics were used.
        points: Separated Yes/No positions per display index.
        yes_points: Yes polyline.
        no_points: No polyline.
        yes_end: Current (rightmost) Yes point.
        no_end: Current (rightmost) No point.
        hover: Interpolated reading at the hover (or current) position.
        hover_active: Whether a hover cursor drives the readouts.
        readouts: Yes/No readout block placement.
        yes_decorations: Decorations along the Yes curve.
        no_decorations: Decorations along the No curve.
        exclusion_zones: Zones that suppressed decorations.
        tooltip: Hover-time tooltip, when hover is active and a window is known.
        guide_line_ys: Y-positions of the 0/25/50/75/100% guide lines.
        endpoint_opacity: Opacity for the current-value markers.
        show_current_pulse: Whether the live pulse is drawn on the endpoints.
    """

    viewport: PlotViewport
    is_home_variant: bool
    points: tuple[SeparatedPoint, ...]
    yes_points: tuple[Point, ...]
    no_points: tuple[Point, ...]
    yes_end: Point
    no_end: Point
    hover: HoverPoint
    hover_active: bool
    readouts: ReadoutLayout
    yes_decorations: tuple[Decoration, ...]
    no_decorations: tuple[Decoration, ...]
    exclusion_zones: tuple[ExclusionZone, ...]
    tooltip: TooltipBox | None
    guide_line_ys: tuple[float, ...]
    endpoint_opacity: float
    show_current_pulse: bool


@dataclass(frozen=True, slots=True)
class MarketChart:
    """A fully built chart: market inputs, series, geometry and axis labels."""

    market: MarketSnapshot
    series: ChartSeries
    geometry: ChartGeometry
    axis_ticks: tuple[AxisTick, ...]
    legend_yes_pct: int
    legend_no_pct: int
    volume_label: str
