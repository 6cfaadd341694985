"""Orchestration entry points for the chart engine.

`layout_chart` turns a display series into plot geometry; `build_chart` runs
the whole pipeline for a market snapshot (series generation, layout and axis
labels). Both are pure: identical inputs produce identical outputs.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Final

from .axis import axis_ticks, format_hover_time, format_volume_label
from .decorations import endpoint_zones, hover_zones, place_trail
from .dto import ChartGeometry, HoverState, MarketChart, MarketSnapshot, PlotViewport, Point
from .geometry import build_viewport, guide_line_ys, resolve_hover, separated_points, split_curves
from .numeric import round_percent
from .readouts import place_readouts
from .series import generate_series
from .timescales import TimeScale
from .tooltip import size_tooltip

HOVER_ENDPOINT_OPACITY: Final[float] = 0.4
PULSE_HOVER_MIN_T: Final[float] = 0.985


def layout_chart(
    display_series: Sequence[float],
    viewport: PlotViewport,
    hover_x: float | None,
    *,
    is_home_variant: bool,
    window: tuple[datetime, datetime] | None = None,
) -> ChartGeometry:
    """Lay out a display series inside a viewport.

    Args:
        display_series: Yes probabilities, oldest first.
        viewport: Plot viewport.
        hover_x: Active hover x-position, or None to read the current value.
        is_home_variant: Use compact home-page metrics.
        window: Optional `(start, end)` timestamps of the series; enables the
            hover-time tooltip.

    Returns:
        ChartGeometry for the presentation layer.

    Raises:
        ValueError: If `display_series` is empty.
    """

    if not display_series:
        raise ValueError("display_series must contain at least one value.")

    points = separated_points(display_series, viewport)
    yes_points, no_points = split_curves(points)
    yes_end = yes_points[-1]
    no_end = no_points[-1]

    hover_active = hover_x is not None
    hover = resolve_hover(display_series, viewport, hover_x)
    yes_hover = Point(x=hover.x, y=hover.yes_y)
    no_hover = Point(x=hover.x, y=hover.no_y)

    zones = endpoint_zones(yes_end, no_end)
    if hover_active:
        zones += hover_zones(yes_hover, no_hover)

    yes_anchor, no_anchor = (yes_hover, no_hover) if hover_active else (yes_end, no_end)
    readouts = place_readouts(
        probability=hover.probability if hover_active else display_series[-1],
        yes_anchor=(yes_anchor.x, yes_anchor.y),
        no_anchor_y=no_anchor.y,
        viewport=viewport,
        hover_active=hover_active,
        is_home_variant=is_home_variant,
    )

    tooltip = None
    if hover_active and window is not None:
        start, end = window
        hover_time = start + (end - start) * hover.t
        tooltip = size_tooltip(format_hover_time(hover_time), hover.x, viewport, is_home_variant=is_home_variant)

    return ChartGeometry(
        viewport=viewport,
        is_home_variant=is_home_variant,
        points=points,
        yes_points=yes_points,
        no_points=no_points,
        yes_end=yes_end,
        no_end=no_end,
        hover=hover,
        hover_active=hover_active,
        readouts=readouts,
        yes_decorations=place_trail(yes_points, zones),
        no_decorations=place_trail(no_points, zones),
        exclusion_zones=zones,
        tooltip=tooltip,
        guide_line_ys=guide_line_ys(viewport),
        endpoint_opacity=HOVER_ENDPOINT_OPACITY if hover_active else 1.0,
        show_current_pulse=not hover_active or hover.t > PULSE_HOVER_MIN_T,
    )


def build_chart(
    market: MarketSnapshot,
    scale: TimeScale,
    hover: HoverState | None = None,
    *,
    aspect: float,
    is_home_variant: bool,
    now: datetime | None = None,
) -> MarketChart:
    """Generate and lay out the probability chart for one market.

    Args:
        market: Market inputs for this render.
        scale: Selected time scale.
        hover: Pointer state; ignored unless it targets `market`.
        aspect: Rendered chart aspect ratio (width / height).
        is_home_variant: Use compact home-page metrics.
        now: Window end timestamp (defaults to the current UTC time).

    Returns:
        MarketChart bundling the series, geometry and labels.
    """

    series = generate_series(market.id, market.current_probability, scale, now=now)
    hover_x = hover.hover_x_for(market.id) if hover is not None else None
    geometry = layout_chart(
        series.display_series,
        build_viewport(aspect, is_home_variant=is_home_variant),
        hover_x,
        is_home_variant=is_home_variant,
        window=(series.window_start, series.window_end),
    )
    if geometry.hover_active:
        legend_yes_pct = geometry.readouts.yes_pct
    else:
        legend_yes_pct = round_percent(market.current_probability)
    return MarketChart(
        market=market,
        series=series,
        geometry=geometry,
        axis_ticks=axis_ticks(series),
        legend_yes_pct=legend_yes_pct,
        legend_no_pct=100 - legend_yes_pct,
        volume_label=format_volume_label(market.volume_btc),
    )
