"""Build charts for Market rows from validated view state."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from chartengine.dto import HoverState, MarketChart, MarketSnapshot
from chartengine.engine import build_chart
from chartengine.timescales import TimeScale
from core.forms import ChartViewStateForm
from markets.models import Market

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChartRequest:
    """Engine inputs resolved from a validated ChartViewStateForm.

    Attributes:
        scale: Selected time scale.
        hover: Hover state for the request.
        aspect: Chart aspect ratio.
        is_home_variant: Whether compact home-page metrics are used.
    """

    scale: TimeScale
    hover: HoverState
    aspect: float
    is_home_variant: bool


def chart_request_from_form(form: ChartViewStateForm, *, market_id: str) -> ChartRequest:
    """Resolve engine inputs from a validated form.

    Raises:
        ValueError: If the form is not valid.
    """

    if not form.is_valid():
        raise ValueError("ChartViewStateForm must be valid before building a ChartRequest.")
    return ChartRequest(
        scale=form.cleaned_data["scale"],
        hover=form.hover_state(market_id=market_id),
        aspect=form.aspect_ratio(),
        is_home_variant=form.is_home_variant(),
    )


def render_market_charts(
    *,
    markets: list[Market],
    request: ChartRequest,
    now: datetime | None = None,
) -> tuple[MarketChart, ...]:
    """Build charts for several markets, reusing results for repeated inputs.

    The cache lives only for this call; charts are never kept across requests.

    Args:
        markets: Markets to chart, in display order.
        request: Shared engine inputs.
        now: Window end timestamp shared by every chart.

    Returns:
        MarketChart entries in the same order as `markets`.
    """

    cache: dict[tuple[MarketSnapshot, float | None], MarketChart] = {}
    charts: list[MarketChart] = []
    for market in markets:
        snapshot = market.to_snapshot()
        key = (snapshot, request.hover.hover_x_for(snapshot.id))
        if key not in cache:
            cache[key] = build_chart(
                snapshot,
                request.scale,
                request.hover,
                aspect=request.aspect,
                is_home_variant=request.is_home_variant,
                now=now,
            )
        charts.append(cache[key])
    return tuple(charts)


def render_market_chart(*, market: Market, request: ChartRequest, now: datetime | None = None) -> MarketChart:
    """Build the chart for a single market."""

    chart = render_market_charts(markets=[market], request=request, now=now)[0]
    logger.debug(
        "Built %s chart for %s (hover=%s, points=%s).",
        request.scale.value,
        market.slug,
        chart.geometry.hover_active,
        chart.series.point_count,
    )
    return chart
