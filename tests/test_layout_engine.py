"""Unit tests for the layout engine entry points."""

from __future__ import annotations

from datetime import datetime

import pytest

from chartengine import build_chart, layout_chart
from chartengine.dto import HoverState, MarketSnapshot, PlotViewport
from chartengine.geometry import MIN_SEPARATION
from chartengine.timescales import TimeScale

pytestmark = pytest.mark.unit

SNAPSHOT = MarketSnapshot(id="mkt-3", is_live=True, volume_btc=1.5)


def _chart(hover: HoverState | None, now: datetime, **kwargs):
    return build_chart(SNAPSHOT, TimeScale.one_hour, hover, aspect=4.6, is_home_variant=False, now=now, **kwargs)


def test_empty_series_is_rejected(detail_viewport: PlotViewport) -> None:
    with pytest.raises(ValueError):
        layout_chart((), detail_viewport, None, is_home_variant=False)


def test_resting_chart_reads_current_value(fixed_now: datetime) -> None:
    """Without a price the market charts at 50% and the readouts sit at the endpoint."""

    chart = _chart(None, fixed_now)
    geometry = chart.geometry

    assert chart.series.point_count == 28
    assert chart.series.display_series[-1] == 0.5
    assert (chart.legend_yes_pct, chart.legend_no_pct) == (50, 50)
    assert (geometry.readouts.yes_pct, geometry.readouts.no_pct) == (50, 50)
    assert not geometry.hover_active
    assert geometry.tooltip is None
    assert geometry.endpoint_opacity == 1.0
    assert geometry.show_current_pulse
    assert len(geometry.exclusion_zones) == 2
    assert geometry.yes_end.x == geometry.viewport.right
    assert geometry.no_end.y - geometry.yes_end.y == pytest.approx(MIN_SEPARATION)
    assert chart.volume_label == "1.5 BTC vol"
    assert len(chart.axis_ticks) == 4


def test_hover_for_other_market_is_ignored(fixed_now: datetime) -> None:
    chart = _chart(HoverState(active_market_id="other", hover_x=100.0), fixed_now)
    assert not chart.geometry.hover_active
    assert chart.geometry.tooltip is None


def test_active_hover_moves_readouts_and_shows_tooltip(fixed_now: datetime) -> None:
    chart = _chart(HoverState(active_market_id="mkt-3", hover_x=100.0), fixed_now)
    geometry = chart.geometry

    assert geometry.hover_active
    assert geometry.hover.x == 100.0
    assert len(geometry.exclusion_zones) == 4
    assert geometry.endpoint_opacity == 0.4
    assert geometry.readouts.x == pytest.approx(109.0)
    assert geometry.tooltip is not None
    assert geometry.tooltip.text.endswith("PM ET")
    assert chart.legend_yes_pct == geometry.readouts.yes_pct
    assert chart.legend_yes_pct + chart.legend_no_pct == 100


def test_pulse_hidden_while_hovering_history(fixed_now: datetime, detail_viewport: PlotViewport) -> None:
    left = _chart(HoverState(active_market_id="mkt-3", hover_x=detail_viewport.left), fixed_now)
    right = _chart(HoverState(active_market_id="mkt-3", hover_x=detail_viewport.right), fixed_now)

    assert not left.geometry.show_current_pulse
    assert left.geometry.tooltip.text == "Oct 18, 2:05 PM ET"
    assert right.geometry.show_current_pulse
    assert right.geometry.tooltip.text == "Oct 18, 3:05 PM ET"


@pytest.mark.parametrize("hover_x", (None, 2.0, 120.0, 300.0, 414.0))
def test_decorations_avoid_exclusion_zones(fixed_now: datetime, hover_x: float | None) -> None:
    hover = HoverState(active_market_id="mkt-3", hover_x=hover_x)
    geometry = build_chart(
        MarketSnapshot(id="mkt-3", current_probability=0.71),
        TimeScale.one_day,
        hover,
        aspect=4.6,
        is_home_variant=False,
        now=fixed_now,
    ).geometry

    assert geometry.yes_decorations
    assert geometry.no_decorations
    for decoration in geometry.yes_decorations + geometry.no_decorations:
        assert not any(zone.contains(decoration.x, decoration.y) for zone in geometry.exclusion_zones)


def test_chart_is_deterministic(fixed_now: datetime) -> None:
    hover = HoverState(active_market_id="mkt-3", hover_x=250.0)
    assert _chart(hover, fixed_now) == _chart(hover, fixed_now)


def test_home_variant_uses_compact_layout(fixed_now: datetime) -> None:
    chart = build_chart(SNAPSHOT, TimeScale.one_day, aspect=3.2, is_home_variant=True, now=fixed_now)
    geometry = chart.geometry
    assert geometry.viewport.width == 320
    assert geometry.readouts.label_font_size == 4.8
    assert len(chart.axis_ticks) == 5
