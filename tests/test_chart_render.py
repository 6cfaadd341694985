"""Tests for SVG rendering and JSON encoding of chart geometry."""

from __future__ import annotations

import json
from datetime import datetime

import pytest

from chartengine import build_chart
from chartengine.dto import HoverState, MarketSnapshot
from chartengine.timescales import TimeScale
from core.charting.payload import encode_market_chart
from core.charting.render import render_chart_svg

pytestmark = pytest.mark.integration

SNAPSHOT = MarketSnapshot(id="mkt-3", current_probability=0.62, is_live=True, volume_btc=12.0)


def _chart(now: datetime, hover_x: float | None = None):
    hover = HoverState(active_market_id="mkt-3", hover_x=hover_x)
    return build_chart(SNAPSHOT, TimeScale.six_hours, hover, aspect=4.6, is_home_variant=False, now=now)


def test_svg_contains_curves_and_readouts(fixed_now: datetime) -> None:
    svg = str(render_chart_svg(_chart(fixed_now)))

    assert svg.startswith("<svg")
    assert 'viewBox="0 0 460 100"' in svg
    assert 'data-market-id="mkt-3"' in svg
    assert svg.count("<polyline") == 2
    assert ">YES<" in svg
    assert ">62%<" in svg
    assert ">38%<" in svg
    assert "PM ET" not in svg


def test_svg_includes_tooltip_when_hovering(fixed_now: datetime) -> None:
    chart = _chart(fixed_now, hover_x=200.0)
    svg = str(render_chart_svg(chart))

    assert chart.geometry.tooltip.text == "Oct 18, 11:58 AM ET"
    assert ">Oct 18, 11:58 AM ET<" in svg


def test_payload_is_json_serializable(fixed_now: datetime) -> None:
    payload = encode_market_chart(_chart(fixed_now, hover_x=200.0))
    decoded = json.loads(json.dumps(payload))

    assert decoded["market"]["id"] == "mkt-3"
    assert decoded["market"]["volume_label"] == "12.0 BTC vol"
    assert decoded["series"]["scale"] == "6H"
    assert decoded["series"]["point_count"] == len(decoded["yes_points"]) == len(decoded["no_points"])
    assert decoded["series"]["values"][-1] == 0.62
    assert decoded["variant"] == "detail"
    assert decoded["hover"]["active"] is True
    assert decoded["tooltip"]["text"].endswith("ET")
    assert decoded["legend"]["yes_pct"] + decoded["legend"]["no_pct"] == 100
    assert decoded["guide_line_ys"] == [97.5, 73.75, 50.0, 26.25, 2.5]
    assert [tick["offset_hours"] for tick in decoded["axis_ticks"]] == [6.0, 4.0, 2.0, 0.0]


def test_payload_without_hover(fixed_now: datetime) -> None:
    payload = encode_market_chart(_chart(fixed_now))
    assert payload["tooltip"] is None
    assert payload["hover"]["active"] is False
    assert payload["endpoint_opacity"] == 1.0
    assert payload["show_current_pulse"] is True
