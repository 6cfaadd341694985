"""Unit tests for Yes/No readout placement."""

from __future__ import annotations

import pytest

from chartengine.dto import PlotViewport
from chartengine.readouts import (
    DETAIL_METRICS,
    HOME_METRICS,
    place_readouts,
    readout_block,
    readout_tops,
    readout_x,
)

pytestmark = pytest.mark.unit


def test_detail_metrics() -> None:
    assert DETAIL_METRICS.block_height == pytest.approx(16.55)
    assert DETAIL_METRICS.min_gap == pytest.approx(17.95)
    assert HOME_METRICS.block_height == pytest.approx(15.26)


def test_close_anchors_are_spread(detail_viewport: PlotViewport) -> None:
    yes_top, no_top = readout_tops(yes_anchor_y=50.0, no_anchor_y=51.0, viewport=detail_viewport, metrics=DETAIL_METRICS)
    assert yes_top == pytest.approx(35.525)
    assert no_top == pytest.approx(53.475)


def test_anchors_at_bottom_lift_yes_block(detail_viewport: PlotViewport) -> None:
    """When No is pinned to the lowest allowed top, Yes moves up to keep the gap."""

    yes_top, no_top = readout_tops(yes_anchor_y=96.0, no_anchor_y=96.0, viewport=detail_viewport, metrics=DETAIL_METRICS)
    assert no_top == pytest.approx(80.35)
    assert yes_top == pytest.approx(62.4)


def test_distant_anchors_keep_their_positions(detail_viewport: PlotViewport) -> None:
    yes_top, no_top = readout_tops(yes_anchor_y=20.0, no_anchor_y=80.0, viewport=detail_viewport, metrics=DETAIL_METRICS)
    assert yes_top == pytest.approx(14.0)
    assert no_top == pytest.approx(74.0)


@pytest.mark.parametrize("is_home_variant", (True, False))
def test_readouts_never_overlap_or_leave_plot(detail_viewport: PlotViewport, is_home_variant: bool) -> None:
    metrics = HOME_METRICS if is_home_variant else DETAIL_METRICS
    anchors = [detail_viewport.top + step * 0.5 for step in range(int(detail_viewport.y_span * 2) + 1)]
    for yes_anchor in anchors[::3]:
        for no_anchor in anchors[::3]:
            yes_top, no_top = readout_tops(
                yes_anchor_y=yes_anchor, no_anchor_y=no_anchor, viewport=detail_viewport, metrics=metrics
            )
            assert no_top - yes_top >= metrics.min_gap - 1e-9
            assert yes_top >= detail_viewport.top + 0.6 - 1e-9
            assert no_top + metrics.block_height <= detail_viewport.bottom - 0.6 + 1e-9


def test_readout_block_baselines() -> None:
    block = readout_block(10.0, DETAIL_METRICS)
    assert block.label_y == pytest.approx(16.16)
    assert block.pct_y == pytest.approx(27.51)


def test_readout_x_offsets_and_clamps(detail_viewport: PlotViewport) -> None:
    assert readout_x(100.0, detail_viewport, hover_active=True, metrics=DETAIL_METRICS) == 109.0
    assert readout_x(100.0, detail_viewport, hover_active=False, metrics=DETAIL_METRICS) == 106.8
    assert readout_x(0.0, detail_viewport, hover_active=False, metrics=DETAIL_METRICS) == 6.8
    assert readout_x(-10.0, detail_viewport, hover_active=False, metrics=DETAIL_METRICS) == 6.0
    assert readout_x(460.0, detail_viewport, hover_active=True, metrics=DETAIL_METRICS) == pytest.approx(433.8)


@pytest.mark.parametrize(("probability", "yes_pct", "no_pct"), [(0.125, 13, 87), (0.5, 50, 50), (0.994, 99, 1)])
def test_readout_percentages_sum_to_100(
    detail_viewport: PlotViewport, probability: float, yes_pct: int, no_pct: int
) -> None:
    layout = place_readouts(
        probability=probability,
        yes_anchor=(200.0, 40.0),
        no_anchor_y=60.0,
        viewport=detail_viewport,
        hover_active=False,
        is_home_variant=False,
    )
    assert (layout.yes_pct, layout.no_pct) == (yes_pct, no_pct)
    assert layout.label_font_size == 5.2
    assert layout.pct_font_size == 10.4
