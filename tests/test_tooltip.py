"""Unit tests for tooltip sizing and placement."""

from __future__ import annotations

import pytest

from chartengine.dto import PlotViewport
from chartengine.tooltip import size_tooltip, tooltip_width

pytestmark = pytest.mark.unit

HOVER_TEXT = "Oct 18, 3:05 PM ET"


def test_width_from_text_length() -> None:
    assert tooltip_width(HOVER_TEXT) == pytest.approx(79.2)
    assert tooltip_width("") == 70
    assert tooltip_width("x" * 60) == 178


def test_tooltip_centred_on_cursor(detail_viewport: PlotViewport) -> None:
    box = size_tooltip(HOVER_TEXT, 200.0, detail_viewport, is_home_variant=False)
    assert box.x == pytest.approx(160.4)
    assert box.text_x == pytest.approx(200.0)
    assert box.y == pytest.approx(2.75)
    assert box.height == 15.8
    assert box.text_y == pytest.approx(13.45)
    assert box.font_size == 8.4


@pytest.mark.parametrize(("hover_x", "expected_x"), [(2.0, 3.2), (414.0, 333.6)])
def test_tooltip_stays_inside_plot(detail_viewport: PlotViewport, hover_x: float, expected_x: float) -> None:
    box = size_tooltip(HOVER_TEXT, hover_x, detail_viewport, is_home_variant=False)
    assert box.x == pytest.approx(expected_x)
    assert detail_viewport.left <= box.x
    assert box.x + box.width <= detail_viewport.right


def test_home_font_size(detail_viewport: PlotViewport) -> None:
    assert size_tooltip(HOVER_TEXT, 200.0, detail_viewport, is_home_variant=True).font_size == 7.8
