"""Unit tests for pointer-to-plot hover conversion."""

from __future__ import annotations

import pytest

from chartengine.dto import PlotViewport
from chartengine.hover import hover_x_from_pointer

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("fraction", "expected"),
    [(0.5, 230.0), (0.0, 2.0), (1.0, 414.0), (-0.5, 2.0), (2.0, 414.0)],
)
def test_pointer_fraction_maps_into_plot(detail_viewport: PlotViewport, fraction: float, expected: float) -> None:
    assert hover_x_from_pointer(fraction, detail_viewport) == pytest.approx(expected)
