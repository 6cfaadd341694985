"""Pure chart computation package for yesnoCharts.

This package fabricates the synthetic probability history for a market and
lays it out as plot-space geometry. It must not import Django or perform any
database I/O; every entry point is a deterministic function of its inputs.
"""

from .engine import build_chart, layout_chart
from .series import generate_series

__all__ = ["build_chart", "generate_series", "layout_chart"]
