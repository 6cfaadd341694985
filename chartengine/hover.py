"""Pointer-to-plot conversion for hover interaction."""

from __future__ import annotations

from .dto import PlotViewport
from .numeric import clamp


def hover_x_from_pointer(fraction: float, viewport: PlotViewport) -> float:
    """Convert a pointer position (fraction of the rendered chart width) to a plot x.

    Args:
        fraction: `(clientX - rect.left) / rect.width` as reported by the browser.
        viewport: Plot viewport of the rendered chart.

    Returns:
        The x-position in plot units, clamped to the plot span.
    """

    relative_x = clamp(fraction * viewport.width, 0.0, viewport.width)
    return clamp(relative_x, viewport.left, viewport.right)
