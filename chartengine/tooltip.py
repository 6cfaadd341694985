"""Hover-time tooltip sizing."""

from __future__ import annotations

from typing import Final

from .dto import PlotViewport, TooltipBox
from .numeric import clamp

TOOLTIP_MIN_WIDTH: Final[float] = 70.0
TOOLTIP_MAX_WIDTH: Final[float] = 178.0
TOOLTIP_CHAR_WIDTH: Final[float] = 3.4
TOOLTIP_PADDING: Final[float] = 18.0
TOOLTIP_HEIGHT: Final[float] = 15.8
TOOLTIP_EDGE_INSET: Final[float] = 1.2
TOOLTIP_CENTER_INSET: Final[float] = 18.0
TOOLTIP_TOP_OFFSET: Final[float] = 0.25
TOOLTIP_BASELINE_OFFSET: Final[float] = 2.8
HOME_FONT_SIZE: Final[float] = 7.8
DETAIL_FONT_SIZE: Final[float] = 8.4


def tooltip_width(text: str) -> float:
    """Estimate the box width for `text`, clamped to `[70, 178]`."""

    return clamp(len(text) * TOOLTIP_CHAR_WIDTH + TOOLTIP_PADDING, TOOLTIP_MIN_WIDTH, TOOLTIP_MAX_WIDTH)


def size_tooltip(text: str, hover_x: float, viewport: PlotViewport, *, is_home_variant: bool) -> TooltipBox:
    """Size and position the tooltip above the hover cursor.

    The box is centred on the cursor where possible and otherwise slides to
    stay inside the plot span.
    """

    width = tooltip_width(text)
    center_x = clamp(hover_x, viewport.left + TOOLTIP_CENTER_INSET, viewport.right - TOOLTIP_CENTER_INSET)
    x = clamp(
        center_x - width / 2,
        viewport.left + TOOLTIP_EDGE_INSET,
        viewport.right - width - TOOLTIP_EDGE_INSET,
    )
    y = viewport.top + TOOLTIP_TOP_OFFSET
    return TooltipBox(
        x=x,
        y=y,
        width=width,
        height=TOOLTIP_HEIGHT,
        text_x=x + width / 2,
        text_y=y + TOOLTIP_HEIGHT / 2 + TOOLTIP_BASELINE_OFFSET,
        text=text,
        font_size=HOME_FONT_SIZE if is_home_variant else DETAIL_FONT_SIZE,
    )
