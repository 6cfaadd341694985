"""JSON encoding of chart geometry for the chart API."""

from __future__ import annotations

from typing import Any

from chartengine.dto import Decoration, MarketChart, Point, ReadoutBlock, TooltipBox

COORDINATE_PRECISION = 3


def _num(value: float) -> float:
    return round(value, COORDINATE_PRECISION)


def _point(point: Point) -> list[float]:
    return [_num(point.x), _num(point.y)]


def _decoration(decoration: Decoration) -> dict[str, float]:
    return {"x": _num(decoration.x), "y": _num(decoration.y), "angle": _num(decoration.angle)}


def _readout_block(block: ReadoutBlock) -> dict[str, float]:
    return {"top_y": _num(block.top_y), "label_y": _num(block.label_y), "pct_y": _num(block.pct_y)}


def _tooltip(tooltip: TooltipBox | None) -> dict[str, Any] | None:
    if tooltip is None:
        return None
    return {
        "x": _num(tooltip.x),
        "y": _num(tooltip.y),
        "width": _num(tooltip.width),
        "height": _num(tooltip.height),
        "text_x": _num(tooltip.text_x),
        "text_y": _num(tooltip.text_y),
        "text": tooltip.text,
        "font_size": tooltip.font_size,
    }


def encode_market_chart(chart: MarketChart) -> dict[str, Any]:
    """Encode a MarketChart into a JSON-serializable dictionary.

    Coordinates are rounded to three decimals, matching the SVG output.

    Args:
        chart: Chart produced by `chartengine.build_chart`.

    Returns:
        Dict payload safe for `JsonResponse`.
    """

    geometry = chart.geometry
    viewport = geometry.viewport
    hover = geometry.hover
    readouts = geometry.readouts
    return {
        "market": {
            "id": chart.market.id,
            "current_probability": chart.market.current_probability,
            "is_live": chart.market.is_live,
            "volume_label": chart.volume_label,
        },
        "series": {
            "scale": chart.series.scale.value,
            "scale_hours": chart.series.scale_hours,
            "point_count": chart.series.point_count,
            "seed": chart.series.seed,
            "values": list(chart.series.display_series),
            "window_start": chart.series.window_start.isoformat(),
            "window_end": chart.series.window_end.isoformat(),
        },
        "viewport": {
            "width": viewport.width,
            "height": viewport.height,
            "left": viewport.left,
            "right": viewport.right,
            "top": viewport.top,
            "bottom": viewport.bottom,
        },
        "variant": "home" if geometry.is_home_variant else "detail",
        "yes_points": [_point(p) for p in geometry.yes_points],
        "no_points": [_point(p) for p in geometry.no_points],
        "yes_end": _point(geometry.yes_end),
        "no_end": _point(geometry.no_end),
        "hover": {
            "active": geometry.hover_active,
            "x": _num(hover.x),
            "t": _num(hover.t),
            "probability": hover.probability,
            "yes_y": _num(hover.yes_y),
            "no_y": _num(hover.no_y),
        },
        "readouts": {
            "x": _num(readouts.x),
            "yes": _readout_block(readouts.yes),
            "no": _readout_block(readouts.no),
            "yes_pct": readouts.yes_pct,
            "no_pct": readouts.no_pct,
        },
        "legend": {"yes_pct": chart.legend_yes_pct, "no_pct": chart.legend_no_pct},
        "decorations": {
            "yes": [_decoration(d) for d in geometry.yes_decorations],
            "no": [_decoration(d) for d in geometry.no_decorations],
        },
        "tooltip": _tooltip(geometry.tooltip),
        "axis_ticks": [
            {"fraction": _num(tick.fraction), "offset_hours": _num(tick.offset_hours), "label": tick.label}
            for tick in chart.axis_ticks
        ],
        "guide_line_ys": [_num(y) for y in geometry.guide_line_ys],
        "endpoint_opacity": geometry.endpoint_opacity,
        "show_current_pulse": geometry.show_current_pulse,
    }
