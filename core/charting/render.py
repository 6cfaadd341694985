"""SVG rendering for chart geometry.

Markup is assembled with Django's `format_html` helpers so any text that
reaches the SVG (tooltip labels, percentages) is escaped.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from django.utils.html import format_html, format_html_join
from django.utils.safestring import SafeString, mark_safe

from chartengine.dto import ChartGeometry, Decoration, MarketChart, Point

YES_STROKE: Final[str] = "#5eead4"
NO_STROKE: Final[str] = "#fb7185"
YES_TRAIL_FILL: Final[str] = "#3fbcae"
NO_TRAIL_FILL: Final[str] = "#e06b7f"
YES_LABEL_FILL: Final[str] = "#99f6e4"
YES_PCT_FILL: Final[str] = "#84f4cb"
NO_LABEL_FILL: Final[str] = "#fda4af"
NO_PCT_FILL: Final[str] = "#f98fa2"
BACKDROP_FILL: Final[str] = "#020617"

# Marker silhouette, drawn in a 260 x 267 box.
MARKER_PATH: Final[str] = (
    "M0.146484 9.04605C0.146484 1.23441 10.9146 -3.16002 16.7881 2.6984L86.5566 71.7336"
    "C100.142 68.0294 114.765 66.0128 130 66.0128C145.239 66.0128 159.865 68.0306 173.453 71.7365"
    "L243.212 2.71207C249.085 -3.14676 259.854 1.24698 259.854 9.05875V161.26"
    "C259.949 162.835 260 164.42 260 166.013C260 221.241 201.797 266.013 130 266.013"
    "C58.203 266.013 0 221.241 0 166.013C1.54644e-06 164.42 0.0506677 162.835 0.146484 161.26V9.04605Z"
)
MARKER_BOX_WIDTH: Final[float] = 260.0
MARKER_BOX_HEIGHT: Final[float] = 267.0
MARKER_WIDTH: Final[float] = 6.1
HOVER_MARKER_SCALE: Final[float] = 1.16

# Trail stamp, drawn in a 90 x 78.98 box.
TRAIL_PATHS: Final[tuple[str, ...]] = (
    "M26.62,28.27c4.09,2.84,9.4,2.58,12.27-.69,2.3-2.63,3.06-5.82,3.08-10-.35-5.03-1.89-10.34-6.28-14.44"
    "C29.51-2.63,21.1-.1,19.06,8.08c-1.74,6.91,1.71,16.11,7.56,20.18h0Z",
    "M22.98,41.99c.21-1.73.04-3.62-.43-5.3-1.46-5.21-4-9.77-9.08-12.33C7.34,21.27-.31,24.39,0,32.36"
    "c-.03,7.11,5.17,14.41,11.8,16.58,5.57,1.82,10.49-1.16,11.17-6.95h0Z",
    "M63.4,28.27c5.85-4.06,9.3-13.26,7.57-20.19C68.92-.12,60.51-2.64,54.33,3.13c-4.4,4.1-5.93,9.41-6.28,14.44"
    ".02,4.18.78,7.37,3.08,10,2.87,3.28,8.17,3.54,12.27.7h0Z",
    "M76.54,24.36c-5.08,2.56-7.62,7.12-9.08,12.33-.47,1.68-.63,3.57-.43,5.3.69,5.79,5.61,8.77,11.16,6.96"
    ",6.63-2.17,11.83-9.47,11.8-16.58.32-7.99-7.32-11.1-13.45-8.01h0Z",
    "M65.95,49.84c-2.36-2.86-4.3-6.01-6.45-9.02-.89-1.24-1.8-2.47-2.78-3.65-2.76-3.35-7.24-5.02-11.72-5.02"
    "s-8.96,1.68-11.72,5.02c-.98,1.19-1.89,2.41-2.78,3.65-2.15,3.01-4.08,6.15-6.45,9.02-1.77,2.15-4.25,3.82"
    "-6.11,5.92-4.14,4.69-4.72,9.96-1.94,15.3,2.79,5.37,8.01,7.6,14.41,7.9,4.82.23,9.23-1.95,13.98-2.16"
    ".22-.01.42-.01.62-.01s.4,0,.61.01c4.75.21,9.16,2.38,13.98,2.16,6.39-.3,11.62-2.53,14.41-7.9"
    ",2.77-5.34,2.2-10.61-1.94-15.3-1.87-2.1-4.35-3.77-6.12-5.92h0Z",
)
TRAIL_BOX_WIDTH: Final[float] = 90.0
TRAIL_BOX_HEIGHT: Final[float] = 78.98
TRAIL_STAMP_WIDTH: Final[float] = 5.2
TRAIL_STAMP_SCALE: Final[float] = 0.94
LIVE_TRAIL_OPACITY: Final[float] = 0.68
IDLE_TRAIL_OPACITY: Final[float] = 0.54

_TEXT_STYLE: Final[str] = "paint-order:stroke;stroke:#020617;stroke-width:{width};stroke-opacity:{opacity};"


def _fmt(value: float) -> str:
    """Format a coordinate with at most three decimals."""

    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _polyline_points(points: Iterable[Point]) -> str:
    return " ".join(f"{p.x:.3f},{p.y:.3f}" for p in points)


def _marker(x: float, y: float, fill: str, scale: float = 1.0) -> SafeString:
    width = MARKER_WIDTH * scale
    height = width * MARKER_BOX_HEIGHT / MARKER_BOX_WIDTH
    return format_html(
        '<g transform="translate({} {}) scale({} {})"><path d="{}" fill="{}" /></g>',
        _fmt(x - width / 2),
        _fmt(y - height / 2),
        f"{width / MARKER_BOX_WIDTH:.6f}",
        f"{height / MARKER_BOX_HEIGHT:.6f}",
        MARKER_PATH,
        fill,
    )


def _pulse(x: float, y: float, tone_class: str) -> SafeString:
    base_scale = MARKER_WIDTH * 0.82 / MARKER_BOX_WIDTH
    return format_html(
        '<g class="{}" transform="translate({} {})"><g transform="scale({})"><g class="chartLivePulseScale">'
        '<path class="chartLivePulsePath" d="{}" transform="translate({} {})" /></g></g></g>',
        tone_class,
        _fmt(x),
        _fmt(y),
        f"{base_scale:.6f}",
        MARKER_PATH,
        _fmt(-MARKER_BOX_WIDTH / 2),
        _fmt(-MARKER_BOX_HEIGHT / 2),
    )


def _trail(decorations: Iterable[Decoration], fill: str, *, opacity: float) -> SafeString:
    scale = TRAIL_STAMP_SCALE * (TRAIL_STAMP_WIDTH / TRAIL_BOX_WIDTH)
    stamp = format_html_join(
        "",
        '<path d="{}" transform="translate({} {})" fill="{}" />',
        ((d, _fmt(-TRAIL_BOX_WIDTH / 2), _fmt(-TRAIL_BOX_HEIGHT / 2), fill) for d in TRAIL_PATHS),
    )
    return format_html_join(
        "",
        '<g transform="translate({} {}) rotate({}) scale({})" opacity="{}">{}</g>',
        ((_fmt(d.x), _fmt(d.y), _fmt(d.angle), f"{scale:.6f}", opacity, stamp) for d in decorations),
    )


def _guide_lines(geometry: ChartGeometry) -> SafeString:
    return format_html_join(
        "",
        '<line x1="0" y1="{}" x2="{}" y2="{}" stroke="#64748b" stroke-opacity="0.24" stroke-width="0.28" '
        'stroke-dasharray="0.45 2.15" />',
        ((_fmt(y), _fmt(geometry.viewport.width), _fmt(y)) for y in geometry.guide_line_ys),
    )


def _hover_overlay(geometry: ChartGeometry) -> SafeString:
    viewport = geometry.viewport
    hover = geometry.hover
    return format_html(
        '<rect x="{}" y="{}" width="{}" height="{}" fill="{}" fill-opacity="0.5" />'
        '<line x1="{}" y1="{}" x2="{}" y2="{}" stroke="#e2e8f0" stroke-opacity="0.6" stroke-width="0.32" />',
        _fmt(hover.x),
        _fmt(viewport.top),
        _fmt(max(0.0, viewport.right - hover.x)),
        _fmt(viewport.y_span),
        BACKDROP_FILL,
        _fmt(hover.x),
        _fmt(viewport.top),
        _fmt(hover.x),
        _fmt(viewport.bottom),
    )


def _tooltip(geometry: ChartGeometry) -> SafeString:
    tooltip = geometry.tooltip
    if tooltip is None:
        return mark_safe("")
    stroke_width = 0.16 if geometry.is_home_variant else 0.2
    return format_html(
        '<rect x="{}" y="{}" width="{}" height="{}" rx="2.45" fill="{}" fill-opacity="0.8" stroke="#475569" '
        'stroke-opacity="0.56" stroke-width="0.24" />'
        '<text x="{}" y="{}" fill="#dbe7f6" font-size="{}" font-weight="430" text-anchor="middle" style="{}">{}</text>',
        _fmt(tooltip.x),
        _fmt(tooltip.y),
        _fmt(tooltip.width),
        _fmt(tooltip.height),
        BACKDROP_FILL,
        _fmt(tooltip.text_x),
        _fmt(tooltip.text_y),
        _fmt(tooltip.font_size),
        _TEXT_STYLE.format(width=stroke_width, opacity=0.45),
        tooltip.text,
    )


def _readouts(geometry: ChartGeometry) -> SafeString:
    readouts = geometry.readouts
    style = _TEXT_STYLE.format(width=0.24 if geometry.is_home_variant else 0.28, opacity=0.82)
    rows = (
        (readouts.no.label_y, NO_LABEL_FILL, readouts.label_font_size, "520", "NO"),
        (readouts.no.pct_y, NO_PCT_FILL, readouts.pct_font_size, "560", f"{readouts.no_pct}%"),
        (readouts.yes.label_y, YES_LABEL_FILL, readouts.label_font_size, "520", "YES"),
        (readouts.yes.pct_y, YES_PCT_FILL, readouts.pct_font_size, "560", f"{readouts.yes_pct}%"),
    )
    return format_html_join(
        "",
        '<text x="{}" y="{}" fill="{}" font-size="{}" font-weight="{}" style="{}">{}</text>',
        ((_fmt(readouts.x), _fmt(y), fill, _fmt(size), weight, style, text) for y, fill, size, weight, text in rows),
    )


def render_chart_svg(chart: MarketChart) -> SafeString:
    """Render a MarketChart as a standalone SVG element.

    Args:
        chart: Chart produced by `chartengine.build_chart`.

    Returns:
        Safe SVG markup suitable for templates and `image/svg+xml` responses.
    """

    geometry = chart.geometry
    viewport = geometry.viewport
    trail_opacity = LIVE_TRAIL_OPACITY if chart.market.is_live else IDLE_TRAIL_OPACITY

    parts: list[SafeString] = [
        _guide_lines(geometry),
        format_html(
            '<polyline fill="none" stroke="{}" stroke-opacity="0.64" stroke-width="1.08" points="{}" />',
            YES_STROKE,
            _polyline_points(geometry.yes_points),
        ),
        format_html(
            '<polyline fill="none" stroke="{}" stroke-opacity="0.6" stroke-width="1.08" points="{}" />',
            NO_STROKE,
            _polyline_points(geometry.no_points),
        ),
        _trail(geometry.yes_decorations, YES_TRAIL_FILL, opacity=trail_opacity),
        _trail(geometry.no_decorations, NO_TRAIL_FILL, opacity=trail_opacity),
    ]
    if geometry.hover_active:
        parts.append(_hover_overlay(geometry))
    if geometry.show_current_pulse:
        parts.append(_pulse(geometry.yes_end.x, geometry.yes_end.y, "chartLivePulseYes"))
        parts.append(_pulse(geometry.no_end.x, geometry.no_end.y, "chartLivePulseNo"))
    parts.append(
        format_html(
            '<g opacity="{}">{}{}</g>',
            geometry.endpoint_opacity,
            _marker(geometry.yes_end.x, geometry.yes_end.y, YES_STROKE),
            _marker(geometry.no_end.x, geometry.no_end.y, NO_STROKE),
        )
    )
    if geometry.hover_active:
        parts.append(_marker(geometry.hover.x, geometry.hover.yes_y, YES_STROKE, HOVER_MARKER_SCALE))
        parts.append(_marker(geometry.hover.x, geometry.hover.no_y, NO_STROKE, HOVER_MARKER_SCALE))
        parts.append(_tooltip(geometry))
    parts.append(_readouts(geometry))

    return format_html(
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {} {}" preserveAspectRatio="none" '
        'data-market-id="{}" data-point-count="{}" data-plot-left="{}" data-plot-right="{}">{}</svg>',
        _fmt(viewport.width),
        _fmt(viewport.height),
        chart.market.id,
        chart.series.point_count,
        _fmt(viewport.left),
        _fmt(viewport.right),
        mark_safe("".join(parts)),
    )
