"""Views for the probability chart.

All chart endpoints share the same query-string view state, validated by
`ChartViewStateForm`. Invalid view state yields HTTP 400 with the form errors;
unknown markets yield HTTP 404.
"""

from __future__ import annotations

import logging

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404, render
from django.views.decorators.http import require_GET

from chartengine.dto import MarketChart
from chartengine.timescales import TimeScale
from core.charting.payload import encode_market_chart
from core.charting.render import render_chart_svg
from core.charting.service import chart_request_from_form, render_market_chart, render_market_charts
from core.forms import VARIANT_HOME, ChartViewStateForm
from markets.models import Market

logger = logging.getLogger(__name__)

MAX_HOME_MARKETS = 12


def _view_state_errors(form: ChartViewStateForm) -> JsonResponse:
    """Return a 400 response describing invalid view state."""

    logger.info("Rejected chart view state: %s", form.errors.as_json())
    return JsonResponse({"errors": form.errors.get_json_data()}, status=400)


def _market_chart(request: HttpRequest, slug: str) -> tuple[Market, ChartViewStateForm, MarketChart | None]:
    """Load a market and build its chart from the request's view state.

    Returns:
        The market, the bound form, and the chart (None when the form is invalid).
    """

    market = get_object_or_404(Market, slug=slug)
    form = ChartViewStateForm(request.GET)
    if not form.is_valid():
        return market, form, None
    chart = render_market_chart(market=market, request=chart_request_from_form(form, market_id=market.slug))
    return market, form, chart


@require_GET
def market_chart_api(request: HttpRequest, slug: str) -> JsonResponse:
    """Return the chart geometry for a market as JSON."""

    _, form, chart = _market_chart(request, slug)
    if chart is None:
        return _view_state_errors(form)
    return JsonResponse(encode_market_chart(chart))


@require_GET
def market_chart_svg(request: HttpRequest, slug: str) -> HttpResponse:
    """Return the chart for a market as an SVG document."""

    _, form, chart = _market_chart(request, slug)
    if chart is None:
        return _view_state_errors(form)
    return HttpResponse(render_chart_svg(chart), content_type="image/svg+xml")


@require_GET
def market_chart_page(request: HttpRequest, slug: str) -> HttpResponse:
    """Render the market detail chart page."""

    market, form, chart = _market_chart(request, slug)
    if chart is None:
        return _view_state_errors(form)
    return render(
        request,
        "core/market_chart.html",
        {
            "market": market,
            "chart": chart,
            "chart_svg": render_chart_svg(chart),
            "scales": [scale.value for scale in TimeScale],
            "selected_scale": form.cleaned_data["scale"].value,
        },
    )


@require_GET
def home(request: HttpRequest) -> HttpResponse:
    """Render compact charts for the most recent markets."""

    form = ChartViewStateForm({**request.GET.dict(), "variant": VARIANT_HOME})
    if not form.is_valid():
        return _view_state_errors(form)
    markets = list(Market.objects.all()[:MAX_HOME_MARKETS])
    charts = render_market_charts(markets=markets, request=chart_request_from_form(form, market_id=""))
    return render(
        request,
        "core/home.html",
        {
            "entries": [
                {"market": market, "chart": chart, "svg": render_chart_svg(chart)}
                for market, chart in zip(markets, charts)
            ],
            "selected_scale": form.cleaned_data["scale"].value,
        },
    )
