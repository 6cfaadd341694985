"""Forms for chart view-state parsing.

The chart endpoints are driven entirely by query-string view state (time
scale, variant, hover cursor, aspect ratio). This form validates that state
and converts it into chart engine inputs.
"""

from __future__ import annotations

from django import forms
from django.conf import settings

from chartengine.dto import HoverState, PlotViewport
from chartengine.geometry import build_viewport
from chartengine.hover import hover_x_from_pointer
from chartengine.timescales import TimeScale

VARIANT_HOME = "home"
VARIANT_DETAIL = "detail"


class ChartViewStateForm(forms.Form):
    """Validate chart view state supplied by the presentation layer.

    The hover cursor may be given either as `hover_x` (plot units) or as
    `pointer` (fraction of the rendered chart width); `hover_x` wins when
    both are present. Out-of-range aspects and pointers are clamped by the
    engine rather than rejected.
    """

    scale = forms.CharField(required=False, max_length=4, help_text="Time scale key (1H, 3H, 6H, 12H, 1D).")
    variant = forms.ChoiceField(
        required=False,
        choices=((VARIANT_HOME, "Home"), (VARIANT_DETAIL, "Detail")),
    )
    hover_x = forms.FloatField(required=False, help_text="Pointer x-position in plot units.")
    pointer = forms.FloatField(required=False, help_text="Pointer x-position as a fraction of the chart width.")
    hover_market = forms.CharField(required=False, max_length=120)
    aspect = forms.FloatField(required=False)

    def clean_scale(self) -> TimeScale:
        """Parse the time scale, falling back to the configured default.

        Returns:
            The selected TimeScale.
        """

        default = TimeScale(settings.CHART_DEFAULT_TIMESCALE)
        try:
            return TimeScale.parse(self.cleaned_data.get("scale"), default=default)
        except ValueError as exc:
            raise forms.ValidationError(str(exc)) from exc

    def is_home_variant(self) -> bool:
        """Return whether the compact home-page variant was requested."""

        return self.cleaned_data.get("variant") == VARIANT_HOME

    def aspect_ratio(self) -> float:
        """Return the requested aspect ratio or the variant's configured default."""

        aspect = self.cleaned_data.get("aspect")
        if aspect is not None:
            return float(aspect)
        return float(settings.CHART_ASPECT_HOME if self.is_home_variant() else settings.CHART_ASPECT_DETAIL)

    def viewport(self) -> PlotViewport:
        """Return the plot viewport the requested chart will be laid out in."""

        return build_viewport(self.aspect_ratio(), is_home_variant=self.is_home_variant())

    def hover_position(self) -> float | None:
        """Return the hover x-position in plot units, if any was supplied."""

        hover_x = self.cleaned_data.get("hover_x")
        if hover_x is not None:
            return hover_x
        pointer = self.cleaned_data.get("pointer")
        if pointer is None:
            return None
        return hover_x_from_pointer(pointer, self.viewport())

    def hover_state(self, *, market_id: str) -> HoverState:
        """Return the hover state, defaulting the hovered market to `market_id`.

        Args:
            market_id: Market being rendered.

        Returns:
            HoverState; inactive when no hover position was supplied.
        """

        hover_x = self.hover_position()
        if hover_x is None:
            return HoverState()
        active_market = (self.cleaned_data.get("hover_market") or "").strip() or market_id
        return HoverState(active_market_id=active_market, hover_x=hover_x)
