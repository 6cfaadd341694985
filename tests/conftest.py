"""Pytest fixtures shared across the chart test suite."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

import pytest

from chartengine.dto import PlotViewport
from chartengine.geometry import build_viewport


@pytest.fixture
def fixed_now() -> datetime:
    """Return a stable window end timestamp (15:05 US Eastern)."""

    return datetime(2026, 10, 18, 19, 5, tzinfo=UTC)


@pytest.fixture
def detail_viewport() -> PlotViewport:
    """Return the detail-variant viewport for a 4.6 aspect ratio (width 460)."""

    return build_viewport(4.6, is_home_variant=False)


@pytest.fixture
def market(db):
    """Return a persisted live market without a known price."""

    from markets.models import Market

    return Market.objects.create(
        slug="mkt-3",
        question="Will the block reward halve before May?",
        yes_price=None,
        is_live=True,
        volume_btc=1.5,
    )


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no database access.
    - `integration`: tests touching Django, database, views, or templates.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
