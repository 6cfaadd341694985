"""Minimal smoke tests for the project scaffolding."""

from __future__ import annotations

import pytest


@pytest.mark.unit
def test_chart_engine_imports() -> None:
    """Import the chart engine and verify the public entry points exist."""

    from chartengine import build_chart, generate_series, layout_chart

    assert callable(build_chart)
    assert callable(generate_series)
    assert callable(layout_chart)


@pytest.mark.integration
def test_django_project_loads() -> None:
    """Import and initialize Django to verify settings are valid."""

    import os

    import django
    from django.conf import settings

    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "yesnoCharts.settings")
    django.setup()
    assert "core.apps.CoreConfig" in settings.INSTALLED_APPS
    assert "markets.apps.MarketsConfig" in settings.INSTALLED_APPS
