"""App configuration for the chart presentation app."""

from __future__ import annotations

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Configuration for the `core` app (chart views, forms and SVG rendering)."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"
    verbose_name = "Charts"
