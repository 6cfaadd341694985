"""App configuration for the markets Django app."""

from __future__ import annotations

from django.apps import AppConfig


class MarketsConfig(AppConfig):
    """Configuration for the `markets` app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "markets"
