"""Admin registrations for the markets app."""

from __future__ import annotations

from django.contrib import admin

from markets.models import Market


@admin.register(Market)
class MarketAdmin(admin.ModelAdmin):
    """Admin configuration for Market."""

    list_display = ("slug", "question", "category", "yes_price", "is_live", "volume_btc", "updated_at")
    list_filter = ("category", "is_live")
    search_fields = ("slug", "question")
    prepopulated_fields = {"slug": ("question",)}
