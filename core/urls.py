"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("", views.home, name="home"),
    path("markets/<slug:slug>/chart/", views.market_chart_page, name="market_chart"),
    path("markets/<slug:slug>/chart.svg", views.market_chart_svg, name="market_chart_svg"),
    path("api/markets/<slug:slug>/chart/", views.market_chart_api, name="market_chart_api"),
]
