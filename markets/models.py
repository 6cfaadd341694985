"""Database models for the markets app.

A Market row is the snapshot supplier for the chart: the chart itself never
stores prices, it only reads the current Yes price and a few display fields
at render time.
"""

from __future__ import annotations

from django.core.validators import MinValueValidator
from django.db import models

from chartengine.dto import MarketSnapshot

DEFAULT_YES_PRICE = 0.5


class MarketCategory(models.TextChoices):
    """Browse category of a market."""

    POLITICS = "politics", "Politics"
    SPORTS = "sports", "Sports"
    CULTURE = "culture", "Culture"
    BITCOIN = "bitcoin", "Bitcoin"
    WEATHER = "weather", "Weather"
    MACRO = "macro", "Macro"


class Market(models.Model):
    """A two-outcome (Yes/No) market.

    Attributes:
        slug: Stable public identifier; also seeds the synthetic chart history.
        question: Human-readable market question.
        category: Browse category.
        yes_price: Current Yes probability, or None when no price is known.
        is_live: Whether the market is currently trading.
        volume_btc: Traded volume in BTC.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    slug = models.SlugField(max_length=120, unique=True)
    question = models.CharField(max_length=300)
    category = models.CharField(max_length=16, choices=MarketCategory.choices, default=MarketCategory.BITCOIN)
    yes_price = models.FloatField(null=True, blank=True)
    is_live = models.BooleanField(default=False)
    volume_btc = models.FloatField(default=0.0, validators=[MinValueValidator(0.0)])
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        """Return the market question for admin/debug contexts."""

        return self.question

    @property
    def current_probability(self) -> float:
        """Return the Yes price, defaulting to 0.5 when unknown."""

        return DEFAULT_YES_PRICE if self.yes_price is None else float(self.yes_price)

    def to_snapshot(self) -> MarketSnapshot:
        """Return the immutable chart input for this market."""

        return MarketSnapshot(
            id=self.slug,
            current_probability=self.current_probability,
            is_live=self.is_live,
            volume_btc=float(self.volume_btc),
        )
