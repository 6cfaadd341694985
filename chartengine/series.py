"""Synthetic probability history for a market.

The history is fabricated, not fetched: a market identifier and its current
Yes probability fully determine the shape. The base series covers 24 hours at
5-minute resolution, drifts from a seed-dependent historical level toward the
current price in the final hours, and always ends exactly at the current
price. A time scale then selects and resamples the trailing window.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Final, Protocol

from .dto import ChartSeries
from .numeric import clamp_probability, interpolate_at, smoothstep
from .rng import LcgRandom
from .timescales import TOTAL_HOURS, TimeScale

logger = logging.getLogger(__name__)

BASE_POINTS_PER_HOUR: Final[int] = 12
BASE_SERIES_COUNT: Final[int] = TOTAL_HOURS * BASE_POINTS_PER_HOUR + 1
SEED_MODULUS: Final[int] = 97

TRANSITION_START: Final[float] = 0.88
MICRO_WAVE_CYCLES: Final[float] = 22.0
MICRO_WAVE_PHASE_PER_SEED: Final[float] = 0.117
MICRO_WAVE_LATE_START: Final[float] = 0.8
MICRO_WAVE_AMPLITUDE: Final[float] = 0.018
MICRO_WAVE_LATE_AMPLITUDE: Final[float] = 0.03

JUMP_EVERY: Final[int] = 20
JUMP_AMPLITUDE: Final[float] = 0.18
DRIFT_PULL: Final[float] = 0.2
COARSE_NOISE_EVERY: Final[int] = 4
COARSE_NOISE_AMPLITUDE: Final[float] = 0.03
FINE_NOISE_AMPLITUDE: Final[float] = 0.004
REAL_STEP_EVERY: Final[int] = 3
JITTER_AMPLITUDE: Final[float] = 0.0028


@dataclass(frozen=True, slots=True)
class SeriesParameters:
    """Seed-derived parameters of a market's synthetic history.

    Attributes:
        seed: Character-code sum of the market id, modulo 97.
        trend_sign: +1 for even seeds, -1 for odd seeds.
        historical_bias: Signed offset of the historical level from the current price.
        historical_center: Clamped historical level the early series hovers around.
        current_probability: Price the series converges to and ends on.
    """

    seed: int
    trend_sign: int
    historical_bias: float
    historical_center: float
    current_probability: float


def derive_seed(market_id: str) -> int:
    """Return the generation seed for a market identifier."""

    return sum(ord(ch) for ch in market_id) % SEED_MODULUS


def series_parameters(market_id: str, current_probability: float) -> SeriesParameters:
    """Derive the seed, trend and historical anchor for a market."""

    seed = derive_seed(market_id)
    trend_sign = 1 if seed % 2 == 0 else -1
    historical_bias = (0.2 + (seed % 5) * 0.02) * trend_sign
    return SeriesParameters(
        seed=seed,
        trend_sign=trend_sign,
        historical_bias=historical_bias,
        historical_center=clamp_probability(current_probability + historical_bias),
        current_probability=current_probability,
    )


def transition_weight(t: float) -> float:
    """Return how far the anchor has moved from the historical level to the current price."""

    if t <= TRANSITION_START:
        return 0.0
    return smoothstep((t - TRANSITION_START) / (1 - TRANSITION_START))


def anchor_at(t: float, params: SeriesParameters) -> float:
    """Return the clamped anchor value the series is pulled toward at time `t`."""

    macro_anchor = params.historical_center + (
        params.current_probability - params.historical_center
    ) * transition_weight(t)
    amplitude = MICRO_WAVE_LATE_AMPLITUDE if t > MICRO_WAVE_LATE_START else MICRO_WAVE_AMPLITUDE
    micro_wave = math.sin((t * MICRO_WAVE_CYCLES + params.seed * MICRO_WAVE_PHASE_PER_SEED) * math.pi * 2) * amplitude
    return clamp_probability(macro_anchor + micro_wave)


class StepPolicy(Protocol):
    """How a base-series index turns its candidate into an emitted value."""

    name: str

    def apply(self, *, prev: float, candidate: float, rng: LcgRandom) -> float:
        ...


@dataclass(frozen=True, slots=True)
class RealStep:
    """Commit the jump + drift + noise candidate."""

    name: str = "real"

    def apply(self, *, prev: float, candidate: float, rng: LcgRandom) -> float:
        return clamp_probability(candidate)


@dataclass(frozen=True, slots=True)
class JitterStep:
    """Discard the candidate and jitter slightly around the previous value."""

    name: str = "jitter"

    def apply(self, *, prev: float, candidate: float, rng: LcgRandom) -> float:
        return clamp_probability(prev + rng.centered(JITTER_AMPLITUDE))


REAL_STEP: Final[RealStep] = RealStep()
JITTER_STEP: Final[JitterStep] = JitterStep()


def step_policy_for(index: int) -> StepPolicy:
    """Return the step policy for a base-series index (every third index is real)."""

    return REAL_STEP if index % REAL_STEP_EVERY == 0 else JITTER_STEP


def step_candidate(*, index: int, prev: float, anchor: float, rng: LcgRandom) -> float:
    """Compute the candidate next value for `index`.

    Draw order is part of the contract: the jump draw (only on jump indices)
    precedes the step-noise draw.
    """

    jump = rng.centered(JUMP_AMPLITUDE) if index % JUMP_EVERY == 0 else 0.0
    drift_pull = (anchor - prev) * DRIFT_PULL
    noise_amplitude = COARSE_NOISE_AMPLITUDE if index % COARSE_NOISE_EVERY == 0 else FINE_NOISE_AMPLITUDE
    step_noise = rng.centered(noise_amplitude)
    return prev + jump + drift_pull + step_noise


def build_base_series(params: SeriesParameters, rng: LcgRandom) -> tuple[float, ...]:
    """Build the dense 24h history, pinned to the current price at the end.

    Args:
        params: Seed-derived parameters for the market.
        rng: Generator seeded with `params.seed`; consumed in place.

    Returns:
        A tuple of `BASE_SERIES_COUNT` probabilities.
    """

    last_index = BASE_SERIES_COUNT - 1
    values: list[float] = []
    for index in range(BASE_SERIES_COUNT):
        t = index / last_index
        anchor = anchor_at(t, params)
        if index == 0:
            values.append(anchor)
            continue
        prev = values[-1]
        candidate = step_candidate(index=index, prev=prev, anchor=anchor, rng=rng)
        values.append(step_policy_for(index).apply(prev=prev, candidate=candidate, rng=rng))
    values[-1] = params.current_probability
    return tuple(values)


def resample_window(
    base_series: tuple[float, ...],
    *,
    window_hours: int,
    point_count: int,
    current_probability: float,
) -> tuple[float, ...]:
    """Resample the trailing `window_hours` of the base series.

    Args:
        base_series: Dense history covering `TOTAL_HOURS`.
        window_hours: Trailing window to keep.
        point_count: Number of evenly spaced output samples.
        current_probability: Value the last output sample is pinned to.

    Returns:
        A tuple of `point_count` probabilities.
    """

    last_index = len(base_series) - 1
    window_start_t = max(0.0, 1 - window_hours / TOTAL_HOURS)
    samples: list[float] = []
    for idx in range(point_count):
        local_t = 1.0 if point_count == 1 else idx / (point_count - 1)
        base_t = window_start_t + local_t * (1 - window_start_t)
        samples.append(interpolate_at(base_series, base_t * last_index))
    if samples:
        samples[-1] = current_probability
    return tuple(samples)


def generate_series(
    market_id: str,
    current_probability: float,
    scale: TimeScale,
    *,
    now: datetime | None = None,
) -> ChartSeries:
    """Generate the synthetic history for a market and time scale.

    Args:
        market_id: Market identifier; drives the seed.
        current_probability: Current Yes probability; the series ends exactly here.
        scale: Time scale selecting the display window.
        now: Window end timestamp. Defaults to the current UTC time and does not
            influence the generated values.

    Returns:
        ChartSeries with the base and display series plus window bounds.
    """

    params = series_parameters(market_id, current_probability)
    rng = LcgRandom(params.seed)
    base_series = build_base_series(params, rng)
    display_series = resample_window(
        base_series,
        window_hours=scale.window_hours,
        point_count=scale.point_count,
        current_probability=current_probability,
    )
    window_end = now or datetime.now(UTC)
    window_start = window_end - timedelta(hours=scale.window_hours)
    logger.debug(
        "Generated %s series for market %r (seed=%s, trend=%+d, center=%.3f).",
        scale.value,
        market_id,
        params.seed,
        params.trend_sign,
        params.historical_center,
    )
    return ChartSeries(
        scale=scale,
        seed=params.seed,
        base_series=base_series,
        display_series=display_series,
        window_start=window_start,
        window_end=window_end,
    )
