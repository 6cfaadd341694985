"""Deterministic pseudo-random source for synthetic series.

A linear-congruential generator is used instead of `random.Random` so the draw
sequence is fully specified by the seed and identical across interpreters.
"""

from __future__ import annotations

from typing import Final

_MODULUS: Final[int] = 2**32
_SEED_MULTIPLIER: Final[int] = 1103515245
_SEED_INCREMENT: Final[int] = 12345
_STEP_MULTIPLIER: Final[int] = 1664525
_STEP_INCREMENT: Final[int] = 1013904223
_SCALE: Final[int] = 0xFFFFFFFF


class LcgRandom:
    """Linear-congruential generator seeded from a small integer.

    Instances are stateful; callers create one per series and pass it
    explicitly to whatever consumes draws.

    Attributes:
        seed: The seed the generator was constructed with.
    """

    __slots__ = ("seed", "_state")

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._state = seed * _SEED_MULTIPLIER + _SEED_INCREMENT

    def random(self) -> float:
        """Advance the generator and return the next draw in `[0, 1]`."""

        # Exact integer arithmetic; browser float LCGs drift from this for most seeds.
        self._state = (self._state * _STEP_MULTIPLIER + _STEP_INCREMENT) % _MODULUS
        return self._state / _SCALE

    def centered(self, amplitude: float) -> float:
        """Return `(random() - 0.5) * amplitude`."""

        return (self.random() - 0.5) * amplitude
