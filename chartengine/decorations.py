"""Arc-length decoration trail along a curve.

Decorations are stamped at even path distances rather than at data indices,
so spacing stays uniform no matter how the segments are shaped. Successive
stamps alternate to the left and right of the line with a small opposing
rotation, which reads as footsteps walking along the curve.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from .dto import Decoration, ExclusionZone, Point
from .numeric import clamp

logger = logging.getLogger(__name__)

TRAIL_STEP: Final[float] = 28.0
TRAIL_START_INSET: Final[float] = 0.0
TRAIL_END_INSET: Final[float] = 14.0
FINAL_SAMPLE_MIN_REMAINDER: Final[float] = 0.35
MIN_SEGMENT_LENGTH: Final[float] = 0.001
LATERAL_OFFSET: Final[float] = 1.05
ROTATION_BIAS_DEGREES: Final[float] = 9.0

ENDPOINT_ZONE_RADIUS: Final[float] = 3.5
HOVER_ZONE_RADIUS: Final[float] = 3.3


@dataclass(frozen=True, slots=True)
class Segment:
    """A non-degenerate polyline segment with its starting path distance."""

    start: Point
    dx: float
    dy: float
    length: float
    cumulative_start: float

    @property
    def cumulative_end(self) -> float:
        return self.cumulative_start + self.length


def build_segments(points: Sequence[Point]) -> tuple[tuple[Segment, ...], float]:
    """Return the non-degenerate segments and the total path length.

    Segments shorter than `MIN_SEGMENT_LENGTH` are skipped and do not add to
    the cumulative distance.
    """

    segments: list[Segment] = []
    cumulative = 0.0
    for start, end in zip(points, points[1:]):
        dx = end.x - start.x
        dy = end.y - start.y
        length = math.hypot(dx, dy)
        if length < MIN_SEGMENT_LENGTH:
            continue
        segments.append(Segment(start=start, dx=dx, dy=dy, length=length, cumulative_start=cumulative))
        cumulative += length
    return tuple(segments), cumulative


def sample_distances(
    total_length: float,
    *,
    step: float = TRAIL_STEP,
    start_inset: float = TRAIL_START_INSET,
    end_inset: float = TRAIL_END_INSET,
) -> tuple[float, ...]:
    """Return the path distances at which decorations are stamped.

    Samples run from the start inset every `step` units up to the end inset.
    The end distance is appended as a final sample when nothing was sampled
    or when it lies more than `0.35 * step` past the last regular sample.
    """

    dist_start = min(start_inset, total_length)
    dist_end = max(dist_start, total_length - end_inset)
    distances: list[float] = []
    dist = dist_start
    while dist <= dist_end:
        distances.append(dist)
        dist += step
    if not distances or dist_end - distances[-1] > step * FINAL_SAMPLE_MIN_REMAINDER:
        distances.append(dist_end)
    return tuple(distances)


def segment_at(segments: Sequence[Segment], distance: float) -> Segment:
    """Return the first segment containing `distance` (the last one as a fallback)."""

    for segment in segments:
        if segment.cumulative_start <= distance <= segment.cumulative_end:
            return segment
    return segments[-1]


def decoration_at(segment: Segment, distance: float, parity_index: int) -> Decoration:
    """Build the decoration for `distance` on `segment`.

    Even parity stamps to the left of travel with a clockwise bias; odd parity
    mirrors both.
    """

    t = clamp((distance - segment.cumulative_start) / segment.length, 0.0, 1.0)
    base_x = segment.start.x + segment.dx * t
    base_y = segment.start.y + segment.dy * t
    normal_x = -segment.dy / segment.length
    normal_y = segment.dx / segment.length
    even = parity_index % 2 == 0
    lateral = LATERAL_OFFSET if even else -LATERAL_OFFSET
    heading = math.degrees(math.atan2(segment.dy, segment.dx))
    angle = heading + 90 + (ROTATION_BIAS_DEGREES if even else -ROTATION_BIAS_DEGREES)
    return Decoration(
        x=base_x + normal_x * lateral,
        y=base_y + normal_y * lateral,
        angle=angle,
        base_x=base_x,
        base_y=base_y,
    )


def place_trail(
    points: Sequence[Point],
    exclusion_zones: Sequence[ExclusionZone] = (),
    *,
    step: float = TRAIL_STEP,
    start_inset: float = TRAIL_START_INSET,
    end_inset: float = TRAIL_END_INSET,
) -> tuple[Decoration, ...]:
    """Place decorations along a polyline, skipping exclusion zones.

    A decoration that lands inside an exclusion zone is dropped, but the
    left/right alternation still advances past it, so neighbours keep the
    phase they would have had without the zone.

    Args:
        points: Ordered polyline vertices.
        exclusion_zones: Circles that must stay clear of decorations.
        step: Path distance between samples.
        start_inset: Distance from the path start to the first sample.
        end_inset: Distance kept clear at the path end.

    Returns:
        Decorations in path order; empty when the polyline has no length.
    """

    segments, total_length = build_segments(points)
    if not segments:
        return ()

    placed: list[Decoration] = []
    parity_index = 0
    for sample_index, distance in enumerate(
        sample_distances(total_length, step=step, start_inset=start_inset, end_inset=end_inset)
    ):
        decoration = decoration_at(segment_at(segments, distance), distance, parity_index)
        parity_index += 1
        if any(zone.contains(decoration.x, decoration.y) for zone in exclusion_zones):
            logger.debug("Dropped trail sample %s at distance %.2f (exclusion zone).", sample_index, distance)
            continue
        placed.append(decoration)
    return tuple(placed)


def endpoint_zones(yes_end: Point, no_end: Point) -> tuple[ExclusionZone, ...]:
    """Return exclusion zones around the current-value markers."""

    return (
        ExclusionZone(x=yes_end.x, y=yes_end.y, r=ENDPOINT_ZONE_RADIUS),
        ExclusionZone(x=no_end.x, y=no_end.y, r=ENDPOINT_ZONE_RADIUS),
    )


def hover_zones(yes_hover: Point, no_hover: Point) -> tuple[ExclusionZone, ...]:
    """Return exclusion zones around the hover markers."""

    return (
        ExclusionZone(x=yes_hover.x, y=yes_hover.y, r=HOVER_ZONE_RADIUS),
        ExclusionZone(x=no_hover.x, y=no_hover.y, r=HOVER_ZONE_RADIUS),
    )
