"""Closed-form intersections of circles and lines.

Every function takes fully resolved numbers and returns an
:class:`IntersectionResult` holding zero, one or two solutions.  Degenerate
inputs (coincident centres, zero radii, zero-length lines, parallel lines)
produce an empty result instead of raising.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .logging_utils import apply_debug_logging
from .model import Coord

logger = logging.getLogger(__name__)


class IntersectionKind(enum.Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass(frozen=True, eq=False)
class IntersectionResult:
    """Zero, one or two intersection points.

    Equality ignores the order of a two-point result since the labelling of
    the two solutions is an artefact of the formula.
    """

    points: Tuple[Coord, ...] = ()

    @classmethod
    def none(cls) -> "IntersectionResult":
        return cls(())

    @classmethod
    def one(cls, point: Coord) -> "IntersectionResult":
        return cls((point,))

    @classmethod
    def two(cls, first: Coord, second: Coord) -> "IntersectionResult":
        return cls((first, second))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Coord]:
        return iter(self.points)

    def __bool__(self) -> bool:
        return bool(self.points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntersectionResult):
            return NotImplemented
        if len(self.points) != len(other.points):
            return False
        if len(self.points) == 2:
            a1, b1 = self.points
            a2, b2 = other.points
            return (a1 == a2 and b1 == b2) or (a1 == b2 and b1 == a2)
        return self.points == other.points

    def __hash__(self) -> int:
        return hash(frozenset(self.points))

    def __repr__(self) -> str:
        if not self.points:
            return "IntersectionResult.none()"
        if len(self.points) == 1:
            return f"IntersectionResult.one({self.points[0]!r})"
        return f"IntersectionResult.two({self.points[0]!r}, {self.points[1]!r})"

    def select(self, kind: IntersectionKind) -> Optional[Coord]:
        """Pick the solution requested by ``kind``; ``None`` if there is none."""

        if not self.points:
            return None
        if len(self.points) == 1 or kind is IntersectionKind.PRIMARY:
            return self.points[0]
        return self.points[1]


def _sgn(value: float) -> float:
    return -1.0 if value < 0.0 else 1.0


def intersect_circles(center1: Coord, r1: float, center2: Coord, r2: float) -> IntersectionResult:
    """Intersect two circles given by centre and radius.

    The solutions are placed symmetrically about the line joining the
    centres: the foot on the radical line plus/minus an orthogonal offset.
    """

    x1, y1 = center1
    x2, y2 = center2
    centerdx = x1 - x2
    centerdy = y1 - y2
    dist = math.sqrt(centerdx * centerdx + centerdy * centerdy)
    if not (abs(r1 - r2) <= dist <= r1 + r2):
        return IntersectionResult.none()
    if dist == 0.0 or r1 == 0.0 or r2 == 0.0:
        return IntersectionResult.none()

    dist2 = dist * dist
    dist4 = dist2 * dist2
    r_diff = r1 * r1 - r2 * r2
    a = r_diff / (2.0 * dist2)
    c_sq = 2.0 * (r1 * r1 + r2 * r2) / dist2 - (r_diff * r_diff) / dist4 - 1.0
    # Rounding can push a tangent configuration just below zero.
    c = math.sqrt(c_sq) if c_sq > 0.0 else 0.0

    fx = (x1 + x2) / 2.0 + a * (x2 - x1)
    gx = c * (y2 - y1) / 2.0
    fy = (y1 + y2) / 2.0 + a * (y2 - y1)
    gy = c * (x1 - x2) / 2.0

    if gx == 0.0 and gy == 0.0:
        return IntersectionResult.one((fx + gx, fy + gy))
    return IntersectionResult.two((fx + gx, fy + gy), (fx - gx, fy - gy))


def intersect_circle_line(center: Coord, r: float, p1: Coord, p2: Coord) -> IntersectionResult:
    """Intersect a circle with the infinite line through ``p1`` and ``p2``."""

    cx, cy = center
    x1, y1 = p1[0] - cx, p1[1] - cy
    x2, y2 = p2[0] - cx, p2[1] - cy

    dx, dy = x2 - x1, y2 - y1
    dr_sq = dx * dx + dy * dy
    if dr_sq == 0.0:
        return IntersectionResult.none()
    cross = x1 * y2 - x2 * y1

    disc = r * r * dr_sq - cross * cross
    if disc < 0.0:
        return IntersectionResult.none()

    root = math.sqrt(disc)
    rx1 = cx + (cross * dy + _sgn(dy) * dx * root) / dr_sq
    ry1 = cy + (-cross * dx + abs(dy) * root) / dr_sq
    if disc == 0.0:
        return IntersectionResult.one((rx1, ry1))

    rx2 = cx + (cross * dy - _sgn(dy) * dx * root) / dr_sq
    ry2 = cy + (-cross * dx - abs(dy) * root) / dr_sq
    return IntersectionResult.two((rx1, ry1), (rx2, ry2))


def intersect_lines(p1: Coord, p2: Coord, p3: Coord, p4: Coord) -> IntersectionResult:
    """Intersect the line ``p1 p2`` with the line ``p3 p4``.

    Parallel and coincident lines both yield an empty result.
    """

    x1, y1 = p1
    x2, y2 = p2
    x3, y3 = p3
    x4, y4 = p4
    den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if den == 0.0:
        return IntersectionResult.none()
    det12 = x1 * y2 - y1 * x2
    det34 = x3 * y4 - y3 * x4
    num_x = det12 * (x3 - x4) - (x1 - x2) * det34
    num_y = det12 * (y3 - y4) - (y1 - y2) * det34
    return IntersectionResult.one((num_x / den, num_y / den))


__all__ = [
    "IntersectionKind",
    "IntersectionResult",
    "intersect_circles",
    "intersect_circle_line",
    "intersect_lines",
]


apply_debug_logging(globals(), logger=logger)
