"""Recursive resolution of point and shape definitions.

Resolution is not memoised: each call walks the whole dependency chain.  Ids
currently being resolved are tracked so that a definition depending on itself
fails with :class:`CyclicReferenceError` instead of recursing forever.
"""

from __future__ import annotations

import logging
import math
from contextlib import contextmanager
from typing import Iterator, List, Mapping, Optional, Set, Tuple, Union

from .config import ResolverConfig, get_resolver_config
from .ids import PointID, ShapeID
from .intersections import (
    IntersectionKind,
    IntersectionResult,
    intersect_circle_line,
    intersect_circles,
    intersect_lines,
)
from .model import (
    Arbitrary,
    Circle,
    Coord,
    CyclicReferenceError,
    Line,
    MissingReferenceError,
    NoIntersectionError,
    Point,
    PrimIntersection,
    ResolutionDepthError,
    ResolvedCircle,
    ResolvedLine,
    ResolvedLineUp,
    ResolvedShape,
    SecIntersection,
    Shape,
)

logger = logging.getLogger(__name__)

AnyID = Union[PointID, ShapeID]


def distance(a: Coord, b: Coord) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return math.sqrt(dx * dx + dy * dy)


class Resolver:
    """Evaluate definitions held in two id-keyed mappings."""

    def __init__(
        self,
        points: Mapping[PointID, Point],
        shapes: Mapping[ShapeID, Shape],
        config: Optional[ResolverConfig] = None,
    ) -> None:
        self.points = points
        self.shapes = shapes
        self.config = config or get_resolver_config()
        self._in_progress: Set[AnyID] = set()
        self._stack: List[AnyID] = []

    @contextmanager
    def _visiting(self, ident: AnyID) -> Iterator[None]:
        if ident in self._in_progress:
            raise CyclicReferenceError(ident)
        max_depth = self.config.max_depth
        if max_depth is not None and len(self._stack) >= max_depth:
            raise ResolutionDepthError(ident, max_depth)
        self._in_progress.add(ident)
        self._stack.append(ident)
        try:
            yield
        finally:
            self._stack.pop()
            self._in_progress.discard(ident)

    def _lookup_point(self, point_id: PointID) -> Point:
        try:
            return self.points[point_id]
        except KeyError:
            raise MissingReferenceError(point_id) from None

    def _lookup_shape(self, shape_id: ShapeID) -> Shape:
        try:
            return self.shapes[shape_id]
        except KeyError:
            raise MissingReferenceError(shape_id) from None

    def point(self, point_id: PointID) -> Coord:
        """Return the coordinate of ``point_id`` or raise ``ResolutionError``."""

        with self._visiting(point_id):
            definition = self._lookup_point(point_id)
            if isinstance(definition, Arbitrary):
                return definition.coord
            if isinstance(definition, PrimIntersection):
                kind = IntersectionKind.PRIMARY
            elif isinstance(definition, SecIntersection):
                kind = IntersectionKind.SECONDARY
            else:
                raise TypeError(f"unsupported point definition {definition!r}")

            result = self.intersection(definition.first, definition.second)
            chosen = result.select(kind)
            if chosen is None:
                raise NoIntersectionError(point_id, definition.first, definition.second)
            return chosen

    def _circle_params(self, circle: Circle) -> Tuple[Coord, float]:
        center = self.point(circle.center)
        through = self.point(circle.through)
        return center, distance(center, through)

    def _line_params(self, line: Line) -> Tuple[Coord, Coord]:
        return self.point(line.a), self.point(line.b)

    def intersection(self, first_id: ShapeID, second_id: ShapeID) -> IntersectionResult:
        """Intersect two stored shapes, resolving their defining points."""

        first = self._lookup_shape(first_id)
        second = self._lookup_shape(second_id)

        with self._visiting(first_id):
            if isinstance(first, Circle):
                params1: Tuple = self._circle_params(first)
            else:
                params1 = self._line_params(first)
        with self._visiting(second_id):
            if isinstance(second, Circle):
                params2: Tuple = self._circle_params(second)
            else:
                params2 = self._line_params(second)

        if isinstance(first, Circle) and isinstance(second, Circle):
            return intersect_circles(params1[0], params1[1], params2[0], params2[1])
        if isinstance(first, Circle) and isinstance(second, Line):
            return intersect_circle_line(params1[0], params1[1], params2[0], params2[1])
        if isinstance(first, Line) and isinstance(second, Circle):
            return intersect_circle_line(params2[0], params2[1], params1[0], params1[1])
        if isinstance(first, Line) and isinstance(second, Line):
            return intersect_lines(params1[0], params1[1], params2[0], params2[1])
        raise TypeError(f"unsupported shape pair {type(first).__name__}/{type(second).__name__}")

    def shape(self, shape_id: ShapeID) -> ResolvedShape:
        """Return the analytic form of ``shape_id`` or raise ``ResolutionError``."""

        with self._visiting(shape_id):
            definition = self._lookup_shape(shape_id)
            if isinstance(definition, Circle):
                center, radius = self._circle_params(definition)
                return ResolvedCircle(center, radius)
            if isinstance(definition, Line):
                p1, p2 = self._line_params(definition)
                if p1[0] == p2[0]:
                    return ResolvedLineUp(p1[0])
                k = (p1[1] - p2[1]) / (p1[0] - p2[0])
                # y - y1 = k(x - x1)
                m = p1[1] - k * p1[0]
                return ResolvedLine(k, m)
            raise TypeError(f"unsupported shape definition {definition!r}")

    def resolve_point(self, point_id: PointID) -> Coord:
        """Entry point for :meth:`point`; running out of stack is a depth failure."""

        try:
            return self.point(point_id)
        except RecursionError:
            raise ResolutionDepthError(point_id, self.config.max_depth) from None

    def resolve_shape(self, shape_id: ShapeID) -> ResolvedShape:
        try:
            return self.shape(shape_id)
        except RecursionError:
            raise ResolutionDepthError(shape_id, self.config.max_depth) from None

    def resolve_intersection(self, first_id: ShapeID, second_id: ShapeID) -> IntersectionResult:
        try:
            return self.intersection(first_id, second_id)
        except RecursionError:
            raise ResolutionDepthError(first_id, self.config.max_depth) from None


__all__ = ["Resolver", "distance"]
