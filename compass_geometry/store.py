"""Geometry store: owns point/shape definitions and resolves them on demand."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .config import ResolverConfig, get_resolver_config
from .ids import IdAllocator, PointID, ShapeID
from .intersections import IntersectionResult
from .model import (
    POINT_TYPES,
    SHAPE_TYPES,
    Arbitrary,
    Coord,
    NotArbitraryError,
    Point,
    ResolutionError,
    ResolvedShape,
    Shape,
)
from .resolver import Resolver

logger = logging.getLogger(__name__)


class GeometryStore:
    """Container of symbolic points and shapes.

    Definitions may reference ids that do not exist yet; such references are
    only detected when resolving.  Resolution failures of any kind surface as
    ``None`` from :meth:`resolve_point` and :meth:`resolve_shape`; the
    ``explain_*`` methods report the underlying :class:`ResolutionError`.
    """

    def __init__(self, config: Optional[ResolverConfig] = None) -> None:
        self.config = config or get_resolver_config()
        self.points: Dict[PointID, Point] = {}
        self.shapes: Dict[ShapeID, Shape] = {}
        self._point_ids: IdAllocator[PointID] = IdAllocator(PointID)
        self._shape_ids: IdAllocator[ShapeID] = IdAllocator(ShapeID)

    def __repr__(self) -> str:
        return f"GeometryStore(points={len(self.points)}, shapes={len(self.shapes)})"

    def _resolver(self) -> Resolver:
        return Resolver(self.points, self.shapes, self.config)

    def add_point(self, definition: Point) -> PointID:
        if not isinstance(definition, POINT_TYPES):
            raise TypeError(f"expected a point definition, got {type(definition).__name__}")
        point_id = self._point_ids.next_id(self.points)
        self.points[point_id] = definition
        logger.debug("Added %s = %r", point_id, definition)
        return point_id

    def add_shape(self, definition: Shape) -> ShapeID:
        if not isinstance(definition, SHAPE_TYPES):
            raise TypeError(f"expected a shape definition, got {type(definition).__name__}")
        shape_id = self._shape_ids.next_id(self.shapes)
        self.shapes[shape_id] = definition
        logger.debug("Added %s = %r", shape_id, definition)
        return shape_id

    def get_point(self, point_id: PointID) -> Optional[Point]:
        return self.points.get(point_id)

    def get_shape(self, shape_id: ShapeID) -> Optional[Shape]:
        return self.shapes.get(shape_id)

    def point_ids(self) -> List[PointID]:
        return list(self.points)

    def shape_ids(self) -> List[ShapeID]:
        return list(self.shapes)

    def set_arbitrary_coordinate(self, point_id: PointID, coord: Coord) -> None:
        """Move the free point ``point_id`` to ``coord``."""

        current = self.points[point_id]
        if not isinstance(current, Arbitrary):
            raise NotArbitraryError(point_id, current)
        self.points[point_id] = Arbitrary(coord[0], coord[1])
        logger.debug("Moved %s to %r", point_id, coord)

    def resolve_point(self, point_id: PointID) -> Optional[Coord]:
        try:
            return self._resolver().resolve_point(point_id)
        except ResolutionError as exc:
            logger.debug("Cannot resolve %s: %s", point_id, exc)
            return None

    def resolve_shape(self, shape_id: ShapeID) -> Optional[ResolvedShape]:
        try:
            return self._resolver().resolve_shape(shape_id)
        except ResolutionError as exc:
            logger.debug("Cannot resolve %s: %s", shape_id, exc)
            return None

    def intersection(self, first: ShapeID, second: ShapeID) -> IntersectionResult:
        """All intersections of two stored shapes; empty when unresolvable."""

        try:
            return self._resolver().resolve_intersection(first, second)
        except ResolutionError as exc:
            logger.debug("Cannot intersect %s and %s: %s", first, second, exc)
            return IntersectionResult.none()

    def explain_point(self, point_id: PointID) -> Optional[ResolutionError]:
        try:
            self._resolver().resolve_point(point_id)
        except ResolutionError as exc:
            return exc
        return None

    def explain_shape(self, shape_id: ShapeID) -> Optional[ResolutionError]:
        try:
            self._resolver().resolve_shape(shape_id)
        except ResolutionError as exc:
            return exc
        return None


def create_store(config: Optional[ResolverConfig] = None) -> GeometryStore:
    return GeometryStore(config)


__all__ = ["GeometryStore", "create_store"]
