"""Read-only queries used by drawing and picking code on top of a store."""

from __future__ import annotations

import logging
import math
from itertools import combinations
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

from .ids import PointID, ShapeID
from .model import (
    Arbitrary,
    Coord,
    Point,
    PrimIntersection,
    ResolvedCircle,
    ResolvedLine,
    ResolvedLineUp,
    ResolvedShape,
    SecIntersection,
)
from .store import GeometryStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

_SAME_POINT_TOL = 1e-9


def resolved_points(store: GeometryStore) -> Dict[PointID, Coord]:
    """Coordinates of every point that resolves; failures are skipped."""

    out: Dict[PointID, Coord] = {}
    for point_id in store.point_ids():
        coord = store.resolve_point(point_id)
        if coord is not None:
            out[point_id] = coord
    return out


def resolved_shapes(store: GeometryStore) -> Dict[ShapeID, ResolvedShape]:
    out: Dict[ShapeID, ResolvedShape] = {}
    for shape_id in store.shape_ids():
        shape = store.resolve_shape(shape_id)
        if shape is not None:
            out[shape_id] = shape
    return out


def _stored_intersections(store: GeometryStore) -> Dict[FrozenSet[ShapeID], List[Coord]]:
    """Resolved coordinates of stored intersection points, keyed by shape pair in either order."""

    stored: Dict[FrozenSet[ShapeID], List[Coord]] = {}
    for point_id, definition in store.points.items():
        if not isinstance(definition, (PrimIntersection, SecIntersection)):
            continue
        coord = store.resolve_point(point_id)
        if coord is not None:
            stored.setdefault(frozenset((definition.first, definition.second)), []).append(coord)
    return stored


def potential_points(store: GeometryStore) -> Dict[Point, Coord]:
    """Intersection definitions over existing shapes that resolve.

    A tangency contributes only its primary definition.  Intersections already
    stored as points, over the same two shapes in either order, are left out.
    """

    stored = _stored_intersections(store)
    out: Dict[Point, Coord] = {}
    for first, second in combinations(sorted(store.shape_ids()), 2):
        result = store.intersection(first, second)
        candidates: Sequence[Point]
        if len(result) == 1:
            candidates = (PrimIntersection(first, second),)
        else:
            candidates = (PrimIntersection(first, second), SecIntersection(first, second))
        taken = np.array(stored.get(frozenset((first, second)), []), dtype=float).reshape(-1, 2)
        for definition, coord in zip(candidates, result):
            if taken.size and np.isclose(taken, coord, rtol=0.0, atol=_SAME_POINT_TOL).all(axis=1).any():
                continue
            out[definition] = coord
    logger.debug("Found %d potential point(s) over %d shape(s)", len(out), len(store.shapes))
    return out


def closest(
    at: Coord,
    candidates: Iterable[T],
    position: Callable[[T], Coord],
    max_distance: Optional[float] = None,
) -> Optional[Tuple[T, float]]:
    """Return ``(candidate, distance)`` for the candidate nearest to ``at``.

    ``None`` when there are no candidates or the nearest one lies farther
    than ``max_distance``.
    """

    items = list(candidates)
    if not items:
        return None
    coords = np.array([position(item) for item in items], dtype=float)
    dists = np.hypot(coords[:, 0] - at[0], coords[:, 1] - at[1])
    best = int(np.argmin(dists))
    best_dist = float(dists[best])
    if max_distance is not None and best_dist > max_distance:
        return None
    return items[best], best_dist


def distance_to_shape(shape: ResolvedShape, at: Coord) -> float:
    """Euclidean distance from ``at`` to the curve of ``shape``."""

    x, y = at
    if isinstance(shape, ResolvedCircle):
        cx, cy = shape.center
        return abs(math.hypot(x - cx, y - cy) - shape.radius)
    if isinstance(shape, ResolvedLine):
        return abs(shape.k * x - y + shape.m) / math.sqrt(shape.k * shape.k + 1.0)
    if isinstance(shape, ResolvedLineUp):
        return abs(x - shape.x)
    raise TypeError(f"unsupported resolved shape {type(shape).__name__}")


def closest_point_definition(store: GeometryStore, at: Coord, max_distance: float) -> Point:
    """Snap ``at`` to a nearby potential point, else make it a free point."""

    candidates = potential_points(store)
    found = closest(at, candidates.items(), lambda item: item[1], max_distance)
    if found is None:
        return Arbitrary(at[0], at[1])
    (definition, _coord), dist = found
    logger.debug("Snapped %r to %r at distance %.6g", at, definition, dist)
    return definition


__all__ = [
    "resolved_points",
    "resolved_shapes",
    "potential_points",
    "closest",
    "distance_to_shape",
    "closest_point_definition",
]
