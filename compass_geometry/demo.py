"""Euclid I.1: the equilateral triangle on a given segment."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from .ids import PointID, ShapeID
from .model import Arbitrary, Circle, Coord, Line, PrimIntersection, SecIntersection
from .store import GeometryStore, create_store


@dataclass
class Construction:
    store: GeometryStore
    points: Dict[str, PointID] = field(default_factory=dict)
    shapes: Dict[str, ShapeID] = field(default_factory=dict)


def build_equilateral(base: Tuple[Coord, Coord] = ((0.0, 0.0), (1.0, 0.0))) -> Construction:
    """Build the triangle ABC on AB plus the midpoint M of AB.

    C and D are the two intersections of the circles around A and B; M is
    where CD crosses AB.
    """

    store = create_store()
    built = Construction(store)
    (ax, ay), (bx, by) = base
    a = built.points["A"] = store.add_point(Arbitrary(ax, ay))
    b = built.points["B"] = store.add_point(Arbitrary(bx, by))

    circle_a = built.shapes["circle A"] = store.add_shape(Circle(a, b))
    circle_b = built.shapes["circle B"] = store.add_shape(Circle(b, a))
    c = built.points["C"] = store.add_point(PrimIntersection(circle_a, circle_b))
    d = built.points["D"] = store.add_point(SecIntersection(circle_a, circle_b))

    ab = built.shapes["AB"] = store.add_shape(Line(a, b))
    built.shapes["AC"] = store.add_shape(Line(a, c))
    built.shapes["BC"] = store.add_shape(Line(b, c))
    cd = built.shapes["CD"] = store.add_shape(Line(c, d))
    built.points["M"] = store.add_point(PrimIntersection(cd, ab))
    return built
