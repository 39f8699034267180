"""Core data structures: symbolic definitions and resolved geometry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .ids import PointID, ShapeID

Coord = Tuple[float, float]


@dataclass(frozen=True)
class Arbitrary:
    """Free point whose coordinate is stored directly."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)


@dataclass(frozen=True)
class PrimIntersection:
    """First intersection of two shapes."""

    first: ShapeID
    second: ShapeID


@dataclass(frozen=True)
class SecIntersection:
    """Second intersection of two shapes."""

    first: ShapeID
    second: ShapeID


Point = Union[Arbitrary, PrimIntersection, SecIntersection]
POINT_TYPES = (Arbitrary, PrimIntersection, SecIntersection)


@dataclass(frozen=True)
class Circle:
    """Circle around ``center`` passing through ``through``."""

    center: PointID
    through: PointID


@dataclass(frozen=True)
class Line:
    """Line through two points."""

    a: PointID
    b: PointID


Shape = Union[Circle, Line]
SHAPE_TYPES = (Circle, Line)


class _Equation:
    def as_equation(self) -> str:
        from .equations import as_equation

        return as_equation(self)  # type: ignore[arg-type]


@dataclass(frozen=True)
class ResolvedCircle(_Equation):
    center: Coord
    radius: float


@dataclass(frozen=True)
class ResolvedLine(_Equation):
    """Non-vertical line ``y = k*x + m``."""

    k: float
    m: float


@dataclass(frozen=True)
class ResolvedLineUp(_Equation):
    """Vertical line ``x = x``."""

    x: float


ResolvedShape = Union[ResolvedCircle, ResolvedLine, ResolvedLineUp]


class ResolutionError(RuntimeError):
    """Raised internally when a point or shape cannot be resolved."""


class MissingReferenceError(ResolutionError):
    def __init__(self, ident: Union[PointID, ShapeID]):
        super().__init__(f"{ident} is not defined")
        self.ident = ident


class NoIntersectionError(ResolutionError):
    def __init__(self, point: PointID, first: ShapeID, second: ShapeID, detail: str = "no solution"):
        super().__init__(f"{point}: {first} and {second} do not intersect ({detail})")
        self.point = point
        self.shapes = (first, second)


class CyclicReferenceError(ResolutionError):
    def __init__(self, ident: Union[PointID, ShapeID]):
        super().__init__(f"{ident} depends on itself")
        self.ident = ident


class ResolutionDepthError(ResolutionError):
    def __init__(self, ident: Union[PointID, ShapeID], max_depth: Optional[int] = None):
        limit = f"max_depth={max_depth}" if max_depth is not None else "the interpreter recursion limit"
        super().__init__(f"resolving {ident} exceeds {limit}")
        self.ident = ident
        self.max_depth = max_depth


class NotArbitraryError(ValueError):
    """Raised when moving a point that is not an ``Arbitrary`` point."""

    def __init__(self, point_id: PointID, current: Optional[Point] = None):
        kind = type(current).__name__ if current is not None else "unknown"
        super().__init__(f"{point_id} is a {kind} point and cannot be moved")
        self.point_id = point_id


__all__ = [
    "Coord",
    "Arbitrary",
    "PrimIntersection",
    "SecIntersection",
    "Point",
    "POINT_TYPES",
    "Circle",
    "Line",
    "Shape",
    "SHAPE_TYPES",
    "ResolvedCircle",
    "ResolvedLine",
    "ResolvedLineUp",
    "ResolvedShape",
    "ResolutionError",
    "MissingReferenceError",
    "NoIntersectionError",
    "CyclicReferenceError",
    "ResolutionDepthError",
    "NotArbitraryError",
]
