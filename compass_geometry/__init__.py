from .config import ResolverConfig, get_resolver_config, set_resolver_config
from .equations import as_equation, equation_string, format_number
from .ids import IdAllocator, PointID, ShapeID
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
    CyclicReferenceError,
    Line,
    MissingReferenceError,
    NoIntersectionError,
    NotArbitraryError,
    PrimIntersection,
    ResolutionDepthError,
    ResolutionError,
    ResolvedCircle,
    ResolvedLine,
    ResolvedLineUp,
    SecIntersection,
)
from .queries import (
    closest,
    closest_point_definition,
    distance_to_shape,
    potential_points,
    resolved_points,
    resolved_shapes,
)
from .resolver import Resolver
from .store import GeometryStore, create_store

__all__ = [
    'ResolverConfig',
    'get_resolver_config',
    'set_resolver_config',
    'as_equation',
    'equation_string',
    'format_number',
    'IdAllocator',
    'PointID',
    'ShapeID',
    'IntersectionKind',
    'IntersectionResult',
    'intersect_circle_line',
    'intersect_circles',
    'intersect_lines',
    'Arbitrary',
    'PrimIntersection',
    'SecIntersection',
    'Circle',
    'Line',
    'ResolvedCircle',
    'ResolvedLine',
    'ResolvedLineUp',
    'ResolutionError',
    'MissingReferenceError',
    'NoIntersectionError',
    'CyclicReferenceError',
    'ResolutionDepthError',
    'NotArbitraryError',
    'Resolver',
    'GeometryStore',
    'create_store',
    'closest',
    'closest_point_definition',
    'distance_to_shape',
    'potential_points',
    'resolved_points',
    'resolved_shapes',
]
