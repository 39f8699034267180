import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from compass_geometry import as_equation
from compass_geometry.demo import build_equilateral
from compass_geometry.model import Coord

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_base(value: str) -> Tuple[Coord, Coord]:
    parts = [part.strip() for part in value.split(",") if part.strip()]
    if len(parts) != 4:
        raise argparse.ArgumentTypeError("base needs four numbers: X1,Y1,X2,Y2")
    try:
        x1, y1, x2, y2 = (float(part) for part in parts)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid base {value!r}: {exc}") from exc
    return (x1, y1), (x2, y2)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Resolve the Euclid I.1 construction and print its geometry"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--base",
        type=_parse_base,
        default=((0.0, 0.0), (1.0, 0.0)),
        help="Free points A and B as X1,Y1,X2,Y2 (default: 0,0,1,0)",
    )
    parser.add_argument(
        "--check",
        action="append",
        default=[],
        metavar="NAME",
        help="Exit with status 1 if the named point does not resolve (repeatable)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    built = build_equilateral(args.base)
    store = built.store
    logger.info("Built construction with %d point(s) and %d shape(s)", len(store.points), len(store.shapes))

    unresolved: List[str] = []
    print("Points:")
    for name, point_id in built.points.items():
        coord = store.resolve_point(point_id)
        if coord is None:
            unresolved.append(name)
            logger.warning("Point %s (%s) unresolved: %s", name, point_id, store.explain_point(point_id))
            print(f"  {name}: unresolved")
        else:
            print(f"  {name}: ({coord[0]:.6f}, {coord[1]:.6f})")

    print("Shapes:")
    for name, shape_id in built.shapes.items():
        resolved = store.resolve_shape(shape_id)
        print(f"  {name}: {as_equation(resolved) if resolved is not None else 'unresolved'}")

    unknown = [name for name in args.check if name not in built.points]
    if unknown:
        parser.error(f"unknown point(s) for --check: {', '.join(unknown)}")
    failed = [name for name in args.check if name in unresolved]
    if failed:
        logger.error("Required point(s) unresolved: %s", ", ".join(failed))
        raise SystemExit(1)


if __name__ == "__main__":
    main(sys.argv[1:])
