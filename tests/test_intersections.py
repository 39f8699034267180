import math

import numpy as np
import pytest

from compass_geometry.intersections import (
    IntersectionKind,
    IntersectionResult,
    intersect_circle_line,
    intersect_circles,
    intersect_lines,
)

TOL = 1e-9


def _line_residual(point, p1, p2):
    dx, dy = p2[0] - p1[0], p2[1] - p1[1]
    cross = (point[0] - p1[0]) * dy - (point[1] - p1[1]) * dx
    return abs(cross) / math.hypot(dx, dy)


def _circle_residual(point, center, r):
    return abs((point[0] - center[0]) ** 2 + (point[1] - center[1]) ** 2 - r * r)


def test_result_equality():
    assert IntersectionResult.none() == IntersectionResult.none()
    assert IntersectionResult.one((3.0, 5.0)) == IntersectionResult.one((3.0, 5.0))
    assert IntersectionResult.one((1.0, 2.0)) != IntersectionResult.one((2.0, 1.0))
    assert IntersectionResult.two((1.0, 2.0), (3.0, 4.0)) == IntersectionResult.two((1.0, 2.0), (3.0, 4.0))
    assert IntersectionResult.two((3.0, 2.0), (1.0, 4.0)) == IntersectionResult.two((1.0, 4.0), (3.0, 2.0))
    assert IntersectionResult.two((1.0, 2.0), (3.0, 4.0)) != IntersectionResult.one((1.0, 2.0))
    assert hash(IntersectionResult.two((0.0, 1.0), (2.0, 3.0))) == hash(
        IntersectionResult.two((2.0, 3.0), (0.0, 1.0))
    )


def test_select_tie_break():
    two = IntersectionResult.two((1.0, 1.0), (2.0, 2.0))
    assert two.select(IntersectionKind.PRIMARY) == (1.0, 1.0)
    assert two.select(IntersectionKind.SECONDARY) == (2.0, 2.0)

    one = IntersectionResult.one((5.0, 6.0))
    assert one.select(IntersectionKind.PRIMARY) == (5.0, 6.0)
    assert one.select(IntersectionKind.SECONDARY) == (5.0, 6.0)

    assert IntersectionResult.none().select(IntersectionKind.PRIMARY) is None
    assert list(two) == [(1.0, 1.0), (2.0, 2.0)]
    assert not IntersectionResult.none()


def test_tangent_circles_give_one_point():
    assert intersect_circles((3.0, 5.0), 2.0, (-1.0, 5.0), 2.0) == IntersectionResult.one((1.0, 5.0))
    internal = intersect_circles((0.0, 0.0), 2.0, (1.0, 0.0), 1.0)
    assert len(internal) == 1
    assert internal.points[0] == pytest.approx((2.0, 0.0))


def test_degenerate_circles_have_no_intersection():
    assert intersect_circles((0.0, 0.0), 1.0, (0.0, 0.0), 1.0) == IntersectionResult.none()
    assert intersect_circles((0.0, 0.0), 1.0, (0.0, 0.0), 2.0) == IntersectionResult.none()
    assert intersect_circles((0.0, 0.0), 0.0, (1.0, 1.0), 0.0) == IntersectionResult.none()
    assert intersect_circles((0.0, 0.0), 0.0, (1.0, 0.0), 1.0) == IntersectionResult.none()
    assert intersect_circles((0.0, 0.0), 1.0, (5.0, 0.0), 1.0) == IntersectionResult.none()


def test_unit_circles_meet_symmetric_about_axis():
    result = intersect_circles((0.0, 0.0), 1.0, (1.0, 0.0), 1.0)
    assert len(result) == 2
    expected = sorted([(0.5, math.sqrt(3) / 2), (0.5, -math.sqrt(3) / 2)])
    for got, want in zip(sorted(result), expected):
        assert got == pytest.approx(want, abs=TOL)


def test_circle_line_known_values():
    assert intersect_circle_line((7.0, 6.0), 5.0, (5.0, 2.0), (9.0, 0.0)) == IntersectionResult.two(
        (3.0, 3.0), (7.0, 1.0)
    )
    assert intersect_circle_line((0.0, 0.0), 5.0, (0.0, 5.0), (1.0, 5.0)) == IntersectionResult.one((0.0, 5.0))
    assert intersect_circle_line((0.0, 0.0), 1.0, (0.0, 0.0), (1.0, 0.0)) == IntersectionResult.two(
        (1.0, 0.0), (-1.0, 0.0)
    )


def test_circle_line_misses_and_degenerate_line():
    assert intersect_circle_line((0.0, 0.0), 1.0, (0.0, 2.0), (1.0, 2.0)) == IntersectionResult.none()
    assert intersect_circle_line((0.0, 0.0), 1.0, (0.5, 0.5), (0.5, 0.5)) == IntersectionResult.none()


def test_line_line_known_values():
    assert intersect_lines((0.0, 0.0), (1.0, 1.0), (0.0, 1.0), (1.0, 0.0)) == IntersectionResult.one((0.5, 0.5))
    assert intersect_lines((2.0, -1.0), (2.0, 3.0), (0.0, 0.0), (1.0, 0.0)) == IntersectionResult.one((2.0, 0.0))


def test_parallel_and_coincident_lines_have_no_intersection():
    assert intersect_lines((0.0, 0.0), (1.0, 1.0), (0.0, 1.0), (1.0, 2.0)) == IntersectionResult.none()
    assert intersect_lines((0.0, 0.0), (1.0, 1.0), (2.0, 2.0), (3.0, 3.0)) == IntersectionResult.none()


def test_random_circle_pairs_satisfy_both_equations():
    rng = np.random.default_rng(20181017)
    hits = 0
    for _ in range(500):
        x1, y1, x2, y2 = rng.uniform(-10.0, 10.0, size=4)
        r1, r2 = rng.uniform(0.1, 10.0, size=2)
        result = intersect_circles((x1, y1), r1, (x2, y2), r2)
        for point in result:
            hits += 1
            assert _circle_residual(point, (x1, y1), r1) < TOL
            assert _circle_residual(point, (x2, y2), r2) < TOL
    assert hits > 0


def test_random_circle_line_pairs_satisfy_both_equations():
    rng = np.random.default_rng(7)
    hits = 0
    for _ in range(500):
        cx, cy, lx1, ly1, lx2, ly2 = rng.uniform(-10.0, 10.0, size=6)
        r = rng.uniform(0.1, 10.0)
        if math.hypot(lx2 - lx1, ly2 - ly1) < 1.0:
            continue
        result = intersect_circle_line((cx, cy), r, (lx1, ly1), (lx2, ly2))
        for point in result:
            hits += 1
            assert _circle_residual(point, (cx, cy), r) < TOL
            assert _line_residual(point, (lx1, ly1), (lx2, ly2)) < TOL
    assert hits > 0


def test_random_line_pairs_satisfy_both_equations():
    rng = np.random.default_rng(11)
    hits = 0
    for _ in range(500):
        p1, p2, p3, p4 = (tuple(pair) for pair in rng.uniform(-10.0, 10.0, size=(4, 2)))
        den = (p1[0] - p2[0]) * (p3[1] - p4[1]) - (p1[1] - p2[1]) * (p3[0] - p4[0])
        if abs(den) < 10.0:
            continue
        result = intersect_lines(p1, p2, p3, p4)
        assert len(result) == 1
        hits += 1
        point = result.points[0]
        assert _line_residual(point, p1, p2) < TOL
        assert _line_residual(point, p3, p4) < TOL
    assert hits > 0


def test_results_are_deterministic():
    args = ((0.3, -1.2), 2.5, (1.7, 0.4), 1.9)
    first = intersect_circles(*args)
    second = intersect_circles(*args)
    assert first.points == second.points
