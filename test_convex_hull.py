import pytest
import numpy as np

from pathlib import Path
from convex_hull import convex_hull, half_hull
from geometry import Point, ccw, cross
from point_io import read_points
from polygon import Polygon, is_convex

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture
def distribution_gen_func():
    return {
        "uniform": lambda low, high, s: np.random.rand(s) * (high - low) + low,
        "normal": lambda low, high, s: np.random.randn(s) * high + low,
    }


def random_point_sets(n_points, distribution_type, limits, distribution_gen_func, n_trials=50):
    np.random.seed(42)

    seeds = np.random.randint(0, 100_000, size=n_trials)
    for seed in seeds:
        np.random.seed(seed)

        gen_func = distribution_gen_func[distribution_type]
        low, high = limits
        xs = gen_func(low, high, n_points).astype(float)
        ys = gen_func(low, high, n_points).astype(float)
        yield [Point(float(xs[i]), float(ys[i])) for i in range(n_points)]


def test_diamond_excludes_interior_point():
    points = [Point(0, 1), Point(1, 0), Point(-1, 0), Point(0, -1), Point(0, 0)]
    hull = convex_hull(points)
    assert len(hull) == 4
    assert Point(0, 0) not in hull.points
    assert hull.points == [Point(0, 1), Point(1, 0), Point(0, -1), Point(-1, 0)]
    assert hull == Polygon([Point(0, 1), Point(1, 0), Point(-1, 0), Point(0, -1)])
    assert str(hull) == "[\n\t(0, 1)\n\t(1, 0)\n\t(0, -1)\n\t(-1, 0)\n]"


def test_colinear_points_excluded():
    points = [Point(0, 0), Point(1, 0), Point(2, 0), Point(1, 1)]
    hull = convex_hull(points)
    assert hull == Polygon([Point(0, 0), Point(2, 0), Point(1, 1)])
    assert Point(1, 0) not in hull.points


def test_duplicates():
    points = [Point(0, 0), Point(2, 0), Point(2, 0), Point(1, 3), Point(1.5, 1), Point(0, 0)]
    hull = convex_hull(points)
    assert hull == Polygon([Point(0, 0), Point(2, 0), Point(1, 3)])


@pytest.mark.parametrize("n_points", [1, 2, 3])
def test_trivial_hull(n_points):
    # colinear triple stays as is
    points = [Point(0, 0), Point(1, 1), Point(2, 2)][:n_points]
    hull = convex_hull(points)
    assert len(hull) == n_points
    assert hull == Polygon(points)


def test_input_is_not_mutated():
    points = [Point(3, 0), Point(0, 1), Point(1, -2), Point(-1, 0), Point(0.5, 0.5)]
    original = list(points)
    convex_hull(points)
    assert points == original


def test_half_hull():
    points = sorted([Point(0, 0), Point(1, 1), Point(2, -1), Point(3, 0.5), Point(4, 0)])
    assert half_hull(points) == [Point(0, 0), Point(1, 1), Point(3, 0.5), Point(4, 0)]
    assert half_hull(points, flip_y=True) == [Point(0, 0), Point(2, -1), Point(4, 0)]


def test_fixture_hull():
    space = read_points(TESTDATA / "convex_hull.in")
    answer = Polygon(read_points(TESTDATA / "convex_hull.out"))
    assert convex_hull(space) == answer


def test_fixture_is_convex():
    assert is_convex(Polygon(read_points(TESTDATA / "convex_hull.out")))


@pytest.mark.parametrize("n_points", [10, 30, 100])
@pytest.mark.parametrize("distribution_type", ["uniform", "normal"])
@pytest.mark.parametrize("limits", [(0, 100), (-100, 100)])
def test_hull_properties(n_points, distribution_type, limits, distribution_gen_func):
    for points in random_point_sets(n_points, distribution_type, limits, distribution_gen_func):
        hull = convex_hull(points)

        assert is_convex(hull)
        assert convex_hull(hull.points) == hull
        assert all(v in points for v in hull)

        tol = 1e-9 * max(abs(limits[0]), abs(limits[1])) ** 2
        sgn = 1 if ccw(hull[0], hull[1], hull[2]) else -1
        for i in range(len(hull)):
            a, b = hull[i], hull[(i + 1) % len(hull)]
            for p in points:
                assert sgn * cross(a, b, p) > -tol


def test_equal_x_can_drop_hull_vertices():
    # equal x points keep input order, both chains start at (0, 4)
    # and (0, 0) is popped from the vertical run
    points = [
        Point(4, 1), Point(0, 4), Point(2, 0), Point(0, 0),
        Point(0, 3), Point(0, 2), Point(1, 2), Point(0, 4),
    ]
    hull = convex_hull(points)
    assert hull == Polygon([Point(0, 4), Point(4, 1), Point(2, 0)])
    assert Point(0, 0) not in hull.points

    # with (0, 0) first among equal x the hull is complete
    reordered = [points[3]] + points[:3] + points[4:]
    assert Point(0, 0) in convex_hull(reordered).points
