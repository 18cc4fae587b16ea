import logging

from typing import Iterable
from geometry import Point, ccw
from polygon import Polygon

log = logging.getLogger(__name__)


def half_hull(points: list[Point], flip_y: bool = False) -> list[Point]:
    """
    Upper chain of points sorted by x, from the leftmost to the rightmost point.
    With `flip_y` the chain is built over points mirrored by y and mirrored back,
    which gives the lower chain.
    Time complexity: O(n).
    """
    if flip_y:
        points = [Point(p.x, -p.y) for p in points]

    hull = points[:2]
    for p in points[2:]:
        while len(hull) >= 2 and not ccw(p, hull[-1], hull[-2]):
            hull.pop()
        hull.append(p)

    if flip_y:
        hull = [Point(p.x, -p.y) for p in hull]
    return hull


def convex_hull(points: Iterable[Point]) -> Polygon:
    """
    Andrew's monotone chain algorithm for convex hull.
    Colinear points on hull edges are dropped.

    Points are ordered by x only, points sharing an x coordinate keep their
    input order. For such inputs the chains can start from a point inside
    a vertical run, so true hull vertices may be missing from the result
    and the result depends on input order.
    Time complexity: O(n*log(n)).
    """
    points = list(points)
    if len(points) <= 3:
        return Polygon(points)

    points.sort()
    upper = half_hull(points)
    lower = half_hull(points, flip_y=True)
    log.debug(
        "Hull of %d points: %d upper, %d lower vertices",
        len(points), len(upper), len(lower),
    )

    # chain endpoints are shared
    return Polygon(upper + lower[1:-1])
