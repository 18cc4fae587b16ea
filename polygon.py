import functools
import logging

from typing import Iterable
from geometry import Point, ccw, centroid, cross

log = logging.getLogger(__name__)


def compare_around(center: Point, p: Point, q: Point) -> int:
    """
    Angular comparator of p and q relative to center.

    Points of the right half-plane (including the vertical line through center)
    go before points of the left half-plane. Inside a half-plane points are
    ordered by the sign of cross(center, p, q), ties are broken by distance
    to the center, the farthest point first.

    Returns -1 if p goes before q, 1 if q goes before p, 0 otherwise.
    """
    px, py = p.x - center.x, p.y - center.y
    qx, qy = q.x - center.x, q.y - center.y

    if px >= 0 and qx < 0:
        return -1
    if px < 0 and qx >= 0:
        return 1

    if px == 0 and qx == 0:
        if py >= 0 or qy >= 0:
            less = p.y > q.y
            greater = q.y > p.y
        else:
            less = q.y > p.y
            greater = p.y > q.y
        return -1 if less else 1 if greater else 0

    det = cross(center, p, q)
    if det < 0:
        return -1
    if det > 0:
        return 1

    d1 = px * px + py * py
    d2 = qx * qx + qy * qy
    if d1 > d2:
        return -1
    if d1 < d2:
        return 1
    return 0


def ccw_sort(points: Iterable[Point]) -> list[Point]:
    """
    Sort points around their centroid, see `compare_around`.
    The sweep starts at the top of the right half-plane.
    """
    points = list(points)
    if not points:
        return points

    center = centroid(points)
    key = functools.cmp_to_key(functools.partial(compare_around, center))
    return sorted(points, key=key)


class Polygon:
    """
    Planar ring of points kept in canonical angular order.
    Vertex 0 and vertex len - 1 are adjacent.
    """

    def __init__(self, points: Iterable[Point] = ()):
        self._vertices: list[Point] = ccw_sort(points)

    def sort(self):
        """
        Re-establish canonical order of the vertices.
        """
        self._vertices = ccw_sort(self._vertices)

    def append(self, point: Point):
        """
        Add a vertex. The polygon is re-sorted immediately,
        so the canonical order always holds.
        """
        self._vertices.append(point)
        self.sort()
        log.debug("Appended %s, polygon has %d vertices", point, len(self._vertices))

    @property
    def points(self) -> list[Point]:
        return self._vertices.copy()

    def is_convex(self) -> bool:
        return is_convex(self)

    def __len__(self):
        return len(self._vertices)

    def __getitem__(self, index):
        # slices are new lists, never views
        return self._vertices[index]

    def __iter__(self):
        return iter(self._vertices)

    def __eq__(self, other):
        if not isinstance(other, Polygon):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(v == w for v, w in zip(self._vertices, other._vertices))

    def __repr__(self):
        return f"Polygon({self._vertices!r})"

    def __str__(self):
        lines = ["["]
        lines.extend(f"\t{v}" for v in self._vertices)
        lines.append("]")
        return "\n".join(lines)


def is_convex(polygon: Polygon) -> bool:
    """
    Check that all turns along the ring have the same direction.
    The direction is taken from the first three vertices.
    Polygons with less than three vertices are not convex.

    Time complexity: O(n).
    """
    n = len(polygon)
    if n <= 2:
        return False

    turn_right = not ccw(polygon[0], polygon[1], polygon[2])
    for i in range(1, n - 2):
        if ccw(polygon[i], polygon[i + 1], polygon[i + 2]) == turn_right:
            return False

    if polygon[0] != polygon[-1]:
        if ccw(polygon[-2], polygon[-1], polygon[0]) == turn_right:
            return False
    return True
