"""
Planar point type and orientation predicates.

All comparisons are done against a fixed absolute tolerance EPS.
Inputs lying within EPS of a decision boundary (two nearly equal
coordinates, three nearly colinear points) may be classified either way.
This is ordinary floating-point imprecision and not reported as an error.
"""
import math
import sys

from dataclasses import dataclass
from typing import Iterable

EPS = sys.float_info.epsilon


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    eps = EPS

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        if math.isfinite(self.x) and math.isfinite(other.x):
            x_eq = abs(self.x - other.x) < self.eps
        else:
            x_eq = self.x == other.x
        if math.isfinite(self.y) and math.isfinite(other.y):
            y_eq = abs(self.y - other.y) < self.eps
        else:
            y_eq = self.y == other.y
        return x_eq and y_eq

    def __lt__(self, other):
        # x only, points with (nearly) equal x are left unordered
        # or abs(self.x - other.x) <= self.eps and self.y < other.y
        return (
            self != other
            and abs(self.x - other.x) > self.eps
            and self.x < other.x
        )

    def __add__(self, other):
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float):
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float):
        return Point(self.x / k, self.y / k)

    def __str__(self):
        return f"({self.x}, {self.y})"


def dist(p: Point, q: Point) -> float:
    """
    Euclidean distance between points p and q.
    """
    return math.hypot(p.x - q.x, p.y - q.y)


def cross(p: Point, q: Point, r: Point) -> float:
    """
    Cross product of segments pq and pr.
    Positive if r lies to the left of the directed line p -> q,
    its magnitude is twice the area of triangle pqr.
    """
    return (q.x - p.x) * (r.y - p.y) - (r.x - p.x) * (q.y - p.y)


def ccw(p: Point, q: Point, r: Point) -> bool:
    """
    Path p -> q -> r makes a strict left turn.
    """
    return cross(p, q, r) > 0


def colinear(p: Point, q: Point, r: Point) -> bool:
    return abs(cross(p, q, r)) < EPS


def centroid(points: Iterable[Point]) -> Point:
    """
    Arithmetic mean of the point coordinates.
    """
    points = list(points)
    if not points:
        raise ValueError("centroid of an empty point set is undefined")

    cx = sum(p.x for p in points) / len(points)
    cy = sum(p.y for p in points) / len(points)
    return Point(cx, cy)
