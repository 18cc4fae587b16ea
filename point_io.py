"""
Plain text point files: one point per line, `x y` separated by whitespace.
"""
import logging
import os

from typing import Iterable
from geometry import Point

log = logging.getLogger(__name__)


def parse_points(lines: Iterable[str]) -> list[Point]:
    """
    Parse points from text lines.
    Blank lines and lines without two leading numbers are skipped.
    """
    points = []
    for lineno, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) < 2:
            log.debug("Skipping line %d: %r", lineno, line)
            continue
        try:
            x, y = map(float, tokens[:2])
        except ValueError:
            log.debug("Skipping line %d: %r", lineno, line)
            continue
        points.append(Point(x, y))
    return points


def read_points(filename: str | os.PathLike) -> list[Point]:
    with open(filename, 'r', encoding='utf-8') as f:
        points = parse_points(f)
    log.debug("Loaded %d points from %s", len(points), os.path.basename(filename))
    return points


def write_points(filename: str | os.PathLike, points: Iterable[Point]):
    """
    Write points one per line. Coordinates are written with repr,
    so reading the file back gives exactly the same values.
    """
    with open(filename, 'w', encoding='utf-8') as f:
        for p in points:
            f.write(f"{float(p.x)!r} {float(p.y)!r}\n")
