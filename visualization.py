import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from geometry import Point
from polygon import Polygon


def plot_points(points: list[Point], ax: Axes | None = None) -> Axes:
    if ax is None:
        ax = plt.gca()
    x = [p.x for p in points]
    y = [p.y for p in points]
    ax.scatter(x, y)
    return ax


def plot_polygon(
    polygon: Polygon,
    ax: Axes | None = None,
    c: str | None = None,
    closed: bool = True,
) -> Axes:
    """
    Draw polygon edges in canonical vertex order.
    With `closed` the last vertex is connected back to the first one.
    """
    if ax is None:
        ax = plt.gca()
    if len(polygon) == 0:
        return ax

    ring = polygon.points
    if closed and len(ring) > 2:
        ring.append(ring[0])

    xs = [p.x for p in ring]
    ys = [p.y for p in ring]
    for i in range(len(ring) - 1):
        ax.plot([xs[i], xs[i + 1]], [ys[i], ys[i + 1]], c=c)
    ax.scatter(xs, ys, c=c, s=2)
    return ax
