import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from geometry import Point


def plot_points(points: list[Point], ax: Axes | None = None):
    x = [p.x for p in points]
    y = [p.y for p in points]
    if ax is None:
        plt.scatter(x, y, s=4)
    else:
        ax.scatter(x, y, s=4)


def plot_hull(hull: list[Point], ax: Axes | None = None, color: str = 'r'):
    """
    Draw the hull as a closed polygon, vertices are expected in boundary order.
    """
    if ax is None:
        ax = plt.gca()
    if not hull:
        return

    closed = hull + [hull[0]]
    ax.plot([p.x for p in closed], [p.y for p in closed], c=color)
    ax.scatter([p.x for p in hull], [p.y for p in hull], c=color, s=12)
    ax.scatter([hull[0].x], [hull[0].y], c='k', marker='x', s=40)
