import logging

import numpy as np

from functools import cmp_to_key
from typing import Iterable, Protocol, TypeVar

from geometry import Point, cross_product, norm_squared

logger = logging.getLogger(__name__)


class Vector2D(Protocol):
    x: float
    y: float

    def __sub__(self, other): ...


P = TypeVar("P", bound=Vector2D)


class Sink(Protocol):
    def append(self, item) -> None: ...


def lowest_point(points: list[P]) -> int:
    """
    Index of the point with the smallest y coordinate.
    Ties are broken by the smallest x coordinate; among exact duplicates the first one wins.
    """
    return min(range(len(points)), key=lambda i: (points[i].y, points[i].x))


class CompareByAngle:
    """
    Orders points by the angle that (p - origin) makes with the x axis.
    Points on the same ray from the origin are ordered by distance, closer first.
    No explicit angles are computed, only the sign of the cross product.
    """

    def __init__(self, origin: Vector2D):
        self.origin = origin

    def __call__(self, lhs: Vector2D, rhs: Vector2D) -> int:
        a = lhs - self.origin
        b = rhs - self.origin

        turn = cross_product(a, b)
        if turn > 0:
            return -1
        if turn < 0:
            return 1

        dist_a = norm_squared(a)
        dist_b = norm_squared(b)
        if dist_a < dist_b:
            return -1
        if dist_a > dist_b:
            return 1
        return 0


def sort_by_angle(points: Iterable[P], origin: P) -> list[P]:
    return sorted(points, key=cmp_to_key(CompareByAngle(origin)))


def sweep(anchor: P, ordered: list[P]) -> list[P]:
    """
    Build the hull from points sorted by angle around the anchor.

    The anchor is appended once more to the sequence so the closing edge
    is checked like any other one, and dropped from the result afterwards.
    Right turns (negative cross product) pop the top of the stack,
    collinear points are kept.
    """
    candidates = ordered + [anchor]
    hull = [anchor, candidates[0]]

    popped = 0
    for p in candidates[1:]:
        while len(hull) >= 2:
            last = hull[-1] - hull[-2]
            curr = p - hull[-1]
            if cross_product(last, curr) >= 0:
                break
            hull.pop()
            popped += 1
        hull.append(p)

    hull.pop()
    logger.debug("Sweep finished: %d vertices kept, %d popped", len(hull), popped)
    return hull


def graham_scan(points: Iterable[P], out: Sink) -> int:
    """
    Convex hull of a finite set of 2D points (Graham scan).

    Hull vertices are written to `out` in counter-clockwise order,
    starting from the lowest (then leftmost) point. Inputs with fewer than
    three points are copied unchanged. The input is never modified.
    Returns the number of vertices written.
    """
    points = list(points)

    if len(points) < 3:
        hull = points
    else:
        idx = lowest_point(points)
        anchor = points[idx]
        logger.debug("Anchor %s selected among %d points", anchor, len(points))

        rest = sort_by_angle(points[:idx] + points[idx + 1:], anchor)
        hull = sweep(anchor, rest)

    for p in hull:
        out.append(p)
    return len(hull)


def convex_hull(points: Iterable[P]) -> list[P]:
    hull = []
    graham_scan(points, hull)
    return hull


def convex_hull_array(points: np.ndarray) -> np.ndarray:
    """
    Convex hull of an (n, 2) array of coordinates, returned as an (m, 2) array.
    """
    points = np.asarray(points, dtype=float)
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"Expected an array of shape (n, 2), got {points.shape}")

    hull = convex_hull(Point(float(x), float(y)) for x, y in points)
    return np.array([[p.x, p.y] for p in hull], dtype=float).reshape(-1, 2)
