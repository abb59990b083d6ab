import logging
import os

import numpy as np

from geometry import Point

logger = logging.getLogger(__name__)

DISTRIBUTIONS = ("uniform", "circle", "gaussian", "clusters")


def load_points(filename: str | os.PathLike) -> list[Point]:
    """
    Read points from a text file: the number of points on the first line,
    then one "x y" pair per line.
    """
    with open(filename, 'r', encoding='utf-8') as f:
        lines = [(i, line.strip()) for i, line in enumerate(f, start=1)]
    lines = [(i, line) for i, line in lines if line]

    if not lines:
        raise ValueError(f"{filename}: file is empty")

    header_no, header = lines[0]
    try:
        n = int(header)
    except ValueError:
        raise ValueError(f"{filename}:{header_no}: expected point count, got {header!r}") from None
    if n < 0:
        raise ValueError(f"{filename}:{header_no}: negative point count {n}")
    if len(lines) - 1 < n:
        raise ValueError(f"{filename}: expected {n} points, found {len(lines) - 1}")

    points = []
    for line_no, line in lines[1:n + 1]:
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"{filename}:{line_no}: expected two coordinates, got {line!r}")
        try:
            x, y = map(float, parts)
        except ValueError:
            raise ValueError(f"{filename}:{line_no}: invalid coordinates {line!r}") from None
        points.append(Point(x, y))

    logger.debug("Loaded %d points from %s", len(points), os.path.basename(filename))
    return points


def save_points(filename: str | os.PathLike, points: list[Point]):
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(f"{len(points)}\n")
        for p in points:
            f.write(f"{p.x!r} {p.y!r}\n")


def generate_random_points(n: int, distribution: str = "uniform", seed: int = 42) -> list[Point]:
    if distribution not in DISTRIBUTIONS:
        raise ValueError(f"Unknown distribution {distribution!r}, expected one of {', '.join(DISTRIBUTIONS)}")

    rng = np.random.RandomState(seed)
    points = []

    if distribution == "uniform":
        points = [(rng.uniform(0, 1000), rng.uniform(0, 1000))
                  for _ in range(n)]
    elif distribution == "circle":
        for _ in range(n):
            angle = rng.uniform(0, 2 * np.pi)
            r = rng.uniform(0, 500) ** 0.5
            x = 500 + r * np.cos(angle)
            y = 500 + r * np.sin(angle)
            points.append((x, y))
    elif distribution == "gaussian":
        points = [(rng.normal(500, 150), rng.normal(500, 150))
                  for _ in range(n)]
    elif distribution == "clusters":
        n_clusters = 5
        for i in range(n_clusters):
            cx = rng.uniform(100, 900)
            cy = rng.uniform(100, 900)
            # the first clusters absorb the remainder so exactly n points are produced
            points_per_cluster = n // n_clusters + (1 if i < n % n_clusters else 0)
            for _ in range(points_per_cluster):
                x = rng.normal(cx, 50)
                y = rng.normal(cy, 50)
                points.append((x, y))

    return [Point(float(x), float(y)) for x, y in points]
