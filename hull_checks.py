from geometry import Point, cross


def half_chain(points: list[Point]) -> list[Point]:
    """
    One monotone chain over points already sorted along the sweep direction.
    Only right turns are removed, so collinear boundary points stay.
    """
    chain = []
    for p in points:
        while len(chain) >= 2 and cross(chain[-2], chain[-1], p) < 0:
            chain.pop()
        chain.append(p)
    return chain


def monotone_chain_hull(points: list[Point]) -> list[Point]:
    """
    Reference hull (Andrew's monotone chain), counter-clockwise from the
    leftmost-lowest point. Input is sorted by (x, y) here.
    """
    ordered = sorted(points)
    if len(ordered) <= 2:
        return ordered

    lower = half_chain(ordered)
    upper = half_chain(ordered[::-1])
    return lower[:-1] + upper[:-1]


def contains_point(polygon: list[Point], p: Point) -> bool:
    """
    Check that p lies inside or on the boundary of a convex polygon
    given in counter-clockwise order.
    """
    n = len(polygon)
    if n == 0:
        return False
    if n == 1:
        return polygon[0] == p
    if any(cross(polygon[i], polygon[(i + 1) % n], p) < 0 for i in range(n)):
        return False

    if all(cross(polygon[0], polygon[i], polygon[i + 1]) == 0 for i in range(1, n - 1)):
        # flat polygon, only the segment between the extreme vertices counts
        xs = [v.x for v in polygon]
        ys = [v.y for v in polygon]
        return min(xs) <= p.x <= max(xs) and min(ys) <= p.y <= max(ys)
    return True
