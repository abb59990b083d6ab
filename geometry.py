from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Point:
    x: float
    y: float

    def __sub__(self, other):
        return Point(self.x - other.x, self.y - other.y)


def cross_product(a: Point, b: Point) -> float:
    """
    2D cross product of vectors a and b.
    Positive for a counter-clockwise turn from a to b, negative for clockwise.
    """
    return a.x * b.y - a.y * b.x


def dot_product(a: Point, b: Point) -> float:
    return a.x * b.x + a.y * b.y


def norm_squared(a: Point) -> float:
    return dot_product(a, a)


def cross(o: Point, a: Point, b: Point) -> float:
    """
    Cross product of segments oa and ob.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)
