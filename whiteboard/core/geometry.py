import math
from typing import Optional, TypeVar
from .shape import Point


T = TypeVar("T")

# Maximum per-axis distance at which a point is considered to be "on" a
# handle point.
HANDLE_TOLERANCE = 5.0

# Maximum slack for a point to count as lying on a line segment.
LINE_TOLERANCE = 1.0


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def is_near_point(
    point: Point, target: Point, tolerance: float = HANDLE_TOLERANCE
) -> bool:
    """
    True if both coordinate deltas between point and target are strictly
    below the tolerance (a square, not a circle, around the target).
    """
    return (
        abs(point[0] - target[0]) < tolerance
        and abs(point[1] - target[1]) < tolerance
    )


def near_point(
    point: Point,
    target: Point,
    name: T,
    tolerance: float = HANDLE_TOLERANCE,
) -> Optional[T]:
    """Returns name if point is near target, None otherwise."""
    return name if is_near_point(point, target, tolerance) else None


def is_on_segment(
    a: Point, b: Point, c: Point, tolerance: float = LINE_TOLERANCE
) -> bool:
    """
    Checks whether c lies on the segment a-b. The detour a->c->b is
    compared with the direct distance a->b; for points on the segment
    the two are equal.
    """
    offset = distance(a, b) - (distance(a, c) + distance(b, c))
    return abs(offset) < tolerance


def is_point_in_box(
    point: Point, x1: float, y1: float, x2: float, y2: float
) -> bool:
    """Inclusive containment test against a normalized box."""
    x, y = point
    return x1 <= x <= x2 and y1 <= y <= y2


def is_point_in_ellipse(
    point: Point, cx: float, cy: float, rx: float, ry: float
) -> bool:
    """
    Evaluates the normalized quadratic form of an axis-aligned ellipse.
    Degenerate ellipses (a zero radius) contain no points.
    """
    if rx <= 0 or ry <= 0:
        return False
    x, y = point
    return ((x - cx) / rx) ** 2 + ((y - cy) / ry) ** 2 < 1
