import math
import pytest
from whiteboard.core.geometry import (
    distance,
    is_near_point,
    is_on_segment,
    is_point_in_box,
    is_point_in_ellipse,
    near_point,
)


def test_distance():
    assert distance((0, 0), (3, 4)) == 5
    assert distance((1, 1), (1, 1)) == 0
    assert distance((-1, 0), (1, 0)) == 2


def test_near_point_uses_strict_per_axis_tolerance():
    assert is_near_point((12, 22), (10, 20))
    assert is_near_point((14.9, 14.9), (10, 10))
    assert not is_near_point((15, 10), (10, 10))
    assert not is_near_point((10, 5), (10, 10))


def test_near_point_returns_name():
    assert near_point((1, 1), (0, 0), "tl") == "tl"
    assert near_point((9, 9), (0, 0), "tl") is None
    assert near_point((9, 9), (0, 0), "tl", tolerance=10) == "tl"


def test_point_on_segment():
    assert is_on_segment((0, 0), (10, 0), (5, 0))
    assert is_on_segment((0, 0), (10, 0), (5, 0.5))
    assert not is_on_segment((0, 0), (10, 0), (5, 5))
    # Beyond the end of the segment.
    assert not is_on_segment((0, 0), (10, 0), (12, 0))


def test_point_on_segment_custom_tolerance():
    assert is_on_segment((0, 0), (10, 0), (5, 5), tolerance=5)


def test_point_in_box_is_inclusive():
    assert is_point_in_box((0, 0), 0, 0, 10, 10)
    assert is_point_in_box((10, 10), 0, 0, 10, 10)
    assert not is_point_in_box((10.01, 5), 0, 0, 10, 10)


def test_point_in_ellipse():
    assert is_point_in_ellipse((10, 5), 10, 5, 10, 5)
    assert is_point_in_ellipse((19, 5), 10, 5, 10, 5)
    # On the boundary is outside (strict inequality).
    assert not is_point_in_ellipse((20, 5), 10, 5, 10, 5)
    # Corners of the bounding box are outside.
    assert not is_point_in_ellipse((1, 1), 10, 5, 10, 5)


def test_degenerate_ellipse_contains_nothing():
    assert not is_point_in_ellipse((0, 0), 0, 0, 0, 5)
    assert not is_point_in_ellipse((0, 0), 0, 0, 5, 0)


def test_distance_is_symmetric():
    a, b = (1.5, -2.0), (-3.0, 4.25)
    assert distance(a, b) == pytest.approx(distance(b, a))
    assert distance(a, b) == pytest.approx(math.hypot(4.5, 6.25))
