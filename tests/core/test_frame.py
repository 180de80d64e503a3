from whiteboard.core.factory import create_shape
from whiteboard.core.frame import (
    children_of,
    frame_of,
    is_inside,
    update_frame_children,
)
from whiteboard.core.shape import Frame


def _frame(fid="f", x1=0, y1=0, x2=100, y2=100, number=1):
    return create_shape("frame", fid, x1, y1, x2, y2, number)


def _rect(rid, x1, y1, x2, y2, number=2):
    return create_shape("rectangle", rid, x1, y1, x2, y2, number)


def test_is_inside():
    frame = _frame()
    assert is_inside(_rect("a", 10, 10, 20, 20), frame)
    # Touching the border still counts.
    assert is_inside(_rect("b", 0, 0, 100, 100), frame)
    assert not is_inside(_rect("c", 90, 90, 110, 110), frame)
    assert not is_inside(_rect("d", -1, 10, 20, 20), frame)


def test_is_inside_with_missing_arguments():
    frame = _frame()
    assert not is_inside(None, frame)
    assert not is_inside(_rect("a", 10, 10, 20, 20), None)


def test_children_of_skips_frames():
    outer = _frame("outer")
    inner = _frame("inner", 10, 10, 50, 50, 2)
    rect = _rect("r", 20, 20, 30, 30, 3)
    assert children_of(outer, [outer, inner, rect]) == [rect]


def test_update_frame_children():
    frame = _frame()
    inside = _rect("in", 10, 10, 20, 20)
    outside = _rect("out", 200, 200, 210, 210, 3)
    shapes = update_frame_children([frame, inside, outside])
    updated = shapes[0]
    assert isinstance(updated, Frame)
    assert updated.children == (inside,)
    assert shapes[1:] == [inside, outside]


def test_update_frame_children_drops_shapes_that_left():
    frame = _frame()
    rect = _rect("r", 10, 10, 20, 20)
    shapes = update_frame_children([frame, rect])
    moved = rect.with_box((150, 150, 160, 160))
    shapes = update_frame_children([shapes[0], moved])
    assert shapes[0].children == ()


def test_update_frame_children_keeps_unchanged_frames():
    frame = _frame()
    shapes = update_frame_children([frame])
    assert shapes[0] is frame


def test_frame_of_returns_topmost_frame():
    lower = _frame("lower", 0, 0, 100, 100, 1)
    upper = _frame("upper", 5, 5, 60, 60, 2)
    rect = _rect("r", 10, 10, 20, 20, 3)
    assert frame_of(rect, [lower, upper, rect]) is upper
    assert frame_of(_rect("x", 70, 70, 80, 80), [lower, upper]) is lower
    assert frame_of(_rect("y", 170, 70, 180, 80), [lower, upper]) is None


def test_frame_is_not_its_own_container():
    frame = _frame()
    assert frame_of(frame, [frame]) is None
