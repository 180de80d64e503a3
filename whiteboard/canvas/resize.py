from __future__ import annotations
import math
from typing import Optional, Union
from ..core.shape import Box, Point, ShapeType
from .region import Handle


# Angle step for shift-constrained lines.
SNAP_ANGLE = math.pi / 4


def resize(
    pointer: Point, handle: Optional[Union[Handle, str]], box: Box
) -> Box:
    """
    Moves the corner (or corner coordinates) of a box that belongs to the
    dragged handle to the pointer. All other coordinates are returned
    untouched. An unknown handle leaves the box as it is.
    """
    x, y = pointer
    x1, y1, x2, y2 = box
    try:
        region = Handle(handle)
    except ValueError:
        return Box(x1, y1, x2, y2)

    if region in (Handle.TOP_LEFT, Handle.START):
        return Box(x, y, x2, y2)
    if region == Handle.TOP_RIGHT:
        return Box(x1, y, x, y2)
    if region == Handle.BOTTOM_LEFT:
        return Box(x, y1, x2, y)
    if region in (Handle.BOTTOM_RIGHT, Handle.END):
        return Box(x1, y1, x, y)
    return Box(x1, y1, x2, y2)


def translate_box(box: Box, dx: float, dy: float) -> Box:
    x1, y1, x2, y2 = box
    return Box(x1 + dx, y1 + dy, x2 + dx, y2 + dy)


def _direction(value: float) -> float:
    # A zero delta extends in the positive direction so the box stays
    # square when the drag runs exactly along one axis.
    return -1.0 if value < 0 else 1.0


def constrained_draw(
    origin: Point,
    pointer: Point,
    shape_type: Union[ShapeType, str],
) -> Point:
    """
    Computes the second corner of a shape drawn with the constraint
    modifier (Shift) held.

    Boxes (rectangles, ellipses, frames) become squares whose side is the
    larger of the two drag distances, extending in the drag direction on
    each axis. Lines snap to the nearest multiple of 45 degrees and keep
    their drawn length. Other types are not constrained.
    """
    ox, oy = origin
    px, py = pointer
    dx = px - ox
    dy = py - oy

    if shape_type in (ShapeType.RECTANGLE, ShapeType.ELLIPSE, ShapeType.FRAME):
        size = max(abs(dx), abs(dy))
        return ox + size * _direction(dx), oy + size * _direction(dy)

    if shape_type == ShapeType.LINE:
        angle = math.atan2(dy, dx)
        length = math.hypot(dx, dy)
        snapped = round(angle / SNAP_ANGLE) * SNAP_ANGLE
        return (
            ox + length * math.cos(snapped),
            oy + length * math.sin(snapped),
        )

    return px, py
