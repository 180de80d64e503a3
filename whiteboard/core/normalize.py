from dataclasses import replace
from typing import Union
from .factory import ellipse_geometry, to_shape_type
from .shape import Box, Ellipse, Frame, Line, Rectangle, Shape, ShapeType


def adjustment_required(shape_type: Union[ShapeType, str]) -> bool:
    """Whether shapes of this type need their corners reordered."""
    return to_shape_type(shape_type) in (
        ShapeType.LINE,
        ShapeType.RECTANGLE,
        ShapeType.FRAME,
    )


def normalize(shape: Shape) -> Shape:
    """
    Reduces a shape to its canonical stored form. Idempotent.

    - Rectangles and frames: corners become (min, min) and (max, max).
    - Ellipses: corners are ordered like rectangles; center and radii
      are recomputed from them.
    - Lines: the start is the lexicographically smaller endpoint by
      (x, then y).
    - Anything else is returned unchanged.
    """
    x1, y1, x2, y2 = shape.x1, shape.y1, shape.x2, shape.y2

    if isinstance(shape, (Rectangle, Frame)):
        canonical = Box(min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))
        if canonical == (x1, y1, x2, y2):
            return shape
        return shape.with_box(canonical)

    if isinstance(shape, Ellipse):
        cx, cy, rx, ry = ellipse_geometry(x1, y1, x2, y2)
        return replace(
            shape,
            x1=min(x1, x2),
            y1=min(y1, y2),
            x2=max(x1, x2),
            y2=max(y1, y2),
            cx=cx,
            cy=cy,
            rx=rx,
            ry=ry,
        )

    if isinstance(shape, Line):
        if (x1, y1) <= (x2, y2):
            return shape
        return shape.with_box(Box(x2, y2, x1, y1))

    return shape
