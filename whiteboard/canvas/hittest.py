from __future__ import annotations
import logging
from collections.abc import Sequence
from typing import NamedTuple, Optional
from ..config import EditorConfig
from ..core.errors import ShapeDispatchError
from ..core.geometry import (
    is_on_segment,
    is_point_in_box,
    is_point_in_ellipse,
    near_point,
)
from ..core.shape import Ellipse, Frame, Line, Point, Rectangle, Shape, Text
from .region import Handle
from .textmetrics import CairoTextMeasurer, TextMeasurer


logger = logging.getLogger(__name__)

_default_config = EditorConfig()
_default_measurer: Optional[TextMeasurer] = None


def _get_default_measurer() -> TextMeasurer:
    global _default_measurer
    if _default_measurer is None:
        _default_measurer = CairoTextMeasurer(
            _default_config.font_family, _default_config.font_size
        )
    return _default_measurer


class Hit(NamedTuple):
    """A shape under the pointer together with the region that was hit."""

    shape: Shape
    handle: Handle


def _corner_handle(
    point: Point, shape: Shape, tolerance: float
) -> Optional[Handle]:
    x1, y1, x2, y2 = shape.box
    return (
        near_point(point, (x1, y1), Handle.TOP_LEFT, tolerance)
        or near_point(point, (x2, y1), Handle.TOP_RIGHT, tolerance)
        or near_point(point, (x1, y2), Handle.BOTTOM_LEFT, tolerance)
        or near_point(point, (x2, y2), Handle.BOTTOM_RIGHT, tolerance)
    )


def position_within(
    point: Point,
    shape: Shape,
    measurer: Optional[TextMeasurer] = None,
    config: Optional[EditorConfig] = None,
) -> Optional[Handle]:
    """
    Determines which part of a shape lies under the given point.

    Handles are checked before the body, so a point near a corner of a
    rectangle reports the corner even though it is also inside. Shapes
    are expected to be normalized.

    Args:
        point: The pointer position in canvas coordinates.
        shape: The shape to test.
        measurer: Text width measurement for text shapes. Defaults to a
            cairo-backed measurer.
        config: Tolerances and text line height.

    Returns:
        The hit Handle, or None if the point misses the shape.

    Raises:
        ShapeDispatchError: if shape is not one of the known shape types.
    """
    config = config or _default_config
    tolerance = config.handle_tolerance

    if isinstance(shape, Line):
        start = near_point(point, shape.start, Handle.START, tolerance)
        end = near_point(point, shape.end, Handle.END, tolerance)
        if start or end:
            return start or end
        if is_on_segment(
            shape.start, shape.end, point, config.line_tolerance
        ):
            return Handle.INSIDE
        return None

    if isinstance(shape, (Rectangle, Frame)):
        corner = _corner_handle(point, shape, tolerance)
        if corner:
            return corner
        if is_point_in_box(point, *shape.box):
            return Handle.INSIDE
        return None

    if isinstance(shape, Ellipse):
        corner = _corner_handle(point, shape, tolerance)
        if corner:
            return corner
        cx, cy = shape.center_x, shape.center_y
        rx = abs(shape.x2 - shape.x1) / 2
        ry = abs(shape.y2 - shape.y1) / 2
        if is_point_in_ellipse(point, cx, cy, rx, ry):
            return Handle.INSIDE
        return None

    if isinstance(shape, Text):
        measurer = measurer or _get_default_measurer()
        width = measurer.measure_width(shape.text)
        x, y = shape.x1, shape.y1
        if is_point_in_box(
            point, x, y, x + width, y + config.text_line_height
        ):
            return Handle.INSIDE
        return None

    logger.error(f"Cannot hit-test object of type {type(shape).__name__}")
    raise ShapeDispatchError(
        f"Unknown shape type: {type(shape).__name__}"
    )


def pick_at(
    point: Point,
    shapes: Optional[Sequence[Shape]],
    include_frames: bool = False,
    measurer: Optional[TextMeasurer] = None,
    config: Optional[EditorConfig] = None,
) -> Optional[Hit]:
    """
    Finds the topmost shape under the point. Later shapes in the sequence
    are drawn on top and therefore win. Frames are skipped unless
    include_frames is set, so they don't steal hits from their contents.

    Returns:
        A Hit, or None for a miss or an empty, absent or invalid
        collection.
    """
    if not shapes or not isinstance(shapes, Sequence):
        return None

    for shape in reversed(shapes):
        if not include_frames and isinstance(shape, Frame):
            continue
        handle = position_within(point, shape, measurer, config)
        if handle:
            return Hit(shape, handle)
    return None
