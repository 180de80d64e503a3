from __future__ import annotations
import logging
from dataclasses import replace
from typing import Mapping, Optional, Union
from .errors import UnsupportedShapeTypeError
from .shape import (
    Box,
    Ellipse,
    Frame,
    Line,
    Rectangle,
    Shape,
    ShapeType,
    Style,
    Text,
)
from .style import StyleOverrides, default_style, merge_style


logger = logging.getLogger(__name__)


def to_shape_type(value: Union[ShapeType, str]) -> ShapeType:
    """
    Converts a type name to a ShapeType.

    Raises:
        UnsupportedShapeTypeError: if the name is not a known shape type.
    """
    if isinstance(value, ShapeType):
        return value
    try:
        return ShapeType(value)
    except ValueError:
        logger.error(f"Unknown element type: {value!r}")
        raise UnsupportedShapeTypeError(
            f"Unsupported shape type: {value!r}"
        ) from None


def ellipse_geometry(x1: float, y1: float, x2: float, y2: float):
    """Center and radii of the ellipse inscribed in the given corners."""
    return (
        (x1 + x2) / 2,
        (y1 + y2) / 2,
        abs(x1 - x2) / 2,
        abs(y1 - y2) / 2,
    )


def create_shape(
    shape_type: Union[ShapeType, str],
    id: str,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    shape_number: int,
    style: StyleOverrides = None,
    styles: Optional[Mapping[ShapeType, Style]] = None,
) -> Shape:
    """
    Builds a new shape record of the given type.

    Rectangles and frames get min/max-ordered corners right away, ellipses
    get their center and radii. Lines keep their corners as given; their
    canonical order is applied later by normalize(). Text starts empty.

    Args:
        shape_type: One of the ShapeType values (or its name).
        id: Stable identity of the shape.
        x1, y1, x2, y2: The two corners the user dragged out.
        shape_number: The label used for the display title.
        style: Explicit style values; missing ones use the type default.
        styles: Optional table of per-type default styles, overriding the
            built-in defaults.

    Raises:
        UnsupportedShapeTypeError: for an unknown shape type.
        StyleError: for unknown style properties.
    """
    kind = to_shape_type(shape_type)
    resolved = merge_style(default_style(kind, styles), style)

    if kind in (ShapeType.RECTANGLE, ShapeType.FRAME):
        cls = Rectangle if kind == ShapeType.RECTANGLE else Frame
        return cls(
            id=id,
            x1=min(x1, x2),
            y1=min(y1, y2),
            x2=max(x1, x2),
            y2=max(y1, y2),
            shape_number=shape_number,
            style=resolved,
        )
    if kind == ShapeType.LINE:
        return Line(
            id=id,
            x1=x1,
            y1=y1,
            x2=x2,
            y2=y2,
            shape_number=shape_number,
            style=resolved,
        )
    if kind == ShapeType.ELLIPSE:
        cx, cy, rx, ry = ellipse_geometry(x1, y1, x2, y2)
        return Ellipse(
            id=id,
            x1=x1,
            y1=y1,
            x2=x2,
            y2=y2,
            shape_number=shape_number,
            style=resolved,
            cx=cx,
            cy=cy,
            rx=rx,
            ry=ry,
        )

    # Only text is left in the closed set.
    return Text(
        id=id,
        x1=x1,
        y1=y1,
        x2=x2,
        y2=y2,
        shape_number=shape_number,
        style=resolved,
        text="",
    )


def rebuild_shape(shape: Shape, box: Box) -> Shape:
    """
    Creates the replacement record for a shape whose corners changed
    during a drag. Identity, number, style and text content carry over;
    frame children are kept until the next containment pass.
    """
    new_shape = create_shape(
        shape.type,
        shape.id,
        box[0],
        box[1],
        box[2],
        box[3],
        shape.shape_number,
        style=shape.style,
    )
    if isinstance(shape, Text):
        return replace(new_shape, text=shape.text)
    if isinstance(shape, Frame):
        return replace(new_shape, children=shape.children)
    return new_shape
