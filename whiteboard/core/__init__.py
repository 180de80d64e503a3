"""
The core package holds the immutable shape records and the pure
functions that build, normalize and relate them.
"""

from .errors import (
    WhiteboardError,
    UnsupportedShapeTypeError,
    ShapeDispatchError,
    StyleError,
    ConfigError,
)
from .shape import (
    Point,
    Box,
    ShapeType,
    Style,
    Shape,
    Rectangle,
    Frame,
    Line,
    Ellipse,
    Text,
)
from .factory import create_shape, rebuild_shape
from .normalize import normalize, adjustment_required
from .frame import is_inside, frame_of, update_frame_children

__all__ = [
    "WhiteboardError",
    "UnsupportedShapeTypeError",
    "ShapeDispatchError",
    "StyleError",
    "ConfigError",
    "Point",
    "Box",
    "ShapeType",
    "Style",
    "Shape",
    "Rectangle",
    "Frame",
    "Line",
    "Ellipse",
    "Text",
    "create_shape",
    "rebuild_shape",
    "normalize",
    "adjustment_required",
    "is_inside",
    "frame_of",
    "update_frame_children",
]
