from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar, NamedTuple, Optional, Tuple


Point = Tuple[float, float]


class ShapeType(str, Enum):
    """The closed set of shape kinds the editor knows about."""

    RECTANGLE = "rectangle"
    ELLIPSE = "ellipse"
    LINE = "line"
    FRAME = "frame"
    TEXT = "text"


class Box(NamedTuple):
    """Two bounding-box corners. Their order depends on the shape type."""

    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class Style:
    """
    Resolved drawing style of a shape. Colors are CSS-like strings as the
    renderer understands them; None means "don't paint".
    """

    stroke_color: Optional[str] = "black"
    fill_color: Optional[str] = None
    line_width: float = 1.0
    corner_radius: float = 0.0


@dataclass(frozen=True)
class Shape:
    """
    Immutable base record shared by every shape type. Shapes are never
    edited in place: every change produces a complete replacement record,
    so a snapshot of shapes can be shared freely between history entries.
    """

    type: ClassVar[ShapeType]

    id: str
    x1: float
    y1: float
    x2: float
    y2: float
    shape_number: int
    style: Style = field(default_factory=Style)

    @property
    def center_x(self) -> float:
        return (self.x1 + self.x2) / 2

    @property
    def center_y(self) -> float:
        return (self.y1 + self.y2) / 2

    @property
    def box(self) -> Box:
        return Box(self.x1, self.y1, self.x2, self.y2)

    @property
    def title(self) -> str:
        """Display title synthesized from the type and the shape number."""
        return f"{self.type.value.capitalize()} {self.shape_number}"

    def with_box(self, box: Box) -> "Shape":
        """
        Returns a copy with new corners. Type-specific derived values are
        not updated here, see normalize() and rebuild_shape() for that.
        """
        return replace(self, x1=box[0], y1=box[1], x2=box[2], y2=box[3])


@dataclass(frozen=True)
class Rectangle(Shape):
    type: ClassVar[ShapeType] = ShapeType.RECTANGLE


@dataclass(frozen=True)
class Frame(Shape):
    type: ClassVar[ShapeType] = ShapeType.FRAME

    # Shapes geometrically contained by this frame. Recomputed after every
    # commit by update_frame_children(); the frame does not own them.
    children: Tuple[Shape, ...] = ()


@dataclass(frozen=True)
class Line(Shape):
    type: ClassVar[ShapeType] = ShapeType.LINE

    @property
    def start(self) -> Point:
        return self.x1, self.y1

    @property
    def end(self) -> Point:
        return self.x2, self.y2


@dataclass(frozen=True)
class Ellipse(Shape):
    type: ClassVar[ShapeType] = ShapeType.ELLIPSE

    cx: float = 0.0
    cy: float = 0.0
    rx: float = 0.0
    ry: float = 0.0


@dataclass(frozen=True)
class Text(Shape):
    type: ClassVar[ShapeType] = ShapeType.TEXT

    text: str = ""


SHAPE_CLASSES = {
    cls.type: cls for cls in (Rectangle, Frame, Line, Ellipse, Text)
}
