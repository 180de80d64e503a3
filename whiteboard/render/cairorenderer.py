import math
import logging
from typing import Iterable, Optional
import cairo
from ..config import EditorConfig
from ..core.errors import ShapeDispatchError
from ..core.shape import Ellipse, Frame, Line, Rectangle, Shape, Style, Text
from .colors import to_rgba


logger = logging.getLogger(__name__)

TITLE_COLOR = "gray"
TITLE_FONT_SIZE = 12.0
TITLE_OFFSET = 8.0


class CairoRenderer:
    """
    Draws normalized shapes onto a cairo context. The context belongs to
    the caller; its state is saved and restored around every shape.
    """

    def __init__(
        self, ctx: cairo.Context, config: Optional[EditorConfig] = None
    ):
        self.ctx = ctx
        self.config = config or EditorConfig()

    def draw_all(self, shapes: Iterable[Shape]):
        """Draws shapes in z-order, first one at the bottom."""
        for shape in shapes:
            self.draw(shape)

    def draw(self, shape: Shape):
        """
        Raises:
            ShapeDispatchError: if shape is not one of the known types.
        """
        ctx = self.ctx
        ctx.save()
        try:
            if isinstance(shape, Frame):
                self._draw_frame(shape)
            elif isinstance(shape, Rectangle):
                self._draw_rectangle(shape)
            elif isinstance(shape, Line):
                self._draw_line(shape)
            elif isinstance(shape, Ellipse):
                self._draw_ellipse(shape)
            elif isinstance(shape, Text):
                self._draw_text(shape)
            else:
                logger.error(f"Cannot draw {type(shape).__name__}")
                raise ShapeDispatchError(
                    f"Unknown shape type: {type(shape).__name__}"
                )
        finally:
            ctx.restore()

    def _fill_and_stroke(self, style: Style):
        ctx = self.ctx
        fill = to_rgba(style.fill_color)
        stroke = to_rgba(style.stroke_color)
        if fill:
            ctx.set_source_rgba(*fill)
            if stroke and style.line_width > 0:
                ctx.fill_preserve()
            else:
                ctx.fill()
        if stroke and style.line_width > 0:
            ctx.set_source_rgba(*stroke)
            ctx.set_line_width(style.line_width)
            ctx.stroke()
        ctx.new_path()

    def _rounded_rect_path(
        self, x: float, y: float, width: float, height: float, radius: float
    ):
        ctx = self.ctx
        radius = max(0.0, min(radius, width / 2, height / 2))
        if radius == 0:
            ctx.rectangle(x, y, width, height)
            return
        ctx.new_sub_path()
        ctx.arc(x + width - radius, y + radius, radius, -math.pi / 2, 0)
        ctx.arc(
            x + width - radius, y + height - radius, radius, 0, math.pi / 2
        )
        ctx.arc(x + radius, y + height - radius, radius, math.pi / 2, math.pi)
        ctx.arc(x + radius, y + radius, radius, math.pi, 3 * math.pi / 2)
        ctx.close_path()

    def _draw_rectangle(self, shape: Shape):
        self._rounded_rect_path(
            shape.x1,
            shape.y1,
            shape.x2 - shape.x1,
            shape.y2 - shape.y1,
            shape.style.corner_radius,
        )
        self._fill_and_stroke(shape.style)

    def _draw_frame(self, shape: Frame):
        self._draw_rectangle(shape)

        ctx = self.ctx
        color = to_rgba(TITLE_COLOR)
        assert color is not None
        ctx.set_source_rgba(*color)
        ctx.select_font_face(
            self.config.font_family,
            cairo.FONT_SLANT_NORMAL,
            cairo.FONT_WEIGHT_NORMAL,
        )
        ctx.set_font_size(TITLE_FONT_SIZE)
        ctx.move_to(shape.x1, shape.y1 - TITLE_OFFSET)
        ctx.show_text(shape.title)
        ctx.new_path()

    def _draw_line(self, shape: Line):
        ctx = self.ctx
        ctx.move_to(shape.x1, shape.y1)
        ctx.line_to(shape.x2, shape.y2)
        # A line has no interior to fill.
        self._fill_and_stroke(
            Style(
                stroke_color=shape.style.stroke_color,
                fill_color=None,
                line_width=shape.style.line_width,
            )
        )

    def _draw_ellipse(self, shape: Ellipse):
        if shape.rx <= 0 or shape.ry <= 0:
            return
        ctx = self.ctx
        ctx.save()
        ctx.translate(shape.cx, shape.cy)
        ctx.scale(shape.rx, shape.ry)
        ctx.arc(0.0, 0.0, 1.0, 0.0, 2 * math.pi)
        # Restore before stroking so the line width is not scaled.
        ctx.restore()
        self._fill_and_stroke(shape.style)

    def _draw_text(self, shape: Text):
        if not shape.text:
            return
        ctx = self.ctx
        color = to_rgba(shape.style.stroke_color)
        if color is None:
            return
        ctx.set_source_rgba(*color)
        ctx.select_font_face(
            self.config.font_family,
            cairo.FONT_SLANT_NORMAL,
            cairo.FONT_WEIGHT_NORMAL,
        )
        ctx.set_font_size(self.config.font_size)
        ascent = ctx.font_extents()[0]
        ctx.move_to(shape.x1, shape.y1 + ascent)
        ctx.show_text(shape.text)
        ctx.new_path()
