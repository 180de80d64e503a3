from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional
import cairo


class TextMeasurer(ABC):
    """
    Measures the rendered width of a line of text. The hit tester calls
    through this instead of owning a drawing surface.
    """

    @abstractmethod
    def measure_width(self, text: str) -> float:
        pass


class CairoTextMeasurer(TextMeasurer):
    """
    Measures text with cairo's toy font API. If no context is given, a
    1x1 scratch surface is created; otherwise the caller's context is
    used as-is and its font state is saved and restored around each call.
    """

    def __init__(
        self,
        font_family: str = "sans-serif",
        font_size: float = 16.0,
        ctx: Optional[cairo.Context] = None,
    ):
        self.font_family = font_family
        self.font_size = font_size
        if ctx is None:
            surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, 1, 1)
            ctx = cairo.Context(surface)
        self._ctx = ctx

    def measure_width(self, text: str) -> float:
        if not text:
            return 0.0
        ctx = self._ctx
        ctx.save()
        try:
            ctx.select_font_face(
                self.font_family,
                cairo.FONT_SLANT_NORMAL,
                cairo.FONT_WEIGHT_NORMAL,
            )
            ctx.set_font_size(self.font_size)
            extents = ctx.text_extents(text)
        finally:
            ctx.restore()
        return extents.x_advance


class FixedWidthMeasurer(TextMeasurer):
    """Assumes every character has the same advance width."""

    def __init__(self, char_width: float = 8.0):
        self.char_width = char_width

    def measure_width(self, text: str) -> float:
        return len(text) * self.char_width
