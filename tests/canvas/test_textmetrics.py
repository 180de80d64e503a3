import cairo
import pytest
from whiteboard.canvas.textmetrics import CairoTextMeasurer, FixedWidthMeasurer


def test_fixed_width():
    measurer = FixedWidthMeasurer(char_width=7.5)
    assert measurer.measure_width("") == 0
    assert measurer.measure_width("abcd") == 30


def test_cairo_empty_text_has_no_width():
    assert CairoTextMeasurer().measure_width("") == 0.0


def test_cairo_width_grows_with_text():
    measurer = CairoTextMeasurer(font_size=16.0)
    short = measurer.measure_width("ab")
    long = measurer.measure_width("abababab")
    assert short > 0
    assert long == pytest.approx(4 * short, rel=0.05)


def test_cairo_width_scales_with_font_size():
    small = CairoTextMeasurer(font_size=10.0).measure_width("hello")
    large = CairoTextMeasurer(font_size=20.0).measure_width("hello")
    assert large > small


def test_cairo_uses_and_restores_given_context():
    surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, 10, 10)
    ctx = cairo.Context(surface)
    ctx.set_font_size(50.0)
    before = ctx.font_extents()
    measurer = CairoTextMeasurer(font_size=8.0, ctx=ctx)
    assert measurer.measure_width("x") > 0
    assert ctx.font_extents() == before
