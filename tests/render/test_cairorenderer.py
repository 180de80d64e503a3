import cairo
import numpy as np
import pytest
from dataclasses import replace
from typing import Tuple
from whiteboard.core.errors import ShapeDispatchError
from whiteboard.core.factory import create_shape
from whiteboard.core.frame import update_frame_children
from whiteboard.core.shape import Style
from whiteboard.render.cairorenderer import CairoRenderer

# --- Test Constants ---
WIDTH, HEIGHT = 100, 100
BLACK = (0, 0, 0, 255)
RED = (255, 0, 0, 255)
WHITE = (255, 255, 255, 255)


@pytest.fixture
def surface_and_ctx() -> Tuple[cairo.ImageSurface, cairo.Context]:
    """Provides a standard 100x100 black testing surface and its context."""
    surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, WIDTH, HEIGHT)
    ctx = cairo.Context(surface)
    ctx.set_source_rgb(0, 0, 0)
    ctx.paint()
    return surface, ctx


def get_pixel_data(surface: cairo.ImageSurface) -> np.ndarray:
    """Extracts pixel data from a Cairo surface into an RGBA array."""
    surface.flush()
    buf = surface.get_data()
    data = np.ndarray(shape=(HEIGHT, WIDTH, 4), dtype=np.uint8, buffer=buf)
    return data[:, :, [2, 1, 0, 3]]  # BGRA -> RGBA


def assert_pixel(data: np.ndarray, x: int, y: int, expected, tolerance=10):
    actual = tuple(int(v) for v in data[y, x])
    for i in range(4):
        assert abs(actual[i] - expected[i]) <= tolerance, (
            f"Pixel at ({x}, {y}) was {actual}, expected {expected}"
        )


def test_rectangle_is_filled(surface_and_ctx):
    surface, ctx = surface_and_ctx
    rect = create_shape(
        "rectangle", "r", 10, 10, 60, 60, 1, style={"fill_color": "red"}
    )
    CairoRenderer(ctx).draw(rect)
    data = get_pixel_data(surface)
    assert_pixel(data, 35, 35, RED)
    assert_pixel(data, 80, 80, BLACK)


def test_zero_line_width_draws_no_stroke(surface_and_ctx):
    surface, ctx = surface_and_ctx
    style = Style(stroke_color="white", fill_color=None, line_width=0)
    rect = create_shape("rectangle", "r", 10, 10, 60, 60, 1, style=style)
    CairoRenderer(ctx).draw(rect)
    data = get_pixel_data(surface)
    assert_pixel(data, 10, 35, BLACK)
    assert_pixel(data, 35, 35, BLACK)


def test_line_is_stroked(surface_and_ctx):
    surface, ctx = surface_and_ctx
    line = create_shape(
        "line",
        "l",
        0,
        50.5,
        100,
        50.5,
        1,
        style={"stroke_color": "white", "line_width": 3},
    )
    CairoRenderer(ctx).draw(line)
    data = get_pixel_data(surface)
    assert_pixel(data, 50, 50, WHITE)
    assert_pixel(data, 50, 20, BLACK)


def test_ellipse_fills_interior_only(surface_and_ctx):
    surface, ctx = surface_and_ctx
    ellipse = create_shape(
        "ellipse", "e", 0, 0, 100, 50, 1, style={"fill_color": "white"}
    )
    CairoRenderer(ctx).draw(ellipse)
    data = get_pixel_data(surface)
    assert_pixel(data, 50, 25, WHITE)
    assert_pixel(data, 2, 2, BLACK)


def test_text_is_drawn(surface_and_ctx):
    surface, ctx = surface_and_ctx
    text = create_shape(
        "text", "t", 5, 5, 5, 5, 1, style={"stroke_color": "white"}
    )
    text = replace(text, text="MMMM")
    CairoRenderer(ctx).draw(text)
    data = get_pixel_data(surface)
    assert data[5:25, 5:60, 0].max() > 128


def test_frame_draws_title_above(surface_and_ctx):
    surface, ctx = surface_and_ctx
    frame = create_shape(
        "frame", "f", 10, 30, 90, 90, 1, style={"fill_color": "red"}
    )
    CairoRenderer(ctx).draw(frame)
    data = get_pixel_data(surface)
    assert_pixel(data, 50, 60, RED)
    # The gray title sits in the band above the frame.
    assert data[10:30, 10:60, 0].max() > 64


def test_draw_all_respects_z_order(surface_and_ctx):
    surface, ctx = surface_and_ctx
    shapes = update_frame_children(
        [
            create_shape(
                "rectangle", "a", 0, 0, 60, 60, 1, style={"fill_color": "red"}
            ),
            create_shape(
                "rectangle",
                "b",
                30,
                30,
                90,
                90,
                2,
                style={"fill_color": "white"},
            ),
        ]
    )
    CairoRenderer(ctx).draw_all(shapes)
    data = get_pixel_data(surface)
    assert_pixel(data, 15, 15, RED)
    assert_pixel(data, 45, 45, WHITE)


def test_context_state_is_restored(surface_and_ctx):
    _, ctx = surface_and_ctx
    ctx.set_line_width(7)
    rect = create_shape("rectangle", "r", 10, 10, 20, 20, 1)
    CairoRenderer(ctx).draw(rect)
    assert ctx.get_line_width() == 7


def test_unknown_shape_raises(surface_and_ctx):
    _, ctx = surface_and_ctx
    with pytest.raises(ShapeDispatchError):
        CairoRenderer(ctx).draw(object())  # type: ignore[arg-type]
