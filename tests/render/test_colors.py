import pytest
from whiteboard.render.colors import FALLBACK, to_rgba


def test_named_colors():
    assert to_rgba("white") == (1.0, 1.0, 1.0, 1.0)
    assert to_rgba("Black") == (0.0, 0.0, 0.0, 1.0)


def test_hex_colors():
    assert to_rgba("#ff0000") == (1.0, 0.0, 0.0, 1.0)
    assert to_rgba("#0f0") == (0.0, 1.0, 0.0, 1.0)
    r, g, b, a = to_rgba("#d9d9d980")
    assert r == pytest.approx(217 / 255)
    assert a == pytest.approx(128 / 255)


def test_no_paint():
    assert to_rgba(None) is None
    assert to_rgba("") is None


def test_unknown_color_uses_fallback():
    assert to_rgba("chartreuse-ish") == FALLBACK
    assert to_rgba("#zzzzzz") == FALLBACK
