from .region import Handle
from .cursor import Cursor, cursor_for
from .hittest import Hit, position_within, pick_at
from .resize import resize, constrained_draw, translate_box
from .textmetrics import TextMeasurer, CairoTextMeasurer, FixedWidthMeasurer

__all__ = [
    "Handle",
    "Cursor",
    "cursor_for",
    "Hit",
    "position_within",
    "pick_at",
    "resize",
    "constrained_draw",
    "translate_box",
    "TextMeasurer",
    "CairoTextMeasurer",
    "FixedWidthMeasurer",
]
