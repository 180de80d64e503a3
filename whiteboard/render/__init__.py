from .cairorenderer import CairoRenderer
from .colors import ColorRGBA, to_rgba

__all__ = ["CairoRenderer", "ColorRGBA", "to_rgba"]
