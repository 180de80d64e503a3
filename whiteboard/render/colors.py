import logging
from typing import Optional, Tuple


logger = logging.getLogger(__name__)

# A fully resolved, render-ready RGBA color.
ColorRGBA = Tuple[float, float, float, float]

NAMED_COLORS = {
    "black": (0.0, 0.0, 0.0, 1.0),
    "white": (1.0, 1.0, 1.0, 1.0),
    "gray": (0.5, 0.5, 0.5, 1.0),
    "grey": (0.5, 0.5, 0.5, 1.0),
    "red": (1.0, 0.0, 0.0, 1.0),
    "green": (0.0, 0.5, 0.0, 1.0),
    "blue": (0.0, 0.0, 1.0, 1.0),
    "transparent": (0.0, 0.0, 0.0, 0.0),
}

# Returned for colors that can't be parsed, so mistakes stand out.
FALLBACK = (1.0, 0.0, 1.0, 1.0)


def to_rgba(color: Optional[str]) -> Optional[ColorRGBA]:
    """
    Resolves a color name or #rgb, #rrggbb or #rrggbbaa hex string.
    None and the empty string mean "no paint" and resolve to None.
    """
    if not color:
        return None
    name = color.strip().lower()
    if name in NAMED_COLORS:
        return NAMED_COLORS[name]

    digits = name[1:] if name.startswith("#") else ""
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) == 6:
        digits += "ff"
    if len(digits) == 8:
        try:
            r, g, b, a = (
                int(digits[i:i + 2], 16) / 255.0 for i in range(0, 8, 2)
            )
            return r, g, b, a
        except ValueError:
            pass

    logger.warning(f"Unknown color '{color}'. Using fallback.")
    return FALLBACK
