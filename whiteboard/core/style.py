import logging
from dataclasses import fields, replace
from typing import Any, Dict, Mapping, Optional, Union
from .errors import StyleError
from .shape import ShapeType, Style


logger = logging.getLogger(__name__)

STYLE_KEYS = tuple(f.name for f in fields(Style))

DEFAULT_STYLES: Dict[ShapeType, Style] = {
    ShapeType.RECTANGLE: Style(
        stroke_color="#d9d9d9",
        fill_color="#d9d9d9",
        line_width=1.0,
        corner_radius=0.0,
    ),
    ShapeType.FRAME: Style(
        stroke_color="white",
        fill_color="white",
        line_width=1.0,
        corner_radius=0.0,
    ),
    ShapeType.LINE: Style(
        stroke_color="#d9d9d9",
        fill_color=None,
        line_width=1.0,
        corner_radius=0.0,
    ),
    ShapeType.ELLIPSE: Style(
        stroke_color="#d9d9d9",
        fill_color="#d9d9d9",
        line_width=1.0,
        corner_radius=0.0,
    ),
    ShapeType.TEXT: Style(
        stroke_color="black",
        fill_color=None,
        line_width=1.0,
        corner_radius=0.0,
    ),
}

StyleOverrides = Union[Style, Mapping[str, Any], None]


def merge_style(
    defaults: Style,
    overrides: StyleOverrides = None,
) -> Style:
    """
    Resolves a style from type defaults and caller overrides.

    Only values that were not supplied fall back to the default. A key
    that is missing or set to None counts as not supplied; any other
    value is kept as-is, including falsy ones such as a line width of 0
    or an empty color string. A Style instance counts as fully supplied.

    Raises:
        StyleError: if an override names an unknown style property.
    """
    if overrides is None:
        return defaults
    if isinstance(overrides, Style):
        return overrides

    unknown = set(overrides) - set(STYLE_KEYS)
    if unknown:
        logger.error(f"Rejected unknown style properties: {sorted(unknown)}")
        raise StyleError(
            f"Unknown style properties: {', '.join(sorted(unknown))}"
        )

    supplied = {
        key: value for key, value in overrides.items() if value is not None
    }
    return replace(defaults, **supplied)


def default_style(
    shape_type: ShapeType,
    styles: Optional[Mapping[ShapeType, Style]] = None,
) -> Style:
    """
    Returns the default style for a shape type, looking at the given table
    first (usually EditorConfig.styles) and then at the built-in one.
    """
    if styles and shape_type in styles:
        return styles[shape_type]
    return DEFAULT_STYLES.get(shape_type, Style())
