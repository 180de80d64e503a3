from __future__ import annotations
from enum import Enum
from typing import Set


class Handle(str, Enum):
    """Named interactive regions of a shape."""

    TOP_LEFT = "tl"
    TOP_RIGHT = "tr"
    BOTTOM_LEFT = "bl"
    BOTTOM_RIGHT = "br"
    START = "start"
    END = "end"
    INSIDE = "inside"


CORNER_HANDLES: Set[Handle] = {
    Handle.TOP_LEFT,
    Handle.TOP_RIGHT,
    Handle.BOTTOM_LEFT,
    Handle.BOTTOM_RIGHT,
}

ENDPOINT_HANDLES: Set[Handle] = {Handle.START, Handle.END}

RESIZE_HANDLES: Set[Handle] = CORNER_HANDLES | ENDPOINT_HANDLES

# Handles whose drag direction runs from top-left to bottom-right.
NWSE_HANDLES: Set[Handle] = {
    Handle.TOP_LEFT,
    Handle.BOTTOM_RIGHT,
    Handle.START,
    Handle.END,
}

NESW_HANDLES: Set[Handle] = {Handle.TOP_RIGHT, Handle.BOTTOM_LEFT}
