from enum import Enum
from typing import Optional, Union
from .region import Handle, NESW_HANDLES, NWSE_HANDLES


class Cursor(str, Enum):
    """Pointer cursors, named like their CSS/GDK counterparts."""

    RESIZE_NWSE = "nwse-resize"
    RESIZE_NESW = "nesw-resize"
    MOVE = "move"
    DEFAULT = "default"


def cursor_for(handle: Optional[Union[Handle, str]]) -> Cursor:
    """Maps a hit handle to the cursor that should be shown over it."""
    try:
        region = Handle(handle)
    except ValueError:
        return Cursor.DEFAULT
    if region in NWSE_HANDLES:
        return Cursor.RESIZE_NWSE
    if region in NESW_HANDLES:
        return Cursor.RESIZE_NESW
    if region == Handle.INSIDE:
        return Cursor.MOVE
    return Cursor.DEFAULT
