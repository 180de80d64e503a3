from __future__ import annotations
import logging
from dataclasses import replace
from typing import List, Optional, Sequence
from .shape import Frame, Shape


logger = logging.getLogger(__name__)


def is_inside(shape: Optional[Shape], frame: Optional[Shape]) -> bool:
    """
    True if the box of shape lies entirely within the box of frame.
    Both are expected in canonical form. Missing arguments are never
    inside anything.
    """
    if shape is None or frame is None:
        return False
    return (
        shape.x1 >= frame.x1
        and shape.y1 >= frame.y1
        and shape.x2 <= frame.x2
        and shape.y2 <= frame.y2
    )


def children_of(frame: Shape, shapes: Sequence[Shape]) -> List[Shape]:
    """All non-frame shapes contained in the frame, in z-order."""
    return [
        shape
        for shape in shapes
        if not isinstance(shape, Frame) and is_inside(shape, frame)
    ]


def frame_of(shape: Shape, shapes: Sequence[Shape]) -> Optional[Frame]:
    """
    The topmost frame that contains the shape, or None. A frame is never
    its own container.
    """
    for candidate in reversed(shapes):
        if (
            isinstance(candidate, Frame)
            and candidate.id != shape.id
            and is_inside(shape, candidate)
        ):
            return candidate
    return None


def update_frame_children(shapes: Sequence[Shape]) -> List[Shape]:
    """
    Recomputes the children of every frame in the collection. Returns a
    new list; frames whose children did not change are kept as-is.
    """
    result: List[Shape] = []
    for shape in shapes:
        if isinstance(shape, Frame):
            children = tuple(children_of(shape, shapes))
            if children != shape.children:
                logger.debug(
                    f"{shape.title} now contains {len(children)} shape(s)"
                )
                shape = replace(shape, children=children)
        result.append(shape)
    return result
