from __future__ import annotations
import uuid
import logging
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Dict, Optional, Tuple, Union
from blinker import Signal
from .canvas.cursor import Cursor, cursor_for
from .canvas.hittest import Hit, pick_at
from .canvas.region import Handle
from .canvas.resize import constrained_draw, resize, translate_box
from .canvas.textmetrics import CairoTextMeasurer, TextMeasurer
from .config import EditorConfig
from .core.errors import ShapeDispatchError
from .core.factory import create_shape, rebuild_shape, to_shape_type
from .core.frame import update_frame_children
from .core.normalize import normalize
from .core.shape import Box, Frame, Point, Shape, ShapeType, Text
from .input import InputSource, PressedKeys
from .undo import HistoryManager


logger = logging.getLogger(__name__)

Snapshot = Tuple[Shape, ...]


class DragMode(Enum):
    DRAW = auto()
    MOVE = auto()
    RESIZE = auto()


@dataclass
class _Drag:
    mode: DragMode
    shape: Shape  # The shape as it was when the drag started.
    handle: Optional[Handle]
    origin: Point
    base: Snapshot  # The collection before the drag started.
    moved: bool = False


def _replace_shapes(
    shapes: Snapshot, replacements: Dict[str, Shape]
) -> Snapshot:
    return tuple(replacements.get(shape.id, shape) for shape in shapes)


def _working_set(drag: _Drag) -> Snapshot:
    """The collection a drag edits; a drawn shape is appended on top."""
    if drag.mode == DragMode.DRAW:
        return drag.base + (drag.shape,)
    return drag.base


def _anchor_for(handle: Handle, box: Box) -> Point:
    """The corner that stays put while the given handle is dragged."""
    x1, y1, x2, y2 = box
    if handle in (Handle.TOP_LEFT, Handle.START):
        return x2, y2
    if handle == Handle.TOP_RIGHT:
        return x1, y2
    if handle == Handle.BOTTOM_LEFT:
        return x2, y1
    return x1, y1


class BoardEditor:
    """
    Drives the shape collection from pointer and keyboard input.

    The collection lives in a HistoryManager as immutable snapshots. A
    drag rewrites the current snapshot in place while it is in flight; on
    release the pre-drag snapshot is put back and the result is committed
    as a single new history entry, so every drag is one undo step. An
    aborted drag (focus loss, cancel_drag(), or a new press without a
    release) restores the pre-drag snapshot.
    """

    def __init__(
        self,
        history: Optional[HistoryManager] = None,
        config: Optional[EditorConfig] = None,
        measurer: Optional[TextMeasurer] = None,
    ):
        self.config = config or EditorConfig()
        self.measurer = measurer or CairoTextMeasurer(
            self.config.font_family, self.config.font_size
        )
        self.history: HistoryManager = history or HistoryManager(())
        self.keys = PressedKeys()
        self.tool: Optional[ShapeType] = None
        self.selected_id: Optional[str] = None
        self.cursor: Cursor = Cursor.DEFAULT
        self._drag: Optional[_Drag] = None
        self._source: Optional[InputSource] = None
        self._last_shape_number = max(
            (s.shape_number for s in self.shapes), default=0
        )

        # Sent with the editor as sender whenever the collection changes.
        self.changed = Signal()
        self.selection_changed = Signal()
        self.history.changed.connect(self._on_history_changed)

    @property
    def shapes(self) -> Snapshot:
        return self.history.current

    @property
    def selected(self) -> Optional[Shape]:
        if self.selected_id is None:
            return None
        return self.find(self.selected_id)

    @property
    def is_dragging(self) -> bool:
        return self._drag is not None

    def find(self, shape_id: str) -> Optional[Shape]:
        for shape in self.shapes:
            if shape.id == shape_id:
                return shape
        return None

    def set_tool(self, tool: Optional[Union[ShapeType, str]]):
        self.tool = None if tool is None else to_shape_type(tool)

    def attach(self, source: InputSource):
        """Starts listening to an input source."""
        if self._source is source:
            return
        self.detach()
        self._source = source
        source.pointer_pressed.connect(self._on_pointer_pressed)
        source.pointer_moved.connect(self._on_pointer_moved)
        source.pointer_released.connect(self._on_pointer_released)
        source.focus_lost.connect(self._on_focus_lost)
        self.keys.attach(source)

    def detach(self):
        """Stops listening to the attached input source, if any."""
        source = self._source
        if source is None:
            return
        self.cancel_drag()
        source.pointer_pressed.disconnect(self._on_pointer_pressed)
        source.pointer_moved.disconnect(self._on_pointer_moved)
        source.pointer_released.disconnect(self._on_pointer_released)
        source.focus_lost.disconnect(self._on_focus_lost)
        self.keys.detach()
        self._source = None

    def _on_pointer_pressed(self, sender, *, x: float, y: float):
        self.pointer_down(x, y)

    def _on_pointer_moved(self, sender, *, x: float, y: float):
        self.pointer_move(x, y)

    def _on_pointer_released(self, sender, *, x: float, y: float):
        self.pointer_up(x, y)

    def _on_focus_lost(self, sender, **kwargs):
        self.cancel_drag()

    def _on_history_changed(self, sender, **kwargs):
        self.changed.send(self)

    def _select(self, shape_id: Optional[str]):
        if shape_id == self.selected_id:
            return
        self.selected_id = shape_id
        self.selection_changed.send(self, shape_id=shape_id)

    def _next_shape_number(self) -> int:
        self._last_shape_number = max(
            self._last_shape_number,
            max((s.shape_number for s in self.shapes), default=0),
        ) + 1
        return self._last_shape_number

    def pick(self, x: float, y: float) -> Optional[Hit]:
        """
        Finds the shape under the pointer. Shapes inside frames take
        precedence; a frame is only hit where no other shape is.
        """
        point = (x, y)
        return pick_at(
            point, self.shapes, False, self.measurer, self.config
        ) or pick_at(point, self.shapes, True, self.measurer, self.config)

    def pointer_down(self, x: float, y: float):
        if self._drag is not None:
            logger.warning("Pointer pressed during a drag, cancelling it")
            self.cancel_drag()

        if self.tool is not None:
            self._begin_draw(x, y)
            return

        hit = self.pick(x, y)
        if hit is None:
            self._select(None)
            return

        self._select(hit.shape.id)
        if hit.handle == Handle.INSIDE:
            mode = DragMode.MOVE
        else:
            mode = DragMode.RESIZE
        self._drag = _Drag(
            mode=mode,
            shape=hit.shape,
            handle=hit.handle,
            origin=(x, y),
            base=self.shapes,
        )
        logger.debug(f"Begin {mode.name} of {hit.shape.title}")

    def _begin_draw(self, x: float, y: float):
        assert self.tool is not None
        shape = create_shape(
            self.tool,
            str(uuid.uuid4()),
            x,
            y,
            x,
            y,
            self._next_shape_number(),
            styles=self.config.styles,
        )
        base = self.shapes
        self._select(shape.id)

        if isinstance(shape, Text):
            # Text is placed, not dragged out; content comes via set_text().
            self.history.set_state(
                lambda shapes: shapes + (shape,), overwrite=False
            )
            return

        self._drag = _Drag(
            mode=DragMode.DRAW,
            shape=shape,
            handle=Handle.BOTTOM_RIGHT,
            origin=(x, y),
            base=base,
        )
        self.history.set_state(base + (shape,), overwrite=True)
        logger.debug(f"Begin drawing {shape.title}")

    def pointer_move(self, x: float, y: float):
        drag = self._drag
        if drag is None:
            hit = self.pick(x, y) if self.tool is None else None
            self.cursor = cursor_for(hit.handle if hit else None)
            return

        drag.moved = True
        replacements = self._drag_result(drag, (x, y))
        self.history.set_state(
            _replace_shapes(_working_set(drag), replacements), overwrite=True
        )

    def _drag_result(
        self, drag: _Drag, pointer: Point
    ) -> Dict[str, Shape]:
        shape = drag.shape

        if drag.mode == DragMode.MOVE:
            dx = pointer[0] - drag.origin[0]
            dy = pointer[1] - drag.origin[1]
            moved = {
                shape.id: rebuild_shape(
                    shape, translate_box(shape.box, dx, dy)
                )
            }
            if isinstance(shape, Frame):
                for child in shape.children:
                    moved[child.id] = rebuild_shape(
                        child, translate_box(child.box, dx, dy)
                    )
            return moved

        if drag.mode == DragMode.DRAW:
            x2, y2 = pointer
            if self.keys.shift:
                x2, y2 = constrained_draw(drag.origin, pointer, shape.type)
            box = Box(shape.x1, shape.y1, x2, y2)
            return {shape.id: rebuild_shape(shape, box)}

        assert drag.handle is not None
        if self.keys.shift:
            anchor = _anchor_for(drag.handle, shape.box)
            pointer = constrained_draw(anchor, pointer, shape.type)
        box = resize(pointer, drag.handle, shape.box)
        return {shape.id: rebuild_shape(shape, box)}

    def pointer_up(self, x: float, y: float):
        drag = self._drag
        if drag is None:
            return
        self._drag = None

        if not drag.moved:
            # A click without movement is not an edit.
            self.history.set_state(drag.base, overwrite=True)
            if drag.mode == DragMode.DRAW:
                self._select(None)
            return

        replacements = self._drag_result(drag, (x, y))
        final = {
            shape_id: normalize(shape)
            for shape_id, shape in replacements.items()
        }
        shapes = tuple(
            update_frame_children(_replace_shapes(_working_set(drag), final))
        )

        self.history.set_state(drag.base, overwrite=True)
        self.history.set_state(shapes, overwrite=False)
        logger.debug(f"Committed {drag.mode.name} of {drag.shape.title}")

    def cancel_drag(self):
        """Aborts the drag in flight and restores the pre-drag state."""
        drag = self._drag
        if drag is None:
            return
        self._drag = None
        logger.debug(f"Cancelled {drag.mode.name} of {drag.shape.title}")
        self.history.set_state(drag.base, overwrite=True)
        if drag.mode == DragMode.DRAW:
            self._select(None)

    def set_text(self, shape_id: str, text: str) -> Shape:
        """
        Commits new content for a text shape; its box grows to fit.

        Raises:
            KeyError: if no shape has the given id.
            ShapeDispatchError: if the shape is not a text shape.
        """
        self.cancel_drag()
        shape = self.find(shape_id)
        if shape is None:
            raise KeyError(shape_id)
        if not isinstance(shape, Text):
            raise ShapeDispatchError(f"{shape.title} does not hold text")

        width = self.measurer.measure_width(text)
        updated = replace(
            shape,
            text=text,
            x2=shape.x1 + width,
            y2=shape.y1 + self.config.text_line_height,
        )
        self._commit({shape_id: updated})
        return updated

    def delete_shape(self, shape_id: str) -> bool:
        self.cancel_drag()
        if self.find(shape_id) is None:
            return False
        self.history.set_state(
            lambda shapes: tuple(
                update_frame_children(
                    [s for s in shapes if s.id != shape_id]
                )
            )
        )
        if self.selected_id == shape_id:
            self._select(None)
        return True

    def _commit(self, replacements: Dict[str, Shape]):
        self.history.set_state(
            lambda shapes: tuple(
                update_frame_children(_replace_shapes(shapes, replacements))
            )
        )

    def undo(self):
        self.cancel_drag()
        self.history.undo()

    def redo(self):
        self.cancel_drag()
        self.history.redo()
