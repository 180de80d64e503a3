from __future__ import annotations
import logging
from typing import FrozenSet, Optional
from blinker import Signal


logger = logging.getLogger(__name__)

SHIFT_KEYS = frozenset({"Shift", "Shift_L", "Shift_R"})


class InputSource:
    """
    Delivers pointer and keyboard events to whoever is attached. The UI
    layer owns an instance and feeds it from its toolkit's event
    handlers; consumers connect to the signals and disconnect again when
    they go away.

    Pointer signals carry `x` and `y`, key signals carry `key`.
    """

    def __init__(self):
        self.pointer_pressed = Signal()
        self.pointer_moved = Signal()
        self.pointer_released = Signal()
        self.key_pressed = Signal()
        self.key_released = Signal()
        self.focus_lost = Signal()

    def press(self, x: float, y: float):
        self.pointer_pressed.send(self, x=x, y=y)

    def move(self, x: float, y: float):
        self.pointer_moved.send(self, x=x, y=y)

    def release(self, x: float, y: float):
        self.pointer_released.send(self, x=x, y=y)

    def key_down(self, key: str):
        self.key_pressed.send(self, key=key)

    def key_up(self, key: str):
        self.key_released.send(self, key=key)

    def lose_focus(self):
        self.focus_lost.send(self)


class PressedKeys:
    """Tracks which keys are currently held down on an input source."""

    def __init__(self):
        self._keys: FrozenSet[str] = frozenset()
        self._source: Optional[InputSource] = None
        self.changed = Signal()

    @property
    def keys(self) -> FrozenSet[str]:
        return self._keys

    def __contains__(self, key: str) -> bool:
        return key in self._keys

    @property
    def shift(self) -> bool:
        return bool(self._keys & SHIFT_KEYS)

    def attach(self, source: InputSource):
        if self._source is source:
            return
        if self._source is not None:
            self.detach()
        self._source = source
        source.key_pressed.connect(self._on_key_pressed)
        source.key_released.connect(self._on_key_released)
        source.focus_lost.connect(self._on_focus_lost)

    def detach(self):
        source = self._source
        if source is None:
            return
        source.key_pressed.disconnect(self._on_key_pressed)
        source.key_released.disconnect(self._on_key_released)
        source.focus_lost.disconnect(self._on_focus_lost)
        self._source = None
        self._set_keys(frozenset())

    def _set_keys(self, keys: FrozenSet[str]):
        if keys == self._keys:
            return
        self._keys = keys
        self.changed.send(self, keys=keys)

    def _on_key_pressed(self, sender, *, key: str):
        self._set_keys(self._keys | {key})

    def _on_key_released(self, sender, *, key: str):
        self._set_keys(self._keys - {key})

    def _on_focus_lost(self, sender, **kwargs):
        # Key-up events are not delivered while unfocused.
        logger.debug("Focus lost, releasing all keys")
        self._set_keys(frozenset())
