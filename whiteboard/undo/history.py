from __future__ import annotations
import logging
from typing import Callable, Generic, List, TypeVar, Union
from blinker import Signal


logger = logging.getLogger(__name__)

S = TypeVar("S")

# Either a replacement snapshot, or a pure function computing the new
# snapshot from the current one.
Action = Union[S, Callable[[S], S]]


class HistoryManager(Generic[S]):
    """
    Linear undo/redo history over immutable snapshots.

    The history is a list of snapshots plus the index of the current one.
    Committed edits drop any redoable snapshots and append; overwriting
    edits replace the current snapshot in place, which is how a drag in
    progress is tracked without flooding the history.

    Listeners connect to `changed`, which is sent with the manager as
    sender after every state change (including undo and redo).
    """

    def __init__(self, initial: S):
        self._snapshots: List[S] = [initial]
        self._index: int = 0
        self.changed = Signal()

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> S:
        """The snapshot at the current index."""
        return self._snapshots[self._index]

    def __len__(self) -> int:
        return len(self._snapshots)

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._snapshots) - 1

    def set_state(self, action: Action, overwrite: bool = False) -> S:
        """
        Records a new snapshot.

        Args:
            action: The new snapshot, or a callable that receives the
                current snapshot and returns the new one.
            overwrite: If True, replace the current snapshot in place
                (length and index unchanged). If False, discard every
                snapshot after the current one, append the new one and
                make it current.

        Returns:
            The snapshot that is now current.
        """
        new_state = action(self.current) if callable(action) else action

        if overwrite:
            self._snapshots[self._index] = new_state
        else:
            dropped = len(self._snapshots) - self._index - 1
            if dropped:
                logger.debug(f"Discarding {dropped} redoable snapshot(s)")
            del self._snapshots[self._index + 1:]
            self._snapshots.append(new_state)
            self._index = len(self._snapshots) - 1

        self.changed.send(self)
        return new_state

    def undo(self) -> bool:
        """Steps back one snapshot. Returns False at the oldest one."""
        if not self.can_undo():
            return False
        self._index -= 1
        logger.debug(f"Undo to snapshot {self._index}")
        self.changed.send(self)
        return True

    def redo(self) -> bool:
        """Steps forward one snapshot. Returns False at the newest one."""
        if not self.can_redo():
            return False
        self._index += 1
        logger.debug(f"Redo to snapshot {self._index}")
        self.changed.send(self)
        return True
