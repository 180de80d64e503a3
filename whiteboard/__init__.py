"""
Interaction core of a whiteboard-style shape editor: shape records,
hit testing, resizing, frame containment and undo/redo history.
"""

from .config import EditorConfig, load_config
from .editor import BoardEditor
from .input import InputSource, PressedKeys
from .undo import HistoryManager

__all__ = [
    "EditorConfig",
    "load_config",
    "BoardEditor",
    "InputSource",
    "PressedKeys",
    "HistoryManager",
]
