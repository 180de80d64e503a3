from .history import HistoryManager

__all__ = ["HistoryManager"]
