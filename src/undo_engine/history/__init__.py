"""Snapshots, the editable document, and the undo/redo history over them."""

from .document import Document
from .snapshot import Content, Snapshot
from .timeline import EMPTY_CURSOR, History, HistoryView

__all__ = [
    "Content",
    "Document",
    "EMPTY_CURSOR",
    "History",
    "HistoryView",
    "Snapshot",
]
