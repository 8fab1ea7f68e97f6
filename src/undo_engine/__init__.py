"""Snapshot-based undo/redo history for a single mutable document."""

__all__ = [
    "adapters",
    "history",
    "runtime",
    "demo",
]

__version__ = "0.1.0"
