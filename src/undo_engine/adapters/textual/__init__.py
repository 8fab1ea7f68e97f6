"""Textual host integration for the history engine."""

from .controller import TextualHistoryAdapter, TextualUIHooks, format_status

__all__ = ["TextualHistoryAdapter", "TextualUIHooks", "format_status"]
