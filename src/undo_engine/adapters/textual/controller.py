"""Bridges a History to Textual widgets through plain callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from undo_engine.history import History, HistoryView


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter uses to update the host UI."""

    update_content: Callable[[str], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


def format_status(view: HistoryView) -> str:
    undo = "undo" if view.can_undo else "-"
    redo = "redo" if view.can_redo else "-"
    return f"snapshot {view.cursor + 1}/{view.length} [{undo}|{redo}]"


class TextualHistoryAdapter:
    """Routes host edits into the document and key actions into the history."""

    ACTIONS = ("save", "undo", "redo")

    def __init__(self, history: History, hooks: TextualUIHooks) -> None:
        self.history = history
        self.hooks = hooks
        self._handlers: Dict[str, Callable[[], None]] = {
            "save": history.save,
            "undo": history.undo,
            "redo": history.redo,
        }
        self._refresh_content()
        self._refresh_status()

    def handle_edit(self, text: str) -> None:
        """Copy the widget text into the document; no snapshot is taken."""

        document = self.history.document
        if document.get_content() == text:
            return
        document.set_content(text)
        self._log("edit ->", version=document.version)
        self._refresh_status()

    def handle_action(self, name: str) -> HistoryView:
        handler = self._handlers.get(name)
        if handler is None:
            raise ValueError(f"Unknown history action '{name}'.")
        version = self.history.document.version
        handler()
        view = self.history.view()
        self._log(f"{name} ->", cursor=view.cursor, length=view.length)
        if self.history.document.version != version:
            self._refresh_content()
        self._refresh_status()
        return view

    def _refresh_content(self) -> None:
        self.hooks.update_content(str(self.history.document.get_content()))

    def _refresh_status(self) -> None:
        self.hooks.update_status(format_status(self.history.view()))

    def _log(self, prefix: str, **fields: object) -> None:
        parts = [prefix, *(f"{key}={value!r}" for key, value in fields.items())]
        self.hooks.log(" ".join(parts))


__all__ = ["TextualHistoryAdapter", "TextualUIHooks", "format_status"]
