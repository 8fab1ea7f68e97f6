"""Executable Textual app editing one document with snapshot history."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widgets import Footer, Header, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use undo_engine.adapters.textual.app"
    ) from exc

from undo_engine.history import Document, History
from undo_engine.runtime import telemetry
from undo_engine.runtime.config import HistoryConfig, SavePolicy

from .controller import TextualHistoryAdapter, TextualUIHooks

ADAPTER_LOGGER = "undo_engine.textual"


class HistoryEditorApp(App[None]):
    """Text area plus a status line showing the history cursor."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor {
		height: 1fr;
		border: round $accent;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        Binding("ctrl+s", "save", "Save snapshot", priority=True),
        Binding("ctrl+z", "undo", "Undo", priority=True),
        Binding("ctrl+y", "redo", "Redo", priority=True),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, history: History) -> None:
        super().__init__()
        self.history = history
        self.adapter: TextualHistoryAdapter | None = None
        self._editor: TextArea | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        self._editor = TextArea(id="editor")
        yield self._editor
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_content=self._update_content,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualHistoryAdapter(self.history, hooks)
        if self._editor:
            self._editor.focus()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if self.adapter:
            self.adapter.handle_edit(event.text_area.text)

    def action_save(self) -> None:
        self._dispatch("save")

    def action_undo(self) -> None:
        self._dispatch("undo")

    def action_redo(self) -> None:
        self._dispatch("redo")

    def _dispatch(self, name: str) -> None:
        if self.adapter:
            self.adapter.handle_action(name)

    def _update_content(self, text: str) -> None:
        # Runs for the app-level ctrl+z/ctrl+y, which take priority over the
        # TextArea's own undo; load_text also resets the widget's cursor.
        if self._editor and self._editor.text != text:
            self._editor.load_text(text)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _log_line(self, line: str) -> None:
        telemetry.record_event(
            "textual.adapter",
            level="debug",
            data={"line": line},
            logger_name=ADAPTER_LOGGER,
        )


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Edit text with snapshot-based undo/redo."
    )
    parser.add_argument(
        "--text",
        default="",
        help="Initial document content (default: empty)",
    )
    parser.add_argument(
        "--save-policy",
        choices=[policy.value for policy in SavePolicy],
        default=None,
        help="What saving after an undo does with newer snapshots "
        "(default: UNDO_ENGINE_SAVE_POLICY or 'append')",
    )
    return parser.parse_args(argv)


def build_history(argv: Optional[Sequence[str]] = None) -> History:
    args = _parse_args(argv)
    if args.save_policy:
        config = HistoryConfig(save_policy=SavePolicy.parse(args.save_policy))
    else:
        config = HistoryConfig.from_env()
    history = History(Document(args.text), config=config)
    history.save()
    return history


def main(argv: Optional[Sequence[str]] = None) -> None:
    HistoryEditorApp(build_history(argv)).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
