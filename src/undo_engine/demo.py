"""Replays the canonical save/undo/redo walkthrough against a fresh document."""

from __future__ import annotations

from typing import Callable, List, Optional

from undo_engine.history import Document, History


def run(echo: Optional[Callable[[str], None]] = print) -> List[str]:
    """Drive a document through three saves, two undos and two redos.

    Every reported line is passed to ``echo`` (``print`` by default) and
    returned in order.
    """

    lines: List[str] = []

    def report(label: str, document: Document) -> None:
        line = f"{label} content: {document.get_content()}"
        lines.append(line)
        if echo is not None:
            echo(line)

    document = Document("Initial content")
    history = History(document)

    history.save()
    document.set_content("Updated content")
    history.save()
    document.set_content("More changes")
    history.save()
    document.set_content("Even more changes")
    report("Current", document)

    history.undo()
    report("Undone", document)
    history.undo()
    report("Undone", document)

    history.redo()
    report("Redone", document)
    history.redo()
    report("Redone", document)
    return lines


def main() -> None:
    run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
