"""Linear undo/redo history over document snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from undo_engine.runtime import telemetry
from undo_engine.runtime.config import HistoryConfig, SavePolicy

from .document import Document
from .snapshot import Content, Snapshot

EMPTY_CURSOR = -1


@dataclass(frozen=True, slots=True)
class HistoryView:
    """Point-in-time summary of a history, for status lines and adapters."""

    cursor: int
    length: int
    content: Content
    can_undo: bool
    can_redo: bool


class History:
    """Ordered snapshots of one document plus a cursor into them.

    ``save`` always appends and moves the cursor to the new end. With the
    default ``SavePolicy.APPEND`` a save after an undo keeps the snapshots
    that were ahead of the cursor; they stay in ``snapshots`` but redo can no
    longer reach them. ``SavePolicy.TRUNCATE`` drops them first instead.

    ``undo`` and ``redo`` never raise: past either end they do nothing.
    """

    def __init__(
        self, document: Document, *, config: Optional[HistoryConfig] = None
    ) -> None:
        self.document = document
        self.config = config or HistoryConfig()
        self._snapshots: List[Snapshot] = []
        self._cursor: int = EMPTY_CURSOR

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def snapshots(self) -> Tuple[Snapshot, ...]:
        return tuple(self._snapshots)

    def can_undo(self) -> bool:
        return self._cursor > 0

    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    def save(self) -> None:
        with telemetry.span(
            "history::save",
            component="history",
            metadata={"policy": self.config.save_policy.value},
        ) as handle:
            dropped = 0
            if self.config.save_policy is SavePolicy.TRUNCATE and self.can_redo():
                dropped = len(self._snapshots) - self._cursor - 1
                del self._snapshots[self._cursor + 1 :]
            self._snapshots.append(self.document.save_to_snapshot())
            self._cursor = len(self._snapshots) - 1
            handle.add_metadata("cursor", self._cursor)
        self._record("save", dropped=dropped)

    def undo(self) -> None:
        if not self.can_undo():
            self._record("undo.skipped", level="debug")
            return
        self._step(-1, "undo")

    def redo(self) -> None:
        if not self.can_redo():
            self._record("redo.skipped", level="debug")
            return
        self._step(1, "redo")

    def view(self) -> HistoryView:
        return HistoryView(
            cursor=self._cursor,
            length=len(self._snapshots),
            content=self.document.get_content(),
            can_undo=self.can_undo(),
            can_redo=self.can_redo(),
        )

    def _step(self, delta: int, label: str) -> None:
        with telemetry.span(
            f"history::{label}",
            component="history",
            metadata={"document_version": self.document.version},
        ) as handle:
            self._cursor += delta
            self.document.restore_from_snapshot(self._snapshots[self._cursor])
            handle.add_metadata("cursor", self._cursor)
        self._record(label)

    def _record(self, name: str, *, level: str = "info", **data: object) -> None:
        telemetry.record_event(
            f"history.{name}",
            level=level,
            data={"cursor": self._cursor, "length": len(self._snapshots), **data},
        )


__all__ = ["EMPTY_CURSOR", "History", "HistoryView"]
