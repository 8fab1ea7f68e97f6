"""The editable subject whose content the history checkpoints."""

from __future__ import annotations

from .snapshot import Content, Snapshot


class Document:
    """Mutable single-value cell.

    ``version`` increases on every write, including restores, so hosts can
    tell whether the content changed without comparing values.
    """

    def __init__(self, content: Content = "") -> None:
        self._content = content
        self.version = 0

    def __repr__(self) -> str:
        return f"Document({self._content!r}, version={self.version})"

    def get_content(self) -> Content:
        return self._content

    def set_content(self, content: Content) -> None:
        self._content = content
        self.version += 1

    def save_to_snapshot(self) -> Snapshot:
        """Capture the current content; the document keeps no reference to it."""

        return Snapshot(self._content)

    def restore_from_snapshot(self, snapshot: Snapshot) -> None:
        """Overwrite the current content with ``snapshot``'s value.

        Whatever was there before is discarded; save first to keep it.
        """

        self.set_content(snapshot.get_state())


__all__ = ["Document"]
