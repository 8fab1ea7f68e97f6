"""Immutable point-in-time captures of document content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Opaque to the history layer: only identity and equality matter.
Content = Any


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Holds exactly one past content value."""

    state: Content

    def get_state(self) -> Content:
        return self.state


__all__ = ["Content", "Snapshot"]
