"""Environment-driven settings for history instances."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .telemetry import env


class SavePolicy(str, Enum):
    """What ``History.save`` does with snapshots past the cursor."""

    APPEND = "append"  # keep them; redo can no longer reach them
    TRUNCATE = "truncate"  # drop them before appending

    @classmethod
    def parse(cls, raw: str) -> "SavePolicy":
        try:
            return cls(raw.strip().lower())
        except ValueError:
            choices = ", ".join(policy.value for policy in cls)
            raise ValueError(
                f"Unknown save policy '{raw}' (expected one of: {choices})."
            ) from None


@dataclass(frozen=True, slots=True)
class HistoryConfig:
    save_policy: SavePolicy = SavePolicy.APPEND

    @classmethod
    def from_env(cls) -> "HistoryConfig":
        """Build a config from ``UNDO_ENGINE_SAVE_POLICY``."""

        raw = env("SAVE_POLICY")
        if not raw:
            return cls()
        return cls(save_policy=SavePolicy.parse(raw))


__all__ = ["HistoryConfig", "SavePolicy"]
