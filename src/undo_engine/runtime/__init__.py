"""Logging and configuration shared by the history engine."""

from . import telemetry
from .config import HistoryConfig, SavePolicy

__all__ = ["HistoryConfig", "SavePolicy", "telemetry"]
