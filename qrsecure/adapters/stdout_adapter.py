"""Stdout logging adapter."""

from datetime import datetime
from ..interfaces import ILogSink

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}


class StdoutAdapter:
    """Adapter for stdout logging."""

    def __init__(self, min_level: str = "info"):
        self.min_level = LEVELS.get(min_level, LEVELS["info"])

    def log(self, level: str, message: str) -> None:
        """Write log entry to stdout."""
        if LEVELS.get(level, LEVELS["info"]) < self.min_level:
            return
        timestamp = datetime.now().isoformat()
        print(f"[{timestamp}] {level.upper()}: {message}")
