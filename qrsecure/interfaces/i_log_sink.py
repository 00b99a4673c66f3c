"""Log sink interface (adapter pattern)."""

from typing import Protocol


class ILogSink(Protocol):
    """Interface for pipeline log output."""

    def log(self, level: str, message: str) -> None:
        """Write entry; level is debug, info, warn or error."""
        ...
