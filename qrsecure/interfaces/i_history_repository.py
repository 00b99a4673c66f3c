"""History repository interface (adapter pattern)."""

from typing import Protocol

from ..history import HistoryEntry


class IHistoryRepository(Protocol):
    """Interface for the capped, newest-first history list."""

    @property
    def capacity(self) -> int:
        """Maximum number of stored entries."""
        ...

    def append(self, entry: HistoryEntry) -> None:
        """Insert entry at the head, dropping the oldest past capacity."""
        ...

    def list(self) -> list[HistoryEntry]:
        """Entries, newest first."""
        ...

    def clear(self) -> None:
        """Remove every entry."""
        ...
