"""In-memory history adapter."""

import threading
from ..history import DEFAULT_CAPACITY, HistoryEntry, push_entry
from ..interfaces import IHistoryRepository


class InMemoryHistoryAdapter:
    """Adapter keeping history in process memory."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self._capacity = capacity
        self._entries: list[HistoryEntry] = []
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, entry: HistoryEntry) -> None:
        with self._lock:
            self._entries = push_entry(self._entries, entry, self._capacity)

    def list(self) -> list[HistoryEntry]:
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries = []
