"""JSON file history adapter (browser local storage stand-in)."""

import json
import os
import threading
from ..errors import HistoryPersistenceError
from ..history import DEFAULT_CAPACITY, HistoryEntry, push_entry
from ..interfaces import IHistoryRepository


class JsonFileHistoryAdapter:
    """Adapter storing history as a JSON array under a fixed key.

    The file holds a JSON object, so other keys written by other tools
    are preserved.
    """

    def __init__(
        self,
        path: str,
        key: str = "qrCodeHistory",
        capacity: int = DEFAULT_CAPACITY
    ):
        self.path = path
        self.key = key
        self._capacity = capacity
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def _read_store(self) -> dict:
        """Load the whole keyed store (empty when the file is missing)."""
        if not os.path.exists(self.path):
            return {}

        try:
            with open(self.path, encoding="utf-8") as f:
                store = json.load(f)
        except (OSError, ValueError) as e:
            raise HistoryPersistenceError(
                f"cannot read history from {self.path}: {e}"
            ) from e

        if not isinstance(store, dict):
            raise HistoryPersistenceError(
                f"history file {self.path} is not a JSON object"
            )
        return store

    def _write_store(self, store: dict) -> None:
        """Write atomically via a temp file in the same directory."""
        tmp_path = f"{self.path}.tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(store, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            raise HistoryPersistenceError(
                f"cannot write history to {self.path}: {e}"
            ) from e

    def _entries(self, store: dict) -> list[HistoryEntry]:
        raw = store.get(self.key) or []
        try:
            return [HistoryEntry.from_dict(item) for item in raw]
        except (KeyError, TypeError, AttributeError) as e:
            raise HistoryPersistenceError(
                f"malformed history record in {self.path}: {e}"
            ) from e

    def append(self, entry: HistoryEntry) -> None:
        with self._lock:
            store = self._read_store()
            history = push_entry(self._entries(store), entry, self._capacity)
            store[self.key] = [item.to_dict() for item in history]
            self._write_store(store)

    def list(self) -> list[HistoryEntry]:
        with self._lock:
            return self._entries(self._read_store())

    def clear(self) -> None:
        with self._lock:
            store = self._read_store()
            store.pop(self.key, None)
            self._write_store(store)
