"""In-memory storage implementation."""

from typing import Optional

from stockroom.storage.base import Storage


class MemoryStorage(Storage):
    """Dictionary-backed storage for tests and throwaway sessions."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self.values: dict[str, str] = dict(initial or {})
        self.save_count = 0

    def load(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def save(self, key: str, value: str) -> None:
        self.values[key] = value
        self.save_count += 1
