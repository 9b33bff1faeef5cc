"""Storage layer for stockroom application."""

from stockroom.storage.base import Storage, COLLECTION_KEYS
from stockroom.storage.memory import MemoryStorage
from stockroom.storage.factories import create_sqlite_storage

__all__ = ["Storage", "COLLECTION_KEYS", "MemoryStorage", "create_sqlite_storage"]
