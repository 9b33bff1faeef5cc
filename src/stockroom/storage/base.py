"""Abstract storage interface."""

from abc import ABC, abstractmethod
from typing import Optional

PRODUCTS_KEY = "products"
TRANSACTIONS_KEY = "transactions"
CATEGORIES_KEY = "categories"
STAFF_KEY = "staff"
DESTINATIONS_KEY = "destinations"

COLLECTION_KEYS = (
    PRODUCTS_KEY,
    TRANSACTIONS_KEY,
    CATEGORIES_KEY,
    STAFF_KEY,
    DESTINATIONS_KEY,
)


class Storage(ABC):
    """Key-value persistence port for serialized inventory collections.

    Values are opaque strings (JSON arrays in practice). Implementations do
    not interpret them.
    """

    @abstractmethod
    def load(self, key: str) -> Optional[str]:
        """Return the stored value for key, or None if nothing is stored."""
        pass

    @abstractmethod
    def save(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass

    def close(self) -> None:
        """Release any resources held by the storage."""
        pass
