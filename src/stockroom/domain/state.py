"""Inventory state container.

``InventoryState`` owns the five persisted collections and is injected into
the domain services, which are the only code that mutates it. Every mutation
is written back through the storage port on a best-effort basis: a failed
write is logged and the in-memory state stays authoritative for the session.
"""

import json
import logging
import uuid
from typing import Any, Callable, Iterable

from stockroom.domain.entities import Category, Destination, Product, Staff, Transaction
from stockroom.domain.errors import StateNotLoadedError, state_not_loaded
from stockroom.domain.seed import DEFAULT_SEED, SeedData
from stockroom.storage import mappers
from stockroom.storage.base import (
    CATEGORIES_KEY,
    COLLECTION_KEYS,
    DESTINATIONS_KEY,
    PRODUCTS_KEY,
    STAFF_KEY,
    TRANSACTIONS_KEY,
    Storage,
)

logger = logging.getLogger(__name__)

Codec = tuple[Callable[[dict], Any], Callable[[Any], dict]]


def _codec(key: str) -> Codec:
    """Return the (from_dict, to_dict) mapper pair for a collection key."""
    # Looked up at call time: mappers imports the domain package.
    codecs: dict[str, Codec] = {
        PRODUCTS_KEY: (mappers.product_from_dict, mappers.product_to_dict),
        TRANSACTIONS_KEY: (mappers.transaction_from_dict, mappers.transaction_to_dict),
        CATEGORIES_KEY: (mappers.category_from_dict, mappers.category_to_dict),
        STAFF_KEY: (mappers.staff_from_dict, mappers.named_to_dict),
        DESTINATIONS_KEY: (mappers.destination_from_dict, mappers.named_to_dict),
    }
    return codecs[key]


def generate_id() -> str:
    """Return a fresh unique entity ID."""
    return uuid.uuid4().hex


class InventoryState:
    """Holds products, the transaction ledger, taxonomy, staff and destinations."""

    def __init__(self, storage: Storage, seed: SeedData = DEFAULT_SEED):
        """Initialize inventory state.

        Args:
            storage: Persistence port collections are read from and written to
            seed: Fallback data for collections that cannot be loaded
        """
        self.storage = storage
        self.seed = seed
        self._collections: dict[str, list] = {}
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def load(self) -> None:
        """Load every collection from storage, falling back to seed data per collection."""
        self._collections = {key: self._load_collection(key) for key in COLLECTION_KEYS}
        self._loaded = True

    def _load_collection(self, key: str) -> list:
        from_dict, _ = _codec(key)
        fallback = list(getattr(self.seed, key))

        try:
            raw = self.storage.load(key)
        except Exception:
            logger.warning("Could not read %s from storage; using seed data", key, exc_info=True)
            return fallback

        if raw is None:
            logger.info("No stored %s found; using seed data", key)
            return fallback

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            return [from_dict(item) for item in data]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Stored %s is corrupt (%s); using seed data", key, e)
            return fallback

    def _require_loaded(self) -> None:
        if not self._loaded:
            raise StateNotLoadedError(state_not_loaded())

    def _items(self, key: str) -> list:
        self._require_loaded()
        return self._collections[key]

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._items(PRODUCTS_KEY))

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Ledger entries, most recent first."""
        return tuple(self._items(TRANSACTIONS_KEY))

    @property
    def categories(self) -> tuple[Category, ...]:
        return tuple(self._items(CATEGORIES_KEY))

    @property
    def staff(self) -> tuple[Staff, ...]:
        return tuple(self._items(STAFF_KEY))

    @property
    def destinations(self) -> tuple[Destination, ...]:
        return tuple(self._items(DESTINATIONS_KEY))

    def replace(self, key: str, items: Iterable[Any]) -> None:
        """Replace a whole collection and persist it."""
        self._require_loaded()
        self._collections[key] = list(items)
        self.persist(key)

    def append(self, key: str, item: Any) -> None:
        """Append an entity to a collection and persist it."""
        self._items(key).append(item)
        self.persist(key)

    def record_transaction(self, transaction: Transaction) -> None:
        """Insert a ledger entry at the head of the ledger and persist it."""
        self._items(TRANSACTIONS_KEY).insert(0, transaction)
        self.persist(TRANSACTIONS_KEY)

    def persist(self, *keys: str) -> None:
        """Write the named collections to storage.

        Write failures are logged and otherwise ignored.
        """
        for key in keys:
            _, to_dict = _codec(key)
            payload = json.dumps([to_dict(item) for item in self._items(key)], ensure_ascii=False)
            try:
                self.storage.save(key, payload)
            except Exception:
                logger.error("Could not save %s; keeping in-memory state", key, exc_info=True)
