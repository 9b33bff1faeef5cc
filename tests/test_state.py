"""Tests for InventoryState loading and persistence."""

import json
import logging

import pytest

from stockroom.domain.catalog import CatalogService
from stockroom.domain.entities import StockStatus
from stockroom.domain.errors import StateNotLoadedError
from stockroom.domain.seed import DEFAULT_SEED, EMPTY_SEED
from stockroom.domain.state import InventoryState
from stockroom.domain.stock import StockService
from stockroom.storage import COLLECTION_KEYS, MemoryStorage, create_sqlite_storage


class FailingStorage(MemoryStorage):
    """Storage whose reads or writes raise."""

    def __init__(self, fail_load=False, fail_save=False, **kwargs):
        super().__init__(**kwargs)
        self.fail_load = fail_load
        self.fail_save = fail_save

    def load(self, key):
        if self.fail_load:
            raise OSError("storage unavailable")
        return super().load(key)

    def save(self, key, value):
        if self.fail_save:
            raise OSError("disk full")
        super().save(key, value)


class TestLoad:
    """Tests for loading collections."""

    def test_empty_storage_uses_seed(self):
        state = InventoryState(MemoryStorage())
        state.load()
        assert state.products == DEFAULT_SEED.products
        assert [p.name for p in state.products][:2] == ["Organic Cotton T-Shirt", "Linen Blend Trousers"]
        assert [s.name for s in state.staff] == ["Tanaka", "Suzuki", "Sato"]
        assert [d.name for d in state.destinations] == ["Main Store", "Online Shop", "Warehouse B"]

    def test_fallback_is_per_collection(self):
        storage = MemoryStorage({"staff": json.dumps([{"id": "s1", "name": "Kimura"}])})
        state = InventoryState(storage)
        state.load()
        assert [s.name for s in state.staff] == ["Kimura"]
        assert state.products == DEFAULT_SEED.products

    def test_stored_empty_list_is_kept(self):
        state = InventoryState(MemoryStorage({"products": "[]"}))
        state.load()
        assert state.products == ()

    def test_corrupt_collection_uses_seed(self, caplog):
        storage = MemoryStorage({"transactions": "{not json", "destinations": json.dumps({"a": 1})})
        state = InventoryState(storage)
        with caplog.at_level(logging.WARNING):
            state.load()
        assert state.transactions == DEFAULT_SEED.transactions
        assert state.destinations == DEFAULT_SEED.destinations
        assert "corrupt" in caplog.text

    def test_malformed_entry_uses_seed(self):
        bad = json.dumps([{"id": "1", "name": "No stock", "category": "X"}])
        state = InventoryState(MemoryStorage({"products": bad}))
        state.load()
        assert state.products == DEFAULT_SEED.products

    @pytest.mark.parametrize("price", ["Infinity", "NaN", -100])
    def test_corrupt_price_uses_seed(self, price):
        stored = json.dumps(
            [{"id": "p", "name": "P", "category": "Supplies", "stock": 5, "price": price}]
        )
        state = InventoryState(MemoryStorage({"products": stored}))
        state.load()
        assert state.products == DEFAULT_SEED.products

    def test_updates_after_corrupt_price_fallback(self, clock):
        stored = json.dumps(
            [{"id": "p", "name": "P", "category": "Supplies", "stock": 5, "price": "Infinity"}]
        )
        storage = MemoryStorage({"products": stored})
        state = InventoryState(storage)
        state.load()

        txn = StockService(state, clock=clock).update_stock("Denim Jacket", 1, "in")

        assert txn is not None
        assert '"Denim Jacket"' in storage.values["products"]

    def test_unreadable_storage_uses_seed(self, caplog):
        state = InventoryState(FailingStorage(fail_load=True))
        with caplog.at_level(logging.WARNING):
            state.load()
        assert state.is_loaded
        assert state.categories == DEFAULT_SEED.categories
        assert "Could not read" in caplog.text

    def test_status_rederived_on_load(self):
        stored = json.dumps([{"id": "1", "name": "Cup", "category": "Kitchen", "stock": 3, "status": "In Stock"}])
        state = InventoryState(MemoryStorage({"products": stored}), seed=EMPTY_SEED)
        state.load()
        assert state.products[0].status is StockStatus.LOW_STOCK

    def test_load_does_not_write(self):
        storage = MemoryStorage()
        InventoryState(storage).load()
        assert storage.save_count == 0


class TestMisuse:
    """Tests for use before load()."""

    def test_read_before_load(self):
        state = InventoryState(MemoryStorage())
        assert not state.is_loaded
        with pytest.raises(StateNotLoadedError):
            state.products

    def test_service_before_load(self):
        state = InventoryState(MemoryStorage())
        with pytest.raises(StateNotLoadedError):
            StockService(state).update_stock("Anything", 1, "in")


class TestPersist:
    """Tests for writing collections back."""

    def test_mutations_are_written_as_json_arrays(self, state, catalog_service, storage):
        catalog_service.register_product("Cup", category="Kitchen", stock=3)
        products = json.loads(storage.values["products"])
        transactions = json.loads(storage.values["transactions"])
        assert products[0]["name"] == "Cup"
        assert transactions[0]["productName"] == "Cup"
        assert transactions[0]["destination"] == "initial stock"

    def test_write_failure_is_swallowed(self, clock, caplog):
        storage = FailingStorage(fail_save=True)
        state = InventoryState(storage, seed=EMPTY_SEED)
        state.load()

        with caplog.at_level(logging.ERROR):
            CatalogService(state, clock=clock).register_product("Cup", stock=3)

        assert [p.name for p in state.products] == ["Cup"]
        assert len(state.transactions) == 1
        assert "Could not save" in caplog.text

    def test_unicode_names_round_trip(self, storage, state, catalog_service):
        catalog_service.register_product("綿シャツ", category="衣類")
        reloaded = InventoryState(storage, seed=EMPTY_SEED)
        reloaded.load()
        assert reloaded.products[0].name == "綿シャツ"
        assert "綿シャツ" in storage.values["products"]


def test_sqlite_round_trip(db_path, clock):
    storage = create_sqlite_storage(db_path)
    state = InventoryState(storage)
    state.load()
    StockService(state, clock=clock).update_stock("Denim Jacket", 3, "out", destination="Main Store")
    storage.close()

    storage = create_sqlite_storage(db_path)
    reloaded = InventoryState(storage)
    reloaded.load()
    storage.close()

    jacket = next(p for p in reloaded.products if p.name == "Denim Jacket")
    assert jacket.stock == 20
    head = reloaded.transactions[0]
    assert head.amount == -3
    assert head.destination == "Main Store"
    assert head.date == "2024/03/15 10:30"
    assert len(reloaded.transactions) == len(DEFAULT_SEED.transactions) + 1


def test_collection_keys():
    assert COLLECTION_KEYS == ("products", "transactions", "categories", "staff", "destinations")
