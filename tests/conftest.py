"""Shared pytest fixtures for stockroom tests."""

from datetime import datetime
from decimal import Decimal
import pytest

from stockroom.domain.catalog import CatalogService
from stockroom.domain.category import CategoryService
from stockroom.domain.report import ReportService
from stockroom.domain.seed import EMPTY_SEED
from stockroom.domain.state import InventoryState
from stockroom.domain.stock import StockService
from stockroom.storage.memory import MemoryStorage

FIXED_NOW = datetime(2024, 3, 15, 10, 30)


@pytest.fixture
def storage():
    """Create an empty in-memory storage."""
    return MemoryStorage()


@pytest.fixture
def state(storage):
    """Create a loaded inventory state with no seed data."""
    state = InventoryState(storage, seed=EMPTY_SEED)
    state.load()
    return state


@pytest.fixture
def clock():
    """Return a clock that always reports FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def catalog_service(state, clock):
    """Create a CatalogService over the test state."""
    return CatalogService(state, clock=clock)


@pytest.fixture
def stock_service(state, clock):
    """Create a StockService over the test state."""
    return StockService(state, clock=clock)


@pytest.fixture
def category_service(state):
    """Create a CategoryService over the test state."""
    return CategoryService(state)


@pytest.fixture
def report_service(state):
    """Create a ReportService with a fixed issue date."""
    return ReportService(state, today=lambda: FIXED_NOW.date())


@pytest.fixture
def sample_products(catalog_service):
    """Register a few products across the taxonomy."""
    return {
        "jacket": catalog_service.register_product(
            "Denim Jacket", category="Clothing", medium_category="Outerwear", stock=23, price=Decimal("8900")
        ),
        "shirt": catalog_service.register_product(
            "Cotton Shirt", category="Clothing", medium_category="Tops", small_category="Long Sleeve", stock=5, price=Decimal("2980")
        ),
        "scarf": catalog_service.register_product(
            "Silk Scarf", category="Accessories", stock=0, price=Decimal("3200")
        ),
    }


@pytest.fixture
def db_path(tmp_path):
    """Return a path for a temporary SQLite database file."""
    return str(tmp_path / "stockroom.db")


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
