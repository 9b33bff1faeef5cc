"""Domain layer for stockroom application."""

from stockroom.domain.state import InventoryState
from stockroom.domain.catalog import CatalogService
from stockroom.domain.category import CategoryService
from stockroom.domain.stock import StockService
from stockroom.domain.report import ReportService
from stockroom.domain.query import FilterCriteria

__all__ = [
    "InventoryState",
    "CatalogService",
    "CategoryService",
    "StockService",
    "ReportService",
    "FilterCriteria",
]
