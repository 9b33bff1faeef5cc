"""Domain model entities for stockroom.

These are pure data classes representing business concepts, independent of
how they are persisted. Storage adapters convert to and from these shapes
through the mappers in ``stockroom.storage.mappers``.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

LOW_STOCK_THRESHOLD = 10
INITIAL_STOCK_MARKER = "initial stock"
DEFAULT_USER = "Current user"
DEFAULT_CATEGORY_ICON = "category"
UNCATEGORIZED = "Uncategorized"


class StockStatus(str, Enum):
    """Stock level label derived from the quantity on hand."""

    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"
    OUT_OF_STOCK = "Out of Stock"


def derive_status(stock: int) -> StockStatus:
    """Derive the stock status label for a quantity on hand."""
    if stock <= 0:
        return StockStatus.OUT_OF_STOCK
    if stock < LOW_STOCK_THRESHOLD:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


class MovementType(str, Enum):
    """Direction of a stock movement."""

    IN = "in"
    OUT = "out"


class CategoryLevel(str, Enum):
    """Taxonomy level of a category entry."""

    MAJOR = "major"
    MEDIUM = "medium"
    MINOR = "minor"

    @property
    def parent_level(self) -> Optional["CategoryLevel"]:
        """Level directly above this one, or None for majors."""
        if self is CategoryLevel.MEDIUM:
            return CategoryLevel.MAJOR
        if self is CategoryLevel.MINOR:
            return CategoryLevel.MEDIUM
        return None


class Orientation(str, Enum):
    """Page orientation hint for printed reports."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


@dataclass(frozen=True)
class Product:
    """Stocked item domain entity."""

    id: str
    name: str
    category: str
    stock: int
    status: StockStatus
    medium_category: Optional[str] = None
    small_category: Optional[str] = None
    price: Optional[Decimal] = None
    image_url: Optional[str] = None

    def category_at(self, level: CategoryLevel) -> Optional[str]:
        """Return the product's category value at a taxonomy level."""
        if level is CategoryLevel.MAJOR:
            return self.category
        if level is CategoryLevel.MEDIUM:
            return self.medium_category
        return self.small_category


@dataclass(frozen=True)
class Transaction:
    """Stock movement ledger entry.

    ``product_name`` is the name at write time. ``product_id`` links the entry
    to its product; entries written before ids were recorded carry None and
    are joined by name instead.
    """

    id: str
    product_name: str
    user: str
    amount: int
    date: str
    type: MovementType
    destination: Optional[str] = None
    product_id: Optional[str] = None


@dataclass(frozen=True)
class Category:
    """Taxonomy entry. ``parent_id`` is an optional link one level up."""

    id: str
    name: str
    type: CategoryLevel
    icon: str = DEFAULT_CATEGORY_ICON
    parent_id: Optional[str] = None


@dataclass(frozen=True)
class Staff:
    """Person who can be recorded as handling a movement."""

    id: str
    name: str


@dataclass(frozen=True)
class Destination:
    """Place outbound stock can be sent to."""

    id: str
    name: str


@dataclass(frozen=True)
class ReportRange:
    """1-indexed inclusive print range plus its orientation hint."""

    start: int = 1
    end: int = 0
    orientation: Orientation = Orientation.PORTRAIT


@dataclass(frozen=True)
class TransactionReport:
    """Movement history report ready for a renderer."""

    items: tuple[Transaction, ...]
    total_count: int
    report_range: ReportRange
    single_product_name: Optional[str]
    single_product_path: str
    issued_on: date

    @property
    def is_single_product(self) -> bool:
        return self.single_product_name is not None


@dataclass(frozen=True)
class InventoryReport:
    """Stock listing report with its valuation footer."""

    items: tuple[Product, ...]
    total_count: int
    report_range: ReportRange
    grand_total: Decimal
    issued_on: date
    category_paths: dict[str, str] = field(default_factory=dict)
