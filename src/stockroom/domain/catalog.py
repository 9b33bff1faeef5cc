"""Catalog domain service: products, staff and destinations."""

import logging
from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from typing import Optional

from stockroom.domain.category import CategoryService
from stockroom.domain.entities import (
    INITIAL_STOCK_MARKER,
    UNCATEGORIZED,
    Destination,
    MovementType,
    Product,
    Staff,
    Transaction,
    derive_status,
)
from stockroom.domain.errors import NotFoundError, ValidationError, product_not_found
from stockroom.domain.state import InventoryState, generate_id
from stockroom.domain.stock import Clock, build_transaction
from stockroom.storage.base import (
    DESTINATIONS_KEY,
    PRODUCTS_KEY,
    STAFF_KEY,
    TRANSACTIONS_KEY,
)

logger = logging.getLogger(__name__)


def belongs_to(transaction: Transaction, product: Product) -> bool:
    """Return True if a ledger entry records a movement of product.

    Entries carrying a product ID are matched by ID; older entries without
    one are matched by name.
    """
    if transaction.product_id is not None:
        return transaction.product_id == product.id
    return transaction.product_name == product.name


class CatalogService:
    """Service for managing products and the reference lists used by movements."""

    def __init__(self, state: InventoryState, clock: Optional[Clock] = None):
        """Initialize catalog service.

        Args:
            state: Inventory state
            clock: Callable returning the current time (defaults to datetime.now)
        """
        self.state = state
        self.clock = clock or datetime.now
        self.categories = CategoryService(state)

    # Product operations
    def add_product(self, product: Product) -> Product:
        """Add a product to the catalog.

        If the product starts with stock, an inbound ledger entry marked as
        initial stock is recorded for it.

        Returns:
            The stored product (with its status derived from stock)

        Raises:
            ValidationError: If stock or price is negative
        """
        _check_quantities(product.stock, product.price)
        product = replace(product, status=derive_status(product.stock))
        self.state.append(PRODUCTS_KEY, product)

        if product.stock > 0:
            self.state.record_transaction(
                build_transaction(
                    product,
                    product.stock,
                    MovementType.IN,
                    self.clock(),
                    destination=INITIAL_STOCK_MARKER,
                )
            )

        logger.debug("Added product %r with stock %d", product.name, product.stock)
        return product

    def register_product(
        self,
        name: str,
        category: Optional[str] = None,
        medium_category: Optional[str] = None,
        small_category: Optional[str] = None,
        stock: int = 0,
        price: Optional[Decimal] = None,
        image_url: Optional[str] = None,
    ) -> Product:
        """Create and add a product from registration form values.

        Args:
            name: Product name
            category: Major category (defaults to "Uncategorized")
            medium_category: Optional medium category
            small_category: Optional minor category
            stock: Initial stock
            price: Optional unit price
            image_url: Optional image reference

        Returns:
            The stored product

        Raises:
            ValidationError: If name is empty, stock or price is negative, or
                the categories do not nest in the linked taxonomy
        """
        product = self._build_product(
            generate_id(), name, category, medium_category, small_category, stock, price, image_url
        )
        return self.add_product(product)

    def edit_product(
        self,
        product_id: str,
        name: str,
        category: Optional[str] = None,
        medium_category: Optional[str] = None,
        small_category: Optional[str] = None,
        stock: int = 0,
        price: Optional[Decimal] = None,
        image_url: Optional[str] = None,
    ) -> Product:
        """Replace a product's fields from edit form values.

        Raises:
            NotFoundError: If product doesn't exist
            ValidationError: Same conditions as register_product
        """
        existing = self.get_product(product_id)
        if existing is None:
            raise NotFoundError(product_not_found(product_id))
        product = self._build_product(
            product_id,
            name,
            category,
            medium_category,
            small_category,
            stock,
            price,
            image_url if image_url is not None else existing.image_url,
        )
        return self.update_product(product)

    def _build_product(
        self,
        product_id: str,
        name: str,
        category: Optional[str],
        medium_category: Optional[str],
        small_category: Optional[str],
        stock: int,
        price: Optional[Decimal],
        image_url: Optional[str],
    ) -> Product:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Product name cannot be empty")
        _check_quantities(stock, price)

        major = (category or "").strip() or UNCATEGORIZED
        medium = (medium_category or "").strip() or None
        minor = (small_category or "").strip() or None
        self.categories.validate_lineage(major, medium, minor)

        return Product(
            id=product_id,
            name=name,
            category=major,
            stock=stock,
            status=derive_status(stock),
            medium_category=medium,
            small_category=minor,
            price=price,
            image_url=image_url,
        )

    def update_product(self, product: Product) -> Product:
        """Replace the stored product with the same ID.

        The ledger is not touched, including when the stock changes.

        Raises:
            NotFoundError: If product doesn't exist
            ValidationError: If stock or price is negative
        """
        if self.get_product(product.id) is None:
            raise NotFoundError(product_not_found(product.id))
        _check_quantities(product.stock, product.price)

        product = replace(product, status=derive_status(product.stock))
        self.state.replace(
            PRODUCTS_KEY,
            [product if p.id == product.id else p for p in self.state.products],
        )
        return product

    def delete_product(self, product_id: str) -> None:
        """Delete a product and every ledger entry recorded for it.

        Unknown IDs are ignored.
        """
        product = self.get_product(product_id)
        if product is None:
            return

        kept = [t for t in self.state.transactions if not belongs_to(t, product)]
        if len(kept) != len(self.state.transactions):
            self.state.replace(TRANSACTIONS_KEY, kept)
        self.state.replace(PRODUCTS_KEY, [p for p in self.state.products if p.id != product_id])
        logger.debug("Deleted product %r", product.name)

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get product by ID."""
        return next((p for p in self.state.products if p.id == product_id), None)

    def find_product_by_name(self, name: str) -> Optional[Product]:
        """Get the first product with exactly this name."""
        return next((p for p in self.state.products if p.name == name), None)

    def list_products(self) -> list[Product]:
        """List products in registration order."""
        return list(self.state.products)

    # Staff operations
    def add_staff(self, name: str) -> Staff:
        """Add a staff member. Duplicate names are allowed."""
        staff = Staff(id=generate_id(), name=_required_name(name, "Staff"))
        self.state.append(STAFF_KEY, staff)
        return staff

    def delete_staff(self, staff_id: str) -> None:
        """Delete a staff member. Recorded movements keep the name."""
        self.state.replace(STAFF_KEY, [s for s in self.state.staff if s.id != staff_id])

    def list_staff(self) -> list[Staff]:
        return list(self.state.staff)

    # Destination operations
    def add_destination(self, name: str) -> Destination:
        """Add an outbound destination. Duplicate names are allowed."""
        destination = Destination(id=generate_id(), name=_required_name(name, "Destination"))
        self.state.append(DESTINATIONS_KEY, destination)
        return destination

    def delete_destination(self, destination_id: str) -> None:
        """Delete a destination. Recorded movements keep the name."""
        self.state.replace(
            DESTINATIONS_KEY,
            [d for d in self.state.destinations if d.id != destination_id],
        )

    def list_destinations(self) -> list[Destination]:
        return list(self.state.destinations)


def _required_name(name: str, kind: str) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError(f"{kind} name cannot be empty")
    return name


def _check_quantities(stock: int, price: Optional[Decimal]) -> None:
    if isinstance(stock, bool) or not isinstance(stock, int) or stock < 0:
        raise ValidationError(f"Stock must be a non-negative whole number, got {stock!r}")
    if price is not None and price < 0:
        raise ValidationError(f"Price cannot be negative, got {price}")
