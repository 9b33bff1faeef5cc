"""Stock mutation domain service.

All stock changes go through ``StockService``: it adjusts the product's
quantity, re-derives its status and records the movement at the head of the
ledger.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

from stockroom.domain.entities import (
    DEFAULT_USER,
    MovementType,
    Product,
    Transaction,
    derive_status,
)
from stockroom.domain.errors import ValidationError, invalid_quantity
from stockroom.domain.state import InventoryState, generate_id
from stockroom.storage.base import PRODUCTS_KEY
from stockroom.utils.date_parser import format_timestamp

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def coerce_movement(direction: MovementType | str) -> MovementType:
    """Convert a direction string to a MovementType.

    Raises:
        ValidationError: If direction is not 'in' or 'out'
    """
    try:
        return MovementType(direction)
    except ValueError:
        raise ValidationError(f"Direction must be 'in' or 'out', got {direction!r}")


def validate_quantity(amount: int) -> int:
    """Return amount if it is a positive whole number.

    Raises:
        ValidationError: If amount is not a positive int
    """
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise ValidationError(invalid_quantity(amount))
    return amount


def build_transaction(
    product: Product,
    amount: int,
    movement: MovementType,
    moment: datetime,
    destination: Optional[str] = None,
    user: Optional[str] = None,
) -> Transaction:
    """Create a ledger entry for moving amount units of product.

    Args:
        product: Product being moved
        amount: Positive quantity moved
        movement: Direction of the movement
        moment: When the movement happened
        destination: Where the stock went, or a note such as the initial stock marker
        user: Who handled the movement (defaults to a placeholder)

    Returns:
        Transaction with a signed amount matching its type
    """
    return Transaction(
        id=generate_id(),
        product_name=product.name,
        user=user or DEFAULT_USER,
        amount=amount if movement is MovementType.IN else -amount,
        date=format_timestamp(moment),
        type=movement,
        destination=destination or None,
        product_id=product.id,
    )


class StockService:
    """Service for recording inbound and outbound stock movements."""

    def __init__(self, state: InventoryState, clock: Optional[Clock] = None):
        """Initialize stock service.

        Args:
            state: Inventory state
            clock: Callable returning the current time (defaults to datetime.now)
        """
        self.state = state
        self.clock = clock or datetime.now

    def update_stock(
        self,
        product_name: str,
        amount: int,
        direction: MovementType | str,
        destination: Optional[str] = None,
        user: Optional[str] = None,
    ) -> Optional[Transaction]:
        """Move stock for the first product named product_name.

        Args:
            product_name: Exact product name
            amount: Positive quantity
            direction: 'in' or 'out'
            destination: Optional destination for outbound movements
            user: Optional person handling the movement

        Returns:
            The recorded Transaction, or None if no product has that name

        Raises:
            ValidationError: If amount or direction is invalid
        """
        validate_quantity(amount)
        movement = coerce_movement(direction)

        product = next((p for p in self.state.products if p.name == product_name), None)
        if product is None:
            logger.debug("No product named %r; stock update ignored", product_name)
            return None

        return self._apply(product, amount, movement, destination, user)

    def update_stock_by_id(
        self,
        product_id: str,
        amount: int,
        direction: MovementType | str,
        destination: Optional[str] = None,
        user: Optional[str] = None,
    ) -> Optional[Transaction]:
        """Move stock for the product with the given ID.

        Same as update_stock, but unambiguous when product names collide.
        """
        validate_quantity(amount)
        movement = coerce_movement(direction)

        product = next((p for p in self.state.products if p.id == product_id), None)
        if product is None:
            logger.debug("No product with id %r; stock update ignored", product_id)
            return None

        return self._apply(product, amount, movement, destination, user)

    def _apply(
        self,
        product: Product,
        amount: int,
        movement: MovementType,
        destination: Optional[str],
        user: Optional[str],
    ) -> Transaction:
        delta = amount if movement is MovementType.IN else -amount
        new_stock = max(0, product.stock + delta)
        updated = replace(product, stock=new_stock, status=derive_status(new_stock))

        self.state.replace(
            PRODUCTS_KEY,
            [updated if p.id == product.id else p for p in self.state.products],
        )

        # Destinations only apply to outbound movements.
        if movement is MovementType.IN:
            destination = None
        transaction = build_transaction(
            product, amount, movement, self.clock(), destination=destination, user=user
        )
        self.state.record_transaction(transaction)

        logger.debug(
            "Recorded %s of %d for %r: stock %d -> %d",
            movement.value,
            amount,
            product.name,
            product.stock,
            new_stock,
        )
        return transaction
