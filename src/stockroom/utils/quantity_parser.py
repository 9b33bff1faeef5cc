"""Quantity and price parsing utilities.

These validate raw form input before it reaches the domain services.
"""

from decimal import Decimal, InvalidOperation
import re
from typing import Optional


def parse_quantity(quantity_str: str) -> int:
    """Parse a movement quantity into a positive integer.

    Accepts thousands separators ("1,200") and surrounding whitespace.

    Args:
        quantity_str: Quantity string

    Returns:
        Positive int

    Raises:
        ValueError: If the string is empty, not a whole number, or not positive
    """
    if not quantity_str or not quantity_str.strip():
        raise ValueError("Empty quantity")

    cleaned = quantity_str.strip().replace(",", "")
    if not re.fullmatch(r"\+?\d+", cleaned):
        raise ValueError(f"Quantity '{quantity_str.strip()}' is not a whole number")

    quantity = int(cleaned)
    if quantity <= 0:
        raise ValueError("Quantity must be greater than zero")
    return quantity


def parse_stock(stock_str: Optional[str]) -> int:
    """Parse an initial stock value; blank means zero."""
    if stock_str is None or not stock_str.strip():
        return 0
    cleaned = stock_str.strip().replace(",", "")
    if not re.fullmatch(r"\+?\d+", cleaned):
        raise ValueError(f"Stock '{stock_str.strip()}' is not a non-negative whole number")
    return int(cleaned)


def parse_price(price_str: Optional[str]) -> Optional[Decimal]:
    """Parse an optional unit price.

    Handles "1200", "1,200.50" and a leading currency symbol ("$", "€", "£", "¥").

    Returns:
        Decimal price, or None for blank input

    Raises:
        ValueError: If the price cannot be parsed or is negative
    """
    if price_str is None or not price_str.strip():
        return None

    cleaned = re.sub(r"[$€£¥]", "", price_str.strip()).replace(",", "").strip()
    try:
        price = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse price '{price_str.strip()}'")

    if not price.is_finite():
        raise ValueError(f"Could not parse price '{price_str.strip()}'")
    if price < 0:
        raise ValueError("Price cannot be negative")
    return price
