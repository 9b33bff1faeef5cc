"""Utility functions for stockroom."""

from stockroom.utils.date_parser import parse_date, parse_timestamp
from stockroom.utils.quantity_parser import parse_quantity, parse_price, parse_stock

__all__ = ["parse_date", "parse_timestamp", "parse_quantity", "parse_price", "parse_stock"]
