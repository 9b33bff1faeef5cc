"""Tests for quantity, stock and price parsing."""

import pytest
from decimal import Decimal

from stockroom.utils.quantity_parser import parse_price, parse_quantity, parse_stock


@pytest.mark.parametrize("text,expected", [("5", 5), (" 12 ", 12), ("1,200", 1200), ("+3", 3)])
def test_parse_quantity(text, expected):
    assert parse_quantity(text) == expected


@pytest.mark.parametrize("text", ["", "  ", "0", "-4", "2.5", "abc", "1e3"])
def test_parse_quantity_rejects(text):
    with pytest.raises(ValueError):
        parse_quantity(text)


@pytest.mark.parametrize("text,expected", [(None, 0), ("", 0), ("0", 0), ("42", 42), ("1,000", 1000)])
def test_parse_stock(text, expected):
    assert parse_stock(text) == expected


@pytest.mark.parametrize("text", ["-1", "3.5", "lots"])
def test_parse_stock_rejects(text):
    with pytest.raises(ValueError):
        parse_stock(text)


class TestParsePrice:
    """Tests for parse_price."""

    def test_blank_is_none(self):
        assert parse_price(None) is None
        assert parse_price("   ") is None

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1200", Decimal("1200")),
            ("1,200.50", Decimal("1200.50")),
            ("$19.99", Decimal("19.99")),
            ("¥8,900", Decimal("8900")),
            ("0", Decimal("0")),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_price(text) == expected

    @pytest.mark.parametrize("text", ["abc", "-5", "NaN", "Infinity"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_price(text)
