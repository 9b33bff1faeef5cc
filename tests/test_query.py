"""Tests for product and transaction filtering."""

from datetime import date

import pytest

from stockroom.domain.entities import MovementType, Transaction
from stockroom.domain.query import (
    FilterCriteria,
    build_category_lookup,
    filter_products,
    filter_transactions,
)


def make_txn(txn_id, name, when, amount=1, product_id=None):
    return Transaction(
        id=txn_id,
        product_name=name,
        user="Tanaka",
        amount=amount,
        date=when,
        type=MovementType.IN if amount >= 0 else MovementType.OUT,
        product_id=product_id,
    )


class TestFilterCriteria:
    """Tests for FilterCriteria flags."""

    def test_empty(self):
        assert FilterCriteria().is_empty
        assert FilterCriteria(search="").is_empty
        assert not FilterCriteria(major="Clothing").is_empty

    def test_date_flag(self):
        assert FilterCriteria(end_date=date(2024, 1, 1)).has_date_filter
        assert not FilterCriteria(search="x").has_date_filter


class TestFilterProducts:
    """Tests for filter_products."""

    def test_empty_filter_is_identity(self, state, sample_products):
        products = state.products
        assert filter_products(products, FilterCriteria()) == list(products)

    def test_search_is_case_insensitive_substring(self, state, sample_products):
        result = filter_products(state.products, FilterCriteria(search="JACK"))
        assert result == [sample_products["jacket"]]

    def test_major_filter(self, state, sample_products):
        result = filter_products(state.products, FilterCriteria(major="Clothing"))
        assert result == [sample_products["jacket"], sample_products["shirt"]]

    def test_levels_combine(self, state, sample_products):
        criteria = FilterCriteria(major="Clothing", medium="Tops", minor="Long Sleeve")
        assert filter_products(state.products, criteria) == [sample_products["shirt"]]

    def test_date_bounds_ignored_for_products(self, state, sample_products):
        criteria = FilterCriteria(start_date=date(2099, 1, 1))
        assert len(filter_products(state.products, criteria)) == 3

    def test_result_is_subsequence(self, state, sample_products):
        products = list(state.products)
        result = filter_products(products, FilterCriteria(search="s"))
        positions = [products.index(p) for p in result]
        assert positions == sorted(positions)


class TestFilterTransactions:
    """Tests for filter_transactions."""

    @pytest.fixture
    def ledger(self):
        return [
            make_txn("t1", "Denim Jacket", "2024/03/15 23:59"),
            make_txn("t2", "Cotton Shirt", "2024/03/15 00:00", amount=-2),
            make_txn("t3", "Denim Jacket", "2024/03/14 23:59"),
            make_txn("t4", "Denim Jacket", "2024/03/16 00:00"),
            make_txn("t5", "Ghost Product", "2024/03/15 12:00"),
        ]

    def test_empty_filter_is_identity(self, ledger):
        assert filter_transactions(ledger, FilterCriteria()) == ledger

    def test_search(self, ledger):
        result = filter_transactions(ledger, FilterCriteria(search="shirt"))
        assert [t.id for t in result] == ["t2"]

    def test_single_day_window_is_inclusive(self, ledger):
        day = date(2024, 3, 15)
        result = filter_transactions(ledger, FilterCriteria(start_date=day, end_date=day))
        assert [t.id for t in result] == ["t1", "t2", "t5"]

    def test_open_ended_bounds(self, ledger):
        after = filter_transactions(ledger, FilterCriteria(start_date=date(2024, 3, 16)))
        assert [t.id for t in after] == ["t4"]
        before = filter_transactions(ledger, FilterCriteria(end_date=date(2024, 3, 14)))
        assert [t.id for t in before] == ["t3"]

    def test_unparseable_date_excluded_only_with_bounds(self, ledger):
        ledger.append(make_txn("bad", "Denim Jacket", "not a date"))
        assert "bad" in [t.id for t in filter_transactions(ledger, FilterCriteria())]
        bounded = filter_transactions(ledger, FilterCriteria(start_date=date(2000, 1, 1)))
        assert "bad" not in [t.id for t in bounded]

    def test_category_filter_uses_current_products(self, ledger, state, sample_products):
        criteria = FilterCriteria(major="Clothing")
        result = filter_transactions(ledger, criteria, state.products)
        assert [t.id for t in result] == ["t1", "t2", "t3", "t4"]

    def test_deleted_product_excluded_by_category_filter(self, ledger, state, sample_products):
        result = filter_transactions(ledger, FilterCriteria(major="Accessories"), state.products)
        assert result == []
        # Without a category filter the orphaned entry is still shown.
        result = filter_transactions(ledger, FilterCriteria(search="ghost"), state.products)
        assert [t.id for t in result] == ["t5"]

    def test_product_id_preferred_over_name(self, state, sample_products):
        scarf = sample_products["scarf"]
        txn = make_txn("t9", "Denim Jacket", "2024/03/15 10:00", product_id=scarf.id)
        result = filter_transactions([txn], FilterCriteria(major="Accessories"), state.products)
        assert result == [txn]

    def test_ledger_from_service(self, state, sample_products, stock_service):
        stock_service.update_stock("Denim Jacket", 3, "out")
        criteria = FilterCriteria(search="denim", start_date=date(2024, 3, 15), end_date=date(2024, 3, 15))
        result = filter_transactions(state.transactions, criteria, state.products)
        assert [t.amount for t in result] == [-3, 23]


def test_category_lookup_last_name_wins(catalog_service, state):
    catalog_service.register_product("Twin", category="First")
    catalog_service.register_product("Twin", category="Second")
    lookup = build_category_lookup(state.products)
    assert lookup.by_name["Twin"] == ("Second", None, None)
    assert len(lookup.by_id) == 2


def test_legacy_entry_with_duplicate_name_uses_last_product(catalog_service, state):
    catalog_service.register_product("Twin", category="First")
    catalog_service.register_product("Twin", category="Second")
    legacy = make_txn("old", "Twin", "2024/03/15 10:00")

    assert filter_transactions([legacy], FilterCriteria(major="Second"), state.products) == [legacy]
    assert filter_transactions([legacy], FilterCriteria(major="First"), state.products) == []
