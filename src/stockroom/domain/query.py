"""Product and transaction filtering.

All functions here are pure: they take the collections they filter and
return new lists in the input order, so callers can recompute views whenever
filter inputs change.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Sequence

from stockroom.domain.entities import CategoryLevel, Product, Transaction
from stockroom.utils.date_parser import day_bounds, parse_timestamp

CategoryTriple = tuple[str, Optional[str], Optional[str]]


@dataclass(frozen=True)
class FilterCriteria:
    """Optional filter inputs. Empty values mean "no constraint"."""

    search: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    major: Optional[str] = None
    medium: Optional[str] = None
    minor: Optional[str] = None

    @property
    def has_category_filter(self) -> bool:
        return bool(self.major or self.medium or self.minor)

    @property
    def has_date_filter(self) -> bool:
        return self.start_date is not None or self.end_date is not None

    @property
    def is_empty(self) -> bool:
        return not (self.search or self.has_date_filter or self.has_category_filter)

    def category_for(self, level: CategoryLevel) -> Optional[str]:
        if level is CategoryLevel.MAJOR:
            return self.major or None
        if level is CategoryLevel.MEDIUM:
            return self.medium or None
        return self.minor or None


@dataclass(frozen=True)
class CategoryLookup:
    """Category values of the current products, keyed by ID and by name."""

    by_id: dict[str, CategoryTriple]
    by_name: dict[str, CategoryTriple]

    def for_transaction(self, transaction: Transaction) -> Optional[CategoryTriple]:
        """Return the categories of the product a transaction belongs to, if known."""
        if transaction.product_id is not None:
            return self.by_id.get(transaction.product_id)
        return self.by_name.get(transaction.product_name)


def build_category_lookup(products: Iterable[Product]) -> CategoryLookup:
    """Index product categories by ID and name (last product wins on name clashes)."""
    by_id: dict[str, CategoryTriple] = {}
    by_name: dict[str, CategoryTriple] = {}
    for product in products:
        triple = (product.category, product.medium_category, product.small_category)
        by_id[product.id] = triple
        by_name[product.name] = triple
    return CategoryLookup(by_id=by_id, by_name=by_name)


def _name_matches(name: str, search: Optional[str]) -> bool:
    return not search or search.lower() in name.lower()


def _categories_match(triple: CategoryTriple, criteria: FilterCriteria) -> bool:
    for level, value in zip(CategoryLevel, triple):
        wanted = criteria.category_for(level)
        if wanted is not None and value != wanted:
            return False
    return True


def filter_products(products: Sequence[Product], criteria: FilterCriteria) -> list[Product]:
    """Filter products by name and category levels.

    Date bounds in criteria do not apply to products and are ignored.
    """
    return [
        product
        for product in products
        if _name_matches(product.name, criteria.search)
        and _categories_match(
            (product.category, product.medium_category, product.small_category), criteria
        )
    ]


def filter_transactions(
    transactions: Sequence[Transaction],
    criteria: FilterCriteria,
    products: Iterable[Product] = (),
) -> list[Transaction]:
    """Filter ledger entries.

    Args:
        transactions: Ledger entries, in the order they should be returned
        criteria: Filter inputs
        products: Current products, used to resolve category filters

    Returns:
        Matching transactions. When a category filter is set, entries whose
        product no longer exists are left out. When a date bound is set,
        entries whose date cannot be parsed are left out.
    """
    lower, upper = day_bounds(criteria.start_date, criteria.end_date)
    lookup = build_category_lookup(products) if criteria.has_category_filter else None

    result = []
    for transaction in transactions:
        if not _name_matches(transaction.product_name, criteria.search):
            continue

        if criteria.has_date_filter:
            moment = parse_timestamp(transaction.date)
            if moment is None:
                continue
            if lower is not None and moment < lower:
                continue
            if upper is not None and moment > upper:
                continue

        if lookup is not None:
            triple = lookup.for_transaction(transaction)
            if triple is None or not _categories_match(triple, criteria):
                continue

        result.append(transaction)
    return result
