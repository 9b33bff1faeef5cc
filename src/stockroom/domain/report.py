"""Report range selection and report building."""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Callable, Iterable, Optional, Sequence, TypeVar

from stockroom.domain.category import format_category_path
from stockroom.domain.entities import (
    InventoryReport,
    Orientation,
    Product,
    ReportRange,
    Transaction,
    TransactionReport,
)
from stockroom.domain.query import (
    FilterCriteria,
    build_category_lookup,
    filter_products,
    filter_transactions,
)
from stockroom.domain.state import InventoryState

T = TypeVar("T")


def select_range(items: Sequence[T], range_start: int, range_end: int) -> list[T]:
    """Select the items at 1-indexed positions range_start..range_end inclusive.

    range_start below 1 is treated as 1; range_end of 0 or less means "to the
    last item". An inverted or out-of-bounds range selects nothing.
    """
    start = max(1, range_start)
    end = range_end if range_end > 0 else len(items)
    if start > end or start > len(items):
        return []
    return list(items[start - 1 : end])


def single_product_name(transactions: Iterable[Transaction]) -> Optional[str]:
    """Return the product name if every transaction is for the same product."""
    names = {t.product_name for t in transactions}
    if len(names) == 1:
        return names.pop()
    return None


def is_single_product(transactions: Iterable[Transaction]) -> bool:
    return single_product_name(transactions) is not None


def inventory_total(products: Iterable[Product]) -> Decimal:
    """Sum of price x stock; products without a price count as zero."""
    return sum(
        ((product.price or Decimal(0)) * product.stock for product in products),
        Decimal(0),
    )


class ReportPreview:
    """Range and orientation chosen in a print preview session.

    Opening a preview always starts from the full range; the orientation is
    kept between sessions.
    """

    def __init__(self, orientation: Orientation = Orientation.PORTRAIT):
        self.range = ReportRange(start=1, end=0, orientation=orientation)

    def open(self, total: int) -> ReportRange:
        """Start a preview over total items, resetting the range to all of them."""
        self.range = ReportRange(start=1, end=total, orientation=self.range.orientation)
        return self.range

    def set_range(self, start: int, end: int) -> ReportRange:
        self.range = replace(self.range, start=start, end=end)
        return self.range

    def set_orientation(self, orientation: Orientation | str) -> ReportRange:
        self.range = replace(self.range, orientation=Orientation(orientation))
        return self.range

    def apply(self, items: Sequence[T]) -> list[T]:
        """Select the previewed items. Orientation has no effect on selection."""
        return select_range(items, self.range.start, self.range.end)


class ReportService:
    """Service for building printable history and inventory reports."""

    def __init__(self, state: InventoryState, today: Optional[Callable[[], date]] = None):
        """Initialize report service.

        Args:
            state: Inventory state
            today: Callable returning the issue date (defaults to date.today)
        """
        self.state = state
        self.today = today or date.today

    def transaction_report(
        self,
        criteria: FilterCriteria = FilterCriteria(),
        report_range: ReportRange = ReportRange(),
    ) -> TransactionReport:
        """Build a movement history report.

        Args:
            criteria: Filter inputs
            report_range: Print range and orientation

        Returns:
            TransactionReport with the selected rows. When every selected row
            is for one product, its name and category path are filled in so
            the renderer can show a single-product header.
        """
        products = self.state.products
        filtered = filter_transactions(self.state.transactions, criteria, products)
        items = select_range(filtered, report_range.start, report_range.end)

        name = single_product_name(items)
        path = ""
        if name is not None:
            triple = build_category_lookup(products).for_transaction(items[0])
            if triple is not None:
                path = " > ".join(part for part in triple if part)

        return TransactionReport(
            items=tuple(items),
            total_count=len(filtered),
            report_range=report_range,
            single_product_name=name,
            single_product_path=path,
            issued_on=self.today(),
        )

    def inventory_report(
        self,
        criteria: FilterCriteria = FilterCriteria(),
        report_range: ReportRange = ReportRange(),
    ) -> InventoryReport:
        """Build a stock listing report.

        The grand total covers every product matching the filter, not just
        the printed range.
        """
        filtered = filter_products(self.state.products, criteria)
        items = select_range(filtered, report_range.start, report_range.end)
        return InventoryReport(
            items=tuple(items),
            total_count=len(filtered),
            report_range=report_range,
            grand_total=inventory_total(filtered),
            issued_on=self.today(),
            category_paths={p.id: format_category_path(p) for p in items},
        )
