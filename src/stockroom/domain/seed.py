"""Built-in seed dataset.

Each collection is used on its own when the stored copy of that collection is
missing or unreadable.
"""

from dataclasses import dataclass
from decimal import Decimal

from stockroom.domain.entities import (
    Category,
    CategoryLevel,
    Destination,
    MovementType,
    Product,
    Staff,
    Transaction,
    derive_status,
)


def _product(id: str, name: str, category: str, stock: int, price: str, medium=None, small=None) -> Product:
    return Product(
        id=id,
        name=name,
        category=category,
        stock=stock,
        status=derive_status(stock),
        medium_category=medium,
        small_category=small,
        price=Decimal(price),
    )


SEED_PRODUCTS = (
    _product("1", "Organic Cotton T-Shirt", "Clothing", 50, "2980", medium="Tops"),
    _product("2", "Linen Blend Trousers", "Clothing", 5, "5480", medium="Bottoms"),
    _product("3", "Silk Scarf", "Accessories", 0, "3200"),
    _product("4", "Denim Jacket", "Clothing", 23, "8900", medium="Outerwear"),
)

SEED_TRANSACTIONS = (
    Transaction(
        id="1",
        product_name="Organic Cotton T-Shirt",
        user="Tanaka",
        amount=50,
        date="2023/10/27 14:30",
        type=MovementType.IN,
        product_id="1",
    ),
    Transaction(
        id="2",
        product_name="Linen Blend Trousers",
        user="Suzuki",
        amount=-15,
        date="2023/10/27 10:15",
        type=MovementType.OUT,
        destination="Main Store",
        product_id="2",
    ),
    Transaction(
        id="3",
        product_name="Silk Scarf",
        user="Sato",
        amount=-5,
        date="2023/10/26 18:00",
        type=MovementType.OUT,
        destination="Online Shop",
        product_id="3",
    ),
    Transaction(
        id="4",
        product_name="Denim Jacket",
        user="Tanaka",
        amount=20,
        date="2023/10/26 09:00",
        type=MovementType.IN,
        product_id="4",
    ),
)

SEED_CATEGORIES = (
    Category(id="1", name="Clothing", type=CategoryLevel.MAJOR, icon="checkroom"),
    Category(id="2", name="Accessories", type=CategoryLevel.MAJOR, icon="diamond"),
    Category(id="3", name="Supplies", type=CategoryLevel.MAJOR, icon="inventory_2"),
    Category(id="4", name="Tops", type=CategoryLevel.MEDIUM, parent_id="1"),
    Category(id="5", name="Bottoms", type=CategoryLevel.MEDIUM, parent_id="1"),
    Category(id="6", name="Outerwear", type=CategoryLevel.MEDIUM, parent_id="1"),
)

SEED_STAFF = (
    Staff(id="1", name="Tanaka"),
    Staff(id="2", name="Suzuki"),
    Staff(id="3", name="Sato"),
)

SEED_DESTINATIONS = (
    Destination(id="1", name="Main Store"),
    Destination(id="2", name="Online Shop"),
    Destination(id="3", name="Warehouse B"),
)


@dataclass(frozen=True)
class SeedData:
    """Fallback contents for each persisted collection."""

    products: tuple[Product, ...] = ()
    transactions: tuple[Transaction, ...] = ()
    categories: tuple[Category, ...] = ()
    staff: tuple[Staff, ...] = ()
    destinations: tuple[Destination, ...] = ()


DEFAULT_SEED = SeedData(
    products=SEED_PRODUCTS,
    transactions=SEED_TRANSACTIONS,
    categories=SEED_CATEGORIES,
    staff=SEED_STAFF,
    destinations=SEED_DESTINATIONS,
)

EMPTY_SEED = SeedData()
