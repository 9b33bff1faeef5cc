"""Mapper functions to convert between domain entities and stored JSON shapes.

Stored shapes keep the camelCase keys of the persisted collections
(``productName``, ``mediumCategory`` and so on), so this layer is the only
place that knows about them.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

# Import entities directly to avoid circular import through domain/__init__.py
from stockroom.domain.entities import (
    CategoryLevel,
    DEFAULT_CATEGORY_ICON,
    MovementType,
    Product,
    Transaction,
    Category,
    Staff,
    Destination,
    derive_status,
)


def _optional_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _whole_number(value: Any) -> int:
    """Accept ints and integral floats; reject bools and anything else."""
    if isinstance(value, bool):
        raise TypeError(f"Expected a number, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise TypeError(f"Expected a whole number, got {value!r}")


def _price_from_json(value: Any) -> Optional[Decimal]:
    """Accept finite, non-negative prices only."""
    if value is None or value == "":
        return None
    try:
        price = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Invalid price {value!r}") from e
    if not price.is_finite() or price < 0:
        raise ValueError(f"Invalid price {value!r}")
    return price


def _price_to_json(price: Optional[Decimal]) -> Optional[int | float]:
    if price is None:
        return None
    if price == price.to_integral_value():
        return int(price)
    return float(price)


def product_from_dict(data: dict[str, Any]) -> Product:
    """Convert a stored product shape to a Product entity.

    The status is derived from the stock rather than trusted from storage.
    """
    stock = max(0, _whole_number(data["stock"]))
    return Product(
        id=str(data["id"]),
        name=str(data["name"]),
        category=str(data["category"]),
        stock=stock,
        status=derive_status(stock),
        medium_category=_optional_str(data.get("mediumCategory")),
        small_category=_optional_str(data.get("smallCategory")),
        price=_price_from_json(data.get("price")),
        image_url=_optional_str(data.get("imageUrl")),
    )


def product_to_dict(product: Product) -> dict[str, Any]:
    """Convert a Product entity to its stored shape."""
    data: dict[str, Any] = {
        "id": product.id,
        "name": product.name,
        "category": product.category,
        "stock": product.stock,
        "status": product.status.value,
    }
    if product.medium_category is not None:
        data["mediumCategory"] = product.medium_category
    if product.small_category is not None:
        data["smallCategory"] = product.small_category
    if product.price is not None:
        data["price"] = _price_to_json(product.price)
    if product.image_url is not None:
        data["imageUrl"] = product.image_url
    return data


def transaction_from_dict(data: dict[str, Any]) -> Transaction:
    """Convert a stored transaction shape to a Transaction entity."""
    return Transaction(
        id=str(data["id"]),
        product_name=str(data["productName"]),
        user=str(data["user"]),
        amount=_whole_number(data["amount"]),
        date=str(data["date"]),
        type=MovementType(data["type"]),
        destination=_optional_str(data.get("destination")),
        product_id=_optional_str(data.get("productId")),
    )


def transaction_to_dict(transaction: Transaction) -> dict[str, Any]:
    """Convert a Transaction entity to its stored shape."""
    data: dict[str, Any] = {
        "id": transaction.id,
        "productName": transaction.product_name,
        "user": transaction.user,
        "amount": transaction.amount,
        "date": transaction.date,
        "type": transaction.type.value,
    }
    if transaction.destination is not None:
        data["destination"] = transaction.destination
    if transaction.product_id is not None:
        data["productId"] = transaction.product_id
    return data


def category_from_dict(data: dict[str, Any]) -> Category:
    """Convert a stored category shape to a Category entity."""
    return Category(
        id=str(data["id"]),
        name=str(data["name"]),
        type=CategoryLevel(data["type"]),
        icon=str(data.get("icon") or DEFAULT_CATEGORY_ICON),
        parent_id=_optional_str(data.get("parentId")),
    )


def category_to_dict(category: Category) -> dict[str, Any]:
    """Convert a Category entity to its stored shape."""
    data: dict[str, Any] = {
        "id": category.id,
        "name": category.name,
        "type": category.type.value,
        "icon": category.icon,
    }
    if category.parent_id is not None:
        data["parentId"] = category.parent_id
    return data


def staff_from_dict(data: dict[str, Any]) -> Staff:
    """Convert a stored staff shape to a Staff entity."""
    return Staff(id=str(data["id"]), name=str(data["name"]))


def destination_from_dict(data: dict[str, Any]) -> Destination:
    """Convert a stored destination shape to a Destination entity."""
    return Destination(id=str(data["id"]), name=str(data["name"]))


def named_to_dict(entity: Staff | Destination) -> dict[str, Any]:
    """Convert a Staff or Destination entity to its stored shape."""
    return {"id": entity.id, "name": entity.name}
