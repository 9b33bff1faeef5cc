"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class StateNotLoadedError(RuntimeError):
    """Inventory state was used before it was loaded.

    This is a programming error, not a recoverable condition, so it does not
    derive from DomainError.
    """


def product_not_found(product_id: str) -> str:
    """Return message for missing product by ID."""
    return f"Product {product_id} not found"


def category_not_found(category_id: str) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found"


def invalid_quantity(amount: object) -> str:
    """Return message for a non-positive or non-integer movement quantity."""
    return f"Quantity must be a positive whole number, got {amount!r}"


def invalid_parent_level(child_level: str, parent_level: str) -> str:
    """Return message when a category is linked to the wrong level."""
    return f"A {child_level} category cannot be placed under a {parent_level} category"


def lineage_mismatch(level: str, name: str, parent_name: str) -> str:
    """Return message when a product's category selections do not nest."""
    return f"{level.capitalize()} category '{name}' does not belong to '{parent_name}'"


def state_not_loaded() -> str:
    """Return message for use of inventory state before load()."""
    return "Inventory state used before load(); call InventoryState.load() first"
