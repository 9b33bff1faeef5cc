"""Category taxonomy domain service."""

from typing import Any, Optional

from stockroom.domain.entities import (
    DEFAULT_CATEGORY_ICON,
    Category,
    CategoryLevel,
    Product,
)
from stockroom.domain.errors import (
    ValidationError,
    invalid_parent_level,
    lineage_mismatch,
)
from stockroom.domain.state import InventoryState, generate_id
from stockroom.storage.base import CATEGORIES_KEY


def coerce_level(level: CategoryLevel | str) -> CategoryLevel:
    """Convert a level string to a CategoryLevel.

    Raises:
        ValidationError: If level is not major, medium or minor
    """
    try:
        return CategoryLevel(level)
    except ValueError:
        raise ValidationError(f"Category level must be major, medium or minor, got {level!r}")


def format_category_path(product: Product) -> str:
    """Get the display path for a product's categories.

    Args:
        product: Product entity

    Returns:
        Category path (e.g., "Clothing > Tops"), skipping empty levels
    """
    parts = [product.category, product.medium_category, product.small_category]
    return " > ".join(part for part in parts if part)


class CategoryService:
    """Service for managing the three-level category taxonomy."""

    def __init__(self, state: InventoryState):
        """Initialize category service.

        Args:
            state: Inventory state
        """
        self.state = state

    def add_category(
        self,
        name: str,
        level: CategoryLevel | str,
        icon: str = DEFAULT_CATEGORY_ICON,
        parent_id: Optional[str] = None,
    ) -> Category:
        """Create a category.

        Duplicate names are allowed, at the same level or across levels.

        Args:
            name: Category name
            level: Taxonomy level (major, medium or minor)
            icon: Display hint
            parent_id: Optional ID of a category one level above

        Returns:
            The created Category

        Raises:
            ValidationError: If name is empty or the parent is missing or at the wrong level
        """
        name = name.strip()
        if not name:
            raise ValidationError("Category name cannot be empty")
        level = coerce_level(level)

        if parent_id is not None:
            parent = self.get_category(parent_id)
            if parent is None:
                raise ValidationError(f"Parent category {parent_id} not found")
            if level.parent_level is not parent.type:
                raise ValidationError(invalid_parent_level(level.value, parent.type.value))

        category = Category(
            id=generate_id(),
            name=name,
            type=level,
            icon=icon or DEFAULT_CATEGORY_ICON,
            parent_id=parent_id,
        )
        self.state.append(CATEGORIES_KEY, category)
        return category

    def delete_category(self, category_id: str) -> None:
        """Delete a category.

        Products using the name and child categories linked to it are left as
        they are.
        """
        remaining = [c for c in self.state.categories if c.id != category_id]
        if len(remaining) != len(self.state.categories):
            self.state.replace(CATEGORIES_KEY, remaining)

    def get_category(self, category_id: str) -> Optional[Category]:
        """Get category by ID."""
        return next((c for c in self.state.categories if c.id == category_id), None)

    def list_categories(self, level: Optional[CategoryLevel | str] = None) -> list[Category]:
        """List configured categories, optionally for a single level."""
        if level is None:
            return list(self.state.categories)
        level = coerce_level(level)
        return [c for c in self.state.categories if c.type is level]

    def category_options(self, level: CategoryLevel | str) -> list[str]:
        """Get the names offered for filtering at a level.

        Non-empty values used by products at that level come first, followed
        by any other configured name, without duplicates.
        """
        level = coerce_level(level)
        options: dict[str, None] = {}
        for product in self.state.products:
            value = product.category_at(level)
            if value:
                options.setdefault(value)
        for category in self.state.categories:
            if category.type is level:
                options.setdefault(category.name)
        return list(options)

    def children_of(self, category_id: str) -> list[Category]:
        """List categories linked directly under a category."""
        return [c for c in self.state.categories if c.parent_id == category_id]

    def get_category_tree(self) -> list[dict[str, Any]]:
        """Get the linked category tree.

        Returns:
            List of root nodes ({"category": Category, "children": [...]}).
            Roots are categories without a parent or whose parent was deleted.
        """
        categories = self.state.categories
        known_ids = {c.id for c in categories}

        def build(category: Category) -> dict[str, Any]:
            return {
                "category": category,
                "children": [build(child) for child in self.children_of(category.id)],
            }

        return [
            build(c)
            for c in categories
            if c.parent_id is None or c.parent_id not in known_ids
        ]

    def validate_lineage(
        self,
        major: Optional[str],
        medium: Optional[str] = None,
        minor: Optional[str] = None,
    ) -> None:
        """Check that a product's category selections nest in the linked tree.

        Only names configured with a parent link are constrained; free-text
        and unlinked names are accepted as they are.

        Raises:
            ValidationError: If a linked medium or minor name sits under a different parent
        """
        for level, name, parent_name in (
            (CategoryLevel.MEDIUM, medium, major),
            (CategoryLevel.MINOR, minor, medium),
        ):
            if not name:
                continue
            linked = [
                c
                for c in self.state.categories
                if c.type is level and c.name == name and c.parent_id is not None
            ]
            if not linked:
                continue
            parent_names = set()
            for category in linked:
                parent = self.get_category(category.parent_id)
                if parent is not None:
                    parent_names.add(parent.name)
            if parent_names and parent_name not in parent_names:
                raise ValidationError(lineage_mismatch(level.value, name, parent_name or ""))
