"""Category domain service."""

import re
from typing import Optional, Union

from fintrack.domain.defaults import CATEGORY_COLORS
from fintrack.domain.entities import Category, TransactionType
from fintrack.domain.errors import (
    NotFoundError,
    ProtectedCategoryError,
    ValidationError,
    category_is_default,
    category_not_found,
    category_type_in_use,
)
from fintrack.domain.store import Store
from fintrack.domain.transaction import coerce_transaction_type

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


def validate_color(color: str) -> str:
    """Return a normalized ``#RRGGBB`` color.

    Raises:
        ValidationError: If the color is not a hex color
    """
    color = color.strip()
    if not _HEX_COLOR.match(color):
        raise ValidationError(f"Invalid color '{color}'. Use a hex color like {CATEGORY_COLORS[0]}")
    return color.upper()


def validate_name(name: Optional[str]) -> str:
    """Return a stripped, non-empty category name."""
    if name is None or not name.strip():
        raise ValidationError("Category name is required")
    return name.strip()


class CategoryService:
    """Service for managing categories.

    The default-category guard itself lives in the store; this service turns
    the store's silent no-op into an error the caller can show.
    """

    def __init__(self, store: Store):
        """Initialize category service.

        Args:
            store: Domain store
        """
        self.store = store

    def create_category(
        self,
        name: str,
        type: Union[str, TransactionType] = TransactionType.EXPENSE,
        color: Optional[str] = None,
        name_localized: Optional[str] = None,
    ) -> str:
        """Create a user category.

        Args:
            name: Category name
            type: income or expense
            color: Hex color, defaults to the first palette color
            name_localized: Optional Turkish name

        Returns:
            Category ID

        Raises:
            ValidationError: If name, type or color is invalid
        """
        return self.store.add_category(
            name=validate_name(name),
            type=coerce_transaction_type(type),
            color=validate_color(color) if color is not None else CATEGORY_COLORS[0],
            name_localized=name_localized.strip() if name_localized else None,
        )

    def get_category(self, category_id: str) -> Optional[Category]:
        """Get category by ID.

        Args:
            category_id: Category ID

        Returns:
            Category entity or None if not found
        """
        return self.store.get_category(category_id)

    def list_categories(self, type: Optional[TransactionType] = None) -> list[Category]:
        """List categories, defaults first, then by name.

        Args:
            type: Optional transaction type to filter by
        """
        categories = [c for c in self.store.categories if type is None or c.type == type]
        return sorted(categories, key=lambda c: (not c.is_default, c.name.lower()))

    def _get_mutable(self, category_id: str) -> Category:
        category = self.store.get_category(category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        if self.store.is_default_category(category_id):
            raise ProtectedCategoryError(category_is_default(category_id))
        return category

    def update_category(
        self,
        category_id: str,
        name: Optional[str] = None,
        type: Union[str, TransactionType, None] = None,
        color: Optional[str] = None,
        name_localized: Optional[str] = None,
    ) -> None:
        """Update a user category.

        Raises:
            NotFoundError: If the category doesn't exist
            ProtectedCategoryError: If the category is a default category
            ValidationError: If a supplied value is invalid, or the type
                would change while transactions use the category
        """
        category = self._get_mutable(category_id)

        patch: dict = {}
        if name is not None:
            patch["name"] = validate_name(name)
        if type is not None:
            new_type = coerce_transaction_type(type)
            in_use = self.count_transactions(category_id)
            if new_type != category.type and in_use:
                raise ValidationError(category_type_in_use(category_id, in_use))
            patch["type"] = new_type
        if color is not None:
            patch["color"] = validate_color(color)
        if name_localized is not None:
            patch["name_localized"] = name_localized.strip() or None

        if patch:
            self.store.update_category(category_id, **patch)

    def delete_category(self, category_id: str) -> None:
        """Delete a user category.

        Transactions that reference it are kept and shown as "Unknown".

        Raises:
            NotFoundError: If the category doesn't exist
            ProtectedCategoryError: If the category is a default category
        """
        self._get_mutable(category_id)
        self.store.delete_category(category_id)

    def count_transactions(self, category_id: str) -> int:
        """Count transactions that reference a category."""
        return sum(1 for t in self.store.transactions if t.category_id == category_id)
