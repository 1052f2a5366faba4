"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from fintrack.domain.entities import Category, StoreState, Transaction


class Database(ABC):
    """Abstract relational storage interface for fintrack.

    Used as an export/import target for store snapshots; the JSON snapshot
    remains the live persistence.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Category operations
    @abstractmethod
    def insert_category(self, category: Category) -> None:
        """Insert a category."""
        pass

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """List categories, defaults first, then by name."""
        pass

    @abstractmethod
    def update_category(self, category: Category) -> bool:
        """Update a non-default category. Returns True if a row changed."""
        pass

    @abstractmethod
    def delete_category(self, category_id: str) -> bool:
        """Delete a non-default category. Returns True if a row was deleted."""
        pass

    @abstractmethod
    def seed_default_categories(self) -> int:
        """Insert the default categories if none exist. Returns the number inserted."""
        pass

    # Transaction operations
    @abstractmethod
    def insert_transaction(self, transaction: Transaction) -> None:
        """Insert a transaction."""
        pass

    @abstractmethod
    def list_transactions(self) -> list[Transaction]:
        """List transactions, newest date first, then newest created first."""
        pass

    @abstractmethod
    def update_transaction(self, transaction: Transaction) -> bool:
        """Overwrite all fields of a transaction. Returns True if a row changed."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: str) -> bool:
        """Delete a transaction. Returns True if a row was deleted."""
        pass

    # Settings operations
    @abstractmethod
    def get_setting(self, key: str) -> Optional[str]:
        """Get a setting value."""
        pass

    @abstractmethod
    def set_setting(self, key: str, value: str) -> None:
        """Insert or replace a setting value."""
        pass

    # Snapshot exchange
    @abstractmethod
    def export_state(self, state: StoreState) -> None:
        """Replace all rows with the contents of a store snapshot."""
        pass

    @abstractmethod
    def load_state(self) -> StoreState:
        """Build a store snapshot from the stored rows."""
        pass
