"""Generic SQLAlchemy database implementation."""

import threading
from contextlib import contextmanager
from typing import Iterator, Optional

import structlog
from sqlalchemy import literal_column
from sqlalchemy.exc import DatabaseError, IntegrityError
from sqlalchemy.orm import Session

from fintrack.database.base import Database
from fintrack.database.errors import ConstraintViolationError, StorageConnectionError
from fintrack.database.mappers import (
    category_to_domain,
    category_to_orm,
    transaction_to_domain,
    transaction_to_orm,
)
from fintrack.database.models import (
    Category,
    Setting,
    Transaction,
    create_session_factory,
)
from fintrack.domain.defaults import DEFAULT_CATEGORIES
from fintrack.domain.entities import (
    Category as DomainCategory,
    StoreState,
    Transaction as DomainTransaction,
)
from fintrack.storage.serializers import settings_from_dict, settings_to_dict

logger = structlog.get_logger(__name__)

SETTING_KEYS = ("language", "currency", "theme", "notifications")


class SQLAlchemyDatabase(Database):
    """SQLAlchemy-based implementation of Database interface.

    Writes are serialized through a lock. Integrity failures surface as
    ConstraintViolationError and operational failures as
    StorageConnectionError; the session is rolled back before raising.
    """

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy database.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')

        Raises:
            StorageConnectionError: If the database cannot be opened
        """
        self.database_url = database_url
        try:
            self.session_factory = create_session_factory(database_url)
        except DatabaseError as e:
            raise StorageConnectionError(f"Could not open database {database_url}: {e}") from e
        self._session: Optional[Session] = None
        self._write_lock = threading.RLock()

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    @contextmanager
    def _write(self, operation: str) -> Iterator[Session]:
        """Run a write in its own transaction, translating driver errors."""
        with self._write_lock:
            session = self._get_session()
            try:
                yield session
                session.commit()
            except IntegrityError as e:
                session.rollback()
                logger.error("database_constraint_violation", operation=operation, error=str(e.orig))
                raise ConstraintViolationError(f"{operation} failed: {e.orig}") from e
            except DatabaseError as e:
                session.rollback()
                logger.error("database_operational_error", operation=operation, error=str(e.orig))
                raise StorageConnectionError(f"{operation} failed: {e.orig}") from e

    @contextmanager
    def _read(self, operation: str) -> Iterator[Session]:
        session = self._get_session()
        try:
            yield session
        except DatabaseError as e:
            session.rollback()
            logger.error("database_operational_error", operation=operation, error=str(e.orig))
            raise StorageConnectionError(f"{operation} failed: {e.orig}") from e

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    # Category operations
    def insert_category(self, category: DomainCategory) -> None:
        """Insert a category."""
        with self._write("insert_category") as session:
            session.add(category_to_orm(category))

    def list_categories(self) -> list[DomainCategory]:
        """List categories, defaults first, then by name."""
        with self._read("list_categories") as session:
            rows = (
                session.query(Category)
                .order_by(Category.is_default.desc(), Category.name.asc())
                .all()
            )
            return [category_to_domain(row) for row in rows]

    def update_category(self, category: DomainCategory) -> bool:
        """Update a non-default category. Returns True if a row changed."""
        with self._write("update_category") as session:
            count = (
                session.query(Category)
                .filter(Category.id == category.id, Category.is_default == 0)
                .update(
                    {
                        Category.name: category.name,
                        Category.name_localized: category.name_localized,
                        Category.type: category.type.value,
                        Category.color: category.color,
                    },
                    synchronize_session=False,
                )
            )
        return count > 0

    def delete_category(self, category_id: str) -> bool:
        """Delete a non-default category. Returns True if a row was deleted."""
        with self._write("delete_category") as session:
            count = (
                session.query(Category)
                .filter(Category.id == category_id, Category.is_default == 0)
                .delete(synchronize_session=False)
            )
        return count > 0

    def seed_default_categories(self) -> int:
        """Insert the default categories if the table is empty."""
        with self._write("seed_default_categories") as session:
            if session.query(Category).count() > 0:
                return 0
            for category in DEFAULT_CATEGORIES:
                session.add(category_to_orm(category))
        logger.info("default_categories_seeded", count=len(DEFAULT_CATEGORIES))
        return len(DEFAULT_CATEGORIES)

    # Transaction operations
    def insert_transaction(self, transaction: DomainTransaction) -> None:
        """Insert a transaction."""
        with self._write("insert_transaction") as session:
            session.add(transaction_to_orm(transaction))

    def list_transactions(self) -> list[DomainTransaction]:
        """List transactions, newest date first, then newest created first."""
        with self._read("list_transactions") as session:
            rows = (
                session.query(Transaction)
                .order_by(Transaction.date.desc(), Transaction.created_at.desc())
                .all()
            )
            return [transaction_to_domain(row) for row in rows]

    def update_transaction(self, transaction: DomainTransaction) -> bool:
        """Overwrite all fields of a transaction. Returns True if a row changed."""
        with self._write("update_transaction") as session:
            count = (
                session.query(Transaction)
                .filter(Transaction.id == transaction.id)
                .update(
                    {
                        Transaction.amount: float(transaction.amount),
                        Transaction.description: transaction.description,
                        Transaction.category_id: transaction.category_id,
                        Transaction.date: transaction.date,
                        Transaction.type: transaction.type.value,
                    },
                    synchronize_session=False,
                )
            )
        return count > 0

    def delete_transaction(self, transaction_id: str) -> bool:
        """Delete a transaction. Returns True if a row was deleted."""
        with self._write("delete_transaction") as session:
            count = (
                session.query(Transaction)
                .filter(Transaction.id == transaction_id)
                .delete(synchronize_session=False)
            )
        return count > 0

    # Settings operations
    def get_setting(self, key: str) -> Optional[str]:
        """Get a setting value."""
        with self._read("get_setting") as session:
            row = session.query(Setting).filter(Setting.key == key).first()
            return row.value if row is not None else None

    def set_setting(self, key: str, value: str) -> None:
        """Insert or replace a setting value."""
        with self._write("set_setting") as session:
            self._upsert_setting(session, key, value)

    def _upsert_setting(self, session: Session, key: str, value: str) -> None:
        row = session.query(Setting).filter(Setting.key == key).first()
        if row is None:
            session.add(Setting(key=key, value=value))
        else:
            row.value = value

    # Snapshot exchange
    def export_state(self, state: StoreState) -> None:
        """Replace all rows with the contents of a store snapshot.

        Runs as a single transaction: on failure nothing is changed.
        """
        with self._write("export_state") as session:
            # Rows are recreated with the same keys, so drop cached instances first
            session.expunge_all()
            session.query(Transaction).delete(synchronize_session=False)
            session.query(Category).delete(synchronize_session=False)
            session.query(Setting).delete(synchronize_session=False)
            session.flush()

            for category in state.categories:
                session.add(category_to_orm(category))
            session.flush()
            for transaction in state.transactions:
                session.add(transaction_to_orm(transaction))
            for key, value in settings_to_dict(state.settings).items():
                stored = str(value).lower() if isinstance(value, bool) else value
                session.add(Setting(key=key, value=stored))
        logger.info(
            "state_exported",
            transactions=len(state.transactions),
            categories=len(state.categories),
        )

    def load_state(self) -> StoreState:
        """Build a store snapshot from the stored rows, in insertion order."""
        with self._read("load_state") as session:
            categories = (
                session.query(Category).order_by(literal_column("categories.rowid")).all()
            )
            transactions = (
                session.query(Transaction).order_by(literal_column("transactions.rowid")).all()
            )
            raw_settings: dict = {
                row.key: row.value
                for row in session.query(Setting).filter(Setting.key.in_(SETTING_KEYS))
            }

            if "notifications" in raw_settings:
                raw_settings["notifications"] = raw_settings["notifications"] == "true"

            return StoreState(
                transactions=tuple(transaction_to_domain(row) for row in transactions),
                categories=tuple(category_to_domain(row) for row in categories),
                settings=settings_from_dict(raw_settings),
            )
