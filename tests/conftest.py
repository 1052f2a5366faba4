"""Shared pytest fixtures for fintrack tests."""

from datetime import UTC, date, datetime
from decimal import Decimal

import pytest

from fintrack.database.factories import create_sqlite_database
from fintrack.domain.category import CategoryService
from fintrack.domain.entities import Transaction, TransactionType
from fintrack.domain.settings import SettingsService
from fintrack.domain.store import Store
from fintrack.domain.summary import SummaryService
from fintrack.domain.transaction import TransactionService
from fintrack.storage.file_storage import FileStorage


@pytest.fixture
def store():
    """Create a store with default categories and no transactions."""
    return Store()


@pytest.fixture
def transaction_service(store):
    """Create a TransactionService on the test store."""
    return TransactionService(store)


@pytest.fixture
def category_service(store):
    """Create a CategoryService on the test store."""
    return CategoryService(store)


@pytest.fixture
def settings_service(store):
    """Create a SettingsService on the test store."""
    return SettingsService(store)


@pytest.fixture
def summary_service(store):
    """Create a SummaryService on the test store."""
    return SummaryService(store)


@pytest.fixture
def data_dir(tmp_path):
    """Return a temporary data directory."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def file_storage(data_dir):
    """Create a FileStorage in a temporary directory."""
    return FileStorage(data_dir)


@pytest.fixture
def temp_db(tmp_path):
    """Create a temporary SQLite database for testing."""
    db_path = tmp_path / "export.db"
    db = create_sqlite_database(db_path)
    db.database_path = str(db_path)
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def make_transaction():
    """Build Transaction entities with sensible defaults."""
    counter = {"n": 0}

    def _make(
        amount="10",
        type=TransactionType.EXPENSE,
        category_id="groceries",
        day=date(2024, 3, 15),
        created_at=None,
        description=None,
    ) -> Transaction:
        counter["n"] += 1
        return Transaction(
            id=f"txn-{counter['n']}",
            amount=Decimal(str(amount)),
            type=type,
            category_id=category_id,
            date=day,
            created_at=created_at
            or datetime(2024, 1, 1, 12, 0, counter["n"], tzinfo=UTC),
            description=description,
        )

    return _make
