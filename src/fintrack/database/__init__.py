"""Relational export/import layer for fintrack."""

from fintrack.database.base import Database
from fintrack.database.errors import (
    ConstraintViolationError,
    StorageConnectionError,
    StorageError,
)
from fintrack.database.factories import create_sqlite_database

__all__ = [
    "Database",
    "create_sqlite_database",
    "StorageError",
    "ConstraintViolationError",
    "StorageConnectionError",
]
