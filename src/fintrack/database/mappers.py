"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic so the domain entities never depend
on the export schema.
"""

from datetime import UTC, datetime
from decimal import Decimal
from typing import Optional

from fintrack.domain import entities as domain
from fintrack.database.models import (
    Category as ORMCategory,
    Transaction as ORMTransaction,
)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite drops tzinfo; stored values are always UTC
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        type=domain.TransactionType(orm_category.type),
        color=orm_category.color,
        name_localized=orm_category.name_localized,
        is_default=bool(orm_category.is_default),
        created_at=_as_utc(orm_category.created_at),
    )


def category_to_orm(category: domain.Category) -> ORMCategory:
    """Convert domain Category entity to a new SQLAlchemy Category model."""
    return ORMCategory(
        id=category.id,
        name=category.name,
        name_localized=category.name_localized,
        type=category.type.value,
        color=category.color,
        is_default=1 if category.is_default else 0,
        created_at=category.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        # REAL column; str() gives the shortest repr, so 12.34 stays 12.34
        amount=Decimal(str(orm_transaction.amount)),
        type=domain.TransactionType(orm_transaction.type),
        category_id=orm_transaction.category_id,
        date=orm_transaction.date,
        created_at=_as_utc(orm_transaction.created_at),
        description=orm_transaction.description,
    )


def transaction_to_orm(transaction: domain.Transaction) -> ORMTransaction:
    """Convert domain Transaction entity to a new SQLAlchemy Transaction model."""
    return ORMTransaction(
        id=transaction.id,
        amount=float(transaction.amount),
        description=transaction.description,
        category_id=transaction.category_id,
        date=transaction.date,
        type=transaction.type.value,
        created_at=transaction.created_at,
    )
