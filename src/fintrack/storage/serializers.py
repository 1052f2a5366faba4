"""Mapper functions between domain entities and plain JSON-compatible dicts.

Decimals are stored as strings, dates and datetimes as ISO strings and enums
by value, so a dump followed by a load reproduces the same entities. Loading
ignores unknown keys and fills in missing optional ones, which lets older
snapshots be read after fields are added.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from fintrack.domain.entities import (
    Category,
    Currency,
    Language,
    Settings,
    Theme,
    Transaction,
    TransactionType,
)


def _datetime_or_none(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


def transaction_to_dict(transaction: Transaction) -> dict[str, Any]:
    """Convert a Transaction entity to a dict."""
    return {
        "id": transaction.id,
        "amount": str(transaction.amount),
        "type": transaction.type.value,
        "category_id": transaction.category_id,
        "date": transaction.date.isoformat(),
        "created_at": transaction.created_at.isoformat(),
        "description": transaction.description,
    }


def transaction_from_dict(data: dict[str, Any]) -> Transaction:
    """Convert a dict to a Transaction entity.

    Raises:
        KeyError, ValueError, ArithmeticError: If a required field is missing or malformed
    """
    amount = Decimal(str(data["amount"]))
    if not amount.is_finite() or amount <= 0:
        raise ValueError(f"Amount must be a positive number, got {data['amount']}")
    return Transaction(
        id=str(data["id"]),
        amount=amount,
        type=TransactionType(data["type"]),
        category_id=str(data["category_id"]),
        date=date.fromisoformat(data["date"]),
        created_at=datetime.fromisoformat(data["created_at"]),
        description=data.get("description"),
    )


def category_to_dict(category: Category) -> dict[str, Any]:
    """Convert a Category entity to a dict."""
    return {
        "id": category.id,
        "name": category.name,
        "name_localized": category.name_localized,
        "type": category.type.value,
        "color": category.color,
        "is_default": category.is_default,
        "created_at": category.created_at.isoformat() if category.created_at else None,
    }


def category_from_dict(data: dict[str, Any]) -> Category:
    """Convert a dict to a Category entity."""
    return Category(
        id=str(data["id"]),
        name=data["name"],
        type=TransactionType(data["type"]),
        color=data["color"],
        name_localized=data.get("name_localized"),
        is_default=bool(data.get("is_default", False)),
        created_at=_datetime_or_none(data.get("created_at")),
    )


def settings_to_dict(settings: Settings) -> dict[str, Any]:
    """Convert Settings to a dict."""
    return {
        "language": settings.language.value,
        "currency": settings.currency.value,
        "theme": settings.theme.value,
        "notifications": settings.notifications,
    }


def settings_from_dict(data: dict[str, Any]) -> Settings:
    """Convert a dict to Settings, using defaults for missing or unknown values."""
    defaults = Settings()

    def pick(enum_type, key, default):
        try:
            return enum_type(data[key])
        except (KeyError, ValueError):
            return default

    notifications = data.get("notifications", defaults.notifications)
    return Settings(
        language=pick(Language, "language", defaults.language),
        currency=pick(Currency, "currency", defaults.currency),
        theme=pick(Theme, "theme", defaults.theme),
        notifications=notifications if isinstance(notifications, bool) else defaults.notifications,
    )
