"""Domain model entities for fintrack.

These are pure data classes representing business concepts, independent of
how they are persisted. The same entities flow through the store, the JSON
snapshot and the relational export.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionType(str, Enum):
    """Direction of money flow. Categories share the same type."""

    INCOME = "income"
    EXPENSE = "expense"


class Language(str, Enum):
    """Supported interface languages."""

    EN = "en"
    TR = "tr"


class Currency(str, Enum):
    """Supported display currencies."""

    USD = "USD"
    EUR = "EUR"
    TRY = "TRY"


class Theme(str, Enum):
    """Supported color themes."""

    LIGHT = "light"
    DARK = "dark"


class Period(str, Enum):
    """Reporting windows offered by the analytics views."""

    THIS_MONTH = "thisMonth"
    LAST_MONTH = "lastMonth"
    THIS_YEAR = "thisYear"


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    ``amount`` is always a positive magnitude; the sign is implied by ``type``.
    """

    id: str
    amount: Decimal
    type: TransactionType
    category_id: str
    date: date
    created_at: datetime
    description: Optional[str] = None

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    @property
    def signed_amount(self) -> Decimal:
        """Amount with sign applied, positive for income."""
        return self.amount if self.is_income else -self.amount


@dataclass(frozen=True)
class Category:
    """Category domain entity."""

    id: str
    name: str
    type: TransactionType
    color: str
    name_localized: Optional[str] = None
    is_default: bool = False
    created_at: Optional[datetime] = None

    def display_name(self, language: Language = Language.EN) -> str:
        """Return the localized name when available for the language."""
        if language == Language.TR and self.name_localized:
            return self.name_localized
        return self.name


@dataclass(frozen=True)
class Settings:
    """User preferences singleton."""

    language: Language = Language.EN
    currency: Currency = Currency.USD
    theme: Theme = Theme.LIGHT
    notifications: bool = True


@dataclass(frozen=True)
class StoreState:
    """Full snapshot of the domain store."""

    transactions: tuple[Transaction, ...] = ()
    categories: tuple[Category, ...] = ()
    settings: Settings = field(default_factory=Settings)
