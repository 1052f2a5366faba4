"""Shared output formatting for CLI commands."""

from decimal import Decimal

from fintrack.domain.defaults import UNKNOWN_CATEGORY_NAME
from fintrack.domain.entities import Settings, Transaction
from fintrack.domain.store import Store
from fintrack.utils.currency import format_currency


def money(amount: Decimal, settings: Settings) -> str:
    """Format an amount in the user's currency and language."""
    return format_currency(amount, settings.currency, settings.language)


def signed_money(transaction: Transaction, settings: Settings) -> str:
    """Format a transaction amount with + for income and - for expense."""
    sign = "+" if transaction.is_income else "-"
    return f"{sign}{money(transaction.amount, settings)}"


def transaction_line(transaction: Transaction, store: Store) -> str:
    """One-line description of a transaction."""
    settings = store.settings
    category = store.get_category(transaction.category_id)
    category_name = (
        category.display_name(settings.language) if category else UNKNOWN_CATEGORY_NAME
    )
    title = transaction.description or category_name
    return (
        f"{transaction.date.isoformat()}  {title:<30} {category_name:<20} "
        f"{signed_money(transaction, settings):>14}  [{transaction.id}]"
    )
