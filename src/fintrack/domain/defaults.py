"""Seed data for a fresh store."""

from dataclasses import replace

from fintrack.domain.entities import Category, Settings, StoreState, TransactionType

DEFAULT_CATEGORIES: tuple[Category, ...] = (
    # Income
    Category("salary", "Salary", TransactionType.INCOME, "#4CAF50", "Maaş", True),
    Category("freelance", "Freelance", TransactionType.INCOME, "#8BC34A", "Serbest Çalışma", True),
    Category("other-income", "Other Income", TransactionType.INCOME, "#CDDC39", "Diğer Gelir", True),
    # Expense
    Category("rent", "Rent", TransactionType.EXPENSE, "#F44336", "Kira", True),
    Category("groceries", "Groceries", TransactionType.EXPENSE, "#E91E63", "Market", True),
    Category("transportation", "Transportation", TransactionType.EXPENSE, "#9C27B0", "Ulaşım", True),
    Category("utilities", "Utilities", TransactionType.EXPENSE, "#673AB7", "Faturalar", True),
    Category("entertainment", "Entertainment", TransactionType.EXPENSE, "#3F51B5", "Eğlence", True),
    Category("healthcare", "Healthcare", TransactionType.EXPENSE, "#2196F3", "Sağlık", True),
)

# Palette offered when creating user categories
CATEGORY_COLORS: tuple[str, ...] = (
    "#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FECA57",
    "#FF9FF3", "#54A0FF", "#5F27CD", "#00D2D3", "#FF9F43",
    "#10AC84", "#EE5A24", "#0ABDE3", "#C44569", "#FFC312",
    "#F79F1F", "#A3CB38", "#1289A7", "#D63031", "#74B9FF",
)

UNKNOWN_CATEGORY_NAME = "Unknown"
UNKNOWN_CATEGORY_COLOR = "#999999"


def default_state() -> StoreState:
    """Return the state of a store that has never been persisted."""
    return StoreState(transactions=(), categories=DEFAULT_CATEGORIES, settings=Settings())


def ensure_default_categories(state: StoreState) -> StoreState:
    """Return ``state`` with any missing default categories put back in front."""
    present = {c.id for c in state.categories}
    missing = tuple(c for c in DEFAULT_CATEGORIES if c.id not in present)
    if not missing:
        return state
    return replace(state, categories=missing + state.categories)
