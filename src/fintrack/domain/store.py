"""In-memory domain store.

The store owns three slices (transactions, categories, settings) and applies
every mutation through the pure reducers in ``fintrack.domain.reducers``.
Mutations never raise: updates and deletes of unknown ids, and of default
categories, are silent no-ops. Listeners registered with ``subscribe`` are
called with the new state after each effective mutation.
"""

import threading
import uuid
from dataclasses import replace
from datetime import UTC, date, datetime
from decimal import Decimal
from typing import Any, Callable, Iterable, Optional

import structlog

from fintrack.domain import reducers
from fintrack.domain.defaults import default_state
from fintrack.domain.entities import (
    Category,
    Currency,
    Language,
    Settings,
    StoreState,
    Theme,
    Transaction,
    TransactionType,
)

logger = structlog.get_logger(__name__)

Listener = Callable[[StoreState], None]


def generate_id() -> str:
    """Return a new unique entity id."""
    return uuid.uuid4().hex


def _is_mutable_category(category: Category) -> bool:
    return not category.is_default


class Store:
    """Explicitly constructed state container for the domain."""

    def __init__(self, initial_state: Optional[StoreState] = None):
        """Initialize store.

        Args:
            initial_state: Starting state. Defaults to no transactions, the
                default categories and default settings.
        """
        self._state = initial_state if initial_state is not None else default_state()
        self._listeners: list[Listener] = []
        self._lock = threading.RLock()

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return self._state.transactions

    @property
    def categories(self) -> tuple[Category, ...]:
        return self._state.categories

    @property
    def settings(self) -> Settings:
        return self._state.settings

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener and return a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, action: str, reducer: Callable[[StoreState], StoreState]) -> bool:
        """Apply a state reducer and notify listeners on change.

        The lock is held while listeners run, so listeners see states in
        commit order. It is reentrant so a listener may dispatch again.
        """
        with self._lock:
            previous = self._state
            new_state = reducer(previous)
            if new_state == previous:
                logger.debug("store_noop", action=action)
                return False
            self._state = new_state

            logger.debug("store_commit", action=action)
            for listener in list(self._listeners):
                listener(new_state)
        return True

    # Lookups
    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID."""
        return next((t for t in self._state.transactions if t.id == transaction_id), None)

    def get_category(self, category_id: str) -> Optional[Category]:
        """Get category by ID."""
        return next((c for c in self._state.categories if c.id == category_id), None)

    def is_default_category(self, category_id: str) -> bool:
        """Return True if the category exists and is protected from changes."""
        category = self.get_category(category_id)
        return category is not None and category.is_default

    # Transaction slice
    def add_transaction(
        self,
        amount: Decimal,
        type: TransactionType,
        category_id: str,
        date: date,
        description: Optional[str] = None,
    ) -> str:
        """Append a transaction with a generated id and creation time. Returns the id."""
        transaction = Transaction(
            id=generate_id(),
            amount=amount,
            type=type,
            category_id=category_id,
            date=date,
            created_at=datetime.now(UTC),
            description=description,
        )
        self._commit(
            "add_transaction",
            lambda s: replace(s, transactions=reducers.append(s.transactions, transaction)),
        )
        return transaction.id

    def update_transaction(self, transaction_id: str, **patch: Any) -> None:
        """Merge fields into an existing transaction. Unknown ids are ignored."""
        self._commit(
            "update_transaction",
            lambda s: replace(
                s, transactions=reducers.update(s.transactions, transaction_id, patch)
            ),
        )

    def delete_transaction(self, transaction_id: str) -> None:
        """Remove a transaction. Unknown ids are ignored."""
        self._commit(
            "delete_transaction",
            lambda s: replace(s, transactions=reducers.remove(s.transactions, transaction_id)),
        )

    def set_transactions(self, transactions: Iterable[Transaction]) -> None:
        """Replace the whole transaction collection."""
        items = reducers.replace_all(transactions)
        self._commit("set_transactions", lambda s: replace(s, transactions=items))

    # Category slice
    def add_category(
        self,
        name: str,
        type: TransactionType,
        color: str,
        name_localized: Optional[str] = None,
    ) -> str:
        """Append a user category. Returns the generated id."""
        category = Category(
            id=generate_id(),
            name=name,
            type=type,
            color=color,
            name_localized=name_localized,
            is_default=False,
            created_at=datetime.now(UTC),
        )
        self._commit(
            "add_category",
            lambda s: replace(s, categories=reducers.append(s.categories, category)),
        )
        return category.id

    def update_category(self, category_id: str, **patch: Any) -> None:
        """Merge fields into a user category. Default categories are left untouched."""
        self._commit(
            "update_category",
            lambda s: replace(
                s,
                categories=reducers.update(
                    s.categories, category_id, patch, guard=_is_mutable_category
                ),
            ),
        )

    def delete_category(self, category_id: str) -> None:
        """Remove a user category. Default categories are never removed."""
        self._commit(
            "delete_category",
            lambda s: replace(
                s,
                categories=reducers.remove(s.categories, category_id, guard=_is_mutable_category),
            ),
        )

    def set_categories(self, categories: Iterable[Category]) -> None:
        """Replace the whole category collection."""
        items = reducers.replace_all(categories)
        self._commit("set_categories", lambda s: replace(s, categories=items))

    # Settings slice
    def set_language(self, language: Language) -> None:
        self.update_settings(language=language)

    def set_currency(self, currency: Currency) -> None:
        self.update_settings(currency=currency)

    def set_theme(self, theme: Theme) -> None:
        self.update_settings(theme=theme)

    def set_notifications(self, enabled: bool) -> None:
        self.update_settings(notifications=enabled)

    def update_settings(self, **patch: Any) -> None:
        """Replace one or more settings fields."""
        self._commit(
            "update_settings",
            lambda s: replace(
                s, settings=replace(s.settings, **reducers.clean_patch(s.settings, patch))
            ),
        )

    def replace_state(self, state: StoreState) -> None:
        """Overwrite the full state. Used when rehydrating from storage."""
        self._commit("replace_state", lambda s: state)
