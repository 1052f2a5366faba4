"""Tests for the domain store and its reducers."""

from datetime import date, datetime
from decimal import Decimal

from fintrack.domain import reducers
from fintrack.domain.defaults import DEFAULT_CATEGORIES
from fintrack.domain.entities import (
    Currency,
    Language,
    StoreState,
    Theme,
    TransactionType,
)
from fintrack.domain.store import Store


class TestReducers:
    """Tests for pure reducer functions."""

    def test_update_merges_patch(self, make_transaction):
        txn = make_transaction(amount="10")
        items = (txn,)

        result = reducers.update(items, txn.id, {"amount": Decimal("25"), "description": "Lunch"})

        assert result[0].amount == Decimal("25")
        assert result[0].description == "Lunch"
        assert result[0].id == txn.id
        assert items[0].amount == Decimal("10")

    def test_update_ignores_unknown_and_immutable_fields(self, make_transaction):
        txn = make_transaction()
        items = (txn,)

        result = reducers.update(items, txn.id, {"id": "other", "created_at": None, "bogus": 1})

        assert result is items

    def test_update_unknown_id_is_noop(self, make_transaction):
        items = (make_transaction(),)
        assert reducers.update(items, "missing", {"amount": Decimal("1")}) is items

    def test_update_respects_guard(self, make_transaction):
        txn = make_transaction()
        items = (txn,)
        assert reducers.update(items, txn.id, {"amount": Decimal("1")}, guard=lambda t: False) is items

    def test_remove(self, make_transaction):
        first = make_transaction()
        second = make_transaction()
        assert reducers.remove((first, second), first.id) == (second,)

    def test_remove_respects_guard(self, make_transaction):
        items = (make_transaction(),)
        assert reducers.remove(items, items[0].id, guard=lambda t: False) is items

    def test_append_and_replace_all(self, make_transaction):
        txn = make_transaction()
        assert reducers.append((), txn) == (txn,)
        assert reducers.replace_all([txn]) == (txn,)


def test_new_store_has_seeded_defaults(store):
    """Test that a fresh store holds default categories and no transactions."""
    assert store.transactions == ()
    assert store.categories == DEFAULT_CATEGORIES
    assert all(c.is_default for c in store.categories)


def test_add_transaction_assigns_id_and_created_at(store):
    """Test that adding a transaction generates id and timestamp."""
    transaction_id = store.add_transaction(
        amount=Decimal("42.10"),
        type=TransactionType.EXPENSE,
        category_id="groceries",
        date=date(2024, 5, 1),
        description="Market",
    )

    txn = store.get_transaction(transaction_id)
    assert txn is not None
    assert txn.amount == Decimal("42.10")
    assert txn.description == "Market"
    assert isinstance(txn.created_at, datetime)
    assert txn.created_at.tzinfo is not None


def test_add_transaction_ids_are_unique(store):
    ids = {
        store.add_transaction(Decimal("1"), TransactionType.EXPENSE, "rent", date(2024, 1, 1))
        for _ in range(20)
    }
    assert len(ids) == 20
    assert len(store.transactions) == 20


def test_add_transaction_preserves_insertion_order(store):
    first = store.add_transaction(Decimal("1"), TransactionType.EXPENSE, "rent", date(2024, 2, 1))
    second = store.add_transaction(Decimal("2"), TransactionType.EXPENSE, "rent", date(2024, 1, 1))
    assert [t.id for t in store.transactions] == [first, second]


def test_update_transaction(store):
    transaction_id = store.add_transaction(
        Decimal("10"), TransactionType.EXPENSE, "groceries", date(2024, 1, 1)
    )
    store.update_transaction(transaction_id, amount=Decimal("15"), date=date(2024, 1, 2))

    txn = store.get_transaction(transaction_id)
    assert txn.amount == Decimal("15")
    assert txn.date == date(2024, 1, 2)


def test_update_and_delete_unknown_transaction_are_noops(store):
    before = store.state
    store.update_transaction("missing", amount=Decimal("1"))
    store.delete_transaction("missing")
    assert store.state is before


def test_delete_transaction(store):
    transaction_id = store.add_transaction(
        Decimal("10"), TransactionType.EXPENSE, "groceries", date(2024, 1, 1)
    )
    store.delete_transaction(transaction_id)
    assert store.get_transaction(transaction_id) is None
    assert store.transactions == ()


def test_add_category_is_never_default(store):
    category_id = store.add_category("Pets", TransactionType.EXPENSE, "#FF6B6B")
    category = store.get_category(category_id)

    assert category.is_default is False
    assert category.created_at is not None
    assert store.categories[-1] == category


def test_update_user_category(store):
    category_id = store.add_category("Pets", TransactionType.EXPENSE, "#FF6B6B")
    store.update_category(category_id, name="Pet Care", color="#4ECDC4")

    category = store.get_category(category_id)
    assert category.name == "Pet Care"
    assert category.color == "#4ECDC4"


def test_update_cannot_promote_category_to_default(store):
    category_id = store.add_category("Pets", TransactionType.EXPENSE, "#FF6B6B")
    store.update_category(category_id, is_default=True)
    assert store.get_category(category_id).is_default is False


def test_default_category_update_is_noop(store):
    before = store.categories
    store.update_category("salary", name="Wages")
    assert store.categories == before
    assert store.get_category("salary").name == "Salary"


def test_default_category_delete_is_noop(store):
    before = store.categories
    store.delete_category("salary")
    store.delete_category("salary")
    assert store.categories == before


def test_delete_user_category(store):
    category_id = store.add_category("Pets", TransactionType.EXPENSE, "#FF6B6B")
    store.delete_category(category_id)
    assert store.get_category(category_id) is None
    assert store.categories == DEFAULT_CATEGORIES


def test_is_default_category(store):
    category_id = store.add_category("Pets", TransactionType.EXPENSE, "#FF6B6B")
    assert store.is_default_category("rent") is True
    assert store.is_default_category(category_id) is False
    assert store.is_default_category("missing") is False


def test_settings_setters(store):
    store.set_language(Language.TR)
    store.set_currency(Currency.EUR)
    store.set_theme(Theme.DARK)
    store.set_notifications(False)

    settings = store.settings
    assert settings.language == Language.TR
    assert settings.currency == Currency.EUR
    assert settings.theme == Theme.DARK
    assert settings.notifications is False


def test_listeners_notified_on_change_only(store):
    received = []
    unsubscribe = store.subscribe(received.append)

    store.add_transaction(Decimal("1"), TransactionType.EXPENSE, "rent", date(2024, 1, 1))
    store.delete_category("rent")
    store.set_theme(Theme.DARK)

    assert len(received) == 2
    assert received[-1] is store.state

    unsubscribe()
    store.set_theme(Theme.LIGHT)
    assert len(received) == 2


def test_replace_state(store, make_transaction):
    txn = make_transaction()
    state = StoreState(transactions=(txn,), categories=DEFAULT_CATEGORIES)
    store.replace_state(state)
    assert store.state == state


def test_set_transactions_and_categories(store, make_transaction):
    txn = make_transaction()
    store.set_transactions([txn])
    store.set_categories(DEFAULT_CATEGORIES[:2])
    assert store.transactions == (txn,)
    assert store.categories == DEFAULT_CATEGORIES[:2]


def test_initial_state_argument(make_transaction):
    txn = make_transaction()
    custom = Store(StoreState(transactions=(txn,)))
    assert custom.transactions == (txn,)
    assert custom.categories == ()
