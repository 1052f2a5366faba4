"""Tests for category service and commands."""

import re

import pytest

from fintrack.cli.main import cli
from fintrack.domain.defaults import CATEGORY_COLORS
from fintrack.domain.entities import TransactionType
from fintrack.domain.errors import NotFoundError, ProtectedCategoryError, ValidationError


def _created_id(output: str) -> str:
    match = re.search(r"\(ID: ([0-9a-f]+)\)", output)
    assert match, output
    return match.group(1)


class TestCategoryService:
    """Tests for CategoryService."""

    def test_create_category(self, category_service, store):
        category_id = category_service.create_category(
            " Pets ", type="expense", color="#ff6b6b", name_localized="Evcil"
        )

        category = store.get_category(category_id)
        assert category.name == "Pets"
        assert category.type == TransactionType.EXPENSE
        assert category.color == "#FF6B6B"
        assert category.name_localized == "Evcil"
        assert category.is_default is False

    def test_create_category_default_color(self, category_service, store):
        category_id = category_service.create_category("Bonus", type=TransactionType.INCOME)
        assert store.get_category(category_id).color == CATEGORY_COLORS[0]

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_create_category_requires_name(self, category_service, name):
        with pytest.raises(ValidationError, match="name is required"):
            category_service.create_category(name)

    def test_create_category_rejects_bad_color(self, category_service):
        with pytest.raises(ValidationError, match="Invalid color"):
            category_service.create_category("Pets", color="red")

    def test_create_category_rejects_bad_type(self, category_service):
        with pytest.raises(ValidationError):
            category_service.create_category("Pets", type="transfer")

    def test_list_categories_defaults_first(self, category_service):
        category_service.create_category("Aardvark Care")

        expenses = category_service.list_categories(TransactionType.EXPENSE)

        assert expenses[-1].name == "Aardvark Care"
        assert all(c.is_default for c in expenses[:-1])
        assert all(c.type == TransactionType.EXPENSE for c in expenses)
        assert len(category_service.list_categories(TransactionType.INCOME)) == 3

    def test_update_category(self, category_service, store):
        category_id = category_service.create_category("Pets")

        category_service.update_category(category_id, name="Pet Care", color="#4ecdc4")

        category = store.get_category(category_id)
        assert category.name == "Pet Care"
        assert category.color == "#4ECDC4"

    def test_update_type_of_used_category_raises(self, category_service, transaction_service, store):
        """Test that a category in use keeps its type so its transactions stay consistent."""
        category_id = category_service.create_category("Pets")
        transaction_id = transaction_service.create_transaction(amount="9", category_id=category_id)

        with pytest.raises(ValidationError, match="type cannot be changed"):
            category_service.update_category(category_id, type="income")

        assert store.get_category(category_id).type == TransactionType.EXPENSE
        assert store.get_transaction(transaction_id).type == TransactionType.EXPENSE

    def test_update_type_of_unused_category(self, category_service, store):
        category_id = category_service.create_category("Pets")
        category_service.update_category(category_id, type="income")
        assert store.get_category(category_id).type == TransactionType.INCOME

    def test_update_default_category_raises(self, category_service, store):
        with pytest.raises(ProtectedCategoryError):
            category_service.update_category("rent", name="Mortgage")
        assert store.get_category("rent").name == "Rent"

    def test_delete_default_category_raises(self, category_service, store):
        with pytest.raises(ProtectedCategoryError, match="default category"):
            category_service.delete_category("salary")
        assert store.get_category("salary") is not None

    def test_update_missing_category_raises(self, category_service):
        with pytest.raises(NotFoundError):
            category_service.update_category("missing", name="X")
        with pytest.raises(NotFoundError):
            category_service.delete_category("missing")

    def test_delete_category_keeps_transactions(self, category_service, transaction_service, store):
        category_id = category_service.create_category("Pets")
        transaction_service.create_transaction(amount="9", category_id=category_id)

        assert category_service.count_transactions(category_id) == 1
        category_service.delete_category(category_id)

        assert store.get_category(category_id) is None
        assert len(store.transactions) == 1
        assert store.transactions[0].category_id == category_id


def test_category_list(cli_runner, data_dir):
    """Test listing categories."""
    result = cli_runner.invoke(cli, ["--data-dir", str(data_dir), "category", "list"])

    assert result.exit_code == 0
    assert "Income categories:" in result.output
    assert "Expense categories:" in result.output
    assert "Salary" in result.output
    assert "ID: groceries (default)" in result.output


def test_category_create_and_edit(cli_runner, data_dir):
    """Test creating a category and editing it in a later invocation."""
    result = cli_runner.invoke(
        cli,
        ["--data-dir", str(data_dir), "category", "create", "Pets", "--color", "#45B7D1"],
    )
    assert result.exit_code == 0
    assert "Created expense category 'Pets'" in result.output
    category_id = _created_id(result.output)

    result = cli_runner.invoke(
        cli,
        ["--data-dir", str(data_dir), "category", "edit", category_id, "--name", "Pet Care"],
    )
    assert result.exit_code == 0
    assert f"Updated category {category_id}" in result.output

    result = cli_runner.invoke(cli, ["--data-dir", str(data_dir), "category", "list"])
    assert "Pet Care" in result.output


def test_category_create_invalid_color(cli_runner, data_dir):
    result = cli_runner.invoke(
        cli, ["--data-dir", str(data_dir), "category", "create", "Pets", "--color", "blue"]
    )

    assert result.exit_code == 1
    assert "Error: Invalid color" in result.output


def test_category_edit_default_fails(cli_runner, data_dir):
    """Test that default categories cannot be edited."""
    result = cli_runner.invoke(
        cli, ["--data-dir", str(data_dir), "category", "edit", "rent", "--name", "Mortgage"]
    )

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "default category" in result.output


def test_category_delete_default_fails(cli_runner, data_dir):
    result = cli_runner.invoke(
        cli, ["--data-dir", str(data_dir), "category", "delete", "groceries", "--yes"]
    )

    assert result.exit_code == 1
    assert "cannot be modified or deleted" in result.output


def test_category_delete_in_use_prompts(cli_runner, data_dir):
    """Test that deleting a category in use asks for confirmation."""
    result = cli_runner.invoke(
        cli, ["--data-dir", str(data_dir), "category", "create", "Pets"]
    )
    category_id = _created_id(result.output)
    cli_runner.invoke(
        cli,
        ["--data-dir", str(data_dir), "transaction", "add", "12", "--category", category_id],
    )

    result = cli_runner.invoke(
        cli, ["--data-dir", str(data_dir), "category", "delete", category_id], input="n\n"
    )
    assert result.exit_code == 0
    assert "1 transaction use this category" in result.output
    assert "Deletion cancelled." in result.output

    result = cli_runner.invoke(
        cli, ["--data-dir", str(data_dir), "category", "delete", category_id], input="y\n"
    )
    assert result.exit_code == 0
    assert f"Deleted category {category_id}" in result.output

    result = cli_runner.invoke(cli, ["--data-dir", str(data_dir), "transaction", "list"])
    assert "Unknown" in result.output
