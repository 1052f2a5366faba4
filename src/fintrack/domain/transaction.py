"""Transaction domain service."""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from fintrack.domain.entities import Transaction, TransactionType
from fintrack.domain.errors import (
    NotFoundError,
    ValidationError,
    category_not_found,
    category_type_mismatch,
    invalid_choice,
    transaction_not_found,
)
from fintrack.domain.store import Store
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.date_parser import parse_date


def coerce_transaction_type(value: Union[str, TransactionType]) -> TransactionType:
    """Convert a string to a TransactionType.

    Raises:
        ValidationError: If the value is not a transaction type
    """
    try:
        return TransactionType(value.lower() if isinstance(value, str) else value)
    except ValueError:
        raise ValidationError(
            invalid_choice("transaction type", value, [t.value for t in TransactionType])
        )


def coerce_amount(value: Union[str, Decimal, int, float, None]) -> Decimal:
    """Convert user input to a positive Decimal amount.

    Raises:
        ValidationError: If the amount is missing, malformed or not positive
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError("Amount is required")
    try:
        if isinstance(value, str):
            amount = parse_amount(value)
        else:
            amount = Decimal(str(value))
    except (ValueError, InvalidOperation) as e:
        raise ValidationError(str(e))
    if not amount.is_finite() or amount <= 0:
        raise ValidationError(f"Amount must be a positive number, got {value}")
    return amount


def coerce_date(value: Union[str, date]) -> date:
    """Convert user input to a calendar date.

    Raises:
        ValidationError: If the string cannot be parsed
    """
    if isinstance(value, date):
        return value
    try:
        return parse_date(value)
    except ValueError as e:
        raise ValidationError(str(e))


class TransactionService:
    """Service for managing transactions.

    Validation happens here, before anything reaches the store, so the store
    itself stays free of error states.
    """

    def __init__(self, store: Store):
        """Initialize transaction service.

        Args:
            store: Domain store
        """
        self.store = store

    def _check_category(self, category_id: Optional[str], transaction_type: TransactionType) -> str:
        if not category_id:
            raise ValidationError("Category is required")
        category = self.store.get_category(category_id)
        if category is None:
            raise ValidationError(category_not_found(category_id))
        if category.type != transaction_type:
            raise ValidationError(
                category_type_mismatch(category_id, category.type.value, transaction_type.value)
            )
        return category_id

    def create_transaction(
        self,
        amount: Union[str, Decimal, int, float, None],
        category_id: Optional[str],
        type: Union[str, TransactionType] = TransactionType.EXPENSE,
        date: Union[str, date, None] = None,
        description: Optional[str] = None,
    ) -> str:
        """Create a transaction.

        Args:
            amount: Positive amount
            category_id: ID of an existing category of the same type
            type: income or expense
            date: Transaction date (defaults to today)
            description: Optional description

        Returns:
            Transaction ID

        Raises:
            ValidationError: If amount or category is missing or invalid
        """
        transaction_type = coerce_transaction_type(type)
        parsed_amount = coerce_amount(amount)
        self._check_category(category_id, transaction_type)
        parsed_date = coerce_date(date) if date is not None else _today()

        return self.store.add_transaction(
            amount=parsed_amount,
            type=transaction_type,
            category_id=category_id,
            date=parsed_date,
            description=description.strip() if description and description.strip() else None,
        )

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.store.get_transaction(transaction_id)

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        category_id: Optional[str] = None,
        type: Optional[TransactionType] = None,
    ) -> list[Transaction]:
        """List transactions newest first with optional filters."""
        results = []
        for txn in self.store.transactions:
            if start_date is not None and txn.date < start_date:
                continue
            if end_date is not None and txn.date > end_date:
                continue
            if category_id is not None and txn.category_id != category_id:
                continue
            if type is not None and txn.type != type:
                continue
            results.append(txn)
        return sorted(results, key=lambda t: (t.date, t.created_at), reverse=True)

    def update_transaction(
        self,
        transaction_id: str,
        amount: Union[str, Decimal, int, float, None] = None,
        category_id: Optional[str] = None,
        type: Union[str, TransactionType, None] = None,
        date: Union[str, date, None] = None,
        description: Optional[str] = None,
        clear_description: bool = False,
    ) -> None:
        """Update fields of a transaction.

        Only the supplied fields change. Type and category are checked
        against each other using the resulting values.

        Raises:
            NotFoundError: If the transaction doesn't exist
            ValidationError: If a supplied value is invalid
        """
        txn = self.store.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        patch: dict = {}
        new_type = coerce_transaction_type(type) if type is not None else txn.type
        if type is not None:
            patch["type"] = new_type
        if amount is not None:
            patch["amount"] = coerce_amount(amount)
        if date is not None:
            patch["date"] = coerce_date(date)
        if clear_description:
            patch["description"] = None
        elif description is not None:
            patch["description"] = description.strip() or None

        new_category_id = category_id if category_id is not None else txn.category_id
        if category_id is not None or type is not None:
            self._check_category(new_category_id, new_type)
            patch["category_id"] = new_category_id

        if patch:
            self.store.update_transaction(transaction_id, **patch)

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        if self.store.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        self.store.delete_transaction(transaction_id)


def _today() -> date:
    return date.today()
