"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ProtectedCategoryError(DomainError):
    """Attempt to edit or delete a default category."""


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def category_not_found(category_id: str) -> str:
    """Return message for missing category by ID."""
    return f"Category '{category_id}' not found"


def category_is_default(category_id: str) -> str:
    """Return message when a default category would be modified."""
    return f"Category '{category_id}' is a default category and cannot be modified or deleted"


def category_type_mismatch(category_id: str, category_type: str, transaction_type: str) -> str:
    """Return message when transaction and category types disagree."""
    return (
        f"Category '{category_id}' is an {category_type} category "
        f"and cannot be used for an {transaction_type} transaction"
    )


def category_type_in_use(category_id: str, count: int) -> str:
    """Return message when a used category would change type."""
    return (
        f"Category '{category_id}' is used by {count} "
        f"transaction{'s' if count != 1 else ''}; its type cannot be changed"
    )


def invalid_choice(field: str, value: object, choices: list[str]) -> str:
    """Return message for an enum value outside the allowed set."""
    return f"Invalid {field} '{value}'. Choose one of: {', '.join(choices)}"
