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


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


def category_not_found(key: str) -> str:
    """Return message for an unknown category key."""
    return f"Category '{key}' not found"


def invalid_amount(text: str) -> str:
    """Return message for an amount that is not a positive number."""
    return f"Amount '{text}' must be a number greater than zero"


def missing_category() -> str:
    """Return message for an entry without a category."""
    return "A category is required"


def duplicate_transaction_id(transaction_id: object) -> str:
    """Return message for a transaction id that is already stored."""
    return f"Transaction with id '{transaction_id}' already exists"
