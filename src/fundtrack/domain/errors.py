"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Missing or malformed input."""


class NotFoundError(DomainError):
    """Referenced account, debt or transaction does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as a duplicate account number."""


class PersistenceError(DomainError):
    """The store failed to read or commit a unit of work."""


def account_not_found(account_id: int) -> str:
    """Return message for missing bank account."""
    return f"Bank account {account_id} not found"


def source_account_not_found(account_id: int) -> str:
    """Return message for missing source account."""
    return f"Source account {account_id} not found"


def destination_account_not_found(account_id: int) -> str:
    """Return message for missing destination account."""
    return f"Destination account {account_id} not found"


def debt_not_found(debt_id: int) -> str:
    """Return message for missing debt."""
    return f"Debt {debt_id} not found"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def duplicate_account_number(account_number: str) -> str:
    """Return message for a duplicate account number."""
    return f"Account with account number '{account_number}' already exists"


def missing_fields(fields: list[str]) -> str:
    """Return message listing required fields absent from a request."""
    if len(fields) == 1:
        return f"{fields[0]} is a required field"
    return f"{', '.join(fields[:-1])} and {fields[-1]} are required fields"
