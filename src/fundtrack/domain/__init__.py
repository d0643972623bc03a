"""Domain layer for fundtrack application.

Services live in their own modules (``fundtrack.domain.account``,
``fundtrack.domain.ledger``, ``fundtrack.domain.debt``) and are imported
from there; importing them here would make the database package, which
needs the entities, import itself in a cycle.
"""

from fundtrack.domain.entities import (
    BankAccount,
    Debt,
    DebtStatus,
    DebtType,
    Recurrence,
    RecurrenceFrequency,
    Transaction,
    TransactionType,
)

__all__ = [
    "BankAccount",
    "Debt",
    "DebtStatus",
    "DebtType",
    "Recurrence",
    "RecurrenceFrequency",
    "Transaction",
    "TransactionType",
]
