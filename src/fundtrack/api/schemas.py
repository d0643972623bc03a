"""Response schemas (Pydantic).

Records are serialised with camelCase keys; references to other records
are their ids.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from fundtrack.domain import entities


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    """Error body shared by every endpoint."""

    error: str


class HealthResponse(BaseModel):
    status: str = "ok"


class BankAccountResponse(_CamelModel):
    """Bank account."""

    id: int
    account_number: str
    balance: float

    @classmethod
    def from_entity(cls, account: entities.BankAccount) -> "BankAccountResponse":
        return cls(
            id=account.id,
            account_number=account.account_number,
            balance=float(account.balance),
        )


class TransactionResponse(_CamelModel):
    """Transaction."""

    id: int
    description: Optional[str]
    amount: float
    category: Optional[str]
    date: datetime
    type: str
    source_account: Optional[int]
    destination_account: Optional[int]
    debt: Optional[int]

    @classmethod
    def from_entity(cls, transaction: entities.Transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            description=transaction.description,
            amount=float(transaction.amount),
            category=transaction.category,
            date=transaction.date,
            type=transaction.type.value,
            source_account=transaction.source_account_id,
            destination_account=transaction.destination_account_id,
            debt=transaction.debt_id,
        )


class RecurrenceResponse(_CamelModel):
    frequency: Optional[str]
    interval: int
    next_due_date: Optional[date]


class DebtResponse(_CamelModel):
    """Debt."""

    id: int
    description: str
    total_amount: float
    settled_amount: float
    pending_amount: float
    status: str
    type: str
    date: datetime
    debtor: Optional[str]
    debtor_account: Optional[int]
    creditor: Optional[str]
    creditor_account: Optional[int]
    is_recurring: bool
    recurrence: Optional[RecurrenceResponse]

    @classmethod
    def from_entity(cls, debt: entities.Debt) -> "DebtResponse":
        recurrence = None
        if debt.recurrence is not None:
            recurrence = RecurrenceResponse(
                frequency=debt.recurrence.frequency.value if debt.recurrence.frequency else None,
                interval=debt.recurrence.interval,
                next_due_date=debt.recurrence.next_due_date,
            )
        return cls(
            id=debt.id,
            description=debt.description,
            total_amount=float(debt.total_amount),
            settled_amount=float(debt.settled_amount),
            pending_amount=float(debt.pending_amount),
            status=debt.status.value,
            type=debt.type.value,
            date=debt.date,
            debtor=debt.debtor,
            debtor_account=debt.debtor_account_id,
            creditor=debt.creditor,
            creditor_account=debt.creditor_account_id,
            is_recurring=debt.is_recurring,
            recurrence=recurrence,
        )
