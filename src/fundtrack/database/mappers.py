"""Mapper functions to convert SQLAlchemy models into domain entities.

This layer isolates the conversion logic so the schema can change without
touching services or the HTTP layer.
"""

from datetime import datetime, UTC
from decimal import Decimal
from typing import Optional

from fundtrack.domain import entities as domain
from fundtrack.database.models import (
    BankAccount as ORMBankAccount,
    Debt as ORMDebt,
    Transaction as ORMTransaction,
)


def _aware(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite drops tzinfo; every stored timestamp is UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _money(value) -> Decimal:
    if value is None:
        return Decimal("0")
    return Decimal(value)


def account_to_domain(orm_account: ORMBankAccount) -> domain.BankAccount:
    """Convert SQLAlchemy BankAccount model to domain BankAccount entity."""
    return domain.BankAccount(
        id=orm_account.id,
        account_number=orm_account.account_number,
        balance=_money(orm_account.balance),
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        description=orm_transaction.description,
        amount=_money(orm_transaction.amount),
        category=orm_transaction.category,
        date=_aware(orm_transaction.date),
        type=domain.TransactionType(orm_transaction.type),
        source_account_id=orm_transaction.source_account_id,
        destination_account_id=orm_transaction.destination_account_id,
        debt_id=orm_transaction.debt_id,
    )


def debt_to_domain(orm_debt: ORMDebt) -> domain.Debt:
    """Convert SQLAlchemy Debt model to domain Debt entity."""
    recurrence = None
    if any(
        value is not None
        for value in (
            orm_debt.recurrence_frequency,
            orm_debt.recurrence_interval,
            orm_debt.recurrence_next_due_date,
        )
    ):
        recurrence = domain.Recurrence(
            frequency=(
                domain.RecurrenceFrequency(orm_debt.recurrence_frequency)
                if orm_debt.recurrence_frequency is not None
                else None
            ),
            interval=orm_debt.recurrence_interval or 1,
            next_due_date=orm_debt.recurrence_next_due_date,
        )

    return domain.Debt(
        id=orm_debt.id,
        description=orm_debt.description,
        total_amount=_money(orm_debt.total_amount),
        settled_amount=_money(orm_debt.settled_amount),
        pending_amount=_money(orm_debt.pending_amount),
        status=domain.DebtStatus(orm_debt.status),
        type=domain.DebtType(orm_debt.type),
        date=_aware(orm_debt.date),
        debtor=orm_debt.debtor,
        debtor_account_id=orm_debt.debtor_account_id,
        creditor=orm_debt.creditor,
        creditor_account_id=orm_debt.creditor_account_id,
        is_recurring=bool(orm_debt.is_recurring),
        recurrence=recurrence,
    )
