"""Domain model entities for fundtrack.

These are pure data classes representing business concepts, independent of
database schema. Services and the HTTP layer only ever see these; the ORM
models stay inside the database package.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionType(str, Enum):
    """Kind of a transaction; decides which account side it moves."""

    INCOME = "income"
    EXPENSE = "expense"
    SELF_TRANSFER = "self-transfer"
    DEBT = "debt"


class DebtStatus(str, Enum):
    """Settlement status of a debt."""

    PENDING = "pending"
    SETTLED = "settled"


class DebtType(str, Enum):
    """Debt polarity.

    POSITIVE: the counterparty owes the owner.
    NEGATIVE: the owner owes the counterparty.
    """

    NEGATIVE = "negative"
    POSITIVE = "positive"


class RecurrenceFrequency(str, Enum):
    """Period unit of a recurring debt."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class BankAccount:
    """Bank account domain entity."""

    id: int
    account_number: str
    balance: Decimal


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    ``amount`` is always positive; the effect on a balance follows from
    ``type`` and from whether the account is the source or destination.
    """

    id: int
    description: Optional[str]
    amount: Decimal
    category: Optional[str]
    date: datetime
    type: TransactionType
    source_account_id: Optional[int]
    destination_account_id: Optional[int]
    debt_id: Optional[int]


@dataclass(frozen=True)
class Recurrence:
    """Recurrence settings stored on a debt."""

    frequency: Optional[RecurrenceFrequency]
    interval: int = 1
    next_due_date: Optional[date] = None


@dataclass(frozen=True)
class Debt:
    """Debt domain entity."""

    id: int
    description: str
    total_amount: Decimal
    settled_amount: Decimal
    pending_amount: Decimal
    status: DebtStatus
    type: DebtType
    date: datetime
    debtor: Optional[str]
    debtor_account_id: Optional[int]
    creditor: Optional[str]
    creditor_account_id: Optional[int]
    is_recurring: bool = False
    recurrence: Optional[Recurrence] = None

    @property
    def counterparty_account_id(self) -> Optional[int]:
        """Account moved by a debt transaction.

        Positive debts move the debtor's account, negative debts the
        creditor's.
        """
        if self.type == DebtType.POSITIVE:
            return self.debtor_account_id
        return self.creditor_account_id
