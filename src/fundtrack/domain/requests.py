"""Typed request structures for every fundtrack operation.

Each request declares its required and optional fields once and is built
from a raw payload (a decoded JSON body, or keyword arguments from the CLI)
by ``from_payload``. Building a request is the only validation step: a
request object that exists is valid, so services never re-check input
before opening a unit of work.

Payload keys use the camelCase names of the HTTP API.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, TypeVar

from fundtrack.domain.entities import (
    DebtStatus,
    DebtType,
    Recurrence,
    RecurrenceFrequency,
    TransactionType,
)
from fundtrack.domain.errors import ValidationError, missing_fields
from fundtrack.utils.amount_parser import parse_amount
from fundtrack.utils.date_parser import parse_date, parse_datetime

E = TypeVar("E", bound=Enum)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _require(payload: Mapping[str, Any], *names: str) -> None:
    """Raise ValidationError naming every required field that is absent."""
    missing = [name for name in names if _is_blank(payload.get(name))]
    if missing:
        raise ValidationError(missing_fields(missing))


def _as_mapping(payload: Any) -> Mapping[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return payload


def _string(payload: Mapping[str, Any], name: str) -> Optional[str]:
    value = payload.get(name)
    if _is_blank(value):
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a string")
    return value.strip()


def _number(payload: Mapping[str, Any], name: str) -> Optional[Decimal]:
    value = payload.get(name)
    if _is_blank(value):
        return None
    try:
        amount = parse_amount(value)
    except ValueError:
        raise ValidationError(f"{name} must be a valid number")
    # Money is stored to the cent; finer amounts would be rounded away
    if amount.normalize().as_tuple().exponent < -2:
        raise ValidationError(f"{name} must not have more than two decimal places")
    return amount


def _positive_amount(payload: Mapping[str, Any], name: str = "amount") -> Decimal:
    amount = _number(payload, name)
    if amount is None:
        raise ValidationError(missing_fields([name]))
    if amount <= 0:
        raise ValidationError(f"{name} must be greater than zero")
    return amount


def _non_negative_amount(payload: Mapping[str, Any], name: str) -> Decimal:
    amount = _number(payload, name)
    if amount is None:
        raise ValidationError(missing_fields([name]))
    if amount < 0:
        raise ValidationError(f"{name} must not be negative")
    return amount


def _reference(payload: Mapping[str, Any], name: str) -> Optional[int]:
    """Parse an account or debt reference (an integer id)."""
    value = payload.get(name)
    if _is_blank(value):
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be a record id")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise ValidationError(f"{name} must be a record id")


def _datetime(payload: Mapping[str, Any], name: str = "date") -> Optional[datetime]:
    value = payload.get(name)
    if _is_blank(value):
        return None
    try:
        return parse_datetime(value)
    except ValueError:
        raise ValidationError(f"{name} must be a valid date")


def _choice(payload: Mapping[str, Any], name: str, enum_cls: type[E]) -> E:
    value = payload.get(name)
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(f"Invalid {name} '{value}'. Allowed values: {allowed}")


@dataclass(frozen=True)
class ExpenseRequest:
    """Money leaving one account."""

    description: str
    amount: Decimal
    source_account_id: int
    category: Optional[str] = None
    date: Optional[datetime] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "ExpenseRequest":
        payload = _as_mapping(payload)
        _require(payload, "description", "amount", "sourceAccount")
        return cls(
            description=_string(payload, "description"),
            amount=_positive_amount(payload),
            source_account_id=_reference(payload, "sourceAccount"),
            category=_string(payload, "category"),
            date=_datetime(payload),
        )


@dataclass(frozen=True)
class IncomeRequest:
    """Money arriving in one account."""

    description: str
    amount: Decimal
    destination_account_id: int
    category: Optional[str] = None
    date: Optional[datetime] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "IncomeRequest":
        payload = _as_mapping(payload)
        _require(payload, "description", "amount", "destinationAccount")
        return cls(
            description=_string(payload, "description"),
            amount=_positive_amount(payload),
            destination_account_id=_reference(payload, "destinationAccount"),
            category=_string(payload, "category"),
            date=_datetime(payload),
        )


@dataclass(frozen=True)
class SelfTransferRequest:
    """Money moving between two of the owner's accounts."""

    amount: Decimal
    source_account_id: int
    destination_account_id: int
    description: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "SelfTransferRequest":
        payload = _as_mapping(payload)
        _require(payload, "amount", "sourceAccount", "destinationAccount")
        return cls(
            amount=_positive_amount(payload),
            source_account_id=_reference(payload, "sourceAccount"),
            destination_account_id=_reference(payload, "destinationAccount"),
            description=_string(payload, "description"),
        )


@dataclass(frozen=True)
class CreateAccountRequest:
    account_number: str

    @classmethod
    def from_payload(cls, payload: Any) -> "CreateAccountRequest":
        payload = _as_mapping(payload)
        _require(payload, "accountNumber")
        return cls(account_number=_string(payload, "accountNumber"))


@dataclass(frozen=True)
class UpdateBalanceRequest:
    """New absolute balance; zero and negative values are valid."""

    new_balance: Decimal

    @classmethod
    def from_payload(cls, payload: Any) -> "UpdateBalanceRequest":
        payload = _as_mapping(payload)
        balance = _number(payload, "newBalance")
        if balance is None:
            raise ValidationError("newBalance must be a valid number")
        return cls(new_balance=balance)


def _recurrence(payload: Mapping[str, Any]) -> Optional[Recurrence]:
    raw = payload.get("recurrence")
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise ValidationError("recurrence must be an object")

    frequency = None
    if not _is_blank(raw.get("frequency")):
        frequency = _choice(raw, "frequency", RecurrenceFrequency)

    interval = raw.get("interval", 1)
    if interval is None:
        interval = 1
    if isinstance(interval, bool) or not isinstance(interval, int) or interval < 1:
        raise ValidationError("recurrence interval must be an integer of at least 1")

    next_due_date: Optional[date] = None
    if not _is_blank(raw.get("nextDueDate")):
        try:
            next_due_date = parse_date(raw["nextDueDate"])
        except ValueError:
            raise ValidationError("nextDueDate must be a valid date")

    return Recurrence(frequency=frequency, interval=interval, next_due_date=next_due_date)


@dataclass(frozen=True)
class CreateDebtRequest:
    """A new debt.

    Settled and pending amounts are stored as given; pending is not derived
    from total minus settled.
    """

    description: str
    total_amount: Decimal
    settled_amount: Decimal
    pending_amount: Decimal
    status: DebtStatus
    type: DebtType
    debtor: Optional[str] = None
    debtor_account_id: Optional[int] = None
    creditor: Optional[str] = None
    creditor_account_id: Optional[int] = None
    is_recurring: bool = False
    recurrence: Optional[Recurrence] = None
    date: Optional[datetime] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "CreateDebtRequest":
        payload = _as_mapping(payload)
        _require(payload, "description", "totalAmount", "settledAmount", "pendingAmount", "status", "type")

        debtor = _string(payload, "debtor")
        debtor_account_id = _reference(payload, "debtorAccount")
        creditor = _string(payload, "creditor")
        creditor_account_id = _reference(payload, "creditorAccount")
        if debtor is None and debtor_account_id is None:
            raise ValidationError("Either debtor or debtorAccount is required")
        if creditor is None and creditor_account_id is None:
            raise ValidationError("Either creditor or creditorAccount is required")

        is_recurring = payload.get("isRecurring", False)
        if is_recurring is None:
            is_recurring = False
        if not isinstance(is_recurring, bool):
            raise ValidationError("isRecurring must be a boolean")

        return cls(
            description=_string(payload, "description"),
            total_amount=_non_negative_amount(payload, "totalAmount"),
            settled_amount=_non_negative_amount(payload, "settledAmount"),
            pending_amount=_non_negative_amount(payload, "pendingAmount"),
            status=_choice(payload, "status", DebtStatus),
            type=_choice(payload, "type", DebtType),
            debtor=debtor,
            debtor_account_id=debtor_account_id,
            creditor=creditor,
            creditor_account_id=creditor_account_id,
            is_recurring=is_recurring,
            recurrence=_recurrence(payload),
            date=_datetime(payload),
        )


@dataclass(frozen=True)
class UpdateDebtStatusRequest:
    new_status: DebtStatus

    @classmethod
    def from_payload(cls, payload: Any) -> "UpdateDebtStatusRequest":
        payload = _as_mapping(payload)
        value = payload.get("newStatus")
        try:
            return cls(new_status=DebtStatus(value))
        except ValueError:
            raise ValidationError("Invalid status provided. Allowed values: pending, settled")


@dataclass(frozen=True)
class DebtTransactionRequest:
    """A settlement or increase entry recorded against a debt."""

    description: str
    amount: Decimal
    type: TransactionType
    source_account_id: int
    category: Optional[str] = None
    date: Optional[datetime] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "DebtTransactionRequest":
        payload = _as_mapping(payload)
        _require(payload, "description", "amount", "type", "sourceAccount")
        return cls(
            description=_string(payload, "description"),
            amount=_positive_amount(payload),
            type=_choice(payload, "type", TransactionType),
            source_account_id=_reference(payload, "sourceAccount"),
            category=_string(payload, "category"),
            date=_datetime(payload),
        )
