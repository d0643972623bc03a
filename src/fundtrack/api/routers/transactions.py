"""Transaction API router.

Expense, income and self-transfer postings. These write several records in
one unit of work; every failure, whether bad input, a missing account or a
store error, is answered with 500. The message still tells the kinds apart.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from fundtrack.api.deps import get_ledger_service
from fundtrack.api.errors import INTERNAL_SERVER_ERROR
from fundtrack.api.schemas import TransactionResponse
from fundtrack.domain.errors import DomainError, PersistenceError
from fundtrack.domain.ledger import LedgerService
from fundtrack.domain.requests import ExpenseRequest, IncomeRequest, SelfTransferRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transactions", tags=["Transactions"])


def unit_failure(action: str, error: DomainError) -> HTTPException:
    """Turn a failed multi-record operation into a 500."""
    logger.error("Error %s: %s", action, error)
    if isinstance(error, PersistenceError):
        return HTTPException(status_code=500, detail=INTERNAL_SERVER_ERROR)
    return HTTPException(status_code=500, detail=str(error))


@router.post("/expense", response_model=TransactionResponse)
def add_expense(
    payload: Any = Body(None),
    service: LedgerService = Depends(get_ledger_service),
) -> TransactionResponse:
    """Record an expense and debit ``sourceAccount``."""
    try:
        transaction = service.record_expense(ExpenseRequest.from_payload(payload))
    except DomainError as e:
        raise unit_failure("adding expense", e)
    return TransactionResponse.from_entity(transaction)


@router.post("/income", response_model=TransactionResponse)
def add_income(
    payload: Any = Body(None),
    service: LedgerService = Depends(get_ledger_service),
) -> TransactionResponse:
    """Record income and credit ``destinationAccount``."""
    try:
        transaction = service.record_income(IncomeRequest.from_payload(payload))
    except DomainError as e:
        raise unit_failure("adding income", e)
    return TransactionResponse.from_entity(transaction)


@router.post("/self-transfer", response_model=TransactionResponse)
def self_transfer(
    payload: Any = Body(None),
    service: LedgerService = Depends(get_ledger_service),
) -> TransactionResponse:
    """Move ``amount`` from ``sourceAccount`` to ``destinationAccount``."""
    try:
        transaction = service.record_self_transfer(SelfTransferRequest.from_payload(payload))
    except DomainError as e:
        raise unit_failure("performing self-transfer", e)
    return TransactionResponse.from_entity(transaction)
