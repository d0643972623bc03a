"""Debt API router."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from fundtrack.api.deps import get_debt_service
from fundtrack.api.routers.transactions import unit_failure
from fundtrack.api.schemas import DebtResponse, TransactionResponse
from fundtrack.domain.debt import DebtService
from fundtrack.domain.errors import DomainError, NotFoundError
from fundtrack.domain.requests import (
    CreateDebtRequest,
    DebtTransactionRequest,
    UpdateDebtStatusRequest,
)

router = APIRouter(prefix="/debts", tags=["Debts"])


@router.post("", status_code=201, response_model=DebtResponse)
def create_debt(
    payload: Any = Body(None),
    service: DebtService = Depends(get_debt_service),
) -> DebtResponse:
    """Create a debt.

    Needs a debtor (name or account) and a creditor (name or account).
    """
    request = CreateDebtRequest.from_payload(payload)
    try:
        debt = service.create_debt(request)
    except NotFoundError as e:
        # An unknown debtor/creditor account is bad input here, not a missing resource
        raise HTTPException(status_code=400, detail=str(e))
    return DebtResponse.from_entity(debt)


@router.get("", response_model=list[DebtResponse])
def list_debts(service: DebtService = Depends(get_debt_service)) -> list[DebtResponse]:
    """List all debts."""
    return [DebtResponse.from_entity(debt) for debt in service.list_debts()]


@router.get("/{debt_id}", response_model=DebtResponse)
def get_debt(debt_id: int, service: DebtService = Depends(get_debt_service)) -> DebtResponse:
    """Get one debt."""
    return DebtResponse.from_entity(service.get_debt(debt_id))


@router.patch("/{debt_id}/update-status", response_model=DebtResponse)
def update_debt_status(
    debt_id: int,
    payload: Any = Body(None),
    service: DebtService = Depends(get_debt_service),
) -> DebtResponse:
    """Set ``newStatus`` (pending or settled)."""
    debt = service.update_status(debt_id, UpdateDebtStatusRequest.from_payload(payload))
    return DebtResponse.from_entity(debt)


@router.post("/{debt_id}/transactions", status_code=201, response_model=TransactionResponse)
def create_debt_transaction(
    debt_id: int,
    payload: Any = Body(None),
    service: DebtService = Depends(get_debt_service),
) -> TransactionResponse:
    """Record a transaction against a debt.

    Moves the counterparty account chosen by the debt's polarity and grows
    the debt's total and pending amounts. Any failure is a 500.
    """
    try:
        transaction = service.record_debt_transaction(
            debt_id, DebtTransactionRequest.from_payload(payload)
        )
    except DomainError as e:
        raise unit_failure("creating debt transaction", e)
    return TransactionResponse.from_entity(transaction)
