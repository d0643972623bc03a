"""Bank account API router."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from fundtrack.api.deps import get_account_service
from fundtrack.api.schemas import BankAccountResponse
from fundtrack.domain.account import AccountService
from fundtrack.domain.requests import CreateAccountRequest, UpdateBalanceRequest

router = APIRouter(prefix="/bank-accounts", tags=["Bank Accounts"])


@router.get("", response_model=list[BankAccountResponse])
def list_bank_accounts(
    service: AccountService = Depends(get_account_service),
) -> list[BankAccountResponse]:
    """List all bank accounts."""
    return [BankAccountResponse.from_entity(account) for account in service.list_accounts()]


@router.get("/{account_id}", response_model=BankAccountResponse)
def get_bank_account(
    account_id: int,
    service: AccountService = Depends(get_account_service),
) -> BankAccountResponse:
    """Get one bank account."""
    return BankAccountResponse.from_entity(service.get_account(account_id))


@router.post("", status_code=201, response_model=BankAccountResponse)
def create_bank_account(
    payload: Any = Body(None),
    service: AccountService = Depends(get_account_service),
) -> BankAccountResponse:
    """Create a bank account with a zero balance.

    A missing or already used ``accountNumber`` is rejected with 400.
    """
    account = service.create_account(CreateAccountRequest.from_payload(payload))
    return BankAccountResponse.from_entity(account)


@router.patch("/{account_id}/update-balance", response_model=BankAccountResponse)
def update_bank_account_balance(
    account_id: int,
    payload: Any = Body(None),
    service: AccountService = Depends(get_account_service),
) -> BankAccountResponse:
    """Overwrite the balance with ``newBalance``."""
    account = service.update_balance(account_id, UpdateBalanceRequest.from_payload(payload))
    return BankAccountResponse.from_entity(account)
