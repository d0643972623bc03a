"""Dependency injection for routers.

The Database handle is created once per app (see ``create_app``) and kept
on ``app.state``; services are cheap wrappers built per request.
"""

from fastapi import Depends, Request

from fundtrack.database.base import Database
from fundtrack.domain.account import AccountService
from fundtrack.domain.debt import DebtService
from fundtrack.domain.ledger import LedgerService


def get_db(request: Request) -> Database:
    """Return the app's Database handle."""
    return request.app.state.db


def get_account_service(db: Database = Depends(get_db)) -> AccountService:
    return AccountService(db)


def get_ledger_service(db: Database = Depends(get_db)) -> LedgerService:
    return LedgerService(db)


def get_debt_service(db: Database = Depends(get_db)) -> DebtService:
    return DebtService(db)
