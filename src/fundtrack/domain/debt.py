"""Debt domain service."""

import logging

from fundtrack.database.base import Database
from fundtrack.domain import errors
from fundtrack.domain.entities import Debt, DebtType, Transaction
from fundtrack.domain.requests import (
    CreateDebtRequest,
    DebtTransactionRequest,
    UpdateDebtStatusRequest,
)

logger = logging.getLogger(__name__)


class DebtService:
    """Service for debts and the transactions recorded against them."""

    def __init__(self, db: Database):
        """Initialize debt service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_debt(self, request: CreateDebtRequest) -> Debt:
        """Create a debt.

        Settled and pending amounts are stored as supplied.

        Raises:
            NotFoundError: If a referenced debtor or creditor account does not exist
        """
        with self.db.unit_of_work() as uow:
            for account_id in (request.debtor_account_id, request.creditor_account_id):
                if account_id is not None and uow.get_account(account_id) is None:
                    raise errors.NotFoundError(errors.account_not_found(account_id))

            debt = uow.create_debt(
                description=request.description,
                total_amount=request.total_amount,
                settled_amount=request.settled_amount,
                pending_amount=request.pending_amount,
                status=request.status,
                type=request.type,
                debtor=request.debtor,
                debtor_account_id=request.debtor_account_id,
                creditor=request.creditor,
                creditor_account_id=request.creditor_account_id,
                is_recurring=request.is_recurring,
                recurrence=request.recurrence,
                date=request.date,
            )

        logger.info("Created %s debt %s", debt.type.value, debt.id)
        return debt

    def get_debt(self, debt_id: int) -> Debt:
        """Get debt by ID.

        Raises:
            NotFoundError: If the debt does not exist
        """
        with self.db.unit_of_work() as uow:
            debt = uow.get_debt(debt_id)
        if debt is None:
            raise errors.NotFoundError(errors.debt_not_found(debt_id))
        return debt

    def list_debts(self) -> list[Debt]:
        """List all debts."""
        with self.db.unit_of_work() as uow:
            return uow.list_debts()

    def update_status(self, debt_id: int, request: UpdateDebtStatusRequest) -> Debt:
        """Move a debt between pending and settled.

        Status never changes on its own, even when the pending amount
        reaches zero.

        Raises:
            NotFoundError: If the debt does not exist
        """
        with self.db.unit_of_work() as uow:
            debt = uow.update_debt_status(debt_id, request.new_status)

        logger.info("Debt %s is now %s", debt_id, request.new_status.value)
        return debt

    def record_debt_transaction(self, debt_id: int, request: DebtTransactionRequest) -> Transaction:
        """Record a transaction against a debt.

        In one unit: the counterparty account picked by the debt's polarity
        is credited (positive debt, debtor's account) or debited (negative
        debt, creditor's account) by the amount, and the debt's total and
        pending amounts both grow by it.

        Raises:
            NotFoundError: If the debt, the source account or the
                counterparty account does not exist
            PersistenceError: If the store fails
        """
        with self.db.unit_of_work() as uow:
            debt = uow.get_debt(debt_id)
            if debt is None:
                raise errors.NotFoundError(errors.debt_not_found(debt_id))

            is_positive = debt.type == DebtType.POSITIVE

            if uow.get_account(request.source_account_id) is None:
                raise errors.NotFoundError(errors.source_account_not_found(request.source_account_id))

            counterparty_id = debt.counterparty_account_id
            if counterparty_id is None:
                side = "debtor" if is_positive else "creditor"
                raise errors.NotFoundError(f"Debt {debt_id} has no {side} account")
            if uow.get_account(counterparty_id) is None:
                raise errors.NotFoundError(errors.account_not_found(counterparty_id))

            transaction = uow.create_transaction(
                type=request.type,
                amount=request.amount,
                description=request.description,
                category=request.category,
                date=request.date,
                source_account_id=request.source_account_id,
                debt_id=debt_id,
            )

            delta = request.amount if is_positive else -request.amount
            uow.adjust_account_balance(counterparty_id, delta)
            uow.add_to_debt(debt_id, request.amount)

        logger.info(
            "Recorded transaction %s of %s against debt %s (account %s)",
            transaction.id,
            request.amount,
            debt_id,
            counterparty_id,
        )
        return transaction
