"""Ledger service: income, expense and self-transfer postings.

Each posting writes a Transaction and moves one or two account balances
inside a single unit of work, so a failure at any step leaves neither the
transaction nor any balance change behind.
"""

import logging
from typing import Optional

from fundtrack.database.base import Database
from fundtrack.domain import errors
from fundtrack.domain.entities import Transaction, TransactionType
from fundtrack.domain.requests import ExpenseRequest, IncomeRequest, SelfTransferRequest

logger = logging.getLogger(__name__)


class LedgerService:
    """Service for recording transactions against bank accounts."""

    def __init__(self, db: Database):
        """Initialize ledger service.

        Args:
            db: Database instance
        """
        self.db = db

    def record_expense(self, request: ExpenseRequest) -> Transaction:
        """Record an expense and debit the source account.

        Raises:
            NotFoundError: If the source account does not exist
            PersistenceError: If the store fails
        """
        with self.db.unit_of_work() as uow:
            if uow.get_account(request.source_account_id) is None:
                raise errors.NotFoundError(errors.source_account_not_found(request.source_account_id))
            uow.adjust_account_balance(request.source_account_id, -request.amount)
            transaction = uow.create_transaction(
                type=TransactionType.EXPENSE,
                amount=request.amount,
                description=request.description,
                category=request.category,
                date=request.date,
                source_account_id=request.source_account_id,
            )

        logger.info(
            "Recorded expense %s of %s from account %s",
            transaction.id,
            request.amount,
            request.source_account_id,
        )
        return transaction

    def record_income(self, request: IncomeRequest) -> Transaction:
        """Record income and credit the destination account.

        Raises:
            NotFoundError: If the destination account does not exist
            PersistenceError: If the store fails
        """
        with self.db.unit_of_work() as uow:
            if uow.get_account(request.destination_account_id) is None:
                raise errors.NotFoundError(
                    errors.destination_account_not_found(request.destination_account_id)
                )
            uow.adjust_account_balance(request.destination_account_id, request.amount)
            transaction = uow.create_transaction(
                type=TransactionType.INCOME,
                amount=request.amount,
                description=request.description,
                category=request.category,
                date=request.date,
                destination_account_id=request.destination_account_id,
            )

        logger.info(
            "Recorded income %s of %s into account %s",
            transaction.id,
            request.amount,
            request.destination_account_id,
        )
        return transaction

    def record_self_transfer(self, request: SelfTransferRequest) -> Transaction:
        """Move money between two accounts.

        The source is debited before the destination is looked up; when the
        destination is missing the unit rolls back and the debit with it.

        Raises:
            NotFoundError: If either account does not exist
            PersistenceError: If the store fails
        """
        with self.db.unit_of_work() as uow:
            if uow.get_account(request.source_account_id) is None:
                raise errors.NotFoundError(errors.source_account_not_found(request.source_account_id))
            uow.adjust_account_balance(request.source_account_id, -request.amount)

            if uow.get_account(request.destination_account_id) is None:
                raise errors.NotFoundError(
                    errors.destination_account_not_found(request.destination_account_id)
                )
            uow.adjust_account_balance(request.destination_account_id, request.amount)

            transaction = uow.create_transaction(
                type=TransactionType.SELF_TRANSFER,
                amount=request.amount,
                description=request.description,
                source_account_id=request.source_account_id,
                destination_account_id=request.destination_account_id,
            )

        logger.info(
            "Recorded self-transfer %s of %s from account %s to %s",
            transaction.id,
            request.amount,
            request.source_account_id,
            request.destination_account_id,
        )
        return transaction

    def get_transaction(self, transaction_id: int) -> Transaction:
        """Get transaction by ID.

        Raises:
            NotFoundError: If the transaction does not exist
        """
        with self.db.unit_of_work() as uow:
            transaction = uow.get_transaction(transaction_id)
        if transaction is None:
            raise errors.NotFoundError(errors.transaction_not_found(transaction_id))
        return transaction

    def list_transactions(
        self,
        account_id: Optional[int] = None,
        debt_id: Optional[int] = None,
    ) -> list[Transaction]:
        """List transactions, newest first.

        Args:
            account_id: Only transactions with this account on either side
            debt_id: Only transactions recorded against this debt
        """
        with self.db.unit_of_work() as uow:
            return uow.list_transactions(account_id=account_id, debt_id=debt_id)
