"""Bank account domain service."""

import logging

from fundtrack.database.base import Database
from fundtrack.domain import errors
from fundtrack.domain.entities import BankAccount
from fundtrack.domain.requests import CreateAccountRequest, UpdateBalanceRequest

logger = logging.getLogger(__name__)


class AccountService:
    """Service for the bank account directory.

    Every operation here touches a single record.
    """

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(self, request: CreateAccountRequest) -> BankAccount:
        """Create a new account with a zero balance.

        Args:
            request: Validated creation request

        Returns:
            The created account

        Raises:
            ConflictError: If the account number is already taken
        """
        with self.db.unit_of_work() as uow:
            if uow.get_account_by_number(request.account_number) is not None:
                raise errors.ConflictError(errors.duplicate_account_number(request.account_number))
            account = uow.create_account(request.account_number)

        logger.info("Created bank account %s (%s)", account.id, account.account_number)
        return account

    def get_account(self, account_id: int) -> BankAccount:
        """Get account by ID.

        Raises:
            NotFoundError: If the account does not exist
        """
        with self.db.unit_of_work() as uow:
            account = uow.get_account(account_id)
        if account is None:
            raise errors.NotFoundError(errors.account_not_found(account_id))
        return account

    def list_accounts(self) -> list[BankAccount]:
        """List all accounts."""
        with self.db.unit_of_work() as uow:
            return uow.list_accounts()

    def update_balance(self, account_id: int, request: UpdateBalanceRequest) -> BankAccount:
        """Overwrite the balance of an account.

        Args:
            account_id: Account ID
            request: Validated request carrying the new absolute balance

        Returns:
            The updated account

        Raises:
            NotFoundError: If the account does not exist
        """
        with self.db.unit_of_work() as uow:
            account = uow.set_account_balance(account_id, request.new_balance)

        logger.info("Set balance of bank account %s to %s", account_id, request.new_balance)
        return account
