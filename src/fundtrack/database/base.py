"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import datetime
from decimal import Decimal
from typing import Optional

from fundtrack.domain.entities import (
    BankAccount,
    Debt,
    DebtStatus,
    DebtType,
    Recurrence,
    Transaction,
    TransactionType,
)


class UnitOfWork(ABC):
    """Record operations bound to one atomic unit.

    Writes become visible to other units only when the unit commits.
    Getters return None for an absent record; the mutating methods raise
    NotFoundError instead.
    """

    # Bank account operations
    @abstractmethod
    def create_account(self, account_number: str) -> BankAccount:
        """Create an account with a zero balance."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[BankAccount]:
        """Get account by ID."""
        pass

    @abstractmethod
    def get_account_by_number(self, account_number: str) -> Optional[BankAccount]:
        """Get account by its account number."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[BankAccount]:
        """List all accounts."""
        pass

    @abstractmethod
    def adjust_account_balance(self, account_id: int, delta: Decimal) -> BankAccount:
        """Add ``delta`` (which may be negative) to an account balance."""
        pass

    @abstractmethod
    def set_account_balance(self, account_id: int, balance: Decimal) -> BankAccount:
        """Replace an account balance."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        type: TransactionType,
        amount: Decimal,
        description: Optional[str] = None,
        category: Optional[str] = None,
        date: Optional[datetime] = None,
        source_account_id: Optional[int] = None,
        destination_account_id: Optional[int] = None,
        debt_id: Optional[int] = None,
    ) -> Transaction:
        """Create a transaction. ``date`` defaults to now."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        account_id: Optional[int] = None,
        debt_id: Optional[int] = None,
    ) -> list[Transaction]:
        """List transactions, newest first, optionally filtered."""
        pass

    # Debt operations
    @abstractmethod
    def create_debt(
        self,
        description: str,
        total_amount: Decimal,
        settled_amount: Decimal,
        pending_amount: Decimal,
        status: DebtStatus,
        type: DebtType,
        debtor: Optional[str] = None,
        debtor_account_id: Optional[int] = None,
        creditor: Optional[str] = None,
        creditor_account_id: Optional[int] = None,
        is_recurring: bool = False,
        recurrence: Optional[Recurrence] = None,
        date: Optional[datetime] = None,
    ) -> Debt:
        """Create a debt. ``date`` defaults to now."""
        pass

    @abstractmethod
    def get_debt(self, debt_id: int) -> Optional[Debt]:
        """Get debt by ID."""
        pass

    @abstractmethod
    def list_debts(self) -> list[Debt]:
        """List all debts."""
        pass

    @abstractmethod
    def update_debt_status(self, debt_id: int, status: DebtStatus) -> Debt:
        """Set the status of a debt."""
        pass

    @abstractmethod
    def add_to_debt(self, debt_id: int, amount: Decimal) -> Debt:
        """Increase both total and pending amounts of a debt."""
        pass


class Database(ABC):
    """Abstract database interface for fundtrack.

    A Database is a process-wide handle created at startup and passed to
    every service. It never carries per-request state; each operation opens
    its own unit of work.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def unit_of_work(self) -> AbstractContextManager[UnitOfWork]:
        """Open an atomic unit.

        Commits when the block exits normally. Rolls back and re-raises
        when the block raises; store failures surface as PersistenceError.
        """
        pass
