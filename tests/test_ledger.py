"""Tests for expense, income and self-transfer postings."""

import pytest
from datetime import datetime, UTC
from decimal import Decimal

from fundtrack.domain.entities import TransactionType
from fundtrack.domain.errors import NotFoundError
from fundtrack.domain.requests import ExpenseRequest, IncomeRequest, SelfTransferRequest


def expense(source, amount, **extra):
    payload = {"description": "Groceries", "amount": amount, "sourceAccount": source}
    payload.update(extra)
    return ExpenseRequest.from_payload(payload)


def income(destination, amount, **extra):
    payload = {"description": "Salary", "amount": amount, "destinationAccount": destination}
    payload.update(extra)
    return IncomeRequest.from_payload(payload)


def transfer(source, destination, amount):
    return SelfTransferRequest.from_payload(
        {"amount": amount, "sourceAccount": source, "destinationAccount": destination}
    )


class TestExpense:
    """Tests for record_expense."""

    def test_debits_source_account(self, ledger_service, account_service, funded_account):
        txn = ledger_service.record_expense(expense(funded_account.id, 40, category="Food"))

        assert txn.type == TransactionType.EXPENSE
        assert txn.amount == Decimal("40")
        assert txn.description == "Groceries"
        assert txn.category == "Food"
        assert txn.source_account_id == funded_account.id
        assert txn.destination_account_id is None
        assert txn.debt_id is None
        assert account_service.get_account(funded_account.id).balance == Decimal("460")

    def test_creates_exactly_one_transaction(self, ledger_service, funded_account):
        txn = ledger_service.record_expense(expense(funded_account.id, "12.34"))

        transactions = ledger_service.list_transactions()
        assert len(transactions) == 1
        assert transactions[0] == txn
        assert ledger_service.get_transaction(txn.id) == txn

    def test_uses_given_date(self, ledger_service, funded_account):
        txn = ledger_service.record_expense(
            expense(funded_account.id, 5, date="2024-03-01T10:30:00Z")
        )
        assert txn.date == datetime(2024, 3, 1, 10, 30, tzinfo=UTC)

    def test_date_defaults_to_now(self, ledger_service, funded_account):
        before = datetime.now(UTC)
        txn = ledger_service.record_expense(expense(funded_account.id, 5))
        assert txn.date >= before.replace(microsecond=0)

    def test_missing_account_leaves_no_trace(self, ledger_service):
        with pytest.raises(NotFoundError) as excinfo:
            ledger_service.record_expense(expense(999, 10))

        assert "Source account 999 not found" in str(excinfo.value)
        assert ledger_service.list_transactions() == []


class TestIncome:
    """Tests for record_income."""

    def test_credits_destination_account(self, ledger_service, account_service, sample_account):
        txn = ledger_service.record_income(income(sample_account.id, 100))

        assert txn.type == TransactionType.INCOME
        assert txn.destination_account_id == sample_account.id
        assert txn.source_account_id is None
        assert account_service.get_account(sample_account.id).balance == Decimal("100")

    def test_missing_account_leaves_no_trace(self, ledger_service):
        with pytest.raises(NotFoundError) as excinfo:
            ledger_service.record_income(income(999, 10))

        assert "Destination account 999 not found" in str(excinfo.value)
        assert ledger_service.list_transactions() == []


class TestSelfTransfer:
    """Tests for record_self_transfer."""

    def test_moves_money_between_accounts(
        self, ledger_service, account_service, funded_account, sample_account
    ):
        txn = ledger_service.record_self_transfer(
            transfer(funded_account.id, sample_account.id, "125.50")
        )

        assert txn.type == TransactionType.SELF_TRANSFER
        assert txn.source_account_id == funded_account.id
        assert txn.destination_account_id == sample_account.id
        assert account_service.get_account(funded_account.id).balance == Decimal("374.50")
        assert account_service.get_account(sample_account.id).balance == Decimal("125.50")

    def test_conserves_total_balance(
        self, ledger_service, account_service, funded_account, sample_account
    ):
        def total():
            return sum(a.balance for a in account_service.list_accounts())

        before = total()
        ledger_service.record_self_transfer(transfer(funded_account.id, sample_account.id, 77))
        ledger_service.record_self_transfer(transfer(sample_account.id, funded_account.id, 7))

        assert total() == before
        assert len(ledger_service.list_transactions()) == 2

    def test_same_account_is_net_zero(self, ledger_service, account_service, funded_account):
        txn = ledger_service.record_self_transfer(
            transfer(funded_account.id, funded_account.id, 30)
        )

        assert txn.source_account_id == txn.destination_account_id == funded_account.id
        assert account_service.get_account(funded_account.id).balance == Decimal("500")
        assert ledger_service.list_transactions() == [txn]

    def test_missing_destination_rolls_back_source_debit(
        self, ledger_service, account_service, funded_account
    ):
        with pytest.raises(NotFoundError):
            ledger_service.record_self_transfer(transfer(funded_account.id, 999, 50))

        assert account_service.get_account(funded_account.id).balance == Decimal("500")
        assert ledger_service.list_transactions() == []

    def test_missing_source_changes_nothing(
        self, ledger_service, account_service, sample_account
    ):
        with pytest.raises(NotFoundError):
            ledger_service.record_self_transfer(transfer(999, sample_account.id, 50))

        assert account_service.get_account(sample_account.id).balance == Decimal("0")
        assert ledger_service.list_transactions() == []


def test_example_scenario(ledger_service, account_service, sample_account, second_account):
    """Income, expense and self-transfer applied in sequence."""
    ledger_service.record_income(income(sample_account.id, 100))
    assert account_service.get_account(sample_account.id).balance == Decimal("100")

    ledger_service.record_expense(expense(sample_account.id, 40))
    assert account_service.get_account(sample_account.id).balance == Decimal("60")
    assert len(ledger_service.list_transactions()) == 2

    ledger_service.record_self_transfer(transfer(sample_account.id, second_account.id, 20))
    assert account_service.get_account(sample_account.id).balance == Decimal("40")
    assert account_service.get_account(second_account.id).balance == Decimal("20")


def test_list_transactions_by_account(ledger_service, funded_account, sample_account, second_account):
    """Filtering by account matches either side of a transaction."""
    ledger_service.record_expense(expense(funded_account.id, 1))
    ledger_service.record_self_transfer(transfer(funded_account.id, sample_account.id, 2))
    ledger_service.record_income(income(second_account.id, 3))

    assert len(ledger_service.list_transactions(account_id=funded_account.id)) == 2
    assert len(ledger_service.list_transactions(account_id=sample_account.id)) == 1
    assert len(ledger_service.list_transactions(account_id=second_account.id)) == 1


def test_get_transaction_not_found(ledger_service):
    with pytest.raises(NotFoundError):
        ledger_service.get_transaction(42)
