"""Shared pytest fixtures for fundtrack tests."""

import tempfile
import os
import pytest

from fundtrack.config import Settings
from fundtrack.database.factories import create_sqlite_database
from fundtrack.domain.account import AccountService
from fundtrack.domain.debt import DebtService
from fundtrack.domain.ledger import LedgerService
from fundtrack.domain.requests import CreateAccountRequest, UpdateBalanceRequest


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def ledger_service(temp_db):
    """Create a LedgerService with a temporary database."""
    return LedgerService(temp_db)


@pytest.fixture
def debt_service(temp_db):
    """Create a DebtService with a temporary database."""
    return DebtService(temp_db)


@pytest.fixture
def make_account(account_service):
    """Return a factory creating an account, optionally with a starting balance."""

    def _make(account_number, balance=None):
        account = account_service.create_account(
            CreateAccountRequest.from_payload({"accountNumber": account_number})
        )
        if balance is not None:
            account = account_service.update_balance(
                account.id, UpdateBalanceRequest.from_payload({"newBalance": balance})
            )
        return account

    return _make


@pytest.fixture
def sample_account(make_account):
    """Create account A001 with a zero balance."""
    return make_account("A001")


@pytest.fixture
def second_account(make_account):
    """Create account A002 with a zero balance."""
    return make_account("A002")


@pytest.fixture
def funded_account(make_account):
    """Create account F001 holding 500.00."""
    return make_account("F001", "500.00")


@pytest.fixture
def settings(temp_db):
    """Settings pointing at the temporary database."""
    return Settings(database_url=temp_db.database_url)


@pytest.fixture
def client(temp_db, settings):
    """FastAPI test client serving from the temporary database."""
    from fastapi.testclient import TestClient
    from fundtrack.api.app import create_app

    app = create_app(settings=settings, db=temp_db)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()

