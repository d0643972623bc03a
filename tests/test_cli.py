"""Tests for CLI commands."""

import pytest
from unittest.mock import patch

from fundtrack.cli.main import cli
from fundtrack.domain.requests import CreateDebtRequest


@pytest.fixture
def db_args(temp_db):
    """Global CLI options pointing at the temporary database."""
    return ["--database-url", f"sqlite:///{temp_db.database_path}"]


def test_help_does_not_touch_database(cli_runner):
    result = cli_runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "Personal bookkeeping" in result.output


class TestAccountCommands:
    def test_create(self, cli_runner, db_args, account_service):
        result = cli_runner.invoke(cli, db_args + ["account", "create", "A001"])

        assert result.exit_code == 0
        assert "Created account 'A001'" in result.output
        assert [a.account_number for a in account_service.list_accounts()] == ["A001"]

    def test_create_duplicate(self, cli_runner, db_args, sample_account):
        result = cli_runner.invoke(cli, db_args + ["account", "create", "A001"])

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_list_empty(self, cli_runner, db_args):
        result = cli_runner.invoke(cli, db_args + ["account", "list"])

        assert result.exit_code == 0
        assert "No accounts found." in result.output

    def test_list(self, cli_runner, db_args, sample_account, funded_account):
        result = cli_runner.invoke(cli, db_args + ["account", "list"])

        assert result.exit_code == 0
        assert "A001" in result.output
        assert "500.00" in result.output

    def test_show_with_transactions(self, cli_runner, db_args, ledger_service, funded_account):
        from fundtrack.domain.requests import ExpenseRequest

        ledger_service.record_expense(
            ExpenseRequest.from_payload(
                {"description": "Groceries", "amount": 40, "sourceAccount": funded_account.id}
            )
        )

        result = cli_runner.invoke(cli, db_args + ["account", "show", str(funded_account.id)])

        assert result.exit_code == 0
        assert "Balance: 460.00" in result.output
        assert "-40.00" in result.output
        assert "Groceries" in result.output

    def test_show_missing(self, cli_runner, db_args):
        result = cli_runner.invoke(cli, db_args + ["account", "show", "42"])

        assert result.exit_code == 1
        assert "Bank account 42 not found" in result.output

    def test_set_balance(self, cli_runner, db_args, account_service, sample_account):
        result = cli_runner.invoke(
            cli, db_args + ["account", "set-balance", str(sample_account.id), "1234.5"]
        )

        assert result.exit_code == 0
        assert "set to 1,234.50" in result.output
        assert str(account_service.get_account(sample_account.id).balance) == "1234.50"

    def test_set_balance_invalid(self, cli_runner, db_args, sample_account):
        result = cli_runner.invoke(
            cli, db_args + ["account", "set-balance", str(sample_account.id), "lots"]
        )

        assert result.exit_code == 1
        assert "newBalance must be a valid number" in result.output


class TestDebtCommands:
    @pytest.fixture
    def debt(self, debt_service):
        return debt_service.create_debt(
            CreateDebtRequest.from_payload(
                {
                    "description": "Shared dinner",
                    "totalAmount": 60,
                    "settledAmount": 0,
                    "pendingAmount": 60,
                    "status": "pending",
                    "type": "positive",
                    "debtor": "Alice",
                    "creditor": "Me",
                }
            )
        )

    def test_list_empty(self, cli_runner, db_args):
        result = cli_runner.invoke(cli, db_args + ["debt", "list"])

        assert result.exit_code == 0
        assert "No debts found." in result.output

    def test_list_filtered_by_status(self, cli_runner, db_args, debt):
        result = cli_runner.invoke(cli, db_args + ["debt", "list", "--status", "pending"])
        assert "Shared dinner" in result.output

        result = cli_runner.invoke(cli, db_args + ["debt", "list", "--status", "settled"])
        assert "No debts found." in result.output

    def test_show(self, cli_runner, db_args, debt):
        result = cli_runner.invoke(cli, db_args + ["debt", "show", str(debt.id)])

        assert result.exit_code == 0
        assert "Debtor: Alice" in result.output
        assert "Pending: 60.00" in result.output

    def test_set_status(self, cli_runner, db_args, debt_service, debt):
        result = cli_runner.invoke(cli, db_args + ["debt", "set-status", str(debt.id), "settled"])

        assert result.exit_code == 0
        assert f"Debt {debt.id} is now settled" in result.output
        assert debt_service.get_debt(debt.id).status.value == "settled"

    def test_set_status_invalid(self, cli_runner, db_args, debt):
        result = cli_runner.invoke(cli, db_args + ["debt", "set-status", str(debt.id), "gone"])

        assert result.exit_code == 1
        assert "Allowed values: pending, settled" in result.output


class TestServerCommands:
    def test_init_db(self, cli_runner, tmp_path):
        db_path = tmp_path / "fresh.db"
        result = cli_runner.invoke(
            cli,
            ["--database-url", f"sqlite:///{db_path}", "init-db"],
            env={"FUNDTRACK_ENV": "production"},
        )

        assert result.exit_code == 0
        assert "Database schema initialized." in result.output

        result = cli_runner.invoke(
            cli,
            ["--database-url", f"sqlite:///{db_path}", "account", "list"],
            env={"FUNDTRACK_ENV": "production"},
        )
        assert "No accounts found." in result.output

    def test_serve_runs_uvicorn(self, cli_runner, db_args):
        with patch("fundtrack.cli.commands.server.uvicorn.run") as run, patch(
            "fundtrack.cli.commands.server.setup_logging"
        ):
            result = cli_runner.invoke(cli, db_args + ["serve", "--port", "9123"])

        assert result.exit_code == 0
        run.assert_called_once()
        _, kwargs = run.call_args
        assert kwargs["port"] == 9123
        assert kwargs["host"] == "127.0.0.1"
