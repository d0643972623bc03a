"""Bank account commands."""

import click

from fundtrack.cli.error_handling import connected_db, handle_domain_error
from fundtrack.domain.account import AccountService
from fundtrack.domain.errors import DomainError
from fundtrack.domain.ledger import LedgerService
from fundtrack.domain.requests import CreateAccountRequest, UpdateBalanceRequest


@click.group()
def account_group():
    """Manage bank accounts."""
    pass


@account_group.command("create")
@click.argument("account_number", metavar="ACCOUNT_NUMBER")
@click.pass_context
def create_account(ctx, account_number: str):
    """Create a new bank account with a zero balance.

    Examples:
        fundtrack account create A001
    """
    service = AccountService(connected_db(ctx))

    try:
        account = service.create_account(
            CreateAccountRequest.from_payload({"accountNumber": account_number})
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created account '{account.account_number}' (ID: {account.id})")


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all bank accounts."""
    service = AccountService(connected_db(ctx))

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 60)
    for acc in accounts:
        click.echo(f"ID: {acc.id:3d} | {acc.account_number:20s} | Balance: {acc.balance:,.2f}")


@account_group.command("show")
@click.argument("account_id", type=int, metavar="ACCOUNT_ID")
@click.pass_context
def show_account(ctx, account_id: int):
    """Show an account and its transactions, newest first."""
    db = connected_db(ctx)

    try:
        account = AccountService(db).get_account(account_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Account {account.account_number} (ID: {account.id})")
    click.echo(f"  Balance: {account.balance:,.2f}")

    transactions = LedgerService(db).list_transactions(account_id=account_id)
    if not transactions:
        click.echo("  No transactions.")
        return

    click.echo("\n  Transactions:")
    for txn in transactions:
        # Sign shows the effect on this account
        sign = "-" if txn.source_account_id == account_id else "+"
        description = txn.description or ""
        click.echo(
            f"  {txn.date:%Y-%m-%d} | {txn.type.value:13s} | {sign}{txn.amount:,.2f} | {description}"
        )


@account_group.command("set-balance")
@click.argument("account_id", type=int, metavar="ACCOUNT_ID")
@click.argument("new_balance", metavar="NEW_BALANCE")
@click.pass_context
def set_balance(ctx, account_id: int, new_balance: str):
    """Overwrite the balance of an account.

    Examples:
        fundtrack account set-balance 1 250.00
    """
    service = AccountService(connected_db(ctx))

    try:
        account = service.update_balance(
            account_id, UpdateBalanceRequest.from_payload({"newBalance": new_balance})
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Balance of '{account.account_number}' set to {account.balance:,.2f}")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
