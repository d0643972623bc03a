"""Debt commands."""

import click

from fundtrack.cli.error_handling import connected_db, handle_domain_error
from fundtrack.domain.debt import DebtService
from fundtrack.domain.errors import DomainError
from fundtrack.domain.ledger import LedgerService
from fundtrack.domain.requests import UpdateDebtStatusRequest


def _party(name: str | None, account_id: int | None) -> str:
    if name and account_id is not None:
        return f"{name} (account {account_id})"
    if account_id is not None:
        return f"account {account_id}"
    return name or "-"


@click.group()
def debt_group():
    """Inspect debts and change their status."""
    pass


@debt_group.command("list")
@click.option("--status", type=click.Choice(["pending", "settled"]), help="Only debts with this status")
@click.pass_context
def list_debts(ctx, status: str | None):
    """List debts."""
    service = DebtService(connected_db(ctx))

    debts = service.list_debts()
    if status is not None:
        debts = [d for d in debts if d.status.value == status]
    if not debts:
        click.echo("No debts found.")
        return

    click.echo("\nDebts:")
    click.echo("-" * 80)
    for d in debts:
        click.echo(
            f"ID: {d.id:3d} | {d.description[:24]:24s} | {d.type.value:8s} | "
            f"{d.status.value:7s} | Pending: {d.pending_amount:,.2f} / {d.total_amount:,.2f}"
        )


@debt_group.command("show")
@click.argument("debt_id", type=int, metavar="DEBT_ID")
@click.pass_context
def show_debt(ctx, debt_id: int):
    """Show a debt and the transactions recorded against it."""
    db = connected_db(ctx)

    try:
        d = DebtService(db).get_debt(debt_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Debt {d.id}: {d.description}")
    click.echo(f"  Type: {d.type.value}")
    click.echo(f"  Status: {d.status.value}")
    click.echo(f"  Debtor: {_party(d.debtor, d.debtor_account_id)}")
    click.echo(f"  Creditor: {_party(d.creditor, d.creditor_account_id)}")
    click.echo(f"  Total: {d.total_amount:,.2f}")
    click.echo(f"  Settled: {d.settled_amount:,.2f}")
    click.echo(f"  Pending: {d.pending_amount:,.2f}")
    if d.is_recurring and d.recurrence is not None:
        frequency = d.recurrence.frequency.value if d.recurrence.frequency else "unspecified"
        click.echo(f"  Recurs: every {d.recurrence.interval} ({frequency})")
        if d.recurrence.next_due_date is not None:
            click.echo(f"  Next due: {d.recurrence.next_due_date}")

    transactions = LedgerService(db).list_transactions(debt_id=debt_id)
    if transactions:
        click.echo("\n  Transactions:")
        for txn in transactions:
            click.echo(f"  {txn.date:%Y-%m-%d} | {txn.amount:,.2f} | {txn.description or ''}")


@debt_group.command("set-status")
@click.argument("debt_id", type=int, metavar="DEBT_ID")
@click.argument("new_status", metavar="STATUS")
@click.pass_context
def set_status(ctx, debt_id: int, new_status: str):
    """Set the status of a debt to pending or settled.

    Examples:
        fundtrack debt set-status 3 settled
    """
    service = DebtService(connected_db(ctx))

    try:
        d = service.update_status(
            debt_id, UpdateDebtStatusRequest.from_payload({"newStatus": new_status})
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Debt {d.id} is now {d.status.value}")


def register_commands(cli):
    """Register debt commands with main CLI."""
    cli.add_command(debt_group, name="debt")
