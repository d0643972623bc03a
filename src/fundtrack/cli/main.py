"""Main CLI entry point."""

import os

import click

from fundtrack.config import load_settings
from fundtrack.database.factories import create_database

# Import and register all commands at module level
from fundtrack.cli.commands import account, debt, server


@click.group()
@click.option(
    "--database-url",
    help="SQLAlchemy database URL (overrides FUNDTRACK_DATABASE_URL environment variable)",
    envvar="FUNDTRACK_DATABASE_URL",
)
@click.pass_context
def cli(ctx, database_url: str | None):
    """fundtrack - Personal bookkeeping backend.

    Records income, expenses, self-transfers and debts against bank
    accounts and serves them over an HTTP JSON API.
    """
    ctx.ensure_object(dict)

    # Build the database handle only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        environ = dict(os.environ)
        if database_url:
            environ["FUNDTRACK_DATABASE_URL"] = database_url
        settings = load_settings(environ)
        db = create_database(settings)
        ctx.obj["settings"] = settings
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
debt.register_commands(cli)
server.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
