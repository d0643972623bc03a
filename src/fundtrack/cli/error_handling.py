"""CLI error handling helpers."""

import click

from fundtrack.database.base import Database
from fundtrack.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def connected_db(ctx: click.Context) -> Database:
    """Return the context's database handle, connecting it on first use."""
    db = ctx.obj["db"]
    db.connect()
    return db
