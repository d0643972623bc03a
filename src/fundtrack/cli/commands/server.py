"""Server and schema commands."""

import click
import uvicorn

from fundtrack.api.app import create_app
from fundtrack.logging_config import setup_logging


@click.command("init-db")
@click.pass_context
def init_db(ctx):
    """Create the database tables.

    Needed once in production, where tables are not created automatically.
    Safe to run again; existing tables are left alone.
    """
    db = ctx.obj["db"]
    db.connect()
    db.initialize_schema()
    click.echo("Database schema initialized.")


@click.command("serve")
@click.option("--host", help="Bind host (defaults to FUNDTRACK_HOST or 127.0.0.1)")
@click.option("--port", type=int, help="Bind port (defaults to FUNDTRACK_PORT or 8000)")
@click.pass_context
def serve(ctx, host: str | None, port: int | None):
    """Run the HTTP API."""
    settings = ctx.obj["settings"]
    setup_logging(settings.log_level)

    app = create_app(settings=settings, db=ctx.obj["db"])
    uvicorn.run(
        app,
        host=host or settings.host,
        port=port or settings.port,
        log_config=None,
    )


def register_commands(cli):
    """Register server commands with main CLI."""
    cli.add_command(init_db)
    cli.add_command(serve)
