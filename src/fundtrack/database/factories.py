"""Database factory functions for creating database instances."""

from typing import Optional

from fundtrack.config import Settings, load_settings
from fundtrack.database.sqlalchemy_db import SQLAlchemyDatabase


def create_database(settings: Optional[Settings] = None) -> SQLAlchemyDatabase:
    """Create a database handle from settings.

    Args:
        settings: Process settings. If None, they are read from the
            environment (FUNDTRACK_DATABASE_URL, FUNDTRACK_ENV).

    Returns:
        SQLAlchemyDatabase instance, not yet connected
    """
    if settings is None:
        settings = load_settings()
    return SQLAlchemyDatabase(
        settings.database_url, auto_create_schema=settings.auto_create_schema
    )


def create_sqlite_database(database_path: str, auto_create_schema: bool = True) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file
        auto_create_schema: Create tables on connect

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    return SQLAlchemyDatabase(f"sqlite:///{database_path}", auto_create_schema=auto_create_schema)
