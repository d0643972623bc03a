"""Database layer for fundtrack application."""

from fundtrack.database.base import Database, UnitOfWork
from fundtrack.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "UnitOfWork", "create_database", "create_sqlite_database"]
