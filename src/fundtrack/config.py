"""Runtime configuration read from environment variables."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

PRODUCTION = "production"


def default_database_url() -> str:
    """Return the default SQLite URL under ~/.fundtrack/."""
    db_dir = Path.home() / ".fundtrack"
    db_dir.mkdir(exist_ok=True)
    return f"sqlite:///{db_dir / 'fundtrack.db'}"


@dataclass(frozen=True)
class Settings:
    """Process settings.

    Attributes:
        database_url: SQLAlchemy URL of the store
        environment: Deployment environment name; "production" disables
            automatic schema creation
        log_level: Root log level name
        host: Bind host for ``fundtrack serve``
        port: Bind port for ``fundtrack serve``
    """

    database_url: str
    environment: str = "development"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == PRODUCTION

    @property
    def auto_create_schema(self) -> bool:
        return not self.is_production


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Args:
        environ: Mapping to read from; defaults to ``os.environ``

    Raises:
        ValueError: If FUNDTRACK_PORT is not an integer
    """
    if environ is None:
        environ = os.environ

    database_url = environ.get("FUNDTRACK_DATABASE_URL") or default_database_url()

    port_str = environ.get("FUNDTRACK_PORT", "8000")
    try:
        port = int(port_str)
    except ValueError:
        raise ValueError(f"FUNDTRACK_PORT must be an integer, got '{port_str}'")

    return Settings(
        database_url=database_url,
        environment=environ.get("FUNDTRACK_ENV", "development"),
        log_level=environ.get("FUNDTRACK_LOG_LEVEL", "INFO").upper(),
        host=environ.get("FUNDTRACK_HOST", "127.0.0.1"),
        port=port,
    )
