"""fundtrack API: FastAPI application factory.

The app factory creates a FastAPI instance with:
- A lifespan handler that connects the Database handle at startup and
  disposes of it at shutdown
- Uniform ``{"error": ...}`` error responses
- Routers for transactions, bank accounts and debts
- Health endpoint at GET /health
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from fundtrack.api.errors import register_error_handlers
from fundtrack.api.routers.bank_accounts import router as bank_accounts_router
from fundtrack.api.routers.debts import router as debts_router
from fundtrack.api.routers.transactions import router as transactions_router
from fundtrack.api.schemas import HealthResponse
from fundtrack.config import Settings, load_settings
from fundtrack.database.base import Database
from fundtrack.database.factories import create_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect the store on startup, release it on shutdown."""
    db: Database = app.state.db
    db.connect()
    logger.info("Database connected (%s)", app.state.settings.environment)

    yield

    db.disconnect()
    logger.info("Database disconnected")


def create_app(
    settings: Optional[Settings] = None,
    db: Optional[Database] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings:
        Process settings. Read from the environment when omitted.
    db:
        Database handle to serve from. Built from ``settings`` when
        omitted; tests pass a handle bound to a temporary database.
    """
    if settings is None:
        settings = load_settings()
    if db is None:
        db = create_database(settings)

    app = FastAPI(
        title="fundtrack API",
        description="Personal bookkeeping: accounts, transactions and debts",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = db

    register_error_handlers(app)

    app.include_router(transactions_router)
    app.include_router(bank_accounts_router)
    app.include_router(debts_router)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health() -> HealthResponse:
        return HealthResponse()

    return app
