"""FastAPI application factory.

The record store is created and seeded once, when the application starts.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Generator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from senametrics import __version__
from senametrics.config import load_settings
from senametrics.db import session as db_session
from senametrics.db.repo import DbSession
from senametrics.db.seed import seed_if_empty
from senametrics.models.types import HealthStatus

logger = logging.getLogger(__name__)


def get_db_session(request: Request) -> Generator[DbSession, None, None]:
    """Dependency to get database session.

    Yields:
        Database session that is automatically closed after request.
    """
    session = db_session.get_session(request.app.state.db_path)
    try:
        yield session
    finally:
        session.close()


def create_app(
    db_path: Path | None = None,
    data_path: Path | None = None,
    seed: bool = True,
) -> FastAPI:
    """Create FastAPI application.

    Args:
        db_path: Optional path to database file. Defaults to settings.
        data_path: Optional JSON dataset. Defaults to settings.
        seed: Whether to seed an empty store on startup.

    Returns:
        Configured FastAPI application.
    """
    settings = load_settings()
    db_path = db_path or settings.db_path
    data_path = data_path or settings.data_file

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        db_session.init_db(db_path)
        if seed:
            with db_session.get_db_session(db_path) as session:
                seed_if_empty(session, data_path)
        logger.info(f"senametrics ready, database at {db_path}")
        yield

    app = FastAPI(
        title="senametrics API",
        description="Read-only statistics over learner records",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.db_path = db_path

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    from senametrics.api.routes import metrics

    app.include_router(metrics.router)

    @app.get("/health", response_model=HealthStatus)
    def health_check() -> HealthStatus:
        """Health check endpoint."""
        return HealthStatus(status="ok")

    return app


# Default app instance
app = create_app()
