from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from ledger import __version__
from ledger.api import create_api_router
from ledger.api.errors import register_exception_handlers
from ledger.core.config import Settings, get_settings
from ledger.core.container import build_container
from ledger.core.logging import configure_logging
from ledger.domain.wallets.service import provision_wallets
from ledger.schemas import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.container
    settings = container.settings
    configure_logging(level=settings.logging.level, json_logs=settings.logging.json_logs)

    await container.database.init_db()
    if settings.ledger.seed_on_startup:
        await provision_wallets(
            container.database,
            settings.ledger.seed_wallet_count,
            settings.ledger.seed_balance,
        )
    logger.info("Server is running on port %s", settings.port)
    try:
        yield
    finally:
        await container.shutdown()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.project_name,
        description="Wallet ledger with atomic transfers",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = build_container(settings)

    register_exception_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse()

    return app


app = create_app()
