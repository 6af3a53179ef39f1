"""marketid API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery — ExMA anti-pattern)
    - Global error handlers map MarketIdError → structured JSON responses
    - Database initialized and store tables created on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from marketid.api.error_handlers import register_error_handlers
from marketid.api.routes import entries, health, identifiers
from marketid.config import get_settings
from marketid.infrastructure.database import init_db
from marketid.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format, settings.service_name)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await manager.create_all()
    logger.info(f"{settings.service_name} started")
    yield
    await manager.dispose()
    logger.info(f"{settings.service_name} shutting down")


settings = get_settings()
app = FastAPI(
    title="marketid API", version=settings.service_version, lifespan=lifespan,
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(identifiers.router)
app.include_router(entries.router)

register_error_handlers(app)
