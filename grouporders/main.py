"""Group Orders API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GroupOrdersError to {message, code, httpStatus}
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from grouporders.api.error_handlers import register_error_handlers
from grouporders.infrastructure.database import init_db, close_db
from grouporders.infrastructure.observability import setup_logging
from grouporders.config import get_settings
from grouporders.api.routes import health, orders, orders_packs, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Group Orders API started")
    yield
    await close_db()
    logger.info("Group Orders API shutting down")


app = FastAPI(
    title="Group Orders API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(orders_packs.router)
app.include_router(orders.router)

register_error_handlers(app)
