"""HTTP entry point for finboard.

Routes live under /api/v1; /health is left unversioned for probes.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from finboard import __version__
from finboard.infrastructure.persistence.sqlalchemy.models import Base
from finboard.presentation.api.dependencies import get_aggregator, get_engine
from finboard.presentation.api.exception_handlers import setup_exception_handlers
from finboard.presentation.api.routers import (
    bank_accounts_router,
    institutions_router,
)
from finboard_config.settings import Settings, get_settings


QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite")


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Log to stdout at the configured level, once per process."""
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("finboard").setLevel(log_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Bank Accounts",
        "description": """Linked bank accounts with live balances.

**Per-link isolation:**
- A failing bank link is reported under `errors`
- `fail_fast=true` fails the whole request instead

**Transactions:**
- Transfers stored for the link are merged with the transaction feed
- Most recent first
""",
    },
    {
        "name": "Institutions",
        "description": "Display metadata (name, logo, colors) of banks.",
    },
    {
        "name": "Health",
        "description": "Liveness probe.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("Starting finboard API v%s...", __version__)
    await _init_database_schema(get_engine())
    yield

    logger.info("Shutting down finboard API...")
    await get_aggregator().close()
    await get_engine().dispose()
    logger.info("Aggregator client and database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Create missing tables and verify connectivity."""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except ConnectionRefusedError:
        logger.critical("Database refused the connection, is it running?")
        raise SystemExit(1) from None
    logger.info("Database schema initialized")


def create_v1_router() -> APIRouter:
    v1_router = APIRouter()
    v1_router.include_router(
        bank_accounts_router,
        prefix="/bank-accounts",
        tags=["Bank Accounts"],
    )
    v1_router.include_router(
        institutions_router,
        prefix="/institutions",
        tags=["Institutions"],
    )
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app.

    Tests pass their own ``settings``; otherwise the cached ones are used.
    """
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Linked bank accounts, balances and transactions.",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        return {
            "status": "healthy",
            "version": __version__,
            "api_versions": ["v1"],
        }

    return app
