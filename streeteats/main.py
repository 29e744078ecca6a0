"""StreetEats API: FastAPI application factory."""


import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from streeteats.core.config import Settings, settings as default_settings
from streeteats.core.exceptions import register_exception_handlers
from streeteats.db.base import Database
from streeteats.middleware.request_log import RequestLogMiddleware
from streeteats.schemas.common import HealthResponse

from streeteats.routers.accounts import router as accounts_router
from streeteats.routers.admin import router as admin_router
from streeteats.routers.catalog import router as catalog_router
from streeteats.routers.grievances import router as grievances_router

logger = logging.getLogger(__name__)


def _configure_logging(settings: Settings) -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.app_env == "development" else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("python_multipart").setLevel(logging.WARNING)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    db: Database = app.state.db
    await db.create_all()
    app.state.settings.upload_dir.mkdir(parents=True, exist_ok=True)
    logger.info("%s started (%s)", app.state.settings.app_name, app.state.settings.app_env)
    try:
        yield
    finally:
        await db.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    _configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url="/docs" if settings.app_env == "development" else None,
        redoc_url="/redoc" if settings.app_env == "development" else None,
        lifespan=_lifespan,
    )
    app.state.settings = settings
    app.state.db = Database(settings.database_url)

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Request logging ---
    app.add_middleware(RequestLogMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- API routes (/api/*) ---
    app.include_router(accounts_router, prefix="/api")
    app.include_router(admin_router, prefix="/api")
    app.include_router(grievances_router, prefix="/api")
    app.include_router(catalog_router, prefix="/api")

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env)

    return app


app = create_app()
