"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", store_backend="memory", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_exception_handlers
from application.ports import StoreHandle
from backend.settings import Settings, get_settings
from infrastructure.db import open_store

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[StoreHandle] = None,
) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.
        store: Optional pre-opened store handle. If not provided, the store
               selected by settings is opened when the app starts.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings)

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    app = FastAPI(
        title="Exercise Tracker API",
        description="Register users, log exercises and query exercise logs",
        version="1.0.0",
        lifespan=_build_lifespan(settings, store),
    )

    _configure_cors(app, settings)
    register_exception_handlers(app)
    _include_routers(app)

    logger.info(
        f"Exercise Tracker API created (environment={settings.environment}, "
        f"store={settings.store_backend}, lenient_dates={settings.lenient_exercise_dates})"
    )
    return app


def _build_lifespan(settings: Settings, store: Optional[StoreHandle]):
    """Open the store on startup and close it on shutdown."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        handle = store
        if handle is None:
            handle = open_store(
                settings.store_backend,
                supabase_url=settings.supabase_url,
                supabase_key=settings.supabase_key,
            )
        app.state.store = handle
        try:
            yield
        finally:
            app.state.store = None
            handle.close()
            logger.info("Store closed")

    return lifespan


def _configure_logging(settings: Settings) -> None:
    """Attach a console handler to the root logger once."""
    root = logging.getLogger()
    root.setLevel(settings.log_level)
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root.addHandler(handler)


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
        )
        logger.info("Sentry initialized for exercise-tracker-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    origins = settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentials with a wildcard origin
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import health_router, users_router

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    # Users router (prefix /api/users defined in the router)
    app.include_router(users_router)


# Default application instance for uvicorn
app = create_app()
