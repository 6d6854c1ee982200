"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health + users)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Database engine lifecycle (created at startup, disposed at shutdown)

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.core.config import Settings, settings as default_settings
from app.infrastructure.database import create_db_engine
from app.interfaces.health import router as health_router
from app.interfaces.users.router import router as users_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import build_limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: own the connection pool for the process lifetime."""
    engine = create_db_engine(app.state.settings)
    app.state.engine = engine
    logger.info("%s %s started", app.state.settings.project_name, app.state.settings.version)

    yield

    engine.dispose()
    logger.info("Database engine disposed")


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        app_settings: Explicit settings; defaults to the environment-loaded ones.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or default_settings
    configure_logging(level=app_settings.log_level, sql_echo=app_settings.debug)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(app_settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(users_router)

    return app


app = create_app()
