"""
Database engine factory.

The engine owns the process-wide connection pool. It is created once
in the application lifespan, handed to repositories through FastAPI
dependencies, and disposed at shutdown.
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from app.core.config import Settings

logger = logging.getLogger(__name__)


def create_db_engine(settings: Settings) -> Engine:
    """Build a SQLAlchemy engine from application settings.

    PostgreSQL gets a sized QueuePool with pre-ping. SQLite (used for
    local runs and tests) is allowed across threads; an in-memory
    SQLite database is pinned to a single shared connection.

    Args:
        settings: Application settings holding the database URL.

    Returns:
        A lazily-connecting Engine. No connection is opened here.
    """
    url = make_url(settings.database_url)
    kwargs: dict = {"pool_pre_ping": True}

    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_size"] = settings.db_pool_size
        kwargs["max_overflow"] = settings.db_max_overflow

    engine = create_engine(url, **kwargs)
    logger.info("Database engine created for backend=%s", url.get_backend_name())
    return engine
