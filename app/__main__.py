"""
Run the service with uvicorn.

Usage:
    python -m app

Host and port come from HOST / PORT (see app.core.config).
Apply migrations first with ``alembic upgrade head``.
"""

import uvicorn

from app.core.config import settings


def main() -> None:
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
