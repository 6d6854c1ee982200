"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client limit on every route through
SlowAPIMiddleware. Protects the database from request floods.
"""

import logging

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import Settings

logger = logging.getLogger(__name__)

HTTP_429 = 429


def build_limiter(settings: Settings) -> Limiter:
    """Create a limiter keyed on client address.

    Each application gets its own limiter and in-memory counters.

    Args:
        settings: Supplies the default limit and the on/off switch.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Kept synchronous: SlowAPIMiddleware may invoke it without awaiting.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    logger.warning("Rate limit exceeded for %s", get_remote_address(request))
    return JSONResponse(
        status_code=HTTP_429,
        content={"error": "rate_limited", "detail": f"Rate limit exceeded: {exc.detail}"},
    )
