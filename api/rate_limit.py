"""
Rate limiting for the PC Catalog API
One process-wide bucket shared by every client
"""

import logging
from typing import Callable

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded

from api.config import Settings
from api.schemas import ErrorResponse

logger = logging.getLogger(__name__)

GLOBAL_RATE_LIMIT_KEY = "global"


def global_key(request: Request) -> str:
    """Every request shares the same bucket, regardless of client address"""
    return GLOBAL_RATE_LIMIT_KEY


def build_limiter(settings: Settings) -> Limiter:
    """Create the admission limiter described by ``settings``"""
    return Limiter(
        key_func=global_key,
        strategy="moving-window",
        storage_uri="memory://",
        enabled=settings.RATE_LIMIT_ENABLED,
    )


def admission_limit(settings: Settings) -> str:
    """All configured windows as one ``limits`` string"""
    return ";".join(settings.rate_limit_expressions())


def limit_route(limiter: Limiter, settings: Settings, endpoint: Callable) -> Callable:
    """
    Put ``endpoint`` under the shared admission limit.

    Every limited route draws from the same "global" scope, so the bucket
    is shared across routes as well as clients. The endpoint must take a
    ``request`` argument.
    """
    if not limiter.enabled:
        return endpoint
    return limiter.shared_limit(admission_limit(settings), scope=GLOBAL_RATE_LIMIT_KEY)(endpoint)


def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Handle rate limit exceeded"""
    logger.warning(f"Rate limit exceeded: {request.method} {request.url.path} ({exc.detail})")
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content=jsonable_encoder(ErrorResponse(error="Too many requests")),
    )
