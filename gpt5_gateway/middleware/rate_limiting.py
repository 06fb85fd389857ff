"""
Rate limiting middleware.
Rejects clients that exceed the configured number of requests per window.
"""
import logging
import math
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from gpt5_gateway.api.models import ErrorResponse
from gpt5_gateway.utils.client_ip import get_client_ip
from gpt5_gateway.utils.rate_limiter import FixedWindowRateLimiter

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests, please try again later."


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Per-client fixed-window rate limiting for every route."""

    def __init__(self, app, limiter: FixedWindowRateLimiter):
        super().__init__(app)
        self.limiter = limiter

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        client_ip = get_client_ip(request)
        result = self.limiter.hit(client_ip)
        reset_seconds = str(math.ceil(result.reset_after))

        if not result.allowed:
            logger.warning(f"Rate limit exceeded for {client_ip} on {request.url.path}")
            content = ErrorResponse.build("TooManyRequests", RATE_LIMIT_MESSAGE)
            response = JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content=content.model_dump(),
            )
            response.headers["Retry-After"] = reset_seconds
        else:
            response = await call_next(request)

        response.headers["RateLimit-Limit"] = str(result.limit)
        response.headers["RateLimit-Remaining"] = str(result.remaining)
        response.headers["RateLimit-Reset"] = reset_seconds
        return response
