"""
Security headers middleware.
Sets hardening headers on every response and enforces the request body limit.
"""
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from gpt5_gateway.api.models import ErrorResponse

BODY_METHODS = ("POST", "PUT", "PATCH", "DELETE")

SECURITY_HEADERS = {
    "Content-Security-Policy": (
        "default-src 'self';base-uri 'self';font-src 'self' https: data:;"
        "form-action 'self';frame-ancestors 'self';img-src 'self' data:;"
        "object-src 'none';script-src 'self';script-src-attr 'none';"
        "style-src 'self' https: 'unsafe-inline';upgrade-insecure-requests"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware adding security headers and rejecting oversized bodies."""

    def __init__(self, app, max_body_bytes: int):
        super().__init__(app)
        self.max_body_bytes = max_body_bytes

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if await self._body_too_large(request):
            content = ErrorResponse.build(
                "PayloadTooLarge",
                f"Request body exceeds {self.max_body_bytes} bytes",
            )
            response = JSONResponse(status_code=413, content=content.model_dump())
        else:
            response = await call_next(request)

        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    async def _body_too_large(self, request: Request) -> bool:
        content_length = request.headers.get("content-length")
        if content_length:
            try:
                return int(content_length) > self.max_body_bytes
            except ValueError:
                return False

        if request.method not in BODY_METHODS:
            return False

        # No declared length (chunked upload): count what actually arrives.
        # The body is cached for downstream handlers.
        body_bytes = await request.body()
        request.state.body = body_bytes
        return len(body_bytes) > self.max_body_bytes
