"""
gpt5-gateway application factory.
"""
import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from openai import AsyncOpenAI

from gpt5_gateway import __version__
from gpt5_gateway.api.models import ErrorResponse
from gpt5_gateway.api.routers import api_router
from gpt5_gateway.config.settings import Settings, get_settings
from gpt5_gateway.middleware.error_handling import ErrorHandlingMiddleware
from gpt5_gateway.middleware.rate_limiting import RateLimitMiddleware
from gpt5_gateway.middleware.request_logging import RequestLoggingMiddleware
from gpt5_gateway.middleware.security_headers import SecurityHeadersMiddleware
from gpt5_gateway.utils.rate_limiter import FixedWindowRateLimiter

logger = logging.getLogger(__name__)


def _describe_validation_error(error: Dict[str, Any]) -> str:
    """Render one pydantic error in the ``"field" <problem>`` form."""
    if error["type"] == "json_invalid":
        return "Invalid JSON body"

    loc = [str(part) for part in error.get("loc", ()) if part != "body"]
    field = ".".join(loc) or "value"

    if error["type"] == "missing":
        return f'"{field}" is required'
    if error["type"] == "string_too_short":
        return f'"{field}" is not allowed to be empty'
    if error["type"] == "string_type":
        return f'"{field}" must be a string'
    if error["type"] in ("model_type", "model_attributes_type", "dict_type"):
        return f'"{field}" must be of type object'
    return f'"{field}" {error.get("msg", "is invalid")}'


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report every request validation failure as a single 400 response."""
    messages = []
    for error in exc.errors():
        message = _describe_validation_error(error)
        if message not in messages:
            messages.append(message)

    logger.info(f"Rejected request to {request.url.path}: {messages}")
    content = ErrorResponse.build("BadRequest", ". ".join(messages))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content.model_dump())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    settings: Settings = app.state.settings
    logger.info(
        f"Starting {settings.app_name} ({settings.environment}), "
        f"data directory: {settings.data_dir}"
    )
    yield

    logger.info("Shutting down...")
    await app.state.openai_client.close()


def create_app(
    settings: Optional[Settings] = None,
    openai_client: Optional[AsyncOpenAI] = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="gpt5-gateway",
        description="Guardrailed prompt gateway for the OpenAI Responses API",
        version=__version__,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.openai_client = openai_client or AsyncOpenAI(
        api_key=settings.openai_api_key, max_retries=0
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Middleware added last runs first
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(
        RateLimitMiddleware,
        limiter=FixedWindowRateLimiter(
            max_requests=settings.rate_limit_max,
            window_seconds=settings.rate_limit_window_seconds,
        ),
    )
    if settings.enable_request_logging:
        app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware, max_body_bytes=settings.max_body_bytes)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
