"""
Health check endpoint.
"""
from fastapi import APIRouter

from gpt5_gateway.api.models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness check; never touches the completion service."""
    return HealthResponse()
