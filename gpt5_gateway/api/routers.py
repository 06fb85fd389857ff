from fastapi import APIRouter

from .endpoints import chat
from .endpoints import health

api_router = APIRouter()

# Include endpoint routers
# Health (no prefix)
api_router.include_router(health.router, prefix="", tags=["health"])
api_router.include_router(chat.router, prefix="/v1", tags=["chat"])
