from .chat import ChatRequest, ChatResponse
from .error import ErrorDetail, ErrorResponse
from .health import HealthResponse

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
]
