"""
LLM chat endpoints.

Forwards a prompt, wrapped in the guardrail and context text, to the
completion service and relays the text of the response.
"""
from fastapi import APIRouter, Depends, Request, status

from gpt5_gateway.api.models import ChatRequest, ChatResponse, ErrorResponse
from gpt5_gateway.controllers.chat_controller import ChatController

# ============================================================================
# Dependency Injection
# ============================================================================


def get_chat_controller(request: Request) -> ChatController:
    """Dependency injection for ChatController."""
    state = request.app.state
    return ChatController(client=state.openai_client, data_dir=state.settings.data_dir)


# ============================================================================
# Router
# ============================================================================

router = APIRouter()


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "/chat",
    status_code=status.HTTP_200_OK,
    response_model=ChatResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        413: {"model": ErrorResponse, "description": "Request body too large"},
        429: {"model": ErrorResponse, "description": "Too many requests"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
async def chat(
    request: ChatRequest,
    controller: ChatController = Depends(get_chat_controller),
) -> ChatResponse:
    """
    Chat completion endpoint.

    Upstream failures still return 200: the error is embedded in
    ``output_text`` as ``[OpenAI error: <message>]``.
    """
    return await controller.chat(request)
