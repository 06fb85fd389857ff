"""
LLM controller for the chat endpoint.

Submits the assembled prompt to the OpenAI Responses API and shapes the
result into plain text.
"""
import logging
from pathlib import Path
from typing import Any, List, Union

from openai import AsyncOpenAI

from gpt5_gateway.api.models.chat import ChatRequest, ChatResponse
from gpt5_gateway.services import DEFAULT_MODEL, MODEL_PRESETS, assemble_prompt

logger = logging.getLogger(__name__)

ERROR_PREFIX = "[OpenAI error: "


def _field(obj: Any, name: str) -> Any:
    """Read ``name`` from an SDK object or a plain dict."""
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def extract_output_text(response: Any) -> str:
    """
    Extract plain text from a Responses API result.

    Prefers the aggregated ``output_text`` field. Otherwise joins the text
    fragments of every output item: fragments with no separator, items with a
    newline.
    """
    output_text = _field(response, "output_text")
    if output_text is not None:
        return output_text

    items = _field(response, "output") or []
    texts: List[str] = []
    for item in items:
        content = _field(item, "content") or []
        texts.append("".join(_field(fragment, "text") or "" for fragment in content))
    return "\n".join(texts)


def _error_message(error: Exception) -> str:
    body = getattr(error, "body", None)
    if isinstance(body, dict):
        nested = body.get("error")
        message = nested.get("message") if isinstance(nested, dict) else body.get("message")
        if message:
            return str(message)
    return getattr(error, "message", None) or str(error) or "Unknown error"


class ChatController:
    """Controller for chat completion operations."""

    def __init__(self, client: AsyncOpenAI, data_dir: Union[str, Path]):
        self.client = client
        self.data_dir = data_dir

    async def complete(self, role: str, composite_input: str) -> str:
        """
        Run one completion for ``composite_input``.

        Upstream failures are not raised: they come back as placeholder text
        starting with ``[OpenAI error: ``.
        """
        preset = MODEL_PRESETS[DEFAULT_MODEL]
        input_messages = [
            {"role": role, "content": [{"type": "text", "text": composite_input}]}
        ]
        try:
            response = await self.client.responses.create(
                model=preset.model,
                temperature=preset.temperature,
                max_output_tokens=preset.max_output_tokens,
                input=input_messages,
            )
        except Exception as e:
            message = _error_message(e)
            logger.warning(f"OpenAI request failed ({type(e).__name__}): {message}")
            return f"{ERROR_PREFIX}{message}]"

        return extract_output_text(response)

    async def chat(self, request: ChatRequest) -> ChatResponse:
        """Assemble the prompt for ``request`` and relay the completion."""
        composite_input = assemble_prompt(request.prompt, self.data_dir)
        output_text = await self.complete(request.role, composite_input)
        return ChatResponse(model=DEFAULT_MODEL, output_text=output_text)
