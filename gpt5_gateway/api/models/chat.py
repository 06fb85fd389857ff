"""
Request and response models for the chat endpoint.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    """Payload for a chat completion.

    - role: message role forwarded to the completion service
    - prompt: user text appended after the guardrail and context
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    role: str = Field(min_length=1)
    prompt: str = Field(min_length=1)


class ChatResponse(BaseModel):
    """Completion relayed to the caller."""

    ok: bool = True
    model: str
    output_text: str
    usage: Optional[dict] = None
    raw: Optional[dict] = None
