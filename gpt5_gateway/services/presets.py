"""
Model presets for the completion service.
"""
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict


class ModelPreset(BaseModel):
    """Model identifier plus sampling parameters."""

    model_config = ConfigDict(frozen=True)

    model: str
    temperature: float
    max_output_tokens: int


MODEL_PRESETS: Mapping[str, ModelPreset] = MappingProxyType(
    {
        "gpt-5": ModelPreset(model="gpt-5", temperature=0.7, max_output_tokens=1024),
        "gpt-5-mini": ModelPreset(model="gpt-5-mini", temperature=0.5, max_output_tokens=768),
        "gpt-5-chat-latest": ModelPreset(
            model="gpt-5-chat-latest", temperature=0.7, max_output_tokens=1024
        ),
    }
)

# The chat handler always uses this preset; requests cannot pick another one.
DEFAULT_MODEL = "gpt-5"
