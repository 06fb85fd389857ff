"""
Prompt assembly for the chat endpoint.

Builds the composite input sent to the completion service from three parts:
the guardrail directive, the context entries and the caller's prompt. The
guardrail and context are read from JSON files on every call. A missing or
malformed file degrades to an empty value and is only reported in the logs.
"""
import logging
from pathlib import Path
from typing import Any, List, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)

logger = logging.getLogger(__name__)

CONTEXT_FILE = "context.json"
GUARDRAIL_FILE = "guardrail.json"
SEPARATOR = "\n---\n"


class ContextEntry(BaseModel):
    """A background snippet injected into every prompt."""

    model_config = ConfigDict(extra="ignore")

    info: str = ""

    @model_validator(mode="before")
    @classmethod
    def _entry_as_mapping(cls, data: Any) -> Any:
        # Entries that aren't objects carry no info.
        return data if isinstance(data, dict) else {}

    @field_validator("info", mode="before")
    @classmethod
    def _info_as_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value


class GuardrailDirective(BaseModel):
    """Static instruction placed ahead of the context and prompt."""

    model_config = ConfigDict(extra="ignore")

    prompt: str = ""


_context_adapter = TypeAdapter(List[ContextEntry])


def load_context_entries(data_dir: Union[str, Path]) -> List[ContextEntry]:
    """Load context entries, or an empty list if the file can't be used."""
    path = Path(data_dir) / CONTEXT_FILE
    try:
        return _context_adapter.validate_json(path.read_bytes())
    except (OSError, ValidationError) as e:
        logger.warning(f"Context resource unavailable ({path}): {e}")
        return []


def load_guardrail(data_dir: Union[str, Path]) -> str:
    """Load the guardrail directive, or an empty string if the file can't be used."""
    path = Path(data_dir) / GUARDRAIL_FILE
    try:
        return GuardrailDirective.model_validate_json(path.read_bytes()).prompt
    except (OSError, ValidationError) as e:
        logger.warning(f"Guardrail resource unavailable ({path}): {e}")
        return ""


def build_composite_input(
    guardrail: str, entries: List[ContextEntry], prompt: str
) -> str:
    """
    Join guardrail, context block and prompt with the separator.

    Empty members are skipped, so an empty guardrail or context never leaves a
    dangling separator.
    """
    context_block = "\n".join(entry.info for entry in entries)
    return SEPARATOR.join(part for part in (guardrail, context_block, prompt) if part)


def assemble_prompt(prompt: str, data_dir: Union[str, Path]) -> str:
    """Load the static resources and build the composite input for ``prompt``."""
    entries = load_context_entries(data_dir)
    guardrail = load_guardrail(data_dir)
    return build_composite_input(guardrail, entries, prompt)
