from .presets import DEFAULT_MODEL, MODEL_PRESETS, ModelPreset
from .prompt_assembler import assemble_prompt, build_composite_input

__all__ = [
    "DEFAULT_MODEL",
    "MODEL_PRESETS",
    "ModelPreset",
    "assemble_prompt",
    "build_composite_input",
]
