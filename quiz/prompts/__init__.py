"""Quiz Prompts - Templates de prompts."""

from .templates import (
    DEFAULT_QUIZ_TITLE,
    DEFAULT_TRUE_FALSE_OPTIONS,
    INSUFFICIENT_MATERIAL_SENTINEL,
    QUIZ_GENERATION_PROMPT,
    QUIZ_SYSTEM_PROMPT,
    build_generation_prompt,
    build_system_prompt,
)

__all__ = [
    "DEFAULT_QUIZ_TITLE",
    "DEFAULT_TRUE_FALSE_OPTIONS",
    "INSUFFICIENT_MATERIAL_SENTINEL",
    "QUIZ_GENERATION_PROMPT",
    "QUIZ_SYSTEM_PROMPT",
    "build_generation_prompt",
    "build_system_prompt",
]
