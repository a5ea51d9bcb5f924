"""Quiz LLM - Cliente do servico de geracao."""

from .factory import ClaudeQuizLLM, LLMClientFactory, QuizLLM
from .generation_client import QuizGenerationClient
from .parser import extract_json_text

__all__ = [
    "ClaudeQuizLLM",
    "LLMClientFactory",
    "QuizLLM",
    "QuizGenerationClient",
    "extract_json_text",
]
