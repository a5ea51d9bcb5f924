"""Quiz Module - Geracao de quizzes a partir de notas de aula.

Arquitetura:
- models/: Enums, Schemas Pydantic, AttemptState
- engine/: QuizAttempt, QuizScoringEngine, QuizAuthoringFlow, dedup
- llm/: LLMClientFactory, QuizGenerationClient
- storage/: QuizStore, LocalFileKV
- prompts/: Templates de prompts
- shell.py: AppShell (estado da aplicacao)
- router.py: FastAPI endpoints
"""

from .config import QuizConfig
from .engine import (
    AuthoringForm,
    QuestionDeduplicationEngine,
    QuizAttempt,
    QuizAuthoringFlow,
    QuizScoringEngine,
)
from .errors import (
    InsufficientMaterialError,
    QuizError,
    SchemaError,
    TransportError,
    ValidationError,
)
from .llm import LLMClientFactory, QuizGenerationClient
from .models import CourseLevel, Difficulty, Question, QuestionType, Quiz, UserRole
from .normalize import normalize_answer
from .shell import AppShell, build_shell
from .storage import LocalFileKV, QuizStore

__all__ = [
    # Models
    "CourseLevel",
    "Difficulty",
    "Question",
    "QuestionType",
    "Quiz",
    "UserRole",
    # Engines
    "AuthoringForm",
    "QuestionDeduplicationEngine",
    "QuizAttempt",
    "QuizAuthoringFlow",
    "QuizScoringEngine",
    "normalize_answer",
    # LLM
    "LLMClientFactory",
    "QuizGenerationClient",
    # Storage
    "LocalFileKV",
    "QuizStore",
    # Shell
    "AppShell",
    "QuizConfig",
    "build_shell",
    # Errors
    "QuizError",
    "ValidationError",
    "TransportError",
    "SchemaError",
    "InsufficientMaterialError",
]
