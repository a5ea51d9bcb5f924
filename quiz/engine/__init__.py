"""Quiz Engines - Logica de negocios."""

from .attempt_engine import QuizAttempt
from .authoring_flow import AuthoringForm, QuizAuthoringFlow
from .dedup_engine import QuestionDeduplicationEngine
from .scoring_engine import QuizScoringEngine

__all__ = [
    "AuthoringForm",
    "QuestionDeduplicationEngine",
    "QuizAttempt",
    "QuizAuthoringFlow",
    "QuizScoringEngine",
]
