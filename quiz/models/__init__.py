"""Quiz Models - Enums, Schemas e State."""

from .enums import CourseLevel, Difficulty, PerformanceBand, QuestionType, UserRole
from .schemas import (
    SKIPPED_LABEL,
    AnswerRequest,
    AttemptView,
    GeneratedQuestion,
    GeneratedQuizPayload,
    GenerateQuizRequest,
    Question,
    Quiz,
    ReviewItem,
    RoleRequest,
    ScoreResult,
    StartAttemptRequest,
)
from .state import AttemptState

__all__ = [
    # Enums
    "CourseLevel",
    "Difficulty",
    "PerformanceBand",
    "QuestionType",
    "UserRole",
    # Schemas
    "Question",
    "Quiz",
    "GeneratedQuestion",
    "GeneratedQuizPayload",
    "GenerateQuizRequest",
    "StartAttemptRequest",
    "AnswerRequest",
    "RoleRequest",
    "ScoreResult",
    "ReviewItem",
    "AttemptView",
    "SKIPPED_LABEL",
    # State
    "AttemptState",
]
