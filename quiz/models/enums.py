"""Quiz Enums - Dificuldade, tipos de questao, niveis e papeis."""

from enum import Enum


class Difficulty(str, Enum):
    """Niveis de dificuldade solicitados na geracao."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    MIXED = "mixed"  # Mistura dos tres niveis


class QuestionType(str, Enum):
    """Tipos de questao suportados."""

    MCQ = "MCQ"
    TRUE_FALSE = "TrueFalse"
    SHORT_ANSWER = "ShortAnswer"

    @property
    def is_choice(self) -> bool:
        """Tipos respondidos escolhendo uma das opcoes."""
        return self in (QuestionType.MCQ, QuestionType.TRUE_FALSE)

    @property
    def label(self) -> str:
        """Nome legivel ("True False", "Short Answer")."""
        return {
            QuestionType.MCQ: "MCQ",
            QuestionType.TRUE_FALSE: "True False",
            QuestionType.SHORT_ANSWER: "Short Answer",
        }[self]


class CourseLevel(str, Enum):
    """Faixa ordinal do curso (introdutorio ate mestrado)."""

    LEVEL_100 = "100"
    LEVEL_200 = "200"
    LEVEL_300 = "300"
    LEVEL_400 = "400"
    LEVEL_500 = "500"

    @property
    def label(self) -> str:
        if self is CourseLevel.LEVEL_500:
            return "500 Level (Masters)"
        return f"{self.value} Level"


class UserRole(str, Enum):
    """Papel ativo no shell."""

    STUDENT = "STUDENT"
    ADMIN = "ADMIN"


class PerformanceBand(str, Enum):
    """Faixa de desempenho mostrada ao final da tentativa."""

    STRONG = "strong"  # >= 70%
    NEEDS_REVIEW = "needs_review"  # < 70%
