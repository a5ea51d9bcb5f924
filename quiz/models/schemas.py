"""Quiz Schemas - Modelos Pydantic do dominio e de request/response."""

from datetime import datetime, timezone
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from ..normalize import normalize_answer
from .enums import CourseLevel, Difficulty, PerformanceBand, QuestionType, UserRole

SKIPPED_LABEL = "(Skipped)"
MINUTES_PER_QUESTION = 2


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# DOMINIO (formato persistido)
# =============================================================================


class Question(BaseModel):
    """Item avaliavel de um quiz.

    Para MCQ/TrueFalse a resposta correta precisa ser uma das opcoes
    (comparacao normalizada). Para ShortAnswer as opcoes sao descartadas.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    id: str = Field(..., min_length=1, description="ID estavel atribuido pelo cliente")
    question: str = Field(..., description="Enunciado da questao")
    type: QuestionType = Field(..., description="MCQ, TrueFalse ou ShortAnswer")
    options: list[str] = Field(default_factory=list, description="Alternativas (vazio p/ ShortAnswer)")
    correct_answer: str = Field(
        ...,
        validation_alias=AliasChoices("correctAnswer", "correct_answer"),
        serialization_alias="correctAnswer",
        description="Resposta canonica",
    )
    explanation: str = Field(..., description="Explicacao mostrada na revisao")

    @model_validator(mode="before")
    @classmethod
    def _drop_short_answer_options(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("type") == QuestionType.SHORT_ANSWER:
            data = {**data, "options": []}
        return data

    @field_validator("question", "correct_answer")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @model_validator(mode="after")
    def _answer_among_options(self) -> "Question":
        if not self.type.is_choice:
            return self
        if not self.options:
            raise ValueError(f"{self.type.value} question requires options")
        normalized = {normalize_answer(option) for option in self.options}
        if normalize_answer(self.correct_answer) not in normalized:
            raise ValueError(
                f"correct answer {self.correct_answer!r} is not one of the options"
            )
        return self


class Quiz(BaseModel):
    """Avaliacao gerada a partir de uma aula. Imutavel apos a criacao."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    id: str = Field(..., min_length=1)
    title: str
    course_level: CourseLevel = CourseLevel.LEVEL_200
    difficulty: Difficulty
    lecture_text: str = Field(..., description="Material de origem (proveniencia)")
    questions: list[Question] = Field(..., min_length=1)
    created_at: datetime = Field(default_factory=_utcnow)

    @field_validator("questions")
    @classmethod
    def _unique_question_ids(cls, questions: list[Question]) -> list[Question]:
        seen: set[str] = set()
        for question in questions:
            if question.id in seen:
                raise ValueError(f"duplicate question id {question.id!r}")
            seen.add(question.id)
        return questions

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def estimated_minutes(self) -> int:
        """Tempo estimado exibido no portal do aluno."""
        return self.total_questions * MINUTES_PER_QUESTION

    def question_ids(self) -> set[str]:
        return {q.id for q in self.questions}


# =============================================================================
# CONTRATO DO SERVICO DE GERACAO
# =============================================================================


class GeneratedQuestion(BaseModel):
    """Questao como devolvida pelo servico (sem id)."""

    question: str
    type: QuestionType
    options: list[str] = Field(default_factory=list)
    correct_answer: str
    explanation: str

    @field_validator("options", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class GeneratedQuizPayload(BaseModel):
    """Resposta completa: ``{quiz_title, questions: [...]}``."""

    quiz_title: str = Field(default="", validation_alias=AliasChoices("quiz_title", "title"))
    questions: list[GeneratedQuestion]


# =============================================================================
# REQUESTS
# =============================================================================


class GenerateQuizRequest(BaseModel):
    """Parametros informados pelo operador para gerar um quiz."""

    lecture_text: str = Field(..., description="Notas de aula coladas pelo instrutor")
    num_questions: int = Field(default=5, ge=1, le=20, description="Numero de questoes (1-20)")
    difficulty: Difficulty = Field(default=Difficulty.MEDIUM)
    question_types: list[QuestionType] = Field(
        default_factory=lambda: [QuestionType.MCQ],
        min_length=1,
        description="Tipos permitidos (pelo menos um)",
    )
    course_level: CourseLevel = Field(default=CourseLevel.LEVEL_200)


class StartAttemptRequest(BaseModel):
    quiz_id: str


class AnswerRequest(BaseModel):
    value: str = Field(..., description="Resposta do aluno para a questao atual")


class RoleRequest(BaseModel):
    role: UserRole


# =============================================================================
# RESPONSES
# =============================================================================


class ScoreResult(BaseModel):
    """Resultado final de uma tentativa submetida."""

    total_questions: int
    score: int = Field(..., description="Numero de respostas corretas")
    percentage: int = Field(..., description="round(100 * score / total)")
    band: PerformanceBand
    band_title: str
    band_message: str
    breakdown: dict[str, dict[str, int]] = Field(
        ..., description="Corretas/total por tipo de questao"
    )


class ReviewItem(BaseModel):
    """Linha da revisao, na ordem original das questoes."""

    question_id: str
    question: str
    learner_answer: str | None = Field(None, description="None quando pulada")
    skipped: bool
    correct_answer: str
    explanation: str
    is_correct: bool

    @property
    def display_answer(self) -> str:
        return SKIPPED_LABEL if self.skipped else self.learner_answer or ""


class AttemptView(BaseModel):
    """Visao somente leitura de uma tentativa para qualquer front end."""

    quiz_id: str
    quiz_title: str
    current_index: int
    total_questions: int
    current_question: Question
    current_answer: str | None
    answered_count: int
    progress: float = Field(..., description="Percentual da posicao atual")
    is_last: bool
    submitted: bool
