"""Quiz Authoring Flow - Formulario do instrutor e commit no store."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..errors import GenerationInProgressError, QuizError, ValidationError
from ..models.enums import CourseLevel, Difficulty, QuestionType
from ..models.schemas import GenerateQuizRequest, Quiz

if TYPE_CHECKING:
    from ..llm.generation_client import QuizGenerationClient
    from ..storage.quiz_store import QuizStore

logger = logging.getLogger(__name__)


@dataclass
class AuthoringForm:
    """Parametros de geracao informados pelo operador."""

    lecture_text: str = ""
    num_questions: int = 5
    difficulty: Difficulty = Difficulty.MEDIUM
    course_level: CourseLevel = CourseLevel.LEVEL_200
    selected_types: list[QuestionType] = field(default_factory=lambda: [QuestionType.MCQ])

    def toggle_type(self, question_type: QuestionType) -> None:
        """Seleciona ou remove um tipo. Remover o ultimo tipo e rejeitado."""
        question_type = QuestionType(question_type)
        if question_type in self.selected_types:
            if len(self.selected_types) == 1:
                raise ValidationError("At least one question type must remain selected.")
            self.selected_types.remove(question_type)
        else:
            self.selected_types.append(question_type)

    def apply(self, request: GenerateQuizRequest) -> None:
        """Copia os parametros de um request para o formulario."""
        if not request.question_types:
            raise ValidationError("Select at least one question type.")
        self.lecture_text = request.lecture_text
        self.num_questions = request.num_questions
        self.difficulty = request.difficulty
        self.course_level = request.course_level
        self.selected_types = list(dict.fromkeys(request.question_types))

    def validate(self) -> None:
        if not self.lecture_text.strip():
            raise ValidationError("Please provide lecture notes.")
        if not 1 <= self.num_questions <= 20:
            raise ValidationError("Number of questions must be between 1 and 20.")
        if not self.selected_types:
            raise ValidationError("Select at least one question type.")

    def clear(self) -> None:
        """Limpa o texto da aula; os demais parametros ficam para o proximo quiz."""
        self.lecture_text = ""


class QuizAuthoringFlow:
    """Fluxo de autoria: valida, gera e grava o quiz.

    No maximo uma geracao pendente por sessao. Cada chamada recebe um token;
    so o token ainda ativo pode gravar o resultado. ``abandon()`` invalida
    o pedido pendente e o resultado que chegar depois e descartado.

    Em caso de falha, ``error`` recebe a mensagem para o operador, o
    formulario continua preenchido e o erro e propagado.
    """

    def __init__(self, client: QuizGenerationClient, store: QuizStore, form: AuthoringForm | None = None):
        self.client = client
        self.store = store
        self.form = form or AuthoringForm()
        self.error: str | None = None
        self._request_seq = 0
        self._pending_token: int | None = None

    @property
    def is_generating(self) -> bool:
        return self._pending_token is not None

    def abandon(self) -> None:
        """Descarta o pedido pendente (operador saiu da tela de autoria)."""
        if self._pending_token is not None:
            logger.info(f"Geracao pendente abandonada (token={self._pending_token})")
        self._pending_token = None

    async def submit(self, request: GenerateQuizRequest | None = None) -> Quiz | None:
        """Gera o quiz com os parametros do formulario e grava no store.

        O formulario so recebe ``request`` depois de confirmar que nao ha
        geracao pendente; um pedido recusado nao altera o formulario.

        Args:
            request: Parametros novos para o formulario (opcional)

        Returns:
            Quiz gravado, ou None se o pedido foi abandonado antes da resposta
        """
        if self.is_generating:
            raise GenerationInProgressError("A quiz is already being generated.")

        try:
            if request is not None:
                self.form.apply(request)
            self.form.validate()
        except ValidationError as e:
            self.error = e.message
            raise

        self.error = None
        self._request_seq += 1
        token = self._request_seq
        self._pending_token = token

        form = self.form
        try:
            quiz = await self.client.generate(
                lecture_text=form.lecture_text,
                num_questions=form.num_questions,
                difficulty=form.difficulty,
                allowed_types=list(form.selected_types),
                course_level=form.course_level,
            )
            is_stale = self._pending_token != token
        except QuizError as e:
            if self._pending_token != token:
                logger.info(f"Falha obsoleta descartada (token={token}): {e.message}")
                return None
            self.error = e.message
            logger.warning(f"Falha na geracao (token={token}): {type(e).__name__}: {e.message}")
            raise
        finally:
            if self._pending_token == token:
                self._pending_token = None

        if is_stale:
            logger.info(f"Resposta obsoleta descartada (token={token}, quiz={quiz.id})")
            return None

        await self.store.add(quiz)
        self.form.clear()
        return quiz
