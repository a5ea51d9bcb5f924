"""Quiz Attempt Engine - Maquina de estados de uma tentativa."""

import logging

from ..errors import AttemptStateError
from ..models.schemas import AttemptView, Question, Quiz, ReviewItem, ScoreResult
from ..models.state import AttemptState
from .scoring_engine import QuizScoringEngine

logger = logging.getLogger(__name__)


class QuizAttempt:
    """Tentativa de um aluno sobre um quiz.

    Estados:
        - InProgress(current_index, answers): estado inicial (0, {})
        - Submitted(answers): terminal; apenas ``restart()`` sai dele

    A revisao e uma visao derivada, somente leitura, do estado Submitted.

    Example:
        >>> attempt = QuizAttempt(quiz)
        >>> attempt.answer("Paris")
        >>> attempt.advance()
        >>> attempt.submitted
        True
    """

    def __init__(self, quiz: Quiz, scoring: QuizScoringEngine | None = None):
        self.quiz = quiz
        self.scoring = scoring or QuizScoringEngine()
        self.state = AttemptState()

    # -------------------------------------------------------------------------
    # Leitura
    # -------------------------------------------------------------------------

    @property
    def current_index(self) -> int:
        return self.state.current_index

    @property
    def answers(self) -> dict[str, str]:
        return self.state.answers

    @property
    def submitted(self) -> bool:
        return self.state.submitted

    @property
    def last_index(self) -> int:
        return self.quiz.total_questions - 1

    @property
    def is_last(self) -> bool:
        return self.state.current_index == self.last_index

    @property
    def current_question(self) -> Question:
        return self.quiz.questions[self.state.current_index]

    @property
    def current_answer(self) -> str | None:
        return self.state.answers.get(self.current_question.id)

    @property
    def answered_count(self) -> int:
        return len(self.state.answers)

    @property
    def progress(self) -> float:
        """Percentual da posicao atual ((indice + 1) / total)."""
        return (self.state.current_index + 1) / self.quiz.total_questions * 100

    # -------------------------------------------------------------------------
    # Transicoes
    # -------------------------------------------------------------------------

    def answer(self, value: str) -> None:
        """Registra a resposta da questao atual. No-op se ja submetida."""
        if self.state.submitted:
            logger.debug(f"Resposta ignorada, tentativa ja submetida: {self.quiz.id}")
            return
        self.state.answers[self.current_question.id] = value

    def advance(self) -> None:
        """Vai para a proxima questao; na ultima, submete a tentativa."""
        if self.state.submitted:
            return
        if self.state.current_index < self.last_index:
            self.state.current_index += 1
        else:
            self.state.submitted = True
            logger.info(
                f"Tentativa submetida: quiz={self.quiz.id} "
                f"respondidas={self.answered_count}/{self.quiz.total_questions}"
            )

    def retreat(self) -> None:
        """Volta uma questao. No-op no indice 0 ou apos submissao."""
        if self.state.submitted:
            return
        if self.state.current_index > 0:
            self.state.current_index -= 1

    def restart(self) -> None:
        """Nova tentativa sobre o mesmo quiz, a partir de qualquer estado."""
        self.state = AttemptState()

    # -------------------------------------------------------------------------
    # Resultado
    # -------------------------------------------------------------------------

    def _require_submitted(self) -> None:
        if not self.state.submitted:
            raise AttemptStateError("The attempt has not been submitted yet.")

    def score(self) -> ScoreResult:
        self._require_submitted()
        return self.scoring.calculate_score(self.quiz, self.state.answers)

    def review(self) -> list[ReviewItem]:
        self._require_submitted()
        return self.scoring.build_review(self.quiz, self.state.answers)

    def view(self) -> AttemptView:
        return AttemptView(
            quiz_id=self.quiz.id,
            quiz_title=self.quiz.title,
            current_index=self.state.current_index,
            total_questions=self.quiz.total_questions,
            current_question=self.current_question,
            current_answer=self.current_answer,
            answered_count=self.answered_count,
            progress=round(self.progress, 1),
            is_last=self.is_last,
            submitted=self.state.submitted,
        )
