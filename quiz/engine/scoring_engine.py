"""Quiz Scoring Engine - Motor de pontuacao e revisao."""

import math

from ..models.enums import PerformanceBand
from ..models.schemas import Question, Quiz, ReviewItem, ScoreResult
from ..normalize import answers_match


class QuizScoringEngine:
    """Motor de pontuação e revisão para tentativas submetidas.

    Todas as operações são funções puras sobre ``(quiz, answers)``. A
    comparação usa ``answers_match`` (trim + casefold), a mesma regra
    para pontuação e revisão, então as duas nunca divergem.

    Uma questão sem resposta conta como incorreta. Não há crédito
    parcial.

    Faixas de desempenho:
        - >= 70%: Strong
        - < 70%: Needs review

    Example:
        >>> engine = QuizScoringEngine()
        >>> result = engine.calculate_score(quiz, {"q-1": "Paris"})
        >>> print(result.percentage)  # 100
    """

    PASS_THRESHOLD = 70

    # Faixas (threshold, band, title, message)
    BAND_THRESHOLDS = [
        (
            PASS_THRESHOLD,
            PerformanceBand.STRONG,
            "Assessment Complete!",
            "Strong result. You have a solid grasp of this lecture material.",
        ),
        (
            0,
            PerformanceBand.NEEDS_REVIEW,
            "Assessment Complete!",
            "Review the explanations below and revisit the lecture notes "
            "before retaking the assessment.",
        ),
    ]

    def is_correct(self, question: Question, answer: str | None) -> bool:
        """Avalia uma resposta individual."""
        return answers_match(answer, question.correct_answer)

    def calculate_percentage(self, score: int, total: int) -> int:
        """Percentual inteiro, arredondando .5 para cima."""
        if total <= 0:
            return 0
        return math.floor(100 * score / total + 0.5)

    def calculate_band(self, percentage: float) -> tuple[PerformanceBand, str, str]:
        """Calcula a faixa de desempenho.

        Returns:
            Tuple de (band, title, message)
        """
        for threshold, band, title, message in self.BAND_THRESHOLDS:
            if percentage >= threshold:
                return band, title, message

        # Fallback (nunca deve chegar aqui)
        return self.BAND_THRESHOLDS[-1][1:4]

    def calculate_score(self, quiz: Quiz, answers: dict[str, str]) -> ScoreResult:
        """Calcula pontuação completa da tentativa.

        Args:
            quiz: Quiz respondido
            answers: question_id -> resposta do aluno

        Returns:
            ScoreResult com score, percentage, faixa e breakdown por tipo
        """
        score = 0
        breakdown: dict[str, dict[str, int]] = {}

        for question in quiz.questions:
            bucket = breakdown.setdefault(question.type.value, {"correct": 0, "total": 0})
            bucket["total"] += 1

            if self.is_correct(question, answers.get(question.id)):
                score += 1
                bucket["correct"] += 1

        total = quiz.total_questions
        percentage = self.calculate_percentage(score, total)
        band, title, message = self.calculate_band(percentage)

        return ScoreResult(
            total_questions=total,
            score=score,
            percentage=percentage,
            band=band,
            band_title=title,
            band_message=message,
            breakdown=breakdown,
        )

    def build_review(self, quiz: Quiz, answers: dict[str, str]) -> list[ReviewItem]:
        """Monta os dados de revisão, na ordem original das questões.

        Resposta ausente ou em branco é tratada como pulada.
        """
        review = []
        for question in quiz.questions:
            answer = answers.get(question.id)
            skipped = answer is None or not answer.strip()
            review.append(
                ReviewItem(
                    question_id=question.id,
                    question=question.question,
                    learner_answer=None if skipped else answer,
                    skipped=skipped,
                    correct_answer=question.correct_answer,
                    explanation=question.explanation,
                    is_correct=self.is_correct(question, answer),
                )
            )
        return review
