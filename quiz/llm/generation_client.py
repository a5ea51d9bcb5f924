"""Quiz Generation Client - Gera quizzes a partir de notas de aula."""

from __future__ import annotations

import asyncio
import json
import logging
import uuid
from collections.abc import Callable, Sequence

from claude_agent_sdk import ClaudeSDKError
from pydantic import ValidationError as PydanticValidationError

from ..engine.dedup_engine import QuestionDeduplicationEngine
from ..errors import InsufficientMaterialError, SchemaError, TransportError, ValidationError
from ..models.enums import CourseLevel, Difficulty, QuestionType
from ..models.schemas import GeneratedQuestion, GeneratedQuizPayload, Question, Quiz
from ..prompts import (
    DEFAULT_QUIZ_TITLE,
    DEFAULT_TRUE_FALSE_OPTIONS,
    INSUFFICIENT_MATERIAL_SENTINEL,
    build_generation_prompt,
    build_system_prompt,
)
from .factory import QuizLLM
from .parser import extract_json_text

logger = logging.getLogger(__name__)


def new_question_id() -> str:
    return f"q-{uuid.uuid4().hex[:12]}"


def new_quiz_id() -> str:
    return f"quiz-{uuid.uuid4().hex[:12]}"


def _summarize(exc: PydanticValidationError) -> str:
    parts = []
    for error in exc.errors()[:5]:
        location = ".".join(str(p) for p in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts)


class QuizGenerationClient:
    """Cliente do serviço de geração de quiz.

    Monta o prompt, chama o LLM com espera limitada, valida a resposta
    contra ``GeneratedQuizPayload`` e devolve um ``Quiz`` completo com ids
    gerados localmente (ids do serviço nunca são aceitos).

    Não faz retry: a política de repetição é de quem chama.

    Erros:
        - ValidationError: entrada inválida, antes de qualquer chamada
        - TransportError: falha do SDK/rede ou timeout
        - SchemaError: JSON malformado ou fora do formato esperado
        - InsufficientMaterialError: serviço devolveu o título sentinela

    Example:
        >>> client = QuizGenerationClient(LLMClientFactory.create_llm())
        >>> quiz = await client.generate(text, 5, "medium", ["MCQ"], "200")
    """

    DEFAULT_TIMEOUT = 60.0
    MIN_QUESTIONS = 1
    MAX_QUESTIONS = 20

    def __init__(
        self,
        llm: QuizLLM,
        timeout: float = DEFAULT_TIMEOUT,
        dedup: QuestionDeduplicationEngine | None = None,
        question_id_factory: Callable[[], str] = new_question_id,
        quiz_id_factory: Callable[[], str] = new_quiz_id,
    ):
        self.llm = llm
        self.timeout = timeout
        self.dedup = dedup or QuestionDeduplicationEngine()
        self._question_id_factory = question_id_factory
        self._quiz_id_factory = quiz_id_factory

    async def generate(
        self,
        lecture_text: str,
        num_questions: int,
        difficulty: Difficulty | str,
        allowed_types: Sequence[QuestionType | str],
        course_level: CourseLevel | str,
    ) -> Quiz:
        """Gera um quiz a partir da aula.

        Args:
            lecture_text: Notas de aula (não pode ser vazio)
            num_questions: Quantidade solicitada (1-20)
            difficulty: easy, medium, hard ou mixed
            allowed_types: Tipos permitidos (pelo menos um)
            course_level: Faixa do curso (100-500)

        Returns:
            Quiz pronto para ser gravado no store
        """
        difficulty, types, course_level = self._validate(
            lecture_text, num_questions, difficulty, allowed_types, course_level
        )

        system_prompt = build_system_prompt(course_level.value)
        prompt = build_generation_prompt(
            lecture_text=lecture_text,
            num_questions=num_questions,
            difficulty=difficulty.value,
            question_types=[t.value for t in types],
            course_level=course_level.value,
        )

        logger.info(
            f"Gerando quiz: {num_questions} questoes, dificuldade={difficulty.value}, "
            f"tipos={[t.value for t in types]}, nivel={course_level.value}"
        )
        raw = await self._request(system_prompt, prompt)
        payload = self.parse_response(raw)

        return self._build_quiz(payload, lecture_text, difficulty, types, course_level, num_questions)

    # -------------------------------------------------------------------------
    # Etapas
    # -------------------------------------------------------------------------

    def _validate(
        self,
        lecture_text: str,
        num_questions: int,
        difficulty: Difficulty | str,
        allowed_types: Sequence[QuestionType | str],
        course_level: CourseLevel | str,
    ) -> tuple[Difficulty, list[QuestionType], CourseLevel]:
        if not lecture_text or not lecture_text.strip():
            raise ValidationError("Please provide lecture notes.")
        if not self.MIN_QUESTIONS <= num_questions <= self.MAX_QUESTIONS:
            raise ValidationError(
                f"Number of questions must be between {self.MIN_QUESTIONS} and {self.MAX_QUESTIONS}."
            )
        if not allowed_types:
            raise ValidationError("Select at least one question type.")
        try:
            types = list(dict.fromkeys(QuestionType(t) for t in allowed_types))
            return Difficulty(difficulty), types, CourseLevel(course_level)
        except ValueError as e:
            raise ValidationError(f"Invalid generation parameter: {e}") from e

    async def _request(self, system_prompt: str, prompt: str) -> str:
        try:
            return await asyncio.wait_for(
                self.llm.complete(system_prompt, prompt), timeout=self.timeout
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Timeout na geracao apos {self.timeout}s")
            raise TransportError(
                f"The generation service did not respond within {self.timeout:g} seconds."
            ) from e
        except (ClaudeSDKError, OSError) as e:
            logger.error(f"Falha de transporte na geracao: {e}")
            raise TransportError(f"The generation service is unavailable: {e}") from e

    def parse_response(self, raw: str) -> GeneratedQuizPayload:
        """Converte o texto do serviço em ``GeneratedQuizPayload``.

        O título sentinela é verificado antes da validação do schema, pois
        a resposta sentinela pode vir sem questões.
        """
        if not raw or not raw.strip():
            raise SchemaError("The generation service returned an empty response.")

        try:
            data = json.loads(extract_json_text(raw))
        except json.JSONDecodeError as e:
            logger.error(f"JSON invalido do servico: {raw[:300]}")
            raise SchemaError(f"The generation service returned malformed JSON: {e}") from e

        if not isinstance(data, dict):
            raise SchemaError("The generation service response is not a JSON object.")

        title = data.get("quiz_title", data.get("title"))
        if isinstance(title, str) and title.strip().upper() == INSUFFICIENT_MATERIAL_SENTINEL:
            logger.warning("Servico sinalizou material insuficiente")
            raise InsufficientMaterialError()

        try:
            payload = GeneratedQuizPayload.model_validate(data)
        except PydanticValidationError as e:
            raise SchemaError(f"The response does not match the quiz schema: {_summarize(e)}") from e

        if not payload.questions:
            raise SchemaError("The generation service returned no questions.")

        return payload

    def _to_question(self, generated: GeneratedQuestion) -> Question:
        options = list(generated.options)
        if generated.type is QuestionType.TRUE_FALSE and not options:
            options = list(DEFAULT_TRUE_FALSE_OPTIONS)

        return Question(
            id=self._question_id_factory(),
            question=generated.question,
            type=generated.type,
            options=options,
            correct_answer=generated.correct_answer,
            explanation=generated.explanation,
        )

    def _build_quiz(
        self,
        payload: GeneratedQuizPayload,
        lecture_text: str,
        difficulty: Difficulty,
        types: list[QuestionType],
        course_level: CourseLevel,
        requested: int,
    ) -> Quiz:
        try:
            questions = [self._to_question(q) for q in payload.questions]
            quiz = Quiz(
                id=self._quiz_id_factory(),
                title=payload.quiz_title.strip() or DEFAULT_QUIZ_TITLE,
                course_level=course_level,
                difficulty=difficulty,
                lecture_text=lecture_text,
                questions=questions,
            )
        except PydanticValidationError as e:
            raise SchemaError(f"The response does not match the quiz schema: {_summarize(e)}") from e

        # A quantidade devolvida e definitiva; divergencias so geram aviso
        if quiz.total_questions != requested:
            logger.warning(
                f"Servico devolveu {quiz.total_questions} questoes (solicitadas: {requested})"
            )

        unexpected = {q.type.value for q in quiz.questions if q.type not in types}
        if unexpected:
            logger.warning(f"Tipos nao solicitados na resposta: {sorted(unexpected)}")

        duplicates = self.dedup.find_duplicates([q.question for q in quiz.questions])
        if duplicates:
            logger.warning(f"Questoes possivelmente duplicadas (indices): {duplicates}")

        logger.info(f"Quiz gerado: {quiz.id} '{quiz.title}' ({quiz.total_questions} questoes)")
        return quiz
