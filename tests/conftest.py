# =============================================================================
# CONFTEST - Fixtures compartilhadas para todos os testes
# =============================================================================
# Centraliza quizzes de exemplo, KV em memoria e LLM simulado
# =============================================================================

import json
from typing import Any

import pytest


# =============================================================================
# FIXTURES DE DOMINIO
# =============================================================================


@pytest.fixture
def sample_questions():
    """Tres questoes, uma de cada tipo."""
    from quiz.models.enums import QuestionType
    from quiz.models.schemas import Question

    return [
        Question(
            id="q-1",
            question="What is the capital of France?",
            type=QuestionType.MCQ,
            options=["Paris", "London", "Rome", "Berlin"],
            correct_answer="paris ",
            explanation="The lecture states Paris is the capital.",
        ),
        Question(
            id="q-2",
            question="How many sides does a square have?",
            type=QuestionType.SHORT_ANSWER,
            correct_answer=" 4",
            explanation="A square has four sides.",
        ),
        Question(
            id="q-3",
            question="Water boils at 100C at sea level.",
            type=QuestionType.TRUE_FALSE,
            options=["True", "False"],
            correct_answer="True",
            explanation="Stated in section 2.",
        ),
    ]


@pytest.fixture
def sample_quiz(sample_questions):
    """Quiz de exemplo com tres questoes."""
    from quiz.models.enums import CourseLevel, Difficulty
    from quiz.models.schemas import Quiz

    return Quiz(
        id="quiz-test-123",
        title="Geography and Geometry",
        course_level=CourseLevel.LEVEL_200,
        difficulty=Difficulty.MEDIUM,
        lecture_text="Paris is the capital of France. A square has four sides.",
        questions=sample_questions,
    )


@pytest.fixture
def other_quiz(sample_questions):
    """Segundo quiz, para testes de ordenacao."""
    from quiz.models.enums import CourseLevel, Difficulty
    from quiz.models.schemas import Quiz

    return Quiz(
        id="quiz-test-456",
        title="Second Quiz",
        course_level=CourseLevel.LEVEL_400,
        difficulty=Difficulty.HARD,
        lecture_text="Other lecture.",
        questions=sample_questions[:1],
    )


# =============================================================================
# FIXTURES DO KV
# =============================================================================


class InMemoryKV:
    """KV assincrono em memoria (mesma interface do LocalFileKV)."""

    def __init__(self, data: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(data or {})
        self.set_calls = 0

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.set_calls += 1
        self.data[key] = value

    async def delete(self, key: str) -> None:
        self.data.pop(key, None)


class FailingKV(InMemoryKV):
    """KV cuja escrita sempre falha."""

    async def set(self, key: str, value: str) -> None:
        self.set_calls += 1
        raise OSError("disk full")


@pytest.fixture
def memory_kv():
    """KV em memoria vazio."""
    return InMemoryKV()


@pytest.fixture
def failing_kv():
    """KV com escrita quebrada."""
    return FailingKV()


# =============================================================================
# FIXTURES DO LLM
# =============================================================================


class FakeLLM:
    """LLM simulado: devolve respostas roteirizadas e registra chamadas."""

    def __init__(self, responses: list[Any] | None = None):
        self.responses = list(responses or [])
        self.calls: list[tuple[str, str]] = []

    async def complete(self, system_prompt: str, prompt: str) -> str:
        self.calls.append((system_prompt, prompt))
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response


def make_llm_payload(num_questions: int = 3, title: str = "Cell Biology Basics") -> dict:
    """Payload valido no formato do servico de geracao."""
    questions = [
        {
            "question": "Which organelle produces ATP?",
            "type": "MCQ",
            "options": ["Mitochondria", "Nucleus", "Ribosome", "Golgi"],
            "correct_answer": "Mitochondria",
            "explanation": "The lecture calls mitochondria the powerhouse of the cell.",
        },
        {
            "question": "The nucleus stores DNA.",
            "type": "TrueFalse",
            "options": ["True", "False"],
            "correct_answer": "True",
            "explanation": "Section 1 says DNA is kept in the nucleus.",
        },
        {
            "question": "Name the process that builds proteins.",
            "type": "ShortAnswer",
            "options": [],
            "correct_answer": "Translation",
            "explanation": "Ribosomes perform translation.",
        },
    ]
    return {"quiz_title": title, "questions": questions[:num_questions]}


@pytest.fixture
def llm_payload():
    return make_llm_payload()


@pytest.fixture
def fake_llm(llm_payload):
    """LLM que devolve um quiz valido."""
    return FakeLLM([json.dumps(llm_payload)])


@pytest.fixture
def lecture_text():
    return (
        "Mitochondria are the powerhouse of the cell and produce ATP. "
        "The nucleus stores DNA. Ribosomes build proteins through translation."
    )



@pytest.fixture
def llm_factory():
    """Cria FakeLLM com respostas roteirizadas."""
    return FakeLLM


@pytest.fixture
def payload_factory():
    """Cria payloads validos com N questoes (1-3)."""
    return make_llm_payload


@pytest.fixture
def kv_factory():
    """Cria KV em memoria com dados iniciais."""
    return InMemoryKV
