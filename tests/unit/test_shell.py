# =============================================================================
# TESTES - App Shell Module
# =============================================================================
# Testes unitarios para papel ativo, quizzes e tentativa ativa
# =============================================================================

import pytest


def _shell(llm, kv):
    from quiz.engine.authoring_flow import QuizAuthoringFlow
    from quiz.llm.generation_client import QuizGenerationClient
    from quiz.shell import AppShell
    from quiz.storage.quiz_store import QuizStore

    store = QuizStore(kv)
    return AppShell(store, QuizAuthoringFlow(QuizGenerationClient(llm), store))


class TestShellRole:
    """Testes para troca de papel."""

    def test_starts_as_student(self, fake_llm, memory_kv):
        from quiz.models.enums import UserRole

        shell = _shell(fake_llm, memory_kv)

        assert shell.role is UserRole.STUDENT
        assert shell.attempt is None

    def test_switch_exits_attempt(self, fake_llm, memory_kv, sample_quiz):
        """Trocar de papel encerra a tentativa ativa."""
        shell = _shell(fake_llm, memory_kv)
        shell.store.insert(sample_quiz)
        shell.start_attempt(sample_quiz.id)

        shell.switch_role("ADMIN")

        assert shell.attempt is None
        assert shell.role.value == "ADMIN"

    def test_leaving_admin_abandons_generation(self, fake_llm, memory_kv):
        from unittest.mock import MagicMock

        shell = _shell(fake_llm, memory_kv)
        shell.authoring.abandon = MagicMock()
        shell.switch_role("ADMIN")

        shell.switch_role("STUDENT")

        shell.authoring.abandon.assert_called_once()


class TestShellQuizzes:
    """Testes para operacoes sobre quizzes."""

    @pytest.mark.asyncio
    async def test_startup_loads(self, fake_llm, kv_factory, sample_quiz):
        import json

        blob = json.dumps(
            {"version": 1, "quizzes": [sample_quiz.model_dump(mode="json", by_alias=True)]}
        )
        shell = _shell(fake_llm, kv_factory({"uniquest_quizzes": blob}))

        quizzes = await shell.startup()

        assert [q.id for q in quizzes] == [sample_quiz.id]

    @pytest.mark.asyncio
    async def test_create_quiz(self, fake_llm, memory_kv, lecture_text):
        """create_quiz aplica o request e grava o resultado."""
        from quiz.models.enums import QuestionType
        from quiz.models.schemas import GenerateQuizRequest

        shell = _shell(fake_llm, memory_kv)
        shell.switch_role("ADMIN")
        request = GenerateQuizRequest(
            lecture_text=lecture_text,
            num_questions=3,
            question_types=[QuestionType.MCQ, QuestionType.TRUE_FALSE, QuestionType.SHORT_ANSWER],
        )

        quiz = await shell.create_quiz(request)

        assert shell.list_quizzes() == [quiz]
        assert shell.authoring.form.selected_types == request.question_types

    def test_get_unknown_quiz(self, fake_llm, memory_kv):
        from quiz.errors import QuizNotFoundError

        with pytest.raises(QuizNotFoundError):
            _shell(fake_llm, memory_kv).get_quiz("nope")

    @pytest.mark.asyncio
    async def test_delete_as_admin(self, fake_llm, memory_kv, sample_quiz):
        shell = _shell(fake_llm, memory_kv)
        await shell.store.add(sample_quiz)
        shell.switch_role("ADMIN")

        await shell.delete_quiz(sample_quiz.id)

        assert shell.list_quizzes() == []

    @pytest.mark.asyncio
    async def test_delete_unknown(self, fake_llm, memory_kv):
        from quiz.errors import QuizNotFoundError

        shell = _shell(fake_llm, memory_kv)
        shell.switch_role("ADMIN")

        with pytest.raises(QuizNotFoundError):
            await shell.delete_quiz("nope")

    @pytest.mark.asyncio
    async def test_pending_generation_keeps_form(self, memory_kv, lecture_text):
        """Segundo create_quiz recusado nao sobrescreve o formulario pendente."""
        import asyncio

        from quiz.errors import GenerationInProgressError, TransportError
        from quiz.models.schemas import GenerateQuizRequest

        started = asyncio.Event()
        release = asyncio.Event()

        class SlowFailingLLM:
            async def complete(self, system_prompt, prompt):
                started.set()
                await release.wait()
                raise ConnectionError("network down")

        shell = _shell(SlowFailingLLM(), memory_kv)
        shell.switch_role("ADMIN")
        first = asyncio.create_task(
            shell.create_quiz(GenerateQuizRequest(lecture_text=lecture_text, num_questions=3))
        )
        await started.wait()

        with pytest.raises(GenerationInProgressError):
            await shell.create_quiz(
                GenerateQuizRequest(lecture_text="OTHER TEXT", num_questions=9)
            )

        release.set()
        with pytest.raises(TransportError):
            await first

        assert shell.authoring.form.lecture_text == lecture_text
        assert shell.authoring.form.num_questions == 3


class TestShellRoleGates:
    """Testes para operacoes restritas ao papel ativo."""

    @pytest.mark.asyncio
    async def test_student_cannot_create(self, fake_llm, memory_kv, lecture_text):
        from quiz.errors import RoleError
        from quiz.models.schemas import GenerateQuizRequest

        shell = _shell(fake_llm, memory_kv)

        with pytest.raises(RoleError):
            await shell.create_quiz(GenerateQuizRequest(lecture_text=lecture_text))

        assert fake_llm.calls == []
        assert shell.list_quizzes() == []
        assert shell.authoring.form.lecture_text == ""

    @pytest.mark.asyncio
    async def test_student_cannot_delete(self, fake_llm, memory_kv, sample_quiz):
        from quiz.errors import RoleError

        shell = _shell(fake_llm, memory_kv)
        await shell.store.add(sample_quiz)

        with pytest.raises(RoleError):
            await shell.delete_quiz(sample_quiz.id)

        assert shell.list_quizzes() == [sample_quiz]

    def test_admin_cannot_start_attempt(self, fake_llm, memory_kv, sample_quiz):
        from quiz.errors import RoleError

        shell = _shell(fake_llm, memory_kv)
        shell.store.insert(sample_quiz)
        shell.switch_role("ADMIN")

        with pytest.raises(RoleError):
            shell.start_attempt(sample_quiz.id)
        assert shell.attempt is None


class TestShellAttempt:
    """Testes para a tentativa ativa."""

    def test_no_active_attempt(self, fake_llm, memory_kv):
        from quiz.errors import NoActiveAttemptError

        shell = _shell(fake_llm, memory_kv)

        with pytest.raises(NoActiveAttemptError):
            shell.advance()
        with pytest.raises(NoActiveAttemptError):
            shell.score()

    def test_take_quiz(self, fake_llm, memory_kv, sample_quiz):
        """Fluxo completo pelo shell."""
        shell = _shell(fake_llm, memory_kv)
        shell.store.insert(sample_quiz)
        shell.start_attempt(sample_quiz.id)

        for answer in ["Paris", "3", "True"]:
            shell.submit_answer(answer)
            shell.advance()

        result = shell.score()
        review = shell.review_data()

        assert result.score == 2
        assert result.percentage == 67
        assert review[1].is_correct is False
        assert shell.active_quiz == sample_quiz

    def test_start_replaces_attempt(self, fake_llm, memory_kv, sample_quiz):
        shell = _shell(fake_llm, memory_kv)
        shell.store.insert(sample_quiz)
        first = shell.start_attempt(sample_quiz.id)
        first.answer("Paris")

        second = shell.start_attempt(sample_quiz.id)

        assert second is not first
        assert second.answers == {}

    def test_restart(self, fake_llm, memory_kv, sample_quiz):
        shell = _shell(fake_llm, memory_kv)
        shell.store.insert(sample_quiz)
        shell.start_attempt(sample_quiz.id)
        shell.submit_answer("Paris")
        shell.advance()

        attempt = shell.restart()

        assert attempt.current_index == 0
        assert attempt.answers == {}


class TestBuildShell:
    """Testes para a montagem padrao."""

    def test_build_shell(self, tmp_path):
        from quiz.config import QuizConfig
        from quiz.shell import build_shell

        config = QuizConfig(data_dir=tmp_path, storage_key="custom", generation_timeout=5.0)

        shell = build_shell(config)

        assert shell.store.key == "custom"
        assert shell.store.kv.directory == tmp_path
        assert shell.authoring.client.timeout == 5.0
        assert shell.authoring.store is shell.store
