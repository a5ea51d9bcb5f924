"""Quiz Shell - Estado da aplicacao: papel ativo, quizzes e tentativa.

Substitui o estado global por um objeto explicito. O store, o fluxo de
autoria e as tentativas sao colaboradores injetados.
"""

from __future__ import annotations

import logging

from .config import QuizConfig
from .engine.attempt_engine import QuizAttempt
from .engine.authoring_flow import QuizAuthoringFlow
from .engine.scoring_engine import QuizScoringEngine
from .errors import NoActiveAttemptError, QuizNotFoundError, RoleError
from .llm.factory import LLMClientFactory
from .llm.generation_client import QuizGenerationClient
from .models.enums import UserRole
from .models.schemas import GenerateQuizRequest, Quiz, ReviewItem, ScoreResult
from .storage.local_kv import LocalFileKV
from .storage.quiz_store import QuizStore

logger = logging.getLogger(__name__)


class AppShell:
    """Alterna entre autoria (ADMIN) e realizacao (STUDENT) de quizzes.

    Attributes:
        store: Conjunto de quizzes
        authoring: Fluxo de autoria
        role: Papel ativo
        attempt: Tentativa ativa (None fora do player)
    """

    def __init__(
        self,
        store: QuizStore,
        authoring: QuizAuthoringFlow,
        scoring: QuizScoringEngine | None = None,
    ):
        self.store = store
        self.authoring = authoring
        self.scoring = scoring or QuizScoringEngine()
        self.role = UserRole.STUDENT
        self.attempt: QuizAttempt | None = None

    @property
    def active_quiz(self) -> Quiz | None:
        return self.attempt.quiz if self.attempt else None

    async def startup(self) -> list[Quiz]:
        """Carrega os quizzes salvos. Dados corrompidos nao impedem o uso."""
        quizzes = await self.store.load()
        if self.store.warning:
            logger.warning(f"Shell iniciado com aviso: {self.store.warning}")
        return quizzes

    def switch_role(self, role: UserRole) -> None:
        """Troca o papel ativo.

        Sair de ADMIN abandona a geracao pendente; qualquer troca encerra a
        tentativa ativa.
        """
        role = UserRole(role)
        if self.role is UserRole.ADMIN and role is not UserRole.ADMIN:
            self.authoring.abandon()
        self.exit_attempt()
        self.role = role

    def require_role(self, role: UserRole) -> None:
        """Garante que a operacao pertence a visao do papel ativo."""
        if self.role is not role:
            raise RoleError(
                f"This action requires the {role.value} role (current: {self.role.value})."
            )

    # -------------------------------------------------------------------------
    # Quizzes
    # -------------------------------------------------------------------------

    def list_quizzes(self) -> list[Quiz]:
        return self.store.list_quizzes()

    def get_quiz(self, quiz_id: str) -> Quiz:
        quiz = self.store.get(quiz_id)
        if quiz is None:
            raise QuizNotFoundError(f"Quiz {quiz_id} not found.")
        return quiz

    async def create_quiz(self, request: GenerateQuizRequest) -> Quiz | None:
        """Gera e grava um quiz (ADMIN). None se a resposta chegou obsoleta."""
        self.require_role(UserRole.ADMIN)
        return await self.authoring.submit(request)

    async def delete_quiz(self, quiz_id: str) -> None:
        """Remove um quiz (ADMIN). O papel ADMIN nunca tem tentativa ativa."""
        self.require_role(UserRole.ADMIN)
        if not await self.store.remove(quiz_id):
            raise QuizNotFoundError(f"Quiz {quiz_id} not found.")

    # -------------------------------------------------------------------------
    # Tentativas
    # -------------------------------------------------------------------------

    def start_attempt(self, quiz_id: str) -> QuizAttempt:
        self.require_role(UserRole.STUDENT)
        quiz = self.get_quiz(quiz_id)
        self.attempt = QuizAttempt(quiz, scoring=self.scoring)
        logger.info(f"Tentativa iniciada: {quiz_id}")
        return self.attempt

    def exit_attempt(self) -> None:
        self.attempt = None

    def require_attempt(self) -> QuizAttempt:
        if self.attempt is None:
            raise NoActiveAttemptError("No quiz is currently being taken.")
        return self.attempt

    def submit_answer(self, value: str) -> QuizAttempt:
        attempt = self.require_attempt()
        attempt.answer(value)
        return attempt

    def advance(self) -> QuizAttempt:
        attempt = self.require_attempt()
        attempt.advance()
        return attempt

    def retreat(self) -> QuizAttempt:
        attempt = self.require_attempt()
        attempt.retreat()
        return attempt

    def restart(self) -> QuizAttempt:
        attempt = self.require_attempt()
        attempt.restart()
        return attempt

    def score(self) -> ScoreResult:
        return self.require_attempt().score()

    def review_data(self) -> list[ReviewItem]:
        return self.require_attempt().review()


def build_shell(config: QuizConfig) -> AppShell:
    """Monta o shell com armazenamento local e cliente Claude."""
    store = QuizStore(LocalFileKV(config.data_dir), key=config.storage_key)
    client = QuizGenerationClient(
        LLMClientFactory.create_llm(config.model),
        timeout=config.generation_timeout,
    )
    return AppShell(store=store, authoring=QuizAuthoringFlow(client, store))
