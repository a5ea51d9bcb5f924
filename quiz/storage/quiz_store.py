"""Quiz Store - Persistencia do conjunto de quizzes em um KV duravel."""

from __future__ import annotations

import json
import logging
from typing import Protocol

from pydantic import ValidationError as PydanticValidationError

from ..errors import DuplicateQuizError, PersistenceError
from ..models.schemas import Quiz

logger = logging.getLogger(__name__)


class KVBackend(Protocol):
    """Interface minima do armazenamento (LocalFileKV, AgentFS kv, ...)."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...


class QuizStore:
    """Conjunto ordenado de quizzes, persistido como um único blob.

    Mantém a lista em memória (mais recente primeiro) e grava a sequência
    inteira sob uma chave fixa a cada mutação. Não há diff incremental nem
    escrita parcial.

    Atualizar a memória (``insert``/``discard``) e persistir (``save``) são
    passos separados. ``add``/``remove`` fazem os dois; se a gravação
    falhar, a mudança em memória é mantida e o erro fica em
    ``last_persist_error``.

    Formato do blob:
        {"version": 1, "quizzes": [<Quiz camelCase>, ...]}

    Um array JSON puro (formato antigo, sem versão) também é aceito.

    Example:
        >>> store = QuizStore(LocalFileKV(".quizdata"))
        >>> await store.load()
        >>> await store.add(quiz)
        >>> store.list_quizzes()[0].id == quiz.id
        True
    """

    DEFAULT_KEY = "uniquest_quizzes"
    SCHEMA_VERSION = 1

    def __init__(self, kv: KVBackend, key: str = DEFAULT_KEY):
        """Inicializa store com o backend KV.

        Args:
            kv: Backend assíncrono com ``get``/``set``
            key: Chave fixa onde o blob é gravado
        """
        self.kv = kv
        self.key = key
        self._quizzes: list[Quiz] = []
        self.warning: str | None = None
        self.last_persist_error: str | None = None

    # -------------------------------------------------------------------------
    # Serialização
    # -------------------------------------------------------------------------

    def serialize(self) -> str:
        """Serializa a sequência completa."""
        return json.dumps(
            {
                "version": self.SCHEMA_VERSION,
                "quizzes": [q.model_dump(mode="json", by_alias=True) for q in self._quizzes],
            },
            ensure_ascii=False,
        )

    @classmethod
    def deserialize(cls, raw: str) -> list[Quiz]:
        """Reconstrói a sequência a partir do blob.

        Raises:
            ValueError: JSON inválido, versão desconhecida ou registro inválido
        """
        data = json.loads(raw)

        if isinstance(data, list):
            records = data
        elif isinstance(data, dict):
            version = data.get("version")
            if version != cls.SCHEMA_VERSION:
                raise ValueError(f"Versão de armazenamento não suportada: {version!r}")
            records = data.get("quizzes")
            if not isinstance(records, list):
                raise ValueError("Campo 'quizzes' ausente ou inválido")
        else:
            raise ValueError(f"Blob inesperado: {type(data).__name__}")

        return [Quiz.model_validate(record) for record in records]

    # -------------------------------------------------------------------------
    # Carga
    # -------------------------------------------------------------------------

    async def load(self) -> list[Quiz]:
        """Carrega o conjunto do armazenamento.

        Dados ausentes resultam em lista vazia. Dados corrompidos também, com
        um aviso não fatal em ``warning``: esta chamada nunca levanta erro.

        Returns:
            Lista de quizzes (mais recente primeiro)
        """
        self.warning = None

        try:
            raw = await self.kv.get(self.key)
        except (OSError, ValueError) as e:
            return self._degrade(f"Could not read saved quizzes: {e}")

        if raw is None:
            logger.debug(f"Nenhum quiz salvo em '{self.key}'")
            self._quizzes = []
            return []

        try:
            self._quizzes = self.deserialize(raw)
        except (ValueError, PydanticValidationError) as e:
            return self._degrade(f"Saved quizzes are corrupt and were ignored: {e}")

        logger.info(f"{len(self._quizzes)} quizzes carregados de '{self.key}'")
        return self.list_quizzes()

    def _degrade(self, message: str) -> list[Quiz]:
        logger.warning(message)
        self.warning = message
        self._quizzes = []
        return []

    # -------------------------------------------------------------------------
    # Leitura
    # -------------------------------------------------------------------------

    def list_quizzes(self) -> list[Quiz]:
        """Lista quizzes, mais recente primeiro."""
        return list(self._quizzes)

    def get(self, quiz_id: str) -> Quiz | None:
        """Busca quiz por ID."""
        for quiz in self._quizzes:
            if quiz.id == quiz_id:
                return quiz
        return None

    def __len__(self) -> int:
        return len(self._quizzes)

    # -------------------------------------------------------------------------
    # Mutação em memória
    # -------------------------------------------------------------------------

    def insert(self, quiz: Quiz) -> None:
        """Adiciona no início da lista (sem persistir)."""
        if self.get(quiz.id) is not None:
            raise DuplicateQuizError(f"Quiz {quiz.id} already exists.")
        self._quizzes.insert(0, quiz)

    def discard(self, quiz_id: str) -> bool:
        """Remove da lista (sem persistir). Retorna se havia o quiz."""
        remaining = [q for q in self._quizzes if q.id != quiz_id]
        removed = len(remaining) != len(self._quizzes)
        self._quizzes = remaining
        return removed

    # -------------------------------------------------------------------------
    # Persistência
    # -------------------------------------------------------------------------

    async def save(self) -> None:
        """Grava a sequência completa sob a chave fixa.

        Raises:
            PersistenceError: falha do backend
        """
        try:
            await self.kv.set(self.key, self.serialize())
        except (OSError, RuntimeError) as e:
            raise PersistenceError(f"Could not save quizzes: {e}") from e
        logger.debug(f"{len(self._quizzes)} quizzes salvos em '{self.key}'")

    async def _persist(self) -> bool:
        try:
            await self.save()
        except PersistenceError as e:
            logger.error(f"Falha ao persistir quizzes (mantidos em memória): {e.message}")
            self.last_persist_error = e.message
            return False
        self.last_persist_error = None
        return True

    async def add(self, quiz: Quiz) -> bool:
        """Adiciona quiz e persiste o conjunto.

        Returns:
            True se a gravação funcionou
        """
        self.insert(quiz)
        logger.info(f"Quiz adicionado: {quiz.id}")
        return await self._persist()

    async def remove(self, quiz_id: str) -> bool:
        """Remove quiz por ID e persiste o restante.

        Returns:
            True se o quiz existia
        """
        if not self.discard(quiz_id):
            logger.debug(f"Quiz não encontrado para remoção: {quiz_id}")
            return False
        logger.info(f"Quiz removido: {quiz_id}")
        await self._persist()
        return True
