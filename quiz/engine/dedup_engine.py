"""Question Deduplication Engine - Deteccao de questoes repetidas."""

import logging
import re

from ..normalize import normalize_answer

logger = logging.getLogger(__name__)

_PUNCTUATION = re.compile(r"[^\w\s]")
_SPACES = re.compile(r"\s+")


class QuestionDeduplicationEngine:
    """Detecta questões com enunciado equivalente em um quiz gerado.

    O engine apenas aponta duplicatas: a quantidade devolvida pelo serviço
    é tratada como definitiva e nenhuma questão é removida.

    Example:
        >>> engine = QuestionDeduplicationEngine()
        >>> engine.find_duplicates(["What is X?", "what is x"])
        [(0, 1)]
    """

    def fingerprint(self, question_text: str) -> str:
        """Forma canônica do enunciado (sem pontuação, caixa ou espaços extras)."""
        text = _PUNCTUATION.sub(" ", normalize_answer(question_text))
        return _SPACES.sub(" ", text).strip()

    def find_duplicates(self, question_texts: list[str]) -> list[tuple[int, int]]:
        """Retorna pares (primeira ocorrência, repetição) por índice.

        Args:
            question_texts: Enunciados na ordem recebida

        Returns:
            Lista de pares de índices com o mesmo fingerprint
        """
        first_seen: dict[str, int] = {}
        duplicates = []

        for index, text in enumerate(question_texts):
            key = self.fingerprint(text)
            if key in first_seen:
                duplicates.append((first_seen[key], index))
                logger.debug(f"Questão duplicada detectada: '{text[:60]}'")
            else:
                first_seen[key] = index

        return duplicates
