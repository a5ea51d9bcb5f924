"""Quiz State - Estado transitorio de uma tentativa."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class AttemptState:
    """Estado de uma tentativa sobre um quiz.

    Nao e persistido entre sessoes.

    Attributes:
        current_index: Posicao atual (0 <= current_index < total de questoes)
        answers: question_id -> resposta do aluno (ausente = pulada)
        submitted: True apos avancar na ultima questao; nunca volta a False
            dentro da mesma tentativa
    """

    current_index: int = 0
    answers: dict[str, str] = field(default_factory=dict)
    submitted: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Converte para dicionario."""
        return {
            "current_index": self.current_index,
            "answers": dict(self.answers),
            "submitted": self.submitted,
        }
