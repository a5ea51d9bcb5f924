"""Quiz Config - Configuracao centralizada via variaveis de ambiente."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:8001",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:8001",
]


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Valor invalido para {name}={raw!r}, usando {default}")
        return default
    if value <= 0:
        logger.warning(f"{name} deve ser positivo, usando {default}")
        return default
    return value


@dataclass
class QuizConfig:
    """Configuracao do servico de quiz.

    Variaveis de ambiente (lidas tambem de ``.env``):
        QUIZ_DATA_DIR: diretorio do armazenamento local (./.quizdata)
        QUIZ_STORAGE_KEY: chave do blob de quizzes (uniquest_quizzes)
        QUIZ_MODEL: modelo Claude (haiku, sonnet, opus)
        QUIZ_GENERATION_TIMEOUT: espera maxima da geracao em segundos (60)
        LOG_LEVEL: nivel de log (INFO)
        CORS_ORIGINS: origens separadas por virgula
    """

    data_dir: Path = field(default_factory=lambda: Path.cwd() / ".quizdata")
    storage_key: str = "uniquest_quizzes"
    model: str = "haiku"
    generation_timeout: float = 60.0
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> QuizConfig:
        """Cria configuracao a partir do ambiente."""
        if load_env_file:
            load_dotenv()

        defaults = cls()
        data_dir = os.getenv("QUIZ_DATA_DIR")
        origins = os.getenv("CORS_ORIGINS")

        return cls(
            data_dir=Path(data_dir) if data_dir else defaults.data_dir,
            storage_key=os.getenv("QUIZ_STORAGE_KEY") or defaults.storage_key,
            model=(os.getenv("QUIZ_MODEL") or defaults.model).lower(),
            generation_timeout=_env_float("QUIZ_GENERATION_TIMEOUT", defaults.generation_timeout),
            log_level=(os.getenv("LOG_LEVEL") or defaults.log_level).upper(),
            cors_origins=(
                [o.strip() for o in origins.split(",") if o.strip()]
                if origins
                else defaults.cors_origins
            ),
        )
