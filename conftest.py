# =============================================================================
# CONFTEST - Pytest Fixtures Globais
# =============================================================================
# Configuracao de ambiente para testes sem dependencias externas
# =============================================================================

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Adicionar root ao path
sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def setup_test_env(tmp_path: Path):
    """Configura variáveis de ambiente para testes."""
    env_vars = {
        "ANTHROPIC_API_KEY": "test-key-123",
        "QUIZ_DATA_DIR": str(tmp_path / "quizdata"),
        "LOG_LEVEL": "ERROR",  # Reduzir logs em testes
    }
    with patch.dict(os.environ, env_vars):
        yield
