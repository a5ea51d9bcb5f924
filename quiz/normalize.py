"""Normalizacao de respostas compartilhada por validacao, pontuacao e revisao."""


def normalize_answer(value: str | None) -> str:
    """Remove espacos nas bordas e aplica casefold.

    Unica regra de comparacao do sistema: sem credito parcial, sem
    correspondencia aproximada e sem sinonimos para ShortAnswer.

    Example:
        >>> normalize_answer("  Paris ")
        'paris'
    """
    if value is None:
        return ""
    return value.strip().casefold()


def answers_match(given: str | None, expected: str) -> bool:
    """True se ``given`` equivale a ``expected`` apos normalizacao."""
    if given is None:
        return False
    return normalize_answer(given) == normalize_answer(expected)
