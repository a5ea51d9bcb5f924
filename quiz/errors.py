"""Quiz Errors - Taxonomia de erros do sistema de quiz.

Nenhum erro e fatal ao processo: cada um fica restrito a operacao que o
levantou. O atributo ``retryable`` indica se repetir a mesma chamada pode
funcionar sem mudar a entrada.
"""


class QuizError(Exception):
    """Erro base do pacote quiz."""

    retryable: bool = False

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(QuizError):
    """Entrada invalida do operador (texto vazio, nenhum tipo selecionado...)."""


class TransportError(QuizError):
    """Servico de geracao indisponivel, falha de rede ou timeout."""

    retryable = True


class SchemaError(QuizError):
    """Resposta do servico nao bate com o formato esperado."""


class InsufficientMaterialError(QuizError):
    """O servico sinalizou que o material da aula e insuficiente."""

    DEFAULT_MESSAGE = (
        "The lecture material provided is insufficient to generate quality "
        "questions for the requested parameters."
    )

    def __init__(self, message: str = DEFAULT_MESSAGE):
        super().__init__(message)


class PersistenceError(QuizError):
    """Falha ao gravar o conjunto de quizzes no armazenamento duravel."""

    retryable = True


class GenerationInProgressError(QuizError):
    """Ja existe uma geracao pendente nesta sessao de autoria."""

    retryable = True


class QuizNotFoundError(QuizError):
    """Quiz inexistente no store."""


class AttemptStateError(QuizError):
    """Operacao invalida para o estado atual da tentativa."""


class NoActiveAttemptError(QuizError):
    """Nenhuma tentativa ativa no shell."""


class DuplicateQuizError(QuizError):
    """Ja existe um quiz com o mesmo id no store."""


class RoleError(QuizError):
    """Operacao nao permitida para o papel ativo."""
