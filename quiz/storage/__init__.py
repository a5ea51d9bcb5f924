"""Quiz Storage - Persistencia local dos quizzes."""

from .local_kv import LocalFileKV
from .quiz_store import KVBackend, QuizStore

__all__ = ["KVBackend", "LocalFileKV", "QuizStore"]
