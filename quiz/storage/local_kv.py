"""Local KV - Armazenamento chave/valor duravel em disco."""

from __future__ import annotations

import asyncio
import os
import re
import tempfile
from pathlib import Path

_VALID_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class LocalFileKV:
    """KV assincrono com um arquivo por chave.

    Mesma interface usada pelo ``QuizStore`` (``get``/``set``/``delete``).
    Cada escrita e atomica: o valor vai para um arquivo temporario no
    mesmo diretorio e substitui o anterior com ``os.replace``.

    Example:
        >>> kv = LocalFileKV(Path(".quizdata"))
        >>> await kv.set("uniquest_quizzes", "[]")
        >>> await kv.get("uniquest_quizzes")
        '[]'
    """

    SUFFIX = ".json"

    def __init__(self, directory: Path | str):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        if not _VALID_KEY.match(key):
            raise ValueError(f"Chave invalida: {key!r}")
        return self.directory / f"{key}{self.SUFFIX}"

    def _read(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def _write(self, key: str, value: str) -> None:
        path = self._path(key)
        self.directory.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)

    async def get(self, key: str) -> str | None:
        return await asyncio.to_thread(self._read, key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._write, key, value)

    async def delete(self, key: str) -> None:
        await asyncio.to_thread(self._delete, key)
