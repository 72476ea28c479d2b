"""Persistent and pluggable storage for command history."""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Iterable

__all__ = ["HistoryStorage", "FileHistoryStorage"]


class HistoryStorage(abc.ABC):
    """Where sessions save their commands and load them back."""

    @abc.abstractmethod
    def store(self, commands: Iterable[str]) -> None:
        """Append ``commands``, oldest first."""

    @abc.abstractmethod
    def commands(self) -> list[str]:
        """Return the stored commands, oldest first."""

    @abc.abstractmethod
    def clear(self) -> None:
        """Forget every stored command."""


class FileHistoryStorage(HistoryStorage):
    """History kept in a text file, one command per line, bounded in length."""

    def __init__(self, file_name: str | Path, size: int = 1000) -> None:
        self._max_size = size
        self._path = Path(file_name)

    def store(self, commands: Iterable[str]) -> None:
        lines = self.commands()
        lines.extend(commands)
        if len(lines) > self._max_size:
            lines = lines[len(lines) - self._max_size:]
        with self._path.open("w", encoding="utf-8", newline="") as f:
            f.writelines(line + "\n" for line in lines)

    def commands(self) -> list[str]:
        try:
            with self._path.open(encoding="utf-8", newline="") as f:
                text = f.read()
        except OSError:
            return []
        if not text:
            return []
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines

    def clear(self) -> None:
        self._path.write_text("", encoding="utf-8")