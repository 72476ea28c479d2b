"""Command history with browsing support."""

from __future__ import annotations

import enum
from collections import deque
from typing import Iterable, TextIO

__all__ = ["History"]


class _Mode(enum.Enum):
    INSERTING = enum.auto()
    BROWSING = enum.auto()


class History:
    """Bounded command history; the newest entry is kept at the front."""

    def __init__(self, size: int) -> None:
        self._max_size = size
        self._buffer: deque[str] = deque()
        self._current = 0
        self._commands = 0
        self._mode = _Mode.INSERTING

    def _insert(self, item: str) -> None:
        self._buffer.appendleft(item)
        if len(self._buffer) > self._max_size:
            self._buffer.pop()

    def new_command(self, item: str) -> None:
        """Record an issued command, replacing the line being edited if browsing."""
        self._commands += 1
        self._current = 0
        if self._mode is _Mode.BROWSING:
            if len(self._buffer) > 1 and self._buffer[1] == item:
                self._buffer.popleft()
            else:
                self._buffer[self._current] = item
        elif not self._buffer or self._buffer[0] != item:
            self._insert(item)
        self._mode = _Mode.INSERTING

    def previous(self, line: str) -> str:
        """Step back in the history, keeping ``line`` as the edited entry."""
        if self._mode is _Mode.INSERTING:
            self._insert(line)
            self._mode = _Mode.BROWSING
            self._current = 1 if len(self._buffer) > 1 else 0
        else:
            self._buffer[self._current] = line
            if self._current != len(self._buffer) - 1:
                self._current += 1
        return self._buffer[self._current]

    def next(self) -> str:
        """Step forward in the history; empty when already at the newest entry."""
        if not self._buffer or self._current == 0:
            return ""
        self._current -= 1
        return self._buffer[self._current]

    def show(self, out: TextIO) -> None:
        """Write the whole history, newest first, to ``out``."""
        out.write("\n")
        for item in self._buffer:
            out.write(item + "\n")
        out.write("\n")
        out.flush()

    def load_commands(self, commands: Iterable[str]) -> None:
        """Load stored commands, oldest first."""
        for command in commands:
            self._insert(command)

    def get_commands(self) -> list[str]:
        """Return the commands issued in this history, oldest first."""
        items = list(self._buffer)
        if self._mode is _Mode.BROWSING:
            items = items[1:]
        count = min(self._commands, len(items))
        return list(reversed(items[:count]))