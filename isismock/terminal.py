"""Line editing on a character terminal."""

from __future__ import annotations

import enum
from typing import TextIO

from isismock.keyboard import KeyType

__all__ = ["Symbol", "Terminal"]


class Symbol(enum.Enum):
    """What a key press means to the session."""

    NOTHING = enum.auto()
    COMMAND = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    TAB = enum.auto()
    EOF = enum.auto()


class Terminal:
    """Keeps the line being edited and echoes edits to ``out``."""

    def __init__(self, out: TextIO, before_input: str = "", after_input: str = "") -> None:
        self._out = out
        self._before = before_input
        self._after = after_input
        self._line = ""
        self._position = 0

    def reset_cursor(self) -> None:
        """Forget the cursor position, as after a fresh prompt."""
        self._position = 0

    def set_line(self, line: str) -> None:
        """Replace the edited line, redrawing it on the terminal."""
        out = self._out
        out.write(self._before + "\b" * self._position + line + self._after)
        out.flush()
        extra = len(self._line) - len(line)
        if extra > 0:
            out.write(" " * extra)
            out.write("\b" * extra)
            out.flush()
        self._line = line
        self._position = len(line)

    def get_line(self) -> str:
        """Return the line being edited."""
        return self._line

    def keypressed(self, key: KeyType, char: str = " ") -> tuple[Symbol, str]:
        """Apply a key press; return the resulting symbol and any command line."""
        out = self._out
        line = self._line
        pos = self._position

        if key is KeyType.EOF:
            return Symbol.EOF, ""
        if key is KeyType.UP:
            return Symbol.UP, ""
        if key is KeyType.DOWN:
            return Symbol.DOWN, ""
        if key is KeyType.RET:
            out.write("\r\n")
            self._line = ""
            self._position = 0
            return Symbol.COMMAND, line

        if key is KeyType.BACKSPACE:
            if pos > 0:
                pos -= 1
                line = line[:pos] + line[pos + 1:]
                out.write("\b" + line[pos:] + " " + "\b" * (len(line) - pos + 1))
                out.flush()
        elif key is KeyType.LEFT:
            if pos > 0:
                out.write("\b")
                out.flush()
                pos -= 1
        elif key is KeyType.RIGHT:
            if pos < len(line):
                out.write(self._before + line[pos] + self._after)
                out.flush()
                pos += 1
        elif key is KeyType.ASCII:
            if char == "\t":
                return Symbol.TAB, ""
            out.write(self._before + char + line[pos:] + self._after)
            out.write("\b" * (len(line) - pos))
            out.flush()
            line = line[:pos] + char + line[pos:]
            pos += 1
        elif key is KeyType.CANC:
            if pos != len(line):
                out.write(line[pos + 1:] + " " + "\b" * (len(line) - pos))
                out.flush()
                line = line[:pos] + line[pos + 1:]
        elif key is KeyType.END:
            out.write(self._before + line[pos:] + self._after)
            out.flush()
            pos = len(line)
        elif key is KeyType.HOME:
            out.write("\b" * pos)
            out.flush()
            pos = 0

        self._line = line
        self._position = pos
        return Symbol.NOTHING, ""