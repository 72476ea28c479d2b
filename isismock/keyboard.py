"""Decoding of raw terminal key sequences."""

from __future__ import annotations

import enum
from typing import Iterator, Union

__all__ = ["KeyType", "decode_keys"]


class KeyType(enum.Enum):
    """Kinds of key press a terminal can report."""

    ASCII = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    BACKSPACE = enum.auto()
    CANC = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    RET = enum.auto()
    EOF = enum.auto()
    IGNORED = enum.auto()


_EOT = 4
_ESC = 27
_CSI = 91

_ARROWS = {
    65: KeyType.UP,
    66: KeyType.DOWN,
    68: KeyType.LEFT,
    67: KeyType.RIGHT,
    70: KeyType.END,
    72: KeyType.HOME,
}


def decode_keys(data: Union[bytes, bytearray, str]) -> Iterator[tuple[KeyType, str]]:
    """Yield ``(KeyType, char)`` pairs for the keys encoded in ``data``.

    Bytes missing at the end of an escape sequence read as zero, as a
    read at end of input does.
    """
    codes = iter(data.encode("latin-1") if isinstance(data, str) else bytes(data))

    def next_code() -> int:
        return next(codes, 0)

    for ch in codes:
        if ch in (_EOT,):
            yield KeyType.EOF, " "
        elif ch in (127, 8):
            yield KeyType.BACKSPACE, " "
        elif ch == 10:
            yield KeyType.RET, " "
        elif ch == _ESC:
            if next_code() != _CSI:
                yield KeyType.IGNORED, " "
                continue
            code = next_code()
            if code == 51:
                yield (KeyType.CANC if next_code() == 126 else KeyType.IGNORED), " "
            else:
                yield _ARROWS.get(code, KeyType.IGNORED), " "
        else:
            yield KeyType.ASCII, chr(ch)