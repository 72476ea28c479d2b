"""Conversion of command-line words into typed values."""

from __future__ import annotations

import enum
import math
import re
import struct

__all__ = ["ConversionError", "ArgType", "from_string"]


class ConversionError(ValueError):
    """Raised when a word cannot be interpreted as the requested type."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "bad from_string conversion: "
            "source string value could not be interpreted as target"
        )


class ArgType(enum.Enum):
    """Parameter types a command handler can ask for."""

    CHAR = "<char>"
    UNSIGNED_CHAR = "<unsigned char>"
    SIGNED_CHAR = "<signed char>"
    SHORT = "<short>"
    UNSIGNED_SHORT = "<unsigned short>"
    INT = "<int>"
    UNSIGNED_INT = "<unsigned int>"
    LONG = "<long>"
    UNSIGNED_LONG = "<unsigned long>"
    LONG_LONG = "<long long>"
    UNSIGNED_LONG_LONG = "<unsigned long long>"
    FLOAT = "<float>"
    DOUBLE = "<double>"
    LONG_DOUBLE = "<long double>"
    BOOL = "<bool>"
    STRING = "<string>"
    STRING_LIST = "<list of strings>"

    def description(self) -> str:
        """Return the text shown in help for a parameter of this type."""
        return self.value


_SIGNED_BITS = {
    ArgType.SIGNED_CHAR: 8,
    ArgType.SHORT: 16,
    ArgType.INT: 32,
    ArgType.LONG: 64,
    ArgType.LONG_LONG: 64,
}

_UNSIGNED_BITS = {
    ArgType.UNSIGNED_CHAR: 8,
    ArgType.UNSIGNED_SHORT: 16,
    ArgType.UNSIGNED_INT: 32,
    ArgType.UNSIGNED_LONG: 64,
    ArgType.UNSIGNED_LONG_LONG: 64,
}

_DECIMAL_FLOAT = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan(?:\([0-9A-Za-z_]*\))?)",
    re.IGNORECASE,
)
_HEX_FLOAT = re.compile(
    r"[+-]?0[xX](?:[0-9A-Fa-f]+\.?[0-9A-Fa-f]*|\.[0-9A-Fa-f]+)(?:[pP][+-]?\d+)?"
)
_DIGITS = frozenset("0123456789")


def _unsigned_digits(text: str, bits: int) -> int:
    if not text or any(c not in _DIGITS for c in text):
        raise ConversionError()
    value = int(text)
    if value >= 1 << bits:
        raise ConversionError()
    return value


def _unsigned(text: str, bits: int) -> int:
    if not text:
        raise ConversionError()
    if text[0] == "+":
        text = text[1:]
    return _unsigned_digits(text, bits)


def _signed(text: str, bits: int) -> int:
    if not text:
        raise ConversionError()
    if text[0] == "-":
        value = _unsigned_digits(text[1:], bits)
        if value > 1 << (bits - 1):
            raise ConversionError()
        return -value
    if text[0] == "+":
        text = text[1:]
    value = _unsigned_digits(text, bits)
    if value > (1 << (bits - 1)) - 1:
        raise ConversionError()
    return value


def _floating(text: str, single: bool) -> float:
    if any(c.isspace() for c in text):
        raise ConversionError()
    if _HEX_FLOAT.fullmatch(text):
        sign = -1.0 if text.startswith("-") else 1.0
        body = text.lstrip("+-")
        try:
            value = sign * float.fromhex(body)
        except (OverflowError, ValueError) as exc:
            raise ConversionError() from exc
    elif _DECIMAL_FLOAT.fullmatch(text):
        lowered = text.lower()
        if "nan" in lowered:
            value = math.nan
        else:
            value = float(text) if "inf" in lowered else float(text)
            if math.isinf(value) and "inf" not in lowered:
                raise ConversionError()
    else:
        raise ConversionError()
    if single and not math.isnan(value):
        try:
            value = struct.unpack("f", struct.pack("f", value))[0]
        except OverflowError as exc:
            raise ConversionError() from exc
    return value


def _boolean(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    value = _signed(text, 64)
    if value == 1:
        return True
    if value == 0:
        return False
    raise ConversionError()


def from_string(text: str, kind: ArgType):
    """Convert ``text`` into a value of the given argument type."""
    if kind is ArgType.STRING:
        return text
    if kind in _SIGNED_BITS:
        return _signed(text, _SIGNED_BITS[kind])
    if kind in _UNSIGNED_BITS:
        return _unsigned(text, _UNSIGNED_BITS[kind])
    if kind is ArgType.BOOL:
        return _boolean(text)
    if kind is ArgType.CHAR:
        if len(text) != 1:
            raise ConversionError()
        return text
    if kind is ArgType.FLOAT:
        return _floating(text, single=True)
    if kind in (ArgType.DOUBLE, ArgType.LONG_DOUBLE):
        return _floating(text, single=False)
    raise TypeError(f"no conversion from a single word to {kind.description()}")