#!/usr/bin/env python3

"""C# literal expression models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_BASE_PREFIXES = {2: "0b", 10: "", 16: "0x"}


class LiteralKind(Enum):
    """Syntactic category of a C# literal."""

    NUMERIC = "numeric"
    STRING = "string"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"


@dataclass(frozen=True)
class IntegerDisplay:
    """An integer value together with the base it should be displayed in.

    The digits are captured once, when the literal is created, so the text
    shown for ``0xFF`` is always the text that was computed from the source
    value rather than re-derived at render time.
    """

    numeric_value: int
    display_base: int
    display_digits: str

    @classmethod
    def from_value(cls, value: int, base: int) -> IntegerDisplay:
        if base not in _BASE_PREFIXES:
            raise ValueError(f"Unsupported display base: {base}")
        magnitude = abs(value)
        if base == 16:
            digits = f"{magnitude:X}"
        elif base == 2:
            digits = f"{magnitude:b}"
        else:
            digits = str(magnitude)
        return cls(value, base, digits)

    @property
    def text(self) -> str:
        sign = "-" if self.numeric_value < 0 else ""
        return f"{sign}{_BASE_PREFIXES[self.display_base]}{self.display_digits}"


@dataclass(frozen=True)
class LiteralExpression:
    """A rendered C# literal: its source text and the value it evaluates to."""

    kind: LiteralKind
    text: str
    value: int | float | str | bool | None = None

    @classmethod
    def null(cls) -> LiteralExpression:
        return cls(LiteralKind.NULL, "null")

    @classmethod
    def boolean(cls, value: bool) -> LiteralExpression:
        if value:
            return cls(LiteralKind.TRUE, "true", True)
        return cls(LiteralKind.FALSE, "false", False)

    @classmethod
    def numeric(cls, text: str, value: int | float) -> LiteralExpression:
        return cls(LiteralKind.NUMERIC, text, value)

    @classmethod
    def integer(cls, display: IntegerDisplay, suffix: str = "") -> LiteralExpression:
        return cls(LiteralKind.NUMERIC, f"{display.text}{suffix}", display.numeric_value)

    @classmethod
    def string(cls, value: str) -> LiteralExpression:
        return cls(LiteralKind.STRING, quote_string(value), value)

    def __str__(self) -> str:
        return self.text


_SIMPLE_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\0": "\\0",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def quote_string(value: str) -> str:
    """Quote a string as a regular C# string literal."""
    parts = []
    for char in value:
        escaped = _SIMPLE_ESCAPES.get(char)
        if escaped is not None:
            parts.append(escaped)
        elif ord(char) < 0x20 or 0x7F <= ord(char) < 0xA0 or char in "\u2028\u2029":
            parts.append(f"\\u{ord(char):04x}")
        elif 0xD800 <= ord(char) <= 0xDFFF:
            # unpaired surrogates cannot be written as UTF-8
            parts.append(f"\\u{ord(char):04x}")
        elif ord(char) > 0xFFFF:
            # C# strings are UTF-16; astral characters use the 8-digit escape
            parts.append(f"\\U{ord(char):08x}")
        else:
            parts.append(char)
    return '"' + "".join(parts) + '"'
