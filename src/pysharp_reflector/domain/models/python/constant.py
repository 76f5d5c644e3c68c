#!/usr/bin/env python3

"""Python default-value constant model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ConstantType(Enum):
    """Literal forms a Python default value can take."""

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"
    NONE = "none"
    HEX_INTEGER = "hex_integer"  # 0xFF
    BIN_INTEGER = "bin_integer"  # 0b101


@dataclass(frozen=True)
class PythonConstant:
    """A literal constant used as a parameter default.

    The literal's source form is kept in ``type`` so that hexadecimal and
    binary integers can be rendered in the same base they were written in.
    A STRING constant may carry ``value=None`` when the parser produced no
    payload.
    """

    type: ConstantType
    value: int | float | str | bool | None = None

    @classmethod
    def integer(cls, value: int) -> PythonConstant:
        return cls(ConstantType.INTEGER, value)

    @classmethod
    def float_(cls, value: float) -> PythonConstant:
        return cls(ConstantType.FLOAT, value)

    @classmethod
    def string(cls, value: str | None) -> PythonConstant:
        return cls(ConstantType.STRING, value)

    @classmethod
    def bool_(cls, value: bool) -> PythonConstant:
        return cls(ConstantType.BOOL, value)

    @classmethod
    def none(cls) -> PythonConstant:
        return cls(ConstantType.NONE)

    @classmethod
    def hex_integer(cls, value: int) -> PythonConstant:
        return cls(ConstantType.HEX_INTEGER, value)

    @classmethod
    def bin_integer(cls, value: int) -> PythonConstant:
        return cls(ConstantType.BIN_INTEGER, value)

    def __str__(self) -> str:
        if self.type is ConstantType.NONE:
            return "None"
        if self.type is ConstantType.HEX_INTEGER:
            return hex(int(self.value or 0))
        if self.type is ConstantType.BIN_INTEGER:
            return bin(int(self.value or 0))
        return repr(self.value)
