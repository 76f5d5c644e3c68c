#!/usr/bin/env python3

"""Python function parameter model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .constant import PythonConstant
from .type_spec import PythonTypeSpec


class ParameterKind(Enum):
    """Syntactic kind of a parameter in a Python signature."""

    NORMAL = "normal"
    VARIADIC_POSITIONAL = "variadic_positional"  # *args
    VARIADIC_KEYWORD = "variadic_keyword"  # **kwargs
    POSITIONAL_ONLY_MARKER = "positional_only_marker"  # the bare /


@dataclass(frozen=True)
class PythonFunctionParameter:
    """One entry of a parsed Python parameter list."""

    name: str
    kind: ParameterKind = ParameterKind.NORMAL
    type: PythonTypeSpec = PythonTypeSpec.ANY
    default_value: PythonConstant | None = None
    is_keyword_only: bool = False

    @classmethod
    def positional_only_marker(cls) -> PythonFunctionParameter:
        return cls("/", ParameterKind.POSITIONAL_ONLY_MARKER)

    @classmethod
    def star_args(cls, name: str = "args") -> PythonFunctionParameter:
        return cls(name, ParameterKind.VARIADIC_POSITIONAL)

    @classmethod
    def double_star_kwargs(cls, name: str = "kwargs") -> PythonFunctionParameter:
        return cls(name, ParameterKind.VARIADIC_KEYWORD)

    def __str__(self) -> str:
        if self.kind is ParameterKind.POSITIONAL_ONLY_MARKER:
            return "/"
        prefix = {
            ParameterKind.VARIADIC_POSITIONAL: "*",
            ParameterKind.VARIADIC_KEYWORD: "**",
        }.get(self.kind, "")
        text = f"{prefix}{self.name}"
        if self.kind is ParameterKind.NORMAL and not self.type.is_any:
            text += f": {self.type}"
        if self.default_value is not None:
            text += f" = {self.default_value}"
        return text
