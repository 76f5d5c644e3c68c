#!/usr/bin/env python3

"""C# parameter declaration models."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .literal_syntax import LiteralExpression
from .type_syntax import TypeSyntax

if TYPE_CHECKING:
    from ..python import PythonConstant


@dataclass(frozen=True)
class ParameterSyntax:
    """A single C# parameter declaration, e.g. ``long y = 10``."""

    identifier: str
    type: TypeSyntax
    default: LiteralExpression | None = None
    is_nullable: bool = False
    effective_default: PythonConstant | None = None
    """Default after the forcing rules for *args, **kwargs and keyword-only parameters"""

    @property
    def is_optional(self) -> bool:
        return self.default is not None

    def render(self) -> str:
        text = f"{self.type.render()} {self.identifier}"
        if self.default is not None:
            text += f" = {self.default.text}"
        return text

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class ParameterListSyntax:
    """An ordered C# parameter list."""

    parameters: tuple[ParameterSyntax, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[ParameterSyntax]:
        return iter(self.parameters)

    def __len__(self) -> int:
        return len(self.parameters)

    def __getitem__(self, index: int) -> ParameterSyntax:
        return self.parameters[index]

    def render(self) -> str:
        return f"({', '.join(parameter.render() for parameter in self.parameters)})"

    def __str__(self) -> str:
        return self.render()
