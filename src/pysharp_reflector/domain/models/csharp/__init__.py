#!/usr/bin/env python3

"""C# syntax models produced by reflection."""

from .literal_syntax import IntegerDisplay, LiteralExpression, LiteralKind, quote_string
from .parameter_syntax import ParameterListSyntax, ParameterSyntax
from .type_syntax import TypeSyntax

__all__ = [
    "IntegerDisplay",
    "LiteralExpression",
    "LiteralKind",
    "ParameterListSyntax",
    "ParameterSyntax",
    "TypeSyntax",
    "quote_string",
]
