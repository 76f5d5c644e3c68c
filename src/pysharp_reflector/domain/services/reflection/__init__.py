#!/usr/bin/env python3

"""Reflection services turning Python signatures into C# syntax."""

from .argument_reflection import ArgumentReflection, translate
from .identifier_normalizer import CSHARP_KEYWORDS, IdentifierNormalizer
from .literal_renderer import DefaultLiteralRenderer
from .type_reflection import TypeReflection

__all__ = [
    "ArgumentReflection",
    "CSHARP_KEYWORDS",
    "DefaultLiteralRenderer",
    "IdentifierNormalizer",
    "TypeReflection",
    "translate",
]
