#!/usr/bin/env python3

"""Domain models for the signature reflector."""

from . import csharp, python

__all__ = [
    "csharp",
    "python",
]
