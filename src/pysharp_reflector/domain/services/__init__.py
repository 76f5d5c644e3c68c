#!/usr/bin/env python3

"""Domain services layer."""

from . import loading, reflection

__all__ = [
    "loading",
    "reflection",
]
