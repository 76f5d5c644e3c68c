#!/usr/bin/env python3

"""Domain layer containing business logic and models."""

from . import models, services

__all__ = [
    "models",
    "services",
]
