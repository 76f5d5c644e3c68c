"""pysharp reflector - Python signature to C# parameter list reflection."""

from .domain.services.reflection import ArgumentReflection, translate
from .infrastructure.config import Config
from .main import main

__all__ = ["ArgumentReflection", "Config", "main", "translate"]
