#!/usr/bin/env python3

"""Python function signature model."""

from dataclasses import dataclass, field

from .parameter import PythonFunctionParameter
from .type_spec import PythonTypeSpec


@dataclass(frozen=True)
class PythonFunction:
    """A parsed Python function: its name and ordered parameters."""

    name: str
    parameters: tuple[PythonFunctionParameter, ...] = field(default_factory=tuple)
    return_type: PythonTypeSpec = PythonTypeSpec.ANY
