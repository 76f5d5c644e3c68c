#!/usr/bin/env python3

"""Python signature models consumed by reflection."""

from .constant import ConstantType, PythonConstant
from .function import PythonFunction
from .parameter import ParameterKind, PythonFunctionParameter
from .type_spec import PythonTypeSpec

__all__ = [
    "ConstantType",
    "ParameterKind",
    "PythonConstant",
    "PythonFunction",
    "PythonFunctionParameter",
    "PythonTypeSpec",
]
