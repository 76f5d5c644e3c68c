#!/usr/bin/env python3

"""Loading of Python function signatures from JSON descriptions.

The loader only converts an already-parsed description into the domain
model; it does not read Python source. Expected layout::

    {"functions": [
        {"name": "f", "return_type": "int", "parameters": [
            {"name": "x", "type": "int"},
            {"name": "y", "type": {"name": "dict", "arguments": ["str", "Any"]},
             "default": {"type": "integer", "value": 10}},
            {"name": "/", "kind": "positional_only_marker"},
            {"name": "args", "kind": "variadic_positional"},
            {"name": "opt", "keyword_only": true}
        ]}
    ]}

A bare list of functions is accepted as well.
"""

import json
from pathlib import Path
from typing import Any

from ....infrastructure.logging import get_logger, log_timing
from ...models.python import (
    ConstantType,
    ParameterKind,
    PythonConstant,
    PythonFunction,
    PythonFunctionParameter,
    PythonTypeSpec,
)

logger = get_logger(__name__)

_VALUE_TYPES: dict[ConstantType, tuple[type, ...]] = {
    ConstantType.INTEGER: (int,),
    ConstantType.FLOAT: (int, float),
    ConstantType.STRING: (str, type(None)),
    ConstantType.BOOL: (bool,),
    ConstantType.NONE: (type(None),),
    ConstantType.HEX_INTEGER: (int,),
    ConstantType.BIN_INTEGER: (int,),
}


class SignatureLoader:
    """Builds PythonFunction models from JSON documents."""

    @staticmethod
    @log_timing
    def load(path: Path) -> list[PythonFunction]:
        """Load all function signatures from a JSON file.

        Args:
            path: Path to the signature file

        Returns:
            Functions in file order

        Raises:
            ValueError: If the file is not valid JSON or is malformed
        """
        try:
            with open(path, encoding="utf-8") as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

        functions = SignatureLoader.parse(document)
        logger.info(f"Loaded {len(functions)} function signature(s) from {path}")
        return functions

    @staticmethod
    def parse(document: Any) -> list[PythonFunction]:
        if isinstance(document, dict):
            entries = document.get("functions")
            where = "functions"
        else:
            entries = document
            where = "<root>"
        if not isinstance(entries, list):
            raise ValueError(f"{where}: expected a list of functions")
        return [
            SignatureLoader._function(entry, f"{where}[{i}]") for i, entry in enumerate(entries)
        ]

    @staticmethod
    def _function(entry: Any, where: str) -> PythonFunction:
        if not isinstance(entry, dict):
            raise ValueError(f"{where}: expected an object")
        name = entry.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError(f"{where}.name: expected a non-empty string")

        raw_parameters = entry.get("parameters", [])
        if not isinstance(raw_parameters, list):
            raise ValueError(f"{where}.parameters: expected a list")

        parameters = tuple(
            SignatureLoader._parameter(raw, f"{where}.parameters[{i}]")
            for i, raw in enumerate(raw_parameters)
        )
        return_type = SignatureLoader._type_spec(entry.get("return_type"), f"{where}.return_type")
        return PythonFunction(name=name, parameters=parameters, return_type=return_type)

    @staticmethod
    def _parameter(raw: Any, where: str) -> PythonFunctionParameter:
        if not isinstance(raw, dict):
            raise ValueError(f"{where}: expected an object")
        name = raw.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError(f"{where}.name: expected a non-empty string")

        kind_name = raw.get("kind", ParameterKind.NORMAL.value)
        try:
            kind = ParameterKind(kind_name)
        except ValueError:
            raise ValueError(f"{where}.kind: unknown parameter kind {kind_name!r}") from None

        keyword_only = raw.get("keyword_only", False)
        if not isinstance(keyword_only, bool):
            raise ValueError(f"{where}.keyword_only: expected a boolean")

        default = raw.get("default")
        return PythonFunctionParameter(
            name=name,
            kind=kind,
            type=SignatureLoader._type_spec(raw.get("type"), f"{where}.type"),
            default_value=None if default is None else SignatureLoader._constant(default, f"{where}.default"),
            is_keyword_only=keyword_only,
        )

    @staticmethod
    def _type_spec(raw: Any, where: str) -> PythonTypeSpec:
        if raw is None:
            return PythonTypeSpec.ANY
        if isinstance(raw, str):
            return PythonTypeSpec(raw)
        if not isinstance(raw, dict) or not isinstance(raw.get("name"), str):
            raise ValueError(f"{where}: expected a type name or an object with a 'name'")
        arguments = raw.get("arguments", [])
        if not isinstance(arguments, list):
            raise ValueError(f"{where}.arguments: expected a list")
        return PythonTypeSpec(
            raw["name"],
            tuple(
                SignatureLoader._type_spec(arg, f"{where}.arguments[{i}]")
                for i, arg in enumerate(arguments)
            ),
        )

    @staticmethod
    def _constant(raw: Any, where: str) -> PythonConstant:
        if not isinstance(raw, dict):
            raise ValueError(f"{where}: expected an object with a 'type'")
        type_name = raw.get("type")
        try:
            constant_type = ConstantType(type_name)
        except ValueError:
            raise ValueError(f"{where}.type: unknown constant type {type_name!r}") from None

        value = raw.get("value")
        allowed = _VALUE_TYPES[constant_type]
        # bool is an int subclass; only BOOL constants may carry one
        if isinstance(value, bool) and constant_type is not ConstantType.BOOL:
            allowed = ()
        if not isinstance(value, allowed):
            raise ValueError(
                f"{where}.value: {type(value).__name__} is not valid for {constant_type.value}"
            )
        if constant_type is ConstantType.FLOAT:
            try:
                value = float(value)
            except OverflowError:
                raise ValueError(f"{where}.value: {value} is too large for a float") from None
        return PythonConstant(constant_type, value)
