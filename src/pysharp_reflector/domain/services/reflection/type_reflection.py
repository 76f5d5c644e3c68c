#!/usr/bin/env python3

"""Mapping of Python type annotations onto C# types.

Handles:
- Builtin scalars (int, float, str, bool, bytes)
- Containers (list, tuple, dict and their typing aliases)
- Optional[T], Union[T, None] and T | None as nullable types
- Anything unrecognised as the dynamic PyObject type
"""

from ....infrastructure.logging import get_logger
from ...models.csharp import TypeSyntax
from ...models.python import PythonTypeSpec

logger = get_logger(__name__)


class TypeReflection:
    """Resolves Python type specs to C# type syntax.

    All methods are static; the mapping holds no state.
    """

    PY_OBJECT = TypeSyntax.predefined("PyObject")

    PRIMITIVE_TYPES: dict[str, TypeSyntax] = {
        "int": TypeSyntax.predefined("long"),
        "float": TypeSyntax.predefined("double"),
        "str": TypeSyntax.predefined("string"),
        "bool": TypeSyntax.predefined("bool"),
        "bytes": TypeSyntax.predefined("byte[]"),
    }

    DYNAMIC_TYPES = frozenset({"Any", "object", "None", "NoneType"})
    LIST_TYPES = frozenset({"list", "List", "Sequence"})
    TUPLE_TYPES = frozenset({"tuple", "Tuple"})
    DICT_TYPES = frozenset({"dict", "Dict", "Mapping"})
    UNION_TYPES = frozenset({"Union", "|"})

    @staticmethod
    def as_predefined_type(type_spec: PythonTypeSpec) -> TypeSyntax:
        """Resolve a Python type spec to a C# type.

        Args:
            type_spec: Parsed Python annotation

        Returns:
            C# type syntax; PyObject when the annotation has no closer mapping
        """
        name = TypeReflection._strip_typing_prefix(type_spec.name)
        arguments = type_spec.arguments

        if name in TypeReflection.DYNAMIC_TYPES:
            return TypeReflection.PY_OBJECT

        primitive = TypeReflection.PRIMITIVE_TYPES.get(name)
        if primitive is not None:
            return primitive

        if name in TypeReflection.LIST_TYPES:
            return TypeSyntax.generic("IReadOnlyList", TypeReflection._argument(arguments, 0))

        if name in TypeReflection.TUPLE_TYPES:
            return TypeReflection._tuple_type(arguments)

        if name in TypeReflection.DICT_TYPES:
            return TypeSyntax.generic(
                "IReadOnlyDictionary",
                TypeReflection._argument(arguments, 0),
                TypeReflection._argument(arguments, 1),
            )

        if name == "Optional" and len(arguments) == 1:
            return TypeReflection.as_predefined_type(arguments[0]).as_nullable()

        if name in TypeReflection.UNION_TYPES:
            return TypeReflection._union_type(arguments)

        logger.debug(f"No C# mapping for Python type {type_spec}, using PyObject")
        return TypeReflection.PY_OBJECT

    @staticmethod
    def _strip_typing_prefix(name: str) -> str:
        for prefix in ("typing.", "collections.abc.", "builtins."):
            if name.startswith(prefix):
                return name[len(prefix):]
        return name

    @staticmethod
    def _argument(arguments: tuple[PythonTypeSpec, ...], index: int) -> TypeSyntax:
        if index < len(arguments):
            return TypeReflection.as_predefined_type(arguments[index])
        return TypeReflection.PY_OBJECT

    @staticmethod
    def _tuple_type(arguments: tuple[PythonTypeSpec, ...]) -> TypeSyntax:
        # tuple[T, ...] is a homogeneous variable-length tuple
        if len(arguments) == 2 and arguments[1].name == "...":
            return TypeSyntax.generic("IReadOnlyList", TypeReflection._argument(arguments, 0))
        if not arguments:
            return TypeSyntax.tuple_of(TypeReflection.PY_OBJECT)
        return TypeSyntax.tuple_of(*(TypeReflection.as_predefined_type(arg) for arg in arguments))

    @staticmethod
    def _union_type(arguments: tuple[PythonTypeSpec, ...]) -> TypeSyntax:
        members = [
            arg
            for arg in arguments
            if TypeReflection._strip_typing_prefix(arg.name) not in ("None", "NoneType")
        ]
        if len(members) == 1 and len(members) < len(arguments):
            return TypeReflection.as_predefined_type(members[0]).as_nullable()
        return TypeReflection.PY_OBJECT
