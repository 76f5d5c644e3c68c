#!/usr/bin/env python3

"""Reflection of Python parameter lists into C# parameter lists.

Python allows parameter shapes C# does not:
- ``*args`` and ``**kwargs`` have no direct C# form; they are given synthetic
  ``tuple[Any]`` and ``dict[str, Any]`` types defaulting to null
- keyword-only parameters follow ``*`` and may lack a default, but in C# every
  parameter after an optional one must itself be optional (CS1737), so they
  default to null
- the bare ``/`` marker is syntax, not a parameter, and is dropped

The input parameters are never modified. The default actually used for each
parameter, after the rules above, is reported as
``ParameterSyntax.effective_default``.
"""

from collections.abc import Iterable
from typing import Never, NoReturn

from ....infrastructure.logging import get_logger, log_timing
from ...models.csharp import ParameterListSyntax, ParameterSyntax, TypeSyntax
from ...models.python import ParameterKind, PythonConstant, PythonFunctionParameter, PythonTypeSpec
from .identifier_normalizer import IdentifierNormalizer
from .literal_renderer import DefaultLiteralRenderer
from .type_reflection import TypeReflection

logger = get_logger(__name__)

TUPLE_ANY = PythonTypeSpec.of("tuple", PythonTypeSpec.ANY)
DICT_STR_ANY = PythonTypeSpec.of("dict", PythonTypeSpec("str"), PythonTypeSpec.ANY)


def _unsupported_kind(kind: Never) -> NoReturn:
    raise NotImplementedError(f"Unsupported parameter kind: {kind!r}")


class ArgumentReflection:
    """Builds C# parameter syntax from Python function parameters."""

    @staticmethod
    def reflected_type(parameter: PythonFunctionParameter) -> TypeSyntax | None:
        """Resolve the C# type of a parameter.

        Returns:
            C# type, or None when the parameter has no runtime representation

        Raises:
            NotImplementedError: If the parameter kind is not recognised
        """
        kind = parameter.kind
        if kind is ParameterKind.POSITIONAL_ONLY_MARKER:
            return None
        if kind is ParameterKind.VARIADIC_POSITIONAL:
            # TODO: honour annotated *args such as *args: int once tuple element types are reflected
            return TypeReflection.as_predefined_type(TUPLE_ANY)
        if kind is ParameterKind.VARIADIC_KEYWORD:
            return TypeReflection.as_predefined_type(DICT_STR_ANY)
        if kind is ParameterKind.NORMAL:
            return TypeReflection.as_predefined_type(parameter.type)
        _unsupported_kind(kind)

    @staticmethod
    def effective_default(parameter: PythonFunctionParameter) -> PythonConstant | None:
        """Return the default value after forcing None where C# needs one."""
        if parameter.default_value is not None:
            return parameter.default_value
        if parameter.kind in (ParameterKind.VARIADIC_POSITIONAL, ParameterKind.VARIADIC_KEYWORD):
            return PythonConstant.none()
        if parameter.is_keyword_only:
            return PythonConstant.none()
        return None

    @staticmethod
    def argument_syntax(parameter: PythonFunctionParameter) -> ParameterSyntax | None:
        """Build the C# declaration for one parameter.

        Args:
            parameter: Python parameter descriptor

        Returns:
            Parameter declaration, or None for the positional-only marker
        """
        reflected_type = ArgumentReflection.reflected_type(parameter)
        if reflected_type is None:
            return None

        identifier = IdentifierNormalizer.normalize(parameter.name)
        default_value = ArgumentReflection.effective_default(parameter)

        if default_value is None:
            return ParameterSyntax(identifier=identifier, type=reflected_type)

        literal, is_nullable = DefaultLiteralRenderer.render(default_value)
        if is_nullable:
            reflected_type = reflected_type.as_nullable()

        return ParameterSyntax(
            identifier=identifier,
            type=reflected_type,
            default=literal,
            is_nullable=is_nullable,
            effective_default=default_value,
        )

    @staticmethod
    @log_timing
    def parameter_list_syntax(
        parameters: Iterable[PythonFunctionParameter], check_order: bool = True
    ) -> ParameterListSyntax:
        """Build the C# parameter list for a Python parameter list.

        Parameters keep their source order; the positional-only marker is
        dropped. A failure on any parameter aborts the whole list.

        Args:
            parameters: Python parameters in declaration order
            check_order: Log a warning when a required parameter follows an optional one

        Returns:
            C# parameter list
        """
        declarations = []
        for parameter in parameters:
            declaration = ArgumentReflection.argument_syntax(parameter)
            if declaration is not None:
                declarations.append(declaration)

        if check_order:
            ArgumentReflection._warn_on_misordered_defaults(declarations)

        logger.debug(f"Reflected {len(declarations)} parameter(s)")
        return ParameterListSyntax(tuple(declarations))

    @staticmethod
    def _warn_on_misordered_defaults(declarations: list[ParameterSyntax]) -> None:
        # Parameters are not reordered; C# rejects this list with CS1737
        first_optional: ParameterSyntax | None = None
        for declaration in declarations:
            if declaration.is_optional:
                first_optional = first_optional or declaration
            elif first_optional is not None:
                logger.warning(
                    f"Required parameter '{declaration.identifier}' follows optional "
                    f"parameter '{first_optional.identifier}'"
                )


def translate(parameters: Iterable[PythonFunctionParameter]) -> list[ParameterSyntax]:
    """Translate Python parameters into C# parameter declarations."""
    return list(ArgumentReflection.parameter_list_syntax(parameters))
