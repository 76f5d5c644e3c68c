#!/usr/bin/env python3

"""Rendering of Python default values as C# literal expressions.

Integers are rendered as ``int`` literals when they fit and as ``long``
literals otherwise. Hexadecimal and binary constants keep their source base.
``None`` becomes ``null`` and marks the parameter type as nullable.
"""

import math

from ....infrastructure.logging import get_logger
from ...models.csharp import IntegerDisplay, LiteralExpression
from ...models.python import ConstantType, PythonConstant

logger = get_logger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class DefaultLiteralRenderer:
    """Converts PythonConstant defaults into C# literals."""

    @staticmethod
    def render(constant: PythonConstant) -> tuple[LiteralExpression, bool]:
        """Render a default value.

        Args:
            constant: Default value from the Python signature

        Returns:
            Tuple of (literal expression, whether the parameter type must be nullable)

        Raises:
            OverflowError: If an integer does not fit a signed 64-bit long
        """
        constant_type = constant.type

        if constant_type is ConstantType.INTEGER:
            return DefaultLiteralRenderer._integer(int(constant.value)), False
        if constant_type is ConstantType.FLOAT:
            return DefaultLiteralRenderer._float(float(constant.value)), False
        if constant_type is ConstantType.STRING:
            # A missing payload is an empty string, never null
            text = constant.value if constant.value is not None else ""
            return LiteralExpression.string(str(text)), False
        if constant_type is ConstantType.BOOL:
            return LiteralExpression.boolean(bool(constant.value)), False
        if constant_type is ConstantType.NONE:
            return LiteralExpression.null(), True
        if constant_type is ConstantType.HEX_INTEGER:
            return DefaultLiteralRenderer._based_integer(int(constant.value), 16), False
        if constant_type is ConstantType.BIN_INTEGER:
            return DefaultLiteralRenderer._based_integer(int(constant.value), 2), False

        logger.warning(f"Unhandled constant type {constant_type!r}, rendering default as null")
        return LiteralExpression.null(), True

    @staticmethod
    def _check_int64(value: int) -> None:
        if not INT64_MIN <= value <= INT64_MAX:
            raise OverflowError(f"Integer default {value} does not fit in a C# long")

    @staticmethod
    def _integer(value: int) -> LiteralExpression:
        DefaultLiteralRenderer._check_int64(value)
        display = IntegerDisplay.from_value(value, 10)
        if INT32_MIN <= value <= INT32_MAX:
            return LiteralExpression.integer(display)
        return LiteralExpression.integer(display, suffix="L")

    @staticmethod
    def _based_integer(value: int, base: int) -> LiteralExpression:
        DefaultLiteralRenderer._check_int64(value)
        if value == INT64_MIN:
            # -0x8000000000000000 is a negated ulong; only the decimal form is a long
            logger.debug(f"Rendering base-{base} default {value} in decimal")
            return DefaultLiteralRenderer._integer(value)
        return LiteralExpression.integer(IntegerDisplay.from_value(value, base))

    @staticmethod
    def _float(value: float) -> LiteralExpression:
        if math.isnan(value):
            return LiteralExpression.numeric("double.NaN", value)
        if math.isinf(value):
            text = "double.PositiveInfinity" if value > 0 else "double.NegativeInfinity"
            return LiteralExpression.numeric(text, value)
        return LiteralExpression.numeric(repr(value), value)
