#!/usr/bin/env python3

"""Conversion of Python parameter names into C# identifiers."""

# Reserved C# keywords; contextual keywords (var, async, ...) are valid identifiers
CSHARP_KEYWORDS = frozenset(
    {
        "abstract", "as", "base", "bool", "break", "byte", "case", "catch",
        "char", "checked", "class", "const", "continue", "decimal", "default",
        "delegate", "do", "double", "else", "enum", "event", "explicit",
        "extern", "false", "finally", "fixed", "float", "for", "foreach",
        "goto", "if", "implicit", "in", "int", "interface", "internal", "is",
        "lock", "long", "namespace", "new", "null", "object", "operator",
        "out", "override", "params", "private", "protected", "public",
        "readonly", "ref", "return", "sbyte", "sealed", "short", "sizeof",
        "stackalloc", "static", "string", "struct", "switch", "this", "throw",
        "true", "try", "typeof", "uint", "ulong", "unchecked", "unsafe",
        "ushort", "using", "virtual", "void", "volatile", "while",
    }
)


class IdentifierNormalizer:
    """Maps snake_case Python names onto valid lowerCamelCase C# identifiers."""

    @staticmethod
    def normalize(name: str) -> str:
        """Lower-camel-case a name and escape it for use as a C# identifier.

        Examples:
            - "my_arg" -> "myArg"
            - "class" -> "@class"
            - "_private" -> "_private"
        """
        return IdentifierNormalizer.valid_identifier(IdentifierNormalizer.to_lower_pascal_case(name))

    @staticmethod
    def to_pascal_case(name: str) -> str:
        stripped = name.lstrip("_")
        leading = name[: len(name) - len(stripped)]
        parts = [part for part in stripped.split("_") if part]
        return leading + "".join(part[0].upper() + part[1:] for part in parts)

    @staticmethod
    def to_lower_pascal_case(name: str) -> str:
        pascal = IdentifierNormalizer.to_pascal_case(name)
        stripped = pascal.lstrip("_")
        if not stripped:
            return pascal
        leading = pascal[: len(pascal) - len(stripped)]
        return leading + stripped[0].lower() + stripped[1:]

    @staticmethod
    def valid_identifier(name: str) -> str:
        if name in CSHARP_KEYWORDS:
            return f"@{name}"
        if not name or name[0].isdigit():
            return f"_{name}"
        return name
