#!/usr/bin/env python3

"""C# type expression model."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class TypeSyntax:
    """A C# type expression.

    Generic arguments are kept structured so that nullability can be applied
    to the outer type without re-parsing rendered text.

    Attributes:
        name: Type name without generic arguments (e.g. "IReadOnlyList")
        arguments: Generic type arguments, or tuple elements when is_tuple
        is_nullable: Whether the type is wrapped as an optional ("T?")
        is_tuple: Render as a C# tuple literal type "(T1, T2)"
    """

    name: str
    arguments: tuple[TypeSyntax, ...] = field(default_factory=tuple)
    is_nullable: bool = False
    is_tuple: bool = False

    @classmethod
    def predefined(cls, name: str) -> TypeSyntax:
        return cls(name)

    @classmethod
    def generic(cls, name: str, *arguments: TypeSyntax) -> TypeSyntax:
        return cls(name, tuple(arguments))

    @classmethod
    def tuple_of(cls, *elements: TypeSyntax) -> TypeSyntax:
        """Create a tuple type.

        C# has no tuple literal syntax for a single element, so one-element
        tuples become ``ValueTuple<T>``.
        """
        if len(elements) == 1:
            return cls.generic("ValueTuple", elements[0])
        return cls("ValueTuple", tuple(elements), is_tuple=True)

    def as_nullable(self) -> TypeSyntax:
        """Return the optional form of this type; already-nullable types are unchanged."""
        if self.is_nullable:
            return self
        return replace(self, is_nullable=True)

    def render(self) -> str:
        if self.is_tuple:
            text = f"({', '.join(arg.render() for arg in self.arguments)})"
        elif self.arguments:
            text = f"{self.name}<{', '.join(arg.render() for arg in self.arguments)}>"
        else:
            text = self.name
        return f"{text}?" if self.is_nullable else text

    def __str__(self) -> str:
        return self.render()
