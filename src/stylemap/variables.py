"""
CSS custom property handles.

A :class:`Variable` is created through ``StyleContext.variable()`` and is
immutable: ``or_()`` returns a new handle with a deeper fallback chain.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import ErrorContext, SelfReferenceError


@dataclass(frozen=True)
class Variable:
    """Resolves to ``var(--name, fallback)``.

    Attributes:
        name: Custom property name, including the leading ``--``.
        property: Property whose defaults apply when formatting values.
        fallback: Literal value or another :class:`Variable`.
    """

    name: str
    property: str
    fallback: Any = None

    @property
    def css_name(self) -> str:
        return self.name

    def set(self, value: Any) -> dict[str, str | None]:
        """Return a mapping to merge into a style node to assign this variable."""
        if _refers_to(value, self.name):
            raise SelfReferenceError(
                f"Variable {self.name} cannot be set to a value referencing itself.",
                ErrorContext(property=self.name),
            )
        from .values import format_value

        return {self.name: format_value(self.property, value)}

    def or_(self, fallback: Any) -> Variable:
        """Return a copy with *fallback* appended to the end of the fallback chain."""
        if isinstance(self.fallback, Variable):
            fallback = self.fallback.or_(fallback)
        return Variable(self.name, self.property, fallback)

    def var(self, property: str | None = None) -> str:
        """Render ``var()`` using the defaults of *property* (or the declared one)."""
        from .values import format_value

        if self.fallback is None:
            return f"var({self.name})"
        fallback = format_value(property or self.property, self.fallback)
        if fallback:
            return f"var({self.name}, {fallback})"
        return f"var({self.name})"

    def __str__(self) -> str:
        return self.var()


def _refers_to(value: Any, name: str) -> bool:
    while isinstance(value, Variable):
        if value.name == name:
            return True
        value = value.fallback
    return False
