"""
Error types for stylemap compilation and registration.
"""

from dataclasses import dataclass


class StylemapError(Exception):
    """Base exception for all stylemap errors."""

    def __init__(self, message: str, context: "ErrorContext | None" = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class UnrenderedStyleError(StylemapError):
    """
    Raised when a registered name is used before it was flushed to CSS.

    Examples:
    - ``classes(button)`` called before ``update_stylesheet()``
    - A style registered after the last flush
    - A style used again after ``reset()``
    """

    def __init__(self, name: str, context: "ErrorContext | None" = None):
        self.name = name
        super().__init__(
            f"'{name}' style is being used, but hasn't been added to the stylesheet.",
            context,
        )


class DuplicateRegistrationError(StylemapError):
    """
    Raised in identity-aware mode when the same call site registers twice
    before the first registration was flushed.
    """

    def __init__(self, identity: str, name: str):
        self.identity = identity
        self.name = name
        super().__init__(
            f"'{name}' was registered twice from {identity!r} before being added to the stylesheet."
        )


class SelfReferenceError(StylemapError):
    """Raised when a variable is assigned a value that refers back to itself."""

    pass


class ValueNestingError(StylemapError):
    """
    Raised when a multi-value property nests lists deeper than two levels.

    Examples:
    - ``gridTemplate: ["a", ["b", ["c"]]]``
    """

    pass


@dataclass
class ErrorContext:
    """
    Where in a style tree an error occurred.

    Attributes:
        selector: Effective selector being compiled
        property: Property name being formatted, if any
    """

    selector: str | None = None
    property: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "in .card { width }"
        """
        if self.selector and self.property:
            return f"in {self.selector} {{ {self.property} }}"
        if self.selector:
            return f"in {self.selector}"
        if self.property:
            return f"in property {self.property}"
        return "in <inline styles>"


def make_nesting_error(property: str, depth: int) -> ValueNestingError:
    """
    Helper to create a ValueNestingError naming the offending property.

    Args:
        property: Property whose value nests too deeply
        depth: Nesting depth that was found

    Returns:
        ValueNestingError with context attached
    """
    return ValueNestingError(
        f"Multi-value properties support at most 2 levels of lists, found {depth}.",
        ErrorContext(property=property),
    )
