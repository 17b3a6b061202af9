"""
Scalar formatters used by the property and function default tables.

Each helper returns a ``Formatter``: a callable taking a raw scalar and
returning its CSS text, or ``None`` when the value is absent.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

Formatter = Callable[[Any], "str | None"]


def is_number(value: Any) -> bool:
    """Return True for ints and floats, but not bools."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def number_text(value: int | float) -> str:
    """Render a number the way CSS expects (``2.0`` prints as ``2``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _numeric_string(value: Any) -> bool:
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        float(value)
    except ValueError:
        return False
    return True


def default_unit(unit: str, coerce_to_number: bool = False) -> Formatter:
    """Append *unit* to numbers; pass everything else through as text.

    With ``coerce_to_number`` numeric-looking strings (``"50"``) also get
    the unit appended.
    """

    def format_with_unit(value: Any) -> str | None:
        if value is None:
            return None
        if is_number(value):
            return f"{number_text(value)}{unit}"
        if coerce_to_number and _numeric_string(value):
            return f"{value.strip()}{unit}"
        return str(value)

    return format_with_unit


def default_value(fallback: str) -> Formatter:
    """Substitute *fallback* for a missing value."""

    def format_with_default(value: Any) -> str:
        return fallback if value is None else str(value)

    return format_with_default


def default_unit_and_value(unit: str, fallback: str) -> Formatter:
    """Combine :func:`default_unit` and :func:`default_value`."""
    with_unit = default_unit(unit)
    with_default = default_value(fallback)

    def format_with_unit_and_default(value: Any) -> str:
        return with_unit(value) or with_default(value)

    return format_with_unit_and_default
