"""
Property value formatting.

Converts a Python value into CSS value text:

- ``None`` stays ``None`` (the declaration is dropped)
- lists and tuples are multi-values, joined with the property separator
- mappings are CSS function maps (``{"rotate": 45}`` -> ``rotate(45deg)``)
- :class:`~stylemap.variables.Variable` handles become ``var()``
- :class:`~stylemap.ledger.Registered` handles become their name
- scalars go through the per-property default table, else numbers get ``px``
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .catalogue import function_formatter, property_formatter, separators_for
from .errors import make_nesting_error
from .ledger import Registered
from .names import function_case, kebab_case
from .variables import Variable

MAX_LIST_DEPTH = 2


def format_value(property: str, value: Any) -> str | None:
    """Format *value* for *property*; ``None`` means drop the declaration.

    A missing value still goes through the property's default, so
    ``animation-timing-function`` gives ``ease`` where ``width`` gives ``None``.
    """
    if isinstance(value, Variable):
        return value.var(property)
    if isinstance(value, Registered):
        return value.name
    if isinstance(value, (list, tuple)):
        return _format_list(property, value)
    if isinstance(value, Mapping):
        return format_functions(property, value)
    return property_formatter(kebab_case(property))(value)


def _format_list(property: str, values: list[Any] | tuple[Any, ...]) -> str:
    separators = separators_for(kebab_case(property))
    nested = False
    parts: list[str] = []

    for value in values:
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            nested = True
            inner = []
            for item in value:
                if item is None:
                    continue
                if isinstance(item, (list, tuple)):
                    raise make_nesting_error(property, MAX_LIST_DEPTH + 1)
                text = format_value(property, item)
                if text is not None:
                    inner.append(text)
            parts.append(separators[0].join(inner))
        else:
            text = format_value(property, value)
            if text is not None:
                parts.append(text)

    return separators[min(1 if nested else 0, len(separators) - 1)].join(parts)


def format_functions(property: str, functions: Mapping[str, Any]) -> str:
    """Format a function map as space-separated ``name(args)`` calls."""
    return " ".join(
        f"{function_case(name)}({_function_arguments(property, name, value)})"
        for name, value in functions.items()
    )


def _function_arguments(property: str, function: str, value: Any) -> str:
    if isinstance(value, (list, tuple)):
        parameters = (
            _function_parameter(property, function, item, index)
            for index, item in enumerate(value)
        )
        return ", ".join(p for p in parameters if p is not None)
    return _function_parameter(property, function, value, 0) or ""


def _function_parameter(property: str, function: str, value: Any, index: int) -> str | None:
    if isinstance(value, (list, tuple)):
        parts = (_function_parameter(property, function, item, index) for item in value)
        return " ".join(p for p in parts if p is not None)
    if isinstance(value, Mapping):
        return format_functions(property, value)
    if isinstance(value, (Variable, Registered)):
        return format_value(property, value)
    formatter = function_formatter(function_case(function), index)
    if formatter is not None:
        return formatter(value)
    return format_value(property, value)
