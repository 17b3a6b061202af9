"""Declaration block serialization."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .names import kebab_case
from .values import format_value

Declaration = tuple[str, Any]


def serialize_declarations(declarations: Iterable[Declaration]) -> str:
    """
    Serialize ``(property, value)`` pairs into a declaration block body.

    Pairs whose value formats to ``None`` are dropped.

    Args:
        declarations: Ordered property/value pairs

    Returns:
        Text like ``"width: 5px; color: red;"``, or ``""`` when nothing remains
    """
    parts: list[str] = []
    for property, value in declarations:
        text = format_value(property, value)
        if text is None:
            continue
        parts.append(f"{kebab_case(property)}: {text};")
    return " ".join(parts)
