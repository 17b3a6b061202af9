"""Property and CSS function name casing."""

from __future__ import annotations

import re

# The MS properties are lowercase, so they need a hyphen added up front.
_MS_PREFIX = re.compile(r"^ms(?=[A-Z])")
_CAPITAL = re.compile(r"[A-Z]")
_INNER_CAPITAL = re.compile(r"[A-Z](?!$)")


def kebab_case(name: str) -> str:
    """Convert a property name to its hyphenated CSS form.

    ``marginLeft`` and ``margin_left`` both become ``margin-left``;
    ``WebkitAlignSelf`` becomes ``-webkit-align-self``. Custom properties
    (``--name``) are returned unchanged.
    """
    if name.startswith("--"):
        return name
    name = _MS_PREFIX.sub("-ms", name)
    name = _CAPITAL.sub(lambda m: f"-{m.group(0).lower()}", name)
    return name.replace("_", "-")


def function_case(name: str) -> str:
    """Convert a CSS function name, keeping a trailing capital (``scaleX``)."""
    name = _INNER_CAPITAL.sub(lambda m: f"-{m.group(0).lower()}", name)
    return name.replace("_", "-")
