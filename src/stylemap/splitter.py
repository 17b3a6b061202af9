"""
Style node splitting.

Separates one style node into its own declarations, the nested rules it
contains (``$`` rule sets and ``:pseudo`` keys) and any inline keyframes
its animations need hoisted.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .animation import Keyframes, resolve_animation

StyleNode = Mapping[str, Any]
RuleEntry = tuple[str, StyleNode]

NESTING_KEY = "$"
ANIMATION_KEY = "animation"


@dataclass
class SplitStyle:
    """The three channels of a style node, each in encounter order."""

    declarations: list[tuple[str, Any]] = field(default_factory=list)
    nested: list[RuleEntry] = field(default_factory=list)
    keyframes: list[tuple[str, Keyframes]] = field(default_factory=list)


def rule_entries(rules: Any) -> list[RuleEntry]:
    """Flatten a rule set into ``(selector, node)`` pairs.

    Accepts a mapping of selector to node, or a sequence of
    ``(selector, node)`` pairs where *selector* may be a list of selectors
    sharing the node.
    """
    if isinstance(rules, Mapping):
        return list(rules.items())

    entries: list[RuleEntry] = []
    for selector, styles in rules:
        if isinstance(selector, (list, tuple)):
            entries.extend((str(s), styles) for s in selector)
        else:
            entries.append((str(selector), styles))
    return entries


def split_style(styles: StyleNode, selector: str = "inline") -> SplitStyle:
    """Split *styles*; *selector* names inline animations."""
    split = SplitStyle()

    for key, value in styles.items():
        if value is None:
            continue
        if key == NESTING_KEY:
            split.nested.extend(rule_entries(value))
        elif key.startswith(":"):
            split.nested.append((f"&{key}", value))
        elif key == ANIMATION_KEY:
            animation = resolve_animation(value, selector)
            split.declarations.append((key, animation.value))
            split.keyframes.extend(animation.keyframes)
        else:
            split.declarations.append((key, value))

    return split
