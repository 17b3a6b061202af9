"""
Style compiler.

Lowers a nested rule set into an ordered list of flat CSS rules:

    {".a": {"width": 5, "$": {"input": {"width": 1}}}}

becomes

    .a { width: 5px; }
    .a input { width: 1px; }

Each node emits its own declarations first, then its nested rules, then
``@keyframes`` blocks for inline animations it references.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .animation import Keyframes
from .declarations import serialize_declarations
from .ledger import unwrap
from .selectors import compose_selector, is_grouping_rule, wrap_grouping_rule
from .splitter import ANIMATION_KEY, NESTING_KEY, RuleEntry, StyleNode, rule_entries, split_style
from .units import default_unit

logger = logging.getLogger(__name__)

_offset = default_unit("%", coerce_to_number=True)


def css(rules: Any) -> str:
    """Compile a rule set to CSS text, one rule per line."""
    return "\n".join(compile_rules(rules))


def compile_rules(rules: Any) -> list[str]:
    """Compile a top-level rule set into CSS rule strings."""
    return _rule_set("", rule_entries(rules))


def _rule_set(parent: str, entries: list[RuleEntry]) -> list[str]:
    output: list[str] = []
    for selector, styles in entries:
        if is_grouping_rule(selector):
            output.extend(
                wrap_grouping_rule(selector, rule) for rule in _style_rules(parent, styles)
            )
        else:
            output.extend(_style_rules(compose_selector(parent, selector), styles))
    return output


def _style_rules(selector: str, styles: StyleNode) -> list[str]:
    split = split_style(styles, selector)

    output = _base_rule(selector, split.declarations)
    output.extend(_rule_set(selector, split.nested))
    output.extend(keyframes_css(name, keyframes) for name, keyframes in split.keyframes)
    return output


def _base_rule(selector: str, declarations: list[tuple[str, Any]]) -> list[str]:
    body = serialize_declarations(declarations)
    if not body:
        return []
    return [f"{selector} {{ {body} }}"]


def keyframes_css(name: str, keyframes: Keyframes, indent: int = 2) -> str:
    """
    Generate an ``@keyframes`` block.

    Offsets may be ``from``/``to``, numbers or percentage strings; numbers and
    numeric strings get a ``%`` suffix. Only declarations are allowed inside
    an offset: nested rules and animations are dropped with a warning.

    Args:
        name: Keyframes name
        keyframes: Offset to style node mapping (or a registered handle)
        indent: Spaces before each offset line

    Returns:
        CSS ``@keyframes`` block
    """
    frames = unwrap(keyframes)
    prefix = " " * indent
    lines = [f"@keyframes {name} {{"]

    for offset, styles in frames.items():
        if styles is None:
            continue
        offset_text = _offset(offset)
        declarations = _keyframe_declarations(name, offset_text, styles)
        lines.append(f"{prefix}{offset_text} {{ {serialize_declarations(declarations)} }}")

    lines.append("}")
    return "\n".join(lines)


def _keyframe_declarations(
    name: str, offset: str, styles: Mapping[str, Any]
) -> list[tuple[str, Any]]:
    declarations: list[tuple[str, Any]] = []
    for key, value in styles.items():
        if value is None:
            continue
        if key in (NESTING_KEY, ANIMATION_KEY) or key.startswith(":"):
            logger.warning(
                "Ignoring %r inside keyframes %s at %s: only declarations are supported",
                key,
                name,
                offset,
            )
            continue
        declarations.append((key, value))
    return declarations


def font_face_css(definition: Mapping[str, Any]) -> str:
    """Generate an ``@font-face`` block from a font face definition."""
    return f"@font-face {{ {serialize_declarations(definition.items())} }}"
