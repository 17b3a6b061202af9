"""
Static property catalogue.

Lookup tables describing which properties need a non-``px`` default unit,
which CSS functions take unit-less or angle parameters, and which
multi-value properties join with something other than ``", "``.

Property tables are keyed by the hyphenated CSS name so humped, snake and
literal spellings all resolve to the same entry.
"""

from __future__ import annotations

from .units import Formatter, default_unit, default_unit_and_value, default_value

# =============================================================================
# Property defaults
# =============================================================================

PROPERTY_DEFAULTS: dict[str, Formatter] = {
    "animation-duration": default_unit_and_value("ms", "0ms"),
    "animation-timing-function": default_value("ease"),
    "animation-delay": default_unit_and_value("ms", "0ms"),
    "animation-iteration-count": default_unit_and_value("", "1"),
    "animation-direction": default_value("normal"),
    "animation-fill-mode": default_value("none"),
    "animation-play-state": default_value("running"),
    "column-count": default_unit(""),
    "flex": default_unit(""),
    "flex-grow": default_unit(""),
    "flex-shrink": default_unit(""),
    "font-weight": default_unit(""),
    "grid-column": default_unit(""),
    "grid-row": default_unit(""),
    "line-height": default_unit(""),
    "opacity": default_unit(""),
    "order": default_unit(""),
    "transition-duration": default_unit("ms"),
    "transition-delay": default_unit("ms"),
    "z-index": default_unit(""),
}

# Fallback for anything not listed above.
GENERIC_DEFAULT: Formatter = default_unit("px")

# =============================================================================
# Function parameter defaults
# =============================================================================

# Positional: the last formatter is reused for any further parameters.
FUNCTION_DEFAULTS: dict[str, list[Formatter]] = {
    "matrix": [default_unit("")],
    "matrix3d": [default_unit("")],
    "repeat": [default_unit(""), default_unit("px")],
    "rotate": [default_unit("deg")],
    "rotateX": [default_unit("deg")],
    "rotateY": [default_unit("deg")],
    "rotateZ": [default_unit("deg")],
    "rotate3d": [default_unit(""), default_unit(""), default_unit(""), default_unit("deg")],
    "scale": [default_unit("")],
    "scaleX": [default_unit("")],
    "scaleY": [default_unit("")],
    "scaleZ": [default_unit("")],
    "scale3d": [default_unit("")],
    "skew": [default_unit("deg")],
    "skewX": [default_unit("deg")],
    "skewY": [default_unit("deg")],
}

# =============================================================================
# Multi-value separators
# =============================================================================

# [primary, secondary]: the secondary separator joins the outer level when a
# value contains a nested list.
PROPERTY_SEPARATORS: dict[str, list[str]] = {
    "border-color": [" "],
    "border-radius": [" "],
    "border-style": [" "],
    "border-width": [" "],
    "grid-column": [" / "],
    "grid-row": [" / "],
    "grid-template": [" ", " / "],
    "grid-template-areas": [" "],
    "grid-template-columns": [" "],
    "grid-template-rows": [" "],
    "inset": [" "],
    "margin": [" "],
    "padding": [" "],
    "transform": [" "],
}

DEFAULT_SEPARATORS: list[str] = [", "]

# =============================================================================
# Animation shorthand
# =============================================================================

# Order of the sub-properties inside the ``animation`` shorthand.
ANIMATION_PROPERTIES: tuple[str, ...] = (
    "animation-name",
    "animation-duration",
    "animation-timing-function",
    "animation-delay",
    "animation-iteration-count",
    "animation-direction",
    "animation-fill-mode",
    "animation-play-state",
)


def property_formatter(css_name: str) -> Formatter:
    """Return the scalar formatter for a hyphenated property name."""
    return PROPERTY_DEFAULTS.get(css_name, GENERIC_DEFAULT)


def function_formatter(function: str, index: int) -> Formatter | None:
    """Return the formatter for parameter *index* of *function*, if catalogued."""
    defaults = FUNCTION_DEFAULTS.get(function)
    if not defaults:
        return None
    return defaults[min(index, len(defaults) - 1)]


def separators_for(css_name: str) -> list[str]:
    """Return the separator list for a hyphenated property name."""
    return PROPERTY_SEPARATORS.get(css_name, DEFAULT_SEPARATORS)
