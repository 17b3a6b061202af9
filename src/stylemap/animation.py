"""
Animation definitions and ``animation`` shorthand resolution.

An animation whose keyframes are not registered is *inline*: the compiler
gives its keyframes a name derived from the selector using it and hoists
an ``@keyframes`` block next to that rule.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .catalogue import ANIMATION_PROPERTIES
from .ledger import Registered
from .values import format_value

Keyframes = Mapping[Any, Any]

_NON_WORD = re.compile(r"[^\w-]+")


def _sub_property(field_name: str) -> AliasChoices:
    """Accept ``duration``, ``animation_duration``, ``animationDuration`` and
    ``animation-duration`` for the same field."""
    camel = "".join(part.capitalize() for part in field_name.split("_"))
    kebab = field_name.replace("_", "-")
    return AliasChoices(
        field_name, f"animation_{field_name}", f"animation{camel}", f"animation-{kebab}"
    )


class AnimationDefinition(BaseModel):
    """The eight ``animation-*`` sub-properties plus optional keyframes.

    Plain mappings may spell sub-properties as in a style node
    (``animationDuration``); unknown keys are rejected.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="forbid")

    name: str | None = Field(default=None, validation_alias=_sub_property("name"))
    keyframes: Any = None
    duration: int | float | str | None = Field(
        default=None, validation_alias=_sub_property("duration")
    )
    timing_function: str | None = Field(
        default=None, validation_alias=_sub_property("timing_function")
    )
    delay: int | float | str | None = Field(default=None, validation_alias=_sub_property("delay"))
    iteration_count: int | float | str | None = Field(
        default=None, validation_alias=_sub_property("iteration_count")
    )
    direction: str | None = Field(default=None, validation_alias=_sub_property("direction"))
    fill_mode: str | None = Field(default=None, validation_alias=_sub_property("fill_mode"))
    play_state: str | None = Field(default=None, validation_alias=_sub_property("play_state"))

    @property
    def is_inline(self) -> bool:
        """True when the keyframes still need a generated name and a hoisted block."""
        return self.keyframes is not None and not isinstance(self.keyframes, Registered)

    def shorthand(self) -> str:
        """Format as an ``animation`` shorthand value."""
        values = (
            self.name,
            self.duration,
            self.timing_function,
            self.delay,
            self.iteration_count,
            self.direction,
            self.fill_mode,
            self.play_state,
        )
        parts = (format_value(prop, value) for prop, value in zip(ANIMATION_PROPERTIES, values))
        return " ".join(p for p in parts if p)


def anonymous_animation(
    keyframes: Keyframes,
    duration: int | float | str | None = None,
    timing_function: str | None = None,
    delay: int | float | str | None = None,
    iteration_count: int | float | str | None = None,
    direction: str | None = None,
    fill_mode: str | None = None,
    play_state: str | None = None,
) -> AnimationDefinition:
    """Define an animation with inline keyframes named at compile time."""
    return AnimationDefinition(
        keyframes=keyframes,
        duration=duration,
        timing_function=timing_function,
        delay=delay,
        iteration_count=iteration_count,
        direction=direction,
        fill_mode=fill_mode,
        play_state=play_state,
    )


@dataclass
class ResolvedAnimation:
    """Shorthand text plus the ``(name, keyframes)`` blocks to hoist."""

    value: str
    keyframes: list[tuple[str, Keyframes]] = field(default_factory=list)


def inline_animation_name(name: str | None, selector: str, index: int) -> str:
    """Build ``<name or selector>-animation-<index>`` with non-word characters
    replaced by ``_`` and a single leading ``_`` stripped."""
    base = _NON_WORD.sub("_", name or f"{selector}-animation")
    if base.startswith("_"):
        base = base[1:]
    return f"{base}-{index}"


def resolve_animation(value: Any, selector: str) -> ResolvedAnimation:
    """Resolve an ``animation`` value (string, definition or list of them)."""
    if isinstance(value, (list, tuple)):
        resolved = [_resolve_single(item, selector, index) for index, item in enumerate(value)]
        return ResolvedAnimation(
            value=", ".join(r.value for r in resolved),
            keyframes=[kf for r in resolved for kf in r.keyframes],
        )
    return _resolve_single(value, selector, 0)


def _resolve_single(value: Any, selector: str, index: int) -> ResolvedAnimation:
    if isinstance(value, Mapping):
        value = AnimationDefinition.model_validate(dict(value))
    if not isinstance(value, AnimationDefinition):
        return ResolvedAnimation(value=str(value))
    if not value.is_inline:
        return ResolvedAnimation(value=value.shorthand())

    name = inline_animation_name(value.name, selector, index)
    named = value.model_copy(update={"name": name})
    return ResolvedAnimation(value=named.shorthand(), keyframes=[(name, value.keyframes)])
