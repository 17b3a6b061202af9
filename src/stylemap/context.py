"""
Style context: the registries behind one application's stylesheet.

Registration hands out named handles; ``update_stylesheet()`` compiles
everything registered so far, writes it to a sink and marks the handles
rendered so ``classes()`` will accept them.

    styles = StyleContext()
    button = styles.style("button", {"padding": [4, 8], ":hover": {"opacity": 0.8}})
    styles.update_stylesheet(FileSink("static/app.css"))
    styles.classes([button, is_active and active])  # "button-0 active-1"
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .animation import AnimationDefinition, Keyframes
from .compiler import css, font_face_css, keyframes_css
from .config import StylemapSettings
from .errors import UnrenderedStyleError
from .ledger import IdentityResolver, Ledger, Registered, caller_identity
from .names import kebab_case
from .sinks import StylesheetSink
from .variables import Variable

logger = logging.getLogger(__name__)

_FONT_FAMILY_KEYS = ("fontFamily", "font_family", "font-family")


class StyleContext:
    """Registries for font faces, raw rules, styles, keyframes and variables."""

    def __init__(
        self,
        settings: StylemapSettings | None = None,
        *,
        sink: StylesheetSink | None = None,
        identity_resolver: IdentityResolver | None = None,
    ) -> None:
        self.settings = settings or StylemapSettings()
        self.sink = sink
        self.identity_resolver = identity_resolver
        if self.identity_resolver is None and self.settings.identity_aware:
            self.identity_resolver = caller_identity
        self._require_stylesheet = self.settings.require_stylesheet

        identity_aware = self.settings.identity_aware
        self._font_faces: list[Registered[Mapping[str, Any]]] = []
        self._rules: list[Any] = []
        self._styles: Ledger[Mapping[str, Any]] = Ledger(identity_aware=identity_aware)
        self._keyframes: Ledger[Keyframes] = Ledger(identity_aware=identity_aware)
        self._variables: Ledger[str] = Ledger(identity_aware=identity_aware)

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def style(
        self, name: str, styles: Mapping[str, Any], identity: str | None = None
    ) -> Registered[Mapping[str, Any]]:
        """Register *styles* as class ``<name>-<n>`` and return its handle."""
        return self._styles.register(name, styles, self._identity(identity))

    def css_rules(self, rules: Any) -> Any:
        """Add a raw rule set to the stylesheet; returns it unchanged."""
        self._rules.append(rules)
        return rules

    def font_face(self, definition: Mapping[str, Any]) -> Registered[Mapping[str, Any]]:
        """Add an ``@font-face``; the handle's name is the font family."""
        family = next((definition[k] for k in _FONT_FAMILY_KEYS if k in definition), None)
        if family is None:
            raise ValueError("Font face definitions need a fontFamily")
        record = Registered(definition, str(family))
        self._font_faces.append(record)
        return record

    def named_animation(
        self,
        name: str,
        keyframes: Keyframes,
        duration: int | float | str | None = None,
        timing_function: str | None = None,
        delay: int | float | str | None = None,
        iteration_count: int | float | str | None = None,
        direction: str | None = None,
        fill_mode: str | None = None,
        play_state: str | None = None,
        *,
        identity: str | None = None,
    ) -> AnimationDefinition:
        """Register *keyframes* as ``@keyframes <name>-<n>`` and define an animation using it."""
        record = self._keyframes.register(name, keyframes, self._identity(identity))
        return AnimationDefinition(
            name=record.name,
            keyframes=record,
            duration=duration,
            timing_function=timing_function,
            delay=delay,
            iteration_count=iteration_count,
            direction=direction,
            fill_mode=fill_mode,
            play_state=play_state,
        )

    def variable(
        self, property: str, name: str | None = None, identity: str | None = None
    ) -> Variable:
        """Declare a custom property ``--<name or property>-<n>`` typed as *property*."""
        base = f"--{name or kebab_case(property)}"
        record = self._variables.register(base, property, self._identity(identity))
        return Variable(record.name, property)

    def _identity(self, explicit: str | None) -> str | None:
        if not self.settings.identity_aware:
            return None
        if explicit is not None:
            return explicit
        return self.identity_resolver() if self.identity_resolver else None

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def get_css(self) -> str:
        """Compile everything registered: font faces, rules, styles, keyframes."""
        chunks: list[str] = []
        chunks.extend(font_face_css(font.payload) for font in self._font_faces)
        chunks.extend(css(rules) for rules in self._rules)
        chunks.extend(css({f".{record.name}": record.payload}) for record in self._styles)
        chunks.extend(keyframes_css(record.name, record.payload) for record in self._keyframes)
        return "\n".join(chunk for chunk in chunks if chunk)

    def update_stylesheet(self, sink: StylesheetSink | None = None) -> str:
        """Flush the stylesheet to *sink* (or the context's sink) and mark
        every registration rendered.

        Returns:
            The CSS text that was written.
        """
        text = self.get_css()
        if self.settings.source_url:
            text = f"{text}\n/*# sourceURL={self.settings.source_url} */"

        target = sink or self.sink
        if target is not None:
            target.write(text)

        for font in self._font_faces:
            font.rendered = True
        self._styles.mark_rendered()
        self._keyframes.mark_rendered()
        self._variables.mark_rendered()
        logger.debug(
            "Flushed stylesheet: %d styles, %d keyframes, %d rule sets",
            len(self._styles),
            len(self._keyframes),
            len(self._rules),
        )
        return text

    def reset(self) -> None:
        """Clear every registry; handles already given out become unrendered."""
        for font in self._font_faces:
            font.rendered = False
        self._font_faces = []
        self._rules = []
        self._styles.reset()
        self._keyframes.reset()
        self._variables.reset()

    # -------------------------------------------------------------------------
    # Class resolution
    # -------------------------------------------------------------------------

    def require_stylesheet(self, enable: bool = True) -> None:
        """
        Can be used to disable the requirement that styles are added to the
        stylesheet before being used. Useful mainly for tests.
        """
        self._require_stylesheet = enable

    def classes(self, collection: Any) -> str:
        """
        Join the class names in a possibly nested collection of handles.

        Falsy entries (``None``, ``False``, ``0``, ``""``) are skipped, so
        conditional classes can be written as ``[base, active and highlighted]``.

        Raises:
            UnrenderedStyleError: If a handle has not been flushed yet and the
                stylesheet requirement is on.
        """
        if not collection:
            return ""
        if isinstance(collection, (list, tuple)):
            names = (self.classes(item) for item in collection)
            return " ".join(name for name in names if name)
        if isinstance(collection, Registered):
            if collection.rendered or not self._require_stylesheet:
                return collection.name
            raise UnrenderedStyleError(collection.name)
        if isinstance(collection, str):
            return collection
        raise TypeError(f"Cannot resolve class names from {type(collection).__name__}")
