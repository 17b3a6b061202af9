"""
stylemap - nested Python style definitions compiled to flat CSS.

Styles are plain dicts; registration gives them stable generated class,
keyframe and custom-property names.
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .animation import AnimationDefinition, anonymous_animation
from .compiler import compile_rules, css, font_face_css, keyframes_css
from .config import StylemapSettings, load_settings
from .context import StyleContext
from .errors import (
    DuplicateRegistrationError,
    SelfReferenceError,
    StylemapError,
    UnrenderedStyleError,
    ValueNestingError,
)
from .ledger import Ledger, Registered, caller_identity, unwrap
from .sinks import FileSink, MemorySink, StylesheetSink
from .values import format_value
from .variables import Variable


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    try:
        return _metadata_version("stylemap")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    # Compilation
    "css",
    "compile_rules",
    "keyframes_css",
    "font_face_css",
    "format_value",
    # Registration
    "StyleContext",
    "Ledger",
    "Registered",
    "unwrap",
    "caller_identity",
    "Variable",
    "AnimationDefinition",
    "anonymous_animation",
    # Output
    "StylesheetSink",
    "FileSink",
    "MemorySink",
    # Configuration
    "StylemapSettings",
    "load_settings",
    # Errors
    "StylemapError",
    "UnrenderedStyleError",
    "DuplicateRegistrationError",
    "SelfReferenceError",
    "ValueNestingError",
]
