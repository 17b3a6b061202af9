"""
Stylemap settings.

Settings come from the ``[stylemap]`` table of a TOML file (usually
``stylemap.toml`` or ``pyproject.toml`` under ``[tool.stylemap]``) and may
be overridden by ``STYLEMAP_*`` environment variables.

Example ``stylemap.toml``:

    [stylemap]
    require_stylesheet = true
    identity_aware = false
    source_url = "stylemap.css"
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_TRUE_VALUES = ("1", "true", "yes", "on")

# Looked up in order when no settings path is given.
SETTINGS_FILES = ("stylemap.toml", "pyproject.toml")


class StylemapSettings(BaseModel):
    """Behaviour switches for a :class:`~stylemap.context.StyleContext`."""

    model_config = ConfigDict(frozen=True)

    require_stylesheet: bool = Field(
        default=True,
        description="Fail when a class name is used before its style was flushed",
    )
    identity_aware: bool = Field(
        default=False,
        description="Reuse registration slots per call-site identity (hot reload)",
    )
    source_url: str | None = Field(
        default=None,
        description="Append a /*# sourceURL=... */ trailer when flushing",
    )


def load_settings(
    path: Path | None = None, environ: Mapping[str, str] | None = None
) -> StylemapSettings:
    """
    Load settings from a TOML file and the environment.

    Args:
        path: TOML file; ``[stylemap]`` or ``[tool.stylemap]`` is read. Missing
            files and tables fall back to defaults. When omitted,
            ``stylemap.toml`` and then ``pyproject.toml`` in the working
            directory are tried.
        environ: Environment mapping (defaults to ``os.environ``)

    Returns:
        Frozen settings
    """
    if path is None:
        path = find_settings_file(Path.cwd())

    data: dict[str, Any] = {}
    if path is not None and path.exists():
        document = tomllib.loads(path.read_text(encoding="utf-8"))
        data.update(document.get("tool", {}).get("stylemap", {}))
        data.update(document.get("stylemap", {}))

    data.update(_env_overrides(os.environ if environ is None else environ))
    return StylemapSettings(**data)


def find_settings_file(directory: Path) -> Path | None:
    """Return the first of ``stylemap.toml`` or ``pyproject.toml`` in *directory*."""
    for name in SETTINGS_FILES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for field_name in ("require_stylesheet", "identity_aware"):
        key = f"STYLEMAP_{field_name.upper()}"
        if key in environ:
            overrides[field_name] = environ[key].strip().lower() in _TRUE_VALUES
    if environ.get("STYLEMAP_SOURCE_URL"):
        overrides["source_url"] = environ["STYLEMAP_SOURCE_URL"]
    return overrides
