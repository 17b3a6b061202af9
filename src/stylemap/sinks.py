"""
Stylesheet sinks.

A sink receives the compiled CSS text each time a context is flushed and
makes it visible somewhere: a file served to the browser, or memory for
tests and server-side rendering.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class StylesheetSink(Protocol):
    """Destination for flushed CSS."""

    def write(self, css: str) -> None: ...


class MemorySink:
    """Keeps the most recent stylesheet text."""

    def __init__(self) -> None:
        self.text = ""
        self.writes = 0

    def write(self, css: str) -> None:
        self.text = css
        self.writes += 1


class FileSink:
    """Writes the stylesheet to *path*, creating parent directories."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def write(self, css: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(css, encoding="utf-8")
        logger.info("Wrote %d bytes of CSS to %s", len(css.encode("utf-8")), self.path)
