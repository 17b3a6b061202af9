"""
stylemap command line.

    stylemap compile rules.yaml -o dist/rules.css
    stylemap build myapp.styles:styles -o static/app.css
"""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

import typer
import yaml

from stylemap import __version__
from stylemap.compiler import css
from stylemap.context import StyleContext
from stylemap.errors import StylemapError
from stylemap.sinks import FileSink

app = typer.Typer(
    help="stylemap – compile nested Python/YAML style definitions to CSS",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"stylemap {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log registration and output details"
    ),
) -> None:
    """stylemap CLI main callback for global options."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _emit(text: str, out: Path | None) -> None:
    if out is None:
        typer.echo(text)
    else:
        FileSink(out).write(text)
        typer.echo(f"Wrote {out}", err=True)


@app.command("compile")
def compile_command(
    rules_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="YAML or JSON rule set"
    ),
    out: Path | None = typer.Option(None, "--out", "-o", help="Output CSS file (default: stdout)"),
) -> None:
    """Compile a rule set file (selector -> styles mapping) to CSS."""
    try:
        rules = yaml.safe_load(rules_file.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        typer.echo(f"Could not read {rules_file}: {e}", err=True)
        raise typer.Exit(code=1)

    if not rules:
        _emit("", out)
        return
    if not isinstance(rules, (dict, list)):
        typer.echo(
            f"{rules_file} must contain a mapping or a list of [selector, styles] pairs",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        _emit(css(rules), out)
    except StylemapError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command("build")
def build_command(
    target: str = typer.Argument(
        ..., help="module[:attribute] holding a StyleContext (default attribute: styles)"
    ),
    out: Path | None = typer.Option(None, "--out", "-o", help="Output CSS file (default: stdout)"),
    path: Path = typer.Option(Path("."), "--path", "-p", help="Directory added to the import path"),
) -> None:
    """Import a module, flush its StyleContext and write the stylesheet."""
    module_name, _, attribute = target.partition(":")
    sys.path.insert(0, str(path.resolve()))

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        typer.echo(f"Could not import {module_name}: {e}", err=True)
        raise typer.Exit(code=1)

    context = getattr(module, attribute or "styles", None)
    if not isinstance(context, StyleContext):
        typer.echo(f"{target} is not a StyleContext", err=True)
        raise typer.Exit(code=1)

    try:
        text = context.update_stylesheet()
    except StylemapError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    _emit(text, out)


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()
