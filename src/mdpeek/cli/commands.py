"""CLI command implementations"""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from mdpeek.config import Settings, load_config
from mdpeek.core.parse import front_matter_of, make_parser, parse_metadata, parse_tokens
from mdpeek.core.render import render_document


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging from it."""
    try:
        settings = load_config(overrides=overrides)
    except (ValueError, ValidationError) as e:
        _fail("Invalid configuration", e)
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("mdpeek").setLevel(settings.log_level)
    return settings


def _read_source(path: str) -> str:
    """Read markdown from a file path, or stdin when path is '-'."""
    if path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        _fail(f"Cannot read {path}", e)


def render_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to render, or '-' for stdin")],
    out: Annotated[Optional[str], typer.Option("--out", "-o", help="Write HTML here instead of stdout")] = None,
    syntax: Annotated[Optional[bool], typer.Option("--syntax/--no-syntax", help="Highlight fenced code")] = None,
    preset: Annotated[Optional[str], typer.Option("--preset", help="MarkdownIt preset name")] = None,
    ):
    """Render a markdown document to preview HTML."""
    settings = _settings(overrides={"syntax": syntax, "preset": preset})
    source = _read_source(path)
    doc = render_document(source, make_parser(settings))

    if out:
        Path(out).write_text(doc.html, encoding="utf-8")
        typer.echo(f"  {path} -> {out}", err=True)
    else:
        typer.echo(doc.html, nl=False)


def meta_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to inspect, or '-' for stdin")],
    ):
    """Print the document's front matter as JSON ({} when absent or unparseable)."""
    settings = _settings()
    source = _read_source(path)
    _, env = parse_tokens(make_parser(settings), source)
    match = front_matter_of(env)
    metadata = parse_metadata(match.meta) if match else {}
    typer.echo(json.dumps(metadata, indent=2, default=str))
