"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdblocks.config import Settings, load_config
from mdblocks.core.errors import ParseError
from mdblocks.core.export import render
from mdblocks.core.extract.checklist import extract_checklist_items, summarize
from mdblocks.core.extract.placeholders import extract_placeholders, extract_unique_placeholders
from mdblocks.core.parse import MarkdownParser, discover_files, strip_metadata
from mdblocks.core.utils.slug import slugify


logger = logging.getLogger(__name__)

READ_ERRORS = (ParseError, OSError, UnicodeDecodeError)


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _files(path: str) -> list[Path]:
    """Resolve path to markdown files, failing when there are none."""
    files = discover_files(Path(path))
    if not files:
        _fail(f"No .md/.mdx files found at {path}")
    return files


def _read_body(path: Path, frontmatter: bool) -> str:
    """Read path and return the text with any metadata block removed."""
    text = path.read_text(encoding='utf-8')
    return strip_metadata(text)[1] if frontmatter else text


def parse_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to parse")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory (default from settings)")] = None,
    stdout: Annotated[bool, typer.Option("--stdout", help="Print to stdout instead of writing files")] = False,
    fmt: Annotated[Optional[str], typer.Option("--format", help="json or yaml")] = None,
    no_ids: Annotated[bool, typer.Option("--no-ids", help="Emit empty block ids")] = False,
    no_frontmatter: Annotated[bool, typer.Option("--no-frontmatter", help="Keep a leading metadata block as content")] = False,
    ):
    """Parse markdown into blocks, placeholders, checklist items, and edges."""
    settings = _settings(overrides={
        "output_dir": out, "output_format": fmt,
        "generate_ids": False if no_ids else None,
        "frontmatter": False if no_frontmatter else None,
    })
    parser = MarkdownParser.from_settings(settings)

    for p in _files(path):
        try:
            doc = parser.parse_file(p)
        except READ_ERRORS as e:
            _fail(f"Failed to parse {p}", e)
        rendered = render(doc, settings.output_format)
        if stdout:
            typer.echo(rendered)
            continue
        output_dir = Path(settings.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        out_file = output_dir / f"{slugify(p.stem)}.{settings.output_format}"
        out_file.write_text(rendered, encoding='utf-8')
        logger.debug("wrote %s", out_file)
        typer.echo(f"  {p} -> {out_file}")


def checklist_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to scan")],
    ):
    """List checklist items and print a completion summary."""
    settings = _settings()
    items = []
    for p in _files(path):
        try:
            items.extend(extract_checklist_items(_read_body(p, settings.frontmatter)))
        except READ_ERRORS as e:
            _fail(f"Failed to read {p}", e)

    for item in items:
        mark = "x" if item.checked else " "
        typer.echo(f"{'  ' * item.indent}[{mark}] {item.text}")
    summary = summarize(items)
    typer.echo(
        f"{summary.completed}/{summary.total} complete, "
        f"{summary.pending} pending ({summary.percentage:.1f}%)"
    )


def placeholders_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to scan")],
    show_all: Annotated[bool, typer.Option("--all", help="List every occurrence in order")] = False,
    ):
    """List placeholder names found in the raw document body.

    Scans the text itself, including raw HTML, so it can list names that
    `parse` omits from a document's placeholders (which come from blocks only).
    """
    settings = _settings()
    names = []
    for p in _files(path):
        try:
            body = _read_body(p, settings.frontmatter)
        except READ_ERRORS as e:
            _fail(f"Failed to read {p}", e)
        names.extend(extract_placeholders(body) if show_all else extract_unique_placeholders(body))

    if not show_all:
        names = sorted(set(names))
    for name in names:
        typer.echo(name)
