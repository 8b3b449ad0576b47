"""CLI entrypoints for orgoutline."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from orgoutline.config import load_settings
from orgoutline.document import Document
from orgoutline.errors import IndexOutOfRange, OutlineError
from orgoutline.logging import configure_logging, get_logger
from orgoutline.outline import OutlineQueries

app = typer.Typer(add_completion=False, help="Query the outline of a parsed org document")
logger = get_logger(__name__)


def _load(path: Path) -> Document:
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("CLI load requested for %s", path)
    try:
        return Document.load(path, settings=settings)
    except OutlineError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _echo_outlines(outlines: OutlineQueries) -> None:
    for node in outlines:
        typer.echo(f"{node.position}\t{node.level}\t{node.title}")


@app.command()
def overview(path: Path = typer.Argument(..., help="Parsed document (JSON AST)")) -> None:
    """Print the document options."""

    doc = _load(path)
    for key, value in doc.overview.items():
        typer.echo(f"{key}: {value}")


@app.command()
def find(
    path: Path = typer.Argument(..., help="Parsed document (JSON AST)"),
    level: int | None = typer.Option(None, "--level", "-l", help="Only headings at this level"),
    tag: str | None = typer.Option(None, "--tag", "-t", help="Only headings carrying this tag"),
    title: str | None = typer.Option(None, "--title", help="Only headings with exactly this title"),
) -> None:
    """List headings, optionally filtered. Filters combine."""

    outlines: OutlineQueries = _load(path).outlines
    if level is not None:
        outlines = outlines.find_by_level(level)
    if tag is not None:
        outlines = outlines.find_by_tags(tag)
    if title is not None:
        outlines = outlines.find_by_title(title)
    _echo_outlines(outlines)


@app.command()
def children(
    path: Path = typer.Argument(..., help="Parsed document (JSON AST)"),
    position: int = typer.Argument(..., help="0-based position of the heading"),
) -> None:
    """List the headings nested below the heading at POSITION."""

    doc = _load(path)
    try:
        node = doc.item(position)
    except IndexOutOfRange as exc:
        raise typer.BadParameter(str(exc), param_hint="POSITION") from exc
    _echo_outlines(node.children())


@app.command()
def blocks(
    path: Path = typer.Argument(..., help="Parsed document (JSON AST)"),
    name: str = typer.Argument(..., help="Block name"),
) -> None:
    """Print the blocks with the given name as JSON."""

    doc = _load(path)
    found = [block.model_dump(mode="json") for block in doc.find_block_by_name(name)]
    typer.echo(json.dumps(found, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    app()
