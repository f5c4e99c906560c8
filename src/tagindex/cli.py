"""Command line interface for tagindex."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from tagindex.config import AppConfig
from tagindex.errors import TagIndexError
from tagindex.index.indexer import TagIndexer
from tagindex.index.tagfile import render_tags, write_tags


console = Console()
app = typer.Typer(help="tagindex - ctags navigation for Markdown documentation")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _make_indexer(config: AppConfig) -> TagIndexer:
    return TagIndexer(
        extension=config.extension,
        excluded=config.excluded,
        namespace=config.namespace,
    )


@app.command()
def build(
    base_dir: Path = typer.Argument(
        AppConfig().base_dir, help="Documentation directory to scan."
    ),
    output: Path = typer.Option(None, "--output", "-o", help="Tag file to write"),
    namespace: Optional[str] = typer.Option(None, help="Tag name prefix"),
    stdout: bool = typer.Option(False, "--stdout", help="Print tags instead of writing a file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Build the tag file for a documentation tree."""
    _setup_logging(verbose)
    config = AppConfig(
        base_dir=base_dir,
        output_path=output if output is not None else AppConfig().output_path,
    )
    if namespace is not None:
        config.namespace = namespace
    resolved_base = config.resolve_base_dir(Path.cwd())

    try:
        anchors, stats = _make_indexer(config).build(resolved_base)
    except TagIndexError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    if stdout:
        typer.echo(render_tags(anchors), nl=False)
        return

    resolved_output = config.resolve_output_path(Path.cwd())
    try:
        write_tags(anchors, resolved_output)
    except OSError as exc:
        console.print(f"[red]Cannot write {resolved_output}: {exc}[/red]")
        raise typer.Exit(code=1) from exc

    console.print(
        f"Documents: {stats.documents}, tags: {len(anchors)}, "
        f"headings: {stats.headings}, grammar rules: {stats.grammar_rules}"
    )
    console.print(f"Wrote [bold]{resolved_output}[/bold]")


@app.command()
def show(
    base_dir: Path = typer.Argument(
        AppConfig().base_dir, help="Documentation directory to scan."
    ),
    namespace: Optional[str] = typer.Option(None, help="Tag name prefix"),
) -> None:
    """List the tags of a documentation tree."""
    config = AppConfig(base_dir=base_dir)
    if namespace is not None:
        config.namespace = namespace
    resolved_base = config.resolve_base_dir(Path.cwd())

    try:
        anchors, _ = _make_indexer(config).build(resolved_base)
    except TagIndexError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    if not anchors:
        console.print("[yellow]No tags found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Tag")
    table.add_column("File")
    table.add_column("Line")

    for anchor in anchors:
        table.add_row(anchor.name, anchor.path, str(anchor.line_number))

    console.print(table)
