# kedgify/cli/cli.py
"""
Kedgify CLI - Main application.

Commands:
    kedgify files PATH...    List the manifest files the paths resolve to
    kedgify split PATH...    Print every document, separated by ---

Global options:
    -v, --verbose            Debug logging
    -c, --config FILE        User config, merged over the package defaults
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from kedgify.cli.errors import friendly_errors, report_error
from kedgify.config.loader import load_config
from kedgify.config.schema import KedgifyConfig
from kedgify.core.exceptions import KedgifyError
from kedgify.ingestion.pipeline import ManifestPipeline
from kedgify.ingestion.splitter.separator import join_documents
from kedgify.logging.logger import configure_logging, get_logger
from kedgify.logging.tags import CLI

app = typer.Typer(
    name="kedgify",
    help="Kedgify: find YAML manifests and split them into documents.",
    no_args_is_help=True,
    add_completion=False,
)

logger = get_logger(__name__)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="User config file (YAML)."),
) -> None:
    try:
        cfg = load_config(config)
    except KedgifyError as e:
        report_error(e)
        raise typer.Exit(code=1) from e

    level = logging.DEBUG if verbose else cfg.logging.level
    configure_logging(level=level, fmt=cfg.logging.format)
    logger.debug(f"{CLI} Using patterns {cfg.resolver.patterns}")

    ctx.obj = cfg


def _pipeline(ctx: typer.Context) -> ManifestPipeline:
    cfg: KedgifyConfig = ctx.obj
    return ManifestPipeline.from_config(cfg)


@app.command("files")
@friendly_errors
def files(
    ctx: typer.Context,
    paths: List[str] = typer.Argument(..., help="Files or directories."),
) -> None:
    """List the manifest files the given paths resolve to."""
    for path in _pipeline(ctx).resolve(paths):
        typer.echo(path)


@app.command("split")
@friendly_errors
def split(
    ctx: typer.Context,
    paths: List[str] = typer.Argument(..., help="Files or directories."),
    summary: bool = typer.Option(False, "--summary", "-s", help="Show a table instead of content."),
) -> None:
    """Split manifests into documents and print them."""
    documents = _pipeline(ctx).run(paths)

    if summary:
        table = Table(show_header=True)
        table.add_column("#", style="dim")
        table.add_column("File")
        table.add_column("Bytes", justify="right")
        for i, doc in enumerate(documents):
            table.add_row(str(i), doc.origin_file, str(len(doc.content)))
        console.print(table)
        console.print(f"[bold]{len(documents)}[/bold] document(s)")
        return

    typer.echo(join_documents(doc.content for doc in documents), nl=False)


if __name__ == "__main__":
    app()
