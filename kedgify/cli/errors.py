# kedgify/cli/errors.py
"""
Error handler for the kedgify CLI.

Turns KedgifyError into a short message on stderr and exit code 1 instead
of a raw traceback. Anything else propagates.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from kedgify.core.exceptions import KedgifyError
from kedgify.logging.logger import get_logger
from kedgify.logging.tags import CLI

logger = get_logger(__name__)

err_console = Console(stderr=True)

F = TypeVar("F", bound=Callable[..., Any])


def report_error(error: KedgifyError) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(error))}", highlight=False, soft_wrap=True)


def friendly_errors(func: F) -> F:
    """Decorator for typer commands."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except KedgifyError as e:
            logger.debug(f"{CLI} {e.kind.value}: {e}", exc_info=True)
            report_error(e)
            raise typer.Exit(code=1) from e

    return wrapper  # type: ignore[return-value]
