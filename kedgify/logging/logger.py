# kedgify/logging/logger.py
"""
Logging setup. Modules only call get_logger(__name__); the CLI calls
configure_logging() once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO, Union

DEFAULT_FORMAT = "[%(levelname)s] %(name)s — %(message)s"


def configure_logging(
    level: Union[int, str] = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream: TextIO | None = None,
) -> None:
    # A handler is installed only once; later calls just change the level.
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
