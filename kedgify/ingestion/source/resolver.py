# kedgify/ingestion/source/resolver.py
"""
Resolve input paths into manifest files.

Directories are expanded (non-recursively) to the files matching the
manifest patterns. Anything else is taken verbatim: a file passed
explicitly is always ingested, whatever its extension.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Iterable, List, Sequence

from kedgify.core.exceptions import NoFilesFoundError, PathAccessError
from kedgify.logging.logger import get_logger
from kedgify.logging.tags import RESOLVE

logger = get_logger(__name__)

DEFAULT_PATTERNS: tuple[str, ...] = ("*.yml", "*.yaml")


def resolve_files(
    paths: Iterable[str],
    patterns: Sequence[str] = DEFAULT_PATTERNS,
) -> List[str]:
    """
    Expand files and directories into an ordered list of manifest files.

    Args:
        paths: Input paths, in the order they should be processed.
        patterns: Glob patterns used to expand directories. Matches are
                  appended pattern by pattern, so with the defaults every
                  *.yml file of a directory comes before its *.yaml files.

    Returns:
        Resolved file paths. Explicit paths are returned unmodified.

    Raises:
        PathAccessError: If a path can't be stat'd.
        NoFilesFoundError: If nothing was found at all.
    """
    files: List[str] = []

    for path in paths:
        try:
            info = os.stat(path)
        except (OSError, ValueError) as exc:
            raise PathAccessError(path, getattr(exc, "strerror", None) or exc) from exc

        if stat.S_ISDIR(info.st_mode):
            found = _expand_directory(path, patterns)
            logger.debug(f"{RESOLVE} {path}: {len(found)} manifest file(s)")
            files.extend(found)
        else:
            files.append(path)

    if not files:
        raise NoFilesFoundError(tuple(patterns))

    logger.debug(f"{RESOLVE} Resolved {len(files)} file(s)")
    return files


def _expand_directory(directory: str, patterns: Sequence[str]) -> List[str]:
    found: List[str] = []
    base = Path(directory)

    for pattern in patterns:
        for match in sorted(base.glob(pattern)):
            if match.is_dir():
                logger.debug(f"{RESOLVE} Skipping directory {match}")
                continue
            found.append(str(match))

    return found


__all__ = ["DEFAULT_PATTERNS", "resolve_files"]
