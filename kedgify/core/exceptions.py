# kedgify/core/exceptions.py
"""
Exception hierarchy for kedgify.

All errors inherit from KedgifyError so callers can handle every failure of
the pipeline with a single except clause. Each error carries an ErrorKind
tag and the path it concerns; the underlying cause is chained with
``raise ... from exc``.

Examples:
    >>> try:
    ...     docs = ManifestPipeline().run(paths)
    ... except KedgifyError as e:
    ...     print(e.kind, e.path)
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    PATH_ACCESS = "path_access"
    NO_FILES_FOUND = "no_files_found"
    FILE_READ = "file_read"
    PATH_RESOLUTION = "path_resolution"
    CONFIG = "config"


class KedgifyError(Exception):
    """Base class for all kedgify errors."""

    kind: ErrorKind

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class PathAccessError(KedgifyError):
    """A supplied path could not be stat'd."""

    kind = ErrorKind.PATH_ACCESS

    def __init__(self, path: str, reason: object = None) -> None:
        message = f"can't get file info about {path}"
        if reason is not None:
            message = f"{message}: {reason}"
        super().__init__(message, path=path)


class NoFilesFoundError(KedgifyError):
    """Resolution finished without finding a single manifest file."""

    kind = ErrorKind.NO_FILES_FOUND

    def __init__(self, patterns: tuple[str, ...] = ()) -> None:
        message = "no manifest files were found"
        if patterns:
            message = f"{message} (looked for {', '.join(patterns)})"
        super().__init__(message)
        self.patterns = patterns


class FileReadError(KedgifyError):
    """A resolved file could not be read."""

    kind = ErrorKind.FILE_READ

    def __init__(self, path: str, reason: object = None) -> None:
        message = f"file reading failed for {path}"
        if reason is not None:
            message = f"{message}: {reason}"
        super().__init__(message, path=path)


class PathResolutionError(KedgifyError):
    """The absolute path of a file could not be determined."""

    kind = ErrorKind.PATH_RESOLUTION

    def __init__(self, path: str, reason: object = None) -> None:
        message = f"cannot determine the absolute file path of {path!r}"
        if reason is not None:
            message = f"{message}: {reason}"
        super().__init__(message, path=path)


class ConfigError(KedgifyError):
    """Configuration file missing, malformed, or invalid."""

    kind = ErrorKind.CONFIG


__all__ = [
    "ErrorKind",
    "KedgifyError",
    "PathAccessError",
    "NoFilesFoundError",
    "FileReadError",
    "PathResolutionError",
    "ConfigError",
]
