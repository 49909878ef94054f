# kedgify/core/__init__.py
"""
Core contracts shared by every stage of the pipeline.
"""

from kedgify.core.document import Document
from kedgify.core.exceptions import (
    ConfigError,
    ErrorKind,
    FileReadError,
    KedgifyError,
    NoFilesFoundError,
    PathAccessError,
    PathResolutionError,
)

__all__ = [
    "Document",
    "ErrorKind",
    "KedgifyError",
    "PathAccessError",
    "NoFilesFoundError",
    "FileReadError",
    "PathResolutionError",
    "ConfigError",
]
