"""
Kedgify - manifest discovery and multi-document splitting.

Kedgify turns a mixed list of files and directories into the ordered set of
YAML documents they contain, ready for a resource converter.

Quick Start:
    >>> from kedgify import ManifestPipeline
    >>> docs = ManifestPipeline().run(["./manifests"])
    >>> for doc in docs:
    ...     print(doc.origin_file, len(doc.content))

Public API:
    - ManifestPipeline: resolve + split in one call
    - resolve_files: expand paths into manifest files
    - load_documents: read and split resolved files
    - split_documents: byte-level document splitting
    - Document: (origin_file, content) value type
    - KedgifyError and subclasses

Architecture:
    kedgify/
    ├── core/              # Document type and exceptions
    ├── ingestion/         # Resolver, splitter, pipeline
    ├── config/            # Layered YAML configuration
    ├── logging/           # Logger setup and tags
    └── cli/               # typer entry point
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
from kedgify.ingestion.pipeline import ManifestPipeline
from kedgify.ingestion.source.resolver import resolve_files
from kedgify.ingestion.splitter import join_documents, load_documents, split_documents

__version__ = "0.1.0"

__all__ = [
    "Document",
    "ManifestPipeline",
    "resolve_files",
    "load_documents",
    "split_documents",
    "join_documents",
    "KedgifyError",
    "ErrorKind",
    "PathAccessError",
    "NoFilesFoundError",
    "FileReadError",
    "PathResolutionError",
    "ConfigError",
    "__version__",
]
