# kedgify/ingestion/source/__init__.py
"""
File discovery for manifest ingestion.

The resolver handles the "where" of ingestion: it turns user supplied files
and directories into the list of manifest files to read.
"""

from kedgify.ingestion.source.resolver import DEFAULT_PATTERNS, resolve_files

__all__ = ["DEFAULT_PATTERNS", "resolve_files"]
