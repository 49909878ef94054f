# kedgify/ingestion/__init__.py
"""
Manifest ingestion.

Flow: resolve_files() → paths → load_documents() → Document
"""

from kedgify.ingestion.pipeline import ManifestPipeline
from kedgify.ingestion.source.resolver import DEFAULT_PATTERNS, resolve_files
from kedgify.ingestion.splitter import join_documents, load_documents, split_documents

__all__ = [
    "ManifestPipeline",
    "DEFAULT_PATTERNS",
    "resolve_files",
    "load_documents",
    "split_documents",
    "join_documents",
]
