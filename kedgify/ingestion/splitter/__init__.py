# kedgify/ingestion/splitter/__init__.py
"""
Multi-document splitting.

YAML streams may hold several documents separated by ``---`` lines. The
splitting happens on raw bytes, before any YAML parsing.
"""

from kedgify.ingestion.splitter.engine import load_documents
from kedgify.ingestion.splitter.separator import SEPARATOR, join_documents, split_documents

__all__ = ["SEPARATOR", "split_documents", "join_documents", "load_documents"]
