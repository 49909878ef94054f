# kedgify/ingestion/splitter/separator.py
"""
Byte-level YAML document separator handling.

A separator is ``---`` followed by a newline, sitting either at the very
start of the stream or right after a newline. The newline before it stays
with the previous document, which lets back-to-back separators each be
recognised:

    ---             # leading separator, empty segment dropped
    ---             # consecutive separator, empty segment dropped
    name: abc
    ---
    name: def

``key: ---value`` never splits, and neither does a trailing ``---`` with no
newline after it.
"""

from __future__ import annotations

import re
from typing import Iterable, List

SEPARATOR = b"---\n"

_SEPARATOR_RE = re.compile(rb"(?:\A|(?<=\n))---\n")


def split_documents(data: bytes) -> List[bytes]:
    """
    Split a YAML byte stream into its documents.

    Segments that are empty or Unicode whitespace only (NBSP, NEL, ...) are
    dropped. The remaining segments are returned untrimmed, in stream order.

    Examples:
        >>> split_documents(b"---\\na: 1\\n---\\nb: 2\\n")
        [b'a: 1\\n', b'b: 2\\n']
        >>> split_documents(b"---\\n---\\n")
        []
    """
    return [segment for segment in _SEPARATOR_RE.split(data) if not _is_blank(segment)]


def _is_blank(segment: bytes) -> bool:
    # Undecodable bytes become lone surrogates, which never count as whitespace.
    return not segment.decode("utf-8", "surrogateescape").strip()


def join_documents(contents: Iterable[bytes]) -> bytes:
    """
    Rebuild a YAML stream from document contents.

    Each document is terminated with a newline if it lacks one, so the
    result splits back into the same documents.
    """
    parts: List[bytes] = []
    for content in contents:
        if not content.endswith(b"\n"):
            content += b"\n"
        parts.append(content)
    return SEPARATOR.join(parts)


__all__ = ["SEPARATOR", "split_documents", "join_documents"]
