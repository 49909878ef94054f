# kedgify/core/document.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Document:
    """
    One logical YAML document extracted from a manifest file.

    content holds the original, untrimmed bytes of the segment.
    origin_file is the absolute path of the file it came from.
    """

    origin_file: str
    content: bytes

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")

    def __repr__(self) -> str:
        return f"Document({self.origin_file!r}, {len(self.content)} bytes)"


__all__ = ["Document"]
