# kedgify/ingestion/splitter/engine.py
from __future__ import annotations

import os
from typing import Iterable, List

from kedgify.core.document import Document
from kedgify.core.exceptions import FileReadError, PathResolutionError
from kedgify.ingestion.splitter.separator import split_documents
from kedgify.logging.logger import get_logger
from kedgify.logging.tags import SPLIT

logger = get_logger(__name__)


def load_documents(files: Iterable[str]) -> List[Document]:
    """
    Read every file and split it into documents.

    Files are processed in order; documents keep their in-file order. The
    first read or path failure aborts the whole batch and nothing is
    returned.

    Raises:
        FileReadError: If a file can't be read.
        PathResolutionError: If a file's absolute path can't be determined.
    """
    documents: List[Document] = []

    for file in files:
        try:
            with open(file, "rb") as f:
                data = f.read()
        except OSError as exc:
            raise FileReadError(file, exc.strerror or exc) from exc

        try:
            origin = os.path.abspath(file)
        except (OSError, ValueError) as exc:
            raise PathResolutionError(file, exc) from exc

        segments = split_documents(data)
        if not segments:
            logger.debug(f"{SPLIT} {origin}: no documents")

        documents.extend(Document(origin_file=origin, content=segment) for segment in segments)

    logger.debug(f"{SPLIT} Produced {len(documents)} document(s)")
    return documents


__all__ = ["load_documents"]
