# kedgify/ingestion/pipeline.py
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Sequence

from kedgify.core.document import Document
from kedgify.ingestion.source.resolver import DEFAULT_PATTERNS, resolve_files
from kedgify.ingestion.splitter.engine import load_documents
from kedgify.logging.logger import get_logger
from kedgify.logging.tags import PIPELINE, RESOLVE, SPLIT

if TYPE_CHECKING:
    from kedgify.config.schema import KedgifyConfig

logger = get_logger(__name__)


class ManifestPipeline:
    """
    End-to-end manifest pipeline:

        paths
          -> resolution (manifest files)
          -> splitting (documents)

    Synchronous and all-or-nothing: the first error aborts the run and no
    documents are returned.
    """

    def __init__(self, patterns: Sequence[str] = DEFAULT_PATTERNS) -> None:
        self.patterns = tuple(patterns)

    @classmethod
    def from_config(cls, cfg: "KedgifyConfig") -> "ManifestPipeline":
        return cls(patterns=cfg.resolver.patterns)

    def resolve(self, paths: Iterable[str]) -> List[str]:
        return resolve_files(paths, self.patterns)

    def run(self, paths: Iterable[str]) -> List[Document]:
        paths = list(paths)
        logger.info(f"{PIPELINE} Starting on {len(paths)} path(s)")

        files = self.resolve(paths)
        logger.info(f"{RESOLVE} Found {len(files)} manifest file(s)")

        documents = load_documents(files)
        logger.info(f"{SPLIT} Split into {len(documents)} document(s)")

        return documents


__all__ = ["ManifestPipeline"]
