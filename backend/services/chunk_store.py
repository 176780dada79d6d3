"""In-memory chunk library scoped by document."""
import logging
from typing import Dict, Iterable, List, Optional

from models.chunk import Chunk
from models.document import Document
from services.chunking_engine import ChunkingEngine

logger = logging.getLogger(__name__)


class ChunkStore:
    """
    Holds the chunks of indexed documents and hands out candidate pools.

    Chunks are grouped by document id. Documents keep the order in which they
    were first indexed, and each document's chunks keep their index order, so
    candidate pools are deterministic. Nothing is persisted.
    """

    def __init__(self, chunking_engine: Optional[ChunkingEngine] = None):
        self.chunking_engine = chunking_engine or ChunkingEngine()
        self._chunks: Dict[str, List[Chunk]] = {}

    def index_document(self, document: Document) -> List[Chunk]:
        """
        Chunk a document and store its chunks.

        Re-indexing a document replaces its previous chunks.

        Args:
            document: Document to index

        Returns:
            The chunks produced for the document
        """
        chunks = self.chunking_engine.chunk_document(
            document.document_id, document.name, document.content
        )
        if document.document_id in self._chunks:
            logger.info(f"Re-indexing document {document.document_id}")
        self._chunks[document.document_id] = chunks
        logger.info(f"Indexed {document.name}: {len(chunks)} chunks")
        return chunks

    def add_chunks(self, chunks: Iterable[Chunk]) -> None:
        """Store chunks produced elsewhere, appended to their documents."""
        added = 0
        for chunk in chunks:
            self._chunks.setdefault(chunk.document_id, []).append(chunk)
            added += 1
        logger.debug(f"Added {added} chunks to store")

    def get_chunks(self, document_ids: Optional[Iterable[str]] = None) -> List[Chunk]:
        """
        Return the candidate pool for a query scope.

        Args:
            document_ids: Collection of ids of the documents attached to the
                request; None means all

        Returns:
            Chunks of the selected documents in indexing order

        Raises:
            TypeError: If document_ids is a single string
        """
        if isinstance(document_ids, str):
            raise TypeError("document_ids must be a collection of ids, not a string")

        if document_ids is None:
            selected = self._chunks.keys()
        else:
            wanted = set(document_ids)
            selected = [doc_id for doc_id in self._chunks if doc_id in wanted]

        return [chunk for doc_id in selected for chunk in self._chunks[doc_id]]

    def remove_document(self, document_id: str) -> int:
        """
        Drop every chunk of a document.

        Returns:
            Number of chunks removed, 0 if the document was unknown
        """
        removed = self._chunks.pop(document_id, [])
        if removed:
            logger.info(f"Removed {len(removed)} chunks of document {document_id}")
        return len(removed)

    def document_ids(self) -> List[str]:
        return list(self._chunks)

    def count(self) -> int:
        return sum(len(chunks) for chunks in self._chunks.values())

    def clear(self) -> None:
        self._chunks.clear()
        logger.info("Cleared all chunks from store")
