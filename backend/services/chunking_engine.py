"""Chunking engine that splits documents into overlapping character windows."""
import logging
from typing import List

from models.document import Document
from models.chunk import Chunk
from config import CHUNK_SIZE, CHUNK_OVERLAP

logger = logging.getLogger(__name__)


def _validate_window(chunk_size: int, overlap: int) -> None:
    """Reject window parameters that would loop forever or corrupt chunks."""
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
        raise ValueError(f"chunk_size must be an integer, got {chunk_size!r}")
    if isinstance(overlap, bool) or not isinstance(overlap, int):
        raise ValueError(f"overlap must be an integer, got {overlap!r}")
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if overlap < 0:
        raise ValueError(f"overlap cannot be negative, got {overlap}")
    if overlap >= chunk_size:
        raise ValueError(
            f"overlap ({overlap}) must be smaller than chunk_size ({chunk_size})"
        )


def chunk_document(
    document_id: str,
    document_name: str,
    content: str,
    chunk_size: int = CHUNK_SIZE,
    overlap: int = CHUNK_OVERLAP
) -> List[Chunk]:
    """
    Split one document's text into ordered, overlapping chunks.

    Each window spans ``[offset, offset + chunk_size)`` clamped to the content
    length, and the offset advances by ``chunk_size - overlap``. Emission stops
    as soon as a window reaches the end of the content, so the final chunk is
    never empty and never lies entirely inside the previous one.

    Args:
        document_id: Identifier of the owning document
        document_name: Display name carried on every chunk
        content: Full document text (may be empty)
        chunk_size: Window size in characters
        overlap: Characters shared by consecutive chunks

    Returns:
        List of chunks in source order; empty if content is empty

    Raises:
        ValueError: If chunk_size <= 0, overlap < 0 or overlap >= chunk_size
    """
    _validate_window(chunk_size, overlap)

    step = chunk_size - overlap
    length = len(content)
    chunks = []
    start = 0

    while start < length:
        end = min(start + chunk_size, length)
        index = len(chunks)
        chunks.append(Chunk(
            chunk_id=f"{document_id}_{index}",
            document_id=document_id,
            document_name=document_name,
            text=content[start:end],
            index=index,
            start_char=start,
            end_char=end
        ))
        if end == length:
            break
        start += step

    logger.debug(f"Chunked {document_name} ({length} chars) into {len(chunks)} chunks")
    return chunks


class ChunkingEngine:
    """Segments documents into fixed-size overlapping chunks."""

    def __init__(self, chunk_size: int = CHUNK_SIZE, chunk_overlap: int = CHUNK_OVERLAP):
        """
        Initialize ChunkingEngine.

        Args:
            chunk_size: Window size in characters
            chunk_overlap: Overlap between consecutive chunks in characters

        Raises:
            ValueError: If the window parameters are invalid
        """
        _validate_window(chunk_size, chunk_overlap)
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

    def chunk_document(self, document_id: str, document_name: str, content: str) -> List[Chunk]:
        """Chunk a single document's content with this engine's window."""
        return chunk_document(
            document_id,
            document_name,
            content,
            chunk_size=self.chunk_size,
            overlap=self.chunk_overlap
        )

    def chunk_documents(self, documents: List[Document]) -> List[Chunk]:
        """
        Chunk a batch of documents.

        Args:
            documents: Loaded documents

        Returns:
            Chunks of every document, grouped per document in input order
        """
        all_chunks = []

        for document in documents:
            logger.info(f"Chunking document: {document.name}")
            all_chunks.extend(
                self.chunk_document(document.document_id, document.name, document.content)
            )

        logger.info(f"Created {len(all_chunks)} chunks from {len(documents)} documents")
        return all_chunks
