"""Chunk data models."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Chunk:
    """Represents a document chunk for retrieval."""
    chunk_id: str  # Format: "{document_id}_{index}"
    document_id: str
    document_name: str
    text: str
    index: int
    start_char: int = 0
    end_char: int = 0


@dataclass
class ScoredChunk:
    """Chunk with lexical relevance score from retrieval."""
    chunk: Chunk
    relevance_score: int  # number of distinct query terms found in the chunk
