"""Data models for the document retrieval engine."""
from .document import Document
from .chunk import Chunk, ScoredChunk

__all__ = [
    "Document",
    "Chunk",
    "ScoredChunk",
]
