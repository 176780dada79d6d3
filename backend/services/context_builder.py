"""Formats retrieved chunks for the downstream generation request."""
import math
from dataclasses import dataclass, field
from typing import List

from models.chunk import Chunk


@dataclass
class RetrievedContext:
    """Citation-ready context assembled from retrieved chunks."""
    text: str
    sources: List[str] = field(default_factory=list)
    chunk_ids: List[str] = field(default_factory=list)
    token_estimate: int = 0


def estimate_tokens(text: str) -> int:
    """Approximate token count (1 token ≈ 4 characters)."""
    return math.ceil(len(text) / 4)


def build_context(chunks: List[Chunk]) -> RetrievedContext:
    """
    Render retrieved chunks as prompt context with source citations.

    Args:
        chunks: Retrieved chunks, best match first

    Returns:
        RetrievedContext whose text tags each chunk with its document name
    """
    blocks = [f"[Source: {chunk.document_name}]\n{chunk.text}" for chunk in chunks]
    text = "\n\n".join(blocks)

    return RetrievedContext(
        text=text,
        sources=list(dict.fromkeys(chunk.document_name for chunk in chunks)),
        chunk_ids=[chunk.chunk_id for chunk in chunks],
        token_estimate=estimate_tokens(text)
    )
