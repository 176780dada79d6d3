"""Retrieval engine that ranks chunks by lexical term overlap."""
import logging
from typing import Iterable, List, Optional

from models.chunk import Chunk, ScoredChunk
from config import SEARCH_LIMIT

logger = logging.getLogger(__name__)


def tokenize_query(query: str) -> List[str]:
    """
    Split a query on whitespace into distinct lower-cased terms.

    Terms keep the order in which they first appear. An empty or
    whitespace-only query yields no terms.
    """
    return list(dict.fromkeys(token.lower() for token in query.split()))


def score_chunks(query: str, candidates: Iterable[Chunk]) -> List[ScoredChunk]:
    """
    Score candidates against a query and rank the ones that match.

    A chunk scores one point per distinct query term that occurs anywhere in
    its lower-cased text, however many times it occurs. Zero-score chunks are
    dropped; the rest are ordered by score descending, with ties kept in
    input order.

    Args:
        query: Free-text query
        candidates: Pool of chunks eligible for this query

    Returns:
        Ranked list of scored chunks, empty if nothing matches
    """
    terms = tokenize_query(query)
    if not terms:
        return []

    scored = []
    for chunk in candidates:
        text = chunk.text.lower()
        score = sum(1 for term in terms if term in text)
        if score > 0:
            scored.append(ScoredChunk(chunk=chunk, relevance_score=score))

    # sorted() is stable, which keeps equal scores in input order
    return sorted(scored, key=lambda item: item.relevance_score, reverse=True)


def search(query: str, candidates: Iterable[Chunk], limit: int = SEARCH_LIMIT) -> List[Chunk]:
    """
    Return the chunks that best match a query, most relevant first.

    Args:
        query: Free-text query
        candidates: Pool of chunks eligible for this query (may be empty)
        limit: Maximum number of chunks to return

    Returns:
        At most ``limit`` chunks; empty if no candidate matches

    Raises:
        ValueError: If limit is not a positive integer
    """
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")

    ranked = score_chunks(query, candidates)
    return [item.chunk for item in ranked[:limit]]


class RetrievalEngine:
    """Select the most relevant chunks for a query from a candidate pool."""

    def __init__(self, limit: int = SEARCH_LIMIT):
        """
        Initialize the retrieval engine.

        Args:
            limit: Default maximum number of chunks returned per search

        Raises:
            ValueError: If limit is not a positive integer
        """
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")
        self.limit = limit
        logger.info(f"Initialized RetrievalEngine (limit={limit})")

    def score(self, query: str, candidates: Iterable[Chunk]) -> List[ScoredChunk]:
        """Rank every matching candidate with its relevance score."""
        return score_chunks(query, candidates)

    def search(self, query: str, candidates: Iterable[Chunk], limit: Optional[int] = None) -> List[Chunk]:
        """
        Retrieve the best matching chunks for a query.

        Args:
            query: User question
            candidates: Chunks eligible for this request, e.g. those of the
                files attached to the conversation
            limit: Overrides the engine's default limit

        Returns:
            List of chunks, best match first

        Raises:
            ValueError: If limit is not a positive integer
        """
        candidates = list(candidates)
        limit = self.limit if limit is None else limit

        if not query or not query.strip():
            logger.warning("Empty query string provided, returning empty results")

        results = search(query, candidates, limit=limit)
        logger.info(f"Retrieved {len(results)} of {len(candidates)} candidate chunks")
        return results
