"""Services for the document retrieval engine."""
from .document_loader import DocumentLoader
from .chunking_engine import ChunkingEngine, chunk_document
from .retrieval_engine import RetrievalEngine, search, score_chunks, tokenize_query
from .chunk_store import ChunkStore
from .context_builder import RetrievedContext, build_context, estimate_tokens

__all__ = ['DocumentLoader', 'ChunkingEngine', 'chunk_document', 'RetrievalEngine', 'search', 'score_chunks', 'tokenize_query', 'ChunkStore', 'RetrievedContext', 'build_context', 'estimate_tokens']
