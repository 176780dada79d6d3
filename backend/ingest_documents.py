"""
Document ingestion and search script.

This script:
1. Loads all supported documents (.txt, .md, .pdf) from a directory
2. Chunks them into overlapping windows
3. Indexes the chunks in an in-memory chunk store
4. Optionally runs a query and prints the best matching chunks

Usage:
    python ingest_documents.py documents/ --query "refund policy" --limit 3
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent))

from services.document_loader import DocumentLoader
from services.chunking_engine import ChunkingEngine
from services.retrieval_engine import RetrievalEngine
from services.chunk_store import ChunkStore
from services.context_builder import build_context
from logger import setup_logging
from config import CHUNK_SIZE, CHUNK_OVERLAP, SEARCH_LIMIT, DOCS_DIRECTORY, LOG_LEVEL, LOG_FORMAT

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Index a directory of documents and search it by keyword"
    )
    parser.add_argument(
        "docs_directory",
        nargs="?",
        default=DOCS_DIRECTORY,
        help=f"Directory containing documents (default: {DOCS_DIRECTORY})"
    )
    parser.add_argument(
        "--query",
        help="Query to run against the indexed chunks"
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=SEARCH_LIMIT,
        help=f"Maximum number of chunks to return (default: {SEARCH_LIMIT})"
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=CHUNK_SIZE,
        help=f"Chunk window size in characters (default: {CHUNK_SIZE})"
    )
    parser.add_argument(
        "--overlap",
        type=int,
        default=CHUNK_OVERLAP,
        help=f"Overlap between chunks in characters (default: {CHUNK_OVERLAP})"
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help=f"Logging level (default: {LOG_LEVEL})"
    )
    parser.add_argument(
        "--log-format",
        choices=["text", "json"],
        default=LOG_FORMAT,
        help=f"Log output format (default: {LOG_FORMAT})"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main ingestion process. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        setup_logging(args.log_level, args.log_format)
        chunking_engine = ChunkingEngine(chunk_size=args.chunk_size, chunk_overlap=args.overlap)
        retrieval_engine = RetrievalEngine(limit=args.limit)
    except ValueError as e:
        logger.error(f"Invalid parameters: {e}")
        return 1

    documents = DocumentLoader(docs_directory=args.docs_directory).load_documents()
    if not documents:
        logger.error(f"No documents found in {args.docs_directory}")
        return 1

    store = ChunkStore(chunking_engine)
    for document in documents:
        store.index_document(document)

    logger.info(f"Indexed {len(documents)} documents into {store.count()} chunks")

    if args.query is None:
        return 0

    results = retrieval_engine.search(args.query, store.get_chunks())
    if not results:
        print(f"No matches for: {args.query}")
        return 0

    for rank, chunk in enumerate(results, start=1):
        print(f"{rank}. {chunk.document_name} [{chunk.chunk_id}]")
        print(chunk.text.strip())
        print()

    context = build_context(results)
    print(f"Sources: {', '.join(context.sources)} (~{context.token_estimate} tokens)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
