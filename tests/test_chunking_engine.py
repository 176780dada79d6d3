"""Unit tests for ChunkingEngine."""
import math
import string
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

import pytest
from models.document import Document
from models.chunk import Chunk
from services.chunking_engine import ChunkingEngine, chunk_document


ALPHABET_25 = string.ascii_lowercase[:25]


class TestChunkDocument:
    """Test suite for the chunk_document function."""

    def test_empty_content_produces_no_chunks(self):
        """Test that empty content yields an empty sequence."""
        assert chunk_document("d", "n", "", 1000, 100) == []

    def test_short_content_is_single_chunk(self):
        """Test that content shorter than the window is one whole chunk."""
        content = "x" * 500
        chunks = chunk_document("d", "n", content, 1000, 100)

        assert len(chunks) == 1
        assert chunks[0].text == content
        assert chunks[0].index == 0
        assert chunks[0].chunk_id == "d_0"

    def test_content_shorter_than_overlap_is_single_chunk(self):
        """Test that a tiny document still yields one chunk."""
        chunks = chunk_document("d", "n", "a", chunk_size=10, overlap=3)

        assert [c.text for c in chunks] == ["a"]

    def test_content_exactly_window_size_is_single_chunk(self):
        """Test that content equal to the window length is not split."""
        chunks = chunk_document("d", "n", "y" * 1000, 1000, 100)

        assert len(chunks) == 1
        assert len(chunks[0].text) == 1000

    def test_overlap_offsets(self):
        """Test window offsets for chunk_size=10, overlap=3 on 25 chars."""
        chunks = chunk_document("d", "n", ALPHABET_25, chunk_size=10, overlap=3)

        spans = [(c.start_char, c.end_char) for c in chunks]
        assert spans == [(0, 10), (7, 17), (14, 24), (21, 25)]
        assert [c.text for c in chunks] == [ALPHABET_25[s:e] for s, e in spans]
        assert [c.index for c in chunks] == [0, 1, 2, 3]

    def test_no_fully_overlapped_trailing_chunk(self):
        """Test that a window reaching the end stops emission."""
        # Second window [7, 17) already reaches the end of 17 chars
        chunks = chunk_document("d", "n", "a" * 17, chunk_size=10, overlap=3)

        assert len(chunks) == 2
        assert chunks[-1].end_char == 17

    @pytest.mark.parametrize("length,size,overlap", [
        (10, 10, 3),
        (11, 10, 3),
        (24, 10, 3),
        (2500, 1000, 100),
        (100, 7, 0),
        (99, 10, 9),
    ])
    def test_chunk_count_invariant(self, length, size, overlap):
        """Test the closed-form chunk count and non-empty final chunk."""
        content = "z" * length
        chunks = chunk_document("d", "n", content, chunk_size=size, overlap=overlap)

        expected = math.ceil(max(length - overlap, 0) / (size - overlap))
        assert len(chunks) == expected
        assert all(len(c.text) > 0 for c in chunks)
        for i, chunk in enumerate(chunks):
            assert chunk.start_char == i * (size - overlap)
            assert chunk.end_char == min(chunk.start_char + size, length)

    def test_every_character_is_covered(self):
        """Test that chunks together cover the whole content."""
        content = "The quick brown fox jumps over the lazy dog. " * 40
        chunks = chunk_document("doc", "fox.txt", content, chunk_size=64, overlap=16)

        covered = set()
        for chunk in chunks:
            assert content[chunk.start_char:chunk.end_char] == chunk.text
            covered.update(range(chunk.start_char, chunk.end_char))

        assert covered == set(range(len(content)))

    def test_chunks_carry_document_metadata(self):
        """Test that each chunk references its source document."""
        chunks = chunk_document("file-42", "notes.md", "a" * 30, chunk_size=10, overlap=0)

        assert [c.chunk_id for c in chunks] == ["file-42_0", "file-42_1", "file-42_2"]
        assert all(c.document_id == "file-42" for c in chunks)
        assert all(c.document_name == "notes.md" for c in chunks)

    def test_deterministic(self):
        """Test that re-chunking reproduces identical chunks."""
        content = "lorem ipsum dolor sit amet " * 20

        first = chunk_document("d", "n", content, chunk_size=50, overlap=5)
        second = chunk_document("d", "n", content, chunk_size=50, overlap=5)

        assert first == second

    def test_chunks_are_immutable(self):
        """Test that produced chunks cannot be modified."""
        chunk = chunk_document("d", "n", "hello")[0]

        with pytest.raises(AttributeError):
            chunk.text = "changed"

    @pytest.mark.parametrize("size,overlap", [
        (100, 100),
        (100, 150),
        (0, 0),
        (-5, 0),
        (10, -1),
    ])
    def test_invalid_parameters_raise(self, size, overlap):
        """Test that invalid window parameters fail fast."""
        with pytest.raises(ValueError):
            chunk_document("d", "n", "some content", chunk_size=size, overlap=overlap)

    def test_invalid_parameters_raise_even_for_empty_content(self):
        """Test that validation does not depend on the content."""
        with pytest.raises(ValueError, match="overlap"):
            chunk_document("d", "n", "", chunk_size=100, overlap=100)

    def test_non_integer_parameters_raise(self):
        """Test that fractional window sizes are rejected."""
        with pytest.raises(ValueError, match="integer"):
            chunk_document("d", "n", "text", chunk_size=10.5, overlap=1)


class TestChunkingEngine:
    """Test suite for ChunkingEngine class."""

    def test_default_parameters(self):
        """Test that the engine defaults to a 1000/100 window."""
        engine = ChunkingEngine()

        assert engine.chunk_size == 1000
        assert engine.chunk_overlap == 100

    def test_invalid_parameters_rejected_at_construction(self):
        """Test that the engine refuses an overlap as large as the window."""
        with pytest.raises(ValueError):
            ChunkingEngine(chunk_size=100, chunk_overlap=100)

    def test_chunk_document_uses_engine_window(self):
        """Test that the engine applies its configured window."""
        engine = ChunkingEngine(chunk_size=10, chunk_overlap=3)
        chunks = engine.chunk_document("d", "n", ALPHABET_25)

        assert len(chunks) == 4
        assert chunks[1].text == ALPHABET_25[7:17]

    def test_chunk_documents_batch(self):
        """Test chunking several documents keeps per-document grouping."""
        engine = ChunkingEngine(chunk_size=10, chunk_overlap=0)
        documents = [
            Document(document_id="a", name="a.txt", content="x" * 25),
            Document(document_id="b", name="b.txt", content=""),
            Document(document_id="c", name="c.txt", content="y" * 5),
        ]

        chunks = engine.chunk_documents(documents)

        assert [c.chunk_id for c in chunks] == ["a_0", "a_1", "a_2", "c_0"]
        assert all(isinstance(c, Chunk) for c in chunks)
