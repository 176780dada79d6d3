"""Document loading service for uploaded text and PDF files."""
import logging
import os
from pathlib import Path
from typing import List, Optional
import fitz  # PyMuPDF

from models.document import Document
from config import DOCS_DIRECTORY, SUPPORTED_EXTENSIONS

logger = logging.getLogger(__name__)


class DocumentLoader:
    """Loads uploaded files and extracts their text content."""

    def __init__(self, docs_directory: str = DOCS_DIRECTORY):
        """
        Initialize DocumentLoader.

        Args:
            docs_directory: Path to directory containing documents
        """
        self.docs_directory = docs_directory

    def load_documents(self) -> List[Document]:
        """
        Load all supported files from the documents directory.

        Returns:
            List of Document objects in filename order
        """
        documents = []

        if not os.path.isdir(self.docs_directory):
            logger.error(f"Documents directory not found: {self.docs_directory}")
            return documents

        filenames = [
            f for f in os.listdir(self.docs_directory)
            if f.lower().endswith(SUPPORTED_EXTENSIONS)
        ]
        logger.info(f"Found {len(filenames)} documents in {self.docs_directory}")

        for filename in sorted(filenames):
            filepath = os.path.join(self.docs_directory, filename)

            try:
                document = self.load_file(filepath)
                documents.append(document)
                logger.info(f"Loaded {filename}: {len(document.content)} chars")
            except Exception as e:
                logger.error(f"Error loading {filename}: {str(e)}", exc_info=True)
                # Skip unreadable file and continue
                continue

        logger.info(f"Successfully loaded {len(documents)} documents")
        return documents

    def load_file(self, filepath: str, document_id: Optional[str] = None) -> Document:
        """
        Load a single file into a Document.

        Args:
            filepath: Path to a .txt, .md or .pdf file
            document_id: Identifier to assign; defaults to the file name

        Returns:
            Document with the extracted text

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file type is not supported
        """
        path = Path(filepath)
        if not path.is_file():
            raise FileNotFoundError(f"Document not found: {filepath}")

        suffix = path.suffix.lower()
        if suffix not in SUPPORTED_EXTENSIONS:
            raise ValueError(f"Unsupported document type: {suffix or path.name}")

        if suffix == ".pdf":
            content = self._read_pdf(path)
        else:
            content = path.read_text(encoding="utf-8")

        return Document(
            document_id=document_id or path.name,
            name=path.name,
            content=content,
            file_type=suffix.lstrip("."),
            size=path.stat().st_size
        )

    def _read_pdf(self, path: Path) -> str:
        """Extract the text of every PDF page, joined by newlines."""
        try:
            pdf_document = fitz.open(str(path))
            try:
                pages = [page.get_text() for page in pdf_document]
            finally:
                pdf_document.close()
        except Exception as e:
            logger.error(f"Failed to load PDF {path.name}: {str(e)}")
            raise

        return "\n".join(pages)
