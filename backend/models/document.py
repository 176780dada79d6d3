"""Document data models."""
from dataclasses import dataclass


@dataclass
class Document:
    """Represents an uploaded document ready for chunking."""
    document_id: str
    name: str
    content: str
    file_type: str = "text"
    size: int = 0
