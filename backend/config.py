"""Configuration management for the document retrieval engine."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Chunking Configuration
CHUNK_SIZE = int(os.getenv("CHUNK_SIZE", "1000"))  # characters
CHUNK_OVERLAP = int(os.getenv("CHUNK_OVERLAP", "100"))  # characters

# Retrieval Configuration
SEARCH_LIMIT = int(os.getenv("SEARCH_LIMIT", "3"))

# Document Configuration
DOCS_DIRECTORY = os.getenv("DOCS_DIRECTORY", "documents")
SUPPORTED_EXTENSIONS = (".txt", ".md", ".pdf")

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")  # text | json
