# Makes the folder importable as a package.
# Exports the vector store client and search types for convenience.

from .vector_store import UpstashVectorStore, VectorStoreError
from .types import ContentChunk, VectorMatch, Source

__all__ = ["UpstashVectorStore", "VectorStoreError", "ContentChunk", "VectorMatch", "Source"]
