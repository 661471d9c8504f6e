"""Application ports - interfaces for external adapters."""

from minirag.application.ports.chunk_store import ChunkStore
from minirag.application.ports.chunker import Chunker
from minirag.application.ports.embedding_provider import EmbeddingProvider

__all__ = [
    "ChunkStore",
    "Chunker",
    "EmbeddingProvider",
]
