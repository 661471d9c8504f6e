"""Domain entities."""

from minirag.domain.entities.chunk import Chunk
from minirag.domain.entities.search_result import SearchResult

__all__ = [
    "Chunk",
    "SearchResult",
]
