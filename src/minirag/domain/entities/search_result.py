"""Search result - chunk paired with its similarity score."""

from dataclasses import dataclass

from minirag.domain.entities.chunk import Chunk


@dataclass(frozen=True)
class SearchResult:
    """Single ranked match returned by a chunk store."""

    chunk: Chunk
    score: float
