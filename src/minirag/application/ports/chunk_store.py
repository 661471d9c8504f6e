"""Chunk store port - holds chunks and answers similarity queries."""

from collections.abc import Iterable, Sequence
from typing import Protocol

from minirag.domain.entities import Chunk, SearchResult


class ChunkStore(Protocol):
    """Port for chunk storage with similarity search."""

    def add(self, chunks: Iterable[Chunk]) -> None: ...

    def search(self, query_embedding: Sequence[float], top_k: int) -> list[SearchResult]: ...

    def clear(self) -> None: ...

    def __len__(self) -> int: ...
