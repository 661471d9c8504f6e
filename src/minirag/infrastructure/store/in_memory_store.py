"""In-memory chunk store with brute-force cosine search."""

from collections.abc import Iterable, Sequence

from minirag.domain.entities import Chunk, SearchResult
from minirag.domain.similarity import cosine_similarity
from minirag.infrastructure.store.rwlock import ReadWriteLock


class InMemoryChunkStore:
    """Append-only chunk list guarded by a reader/writer lock.

    Search scores every chunk (no index) and ranks with a stable sort, so
    chunks with equal scores keep insertion order.
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._chunks: list[Chunk] = []

    def add(self, chunks: Iterable[Chunk]) -> None:
        """Append chunks in order."""
        batch = list(chunks)
        with self._lock.write_locked():
            self._chunks.extend(batch)

    def search(self, query_embedding: Sequence[float], top_k: int) -> list[SearchResult]:
        """Return up to top_k chunks by descending cosine similarity."""
        if top_k <= 0:
            return []
        with self._lock.read_locked():
            results = [
                SearchResult(chunk=chunk, score=cosine_similarity(query_embedding, chunk.embedding))
                for chunk in self._chunks
            ]
        results.sort(key=lambda r: r.score, reverse=True)
        return results[:top_k]

    def clear(self) -> None:
        """Discard all chunks."""
        with self._lock.write_locked():
            self._chunks = []

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._chunks)
