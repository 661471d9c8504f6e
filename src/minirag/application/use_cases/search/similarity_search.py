"""Similarity search use case - embed query, rank chunks, apply score threshold."""

import logging
from dataclasses import dataclass

from minirag.application.ports import ChunkStore, EmbeddingProvider
from minirag.domain.entities import SearchResult
from minirag.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


@dataclass
class SearchOutcome:
    """Ranked candidates from the store and the subset that cleared the threshold."""

    candidates: list[SearchResult]
    results: list[SearchResult]


class SimilaritySearchUseCase:
    """Top-K cosine search followed by a minimum-score filter."""

    def __init__(
        self,
        store: ChunkStore,
        embedding_provider: EmbeddingProvider,
        top_k: int = 3,
        min_score: float = 0.4,
    ) -> None:
        self._store = store
        self._embedding_provider = embedding_provider
        self._top_k = top_k
        self._min_score = min_score

    async def execute(self, query: str) -> SearchOutcome:
        """Execute similarity search for a free-text query."""
        if not query or not query.strip():
            raise ValidationError("query is required")

        embedding = await self._embedding_provider.embed(query)
        candidates = self._store.search(embedding, self._top_k)

        logger.info("query=%r candidates=%d", query, len(candidates))
        for r in candidates:
            logger.debug("query=%r chunk=%s score=%.3f", query, r.chunk.id, r.score)

        results = [r for r in candidates if r.score >= self._min_score]
        return SearchOutcome(candidates=candidates, results=results)
