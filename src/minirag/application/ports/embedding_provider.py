"""Embedding provider port."""

from typing import Protocol


class EmbeddingProvider(Protocol):
    """Port for generating text embeddings.

    Implementations return an empty list when no embedding is available
    instead of raising.
    """

    async def embed(self, text: str) -> list[float]: ...
