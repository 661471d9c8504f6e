"""Embedding provider selection from settings."""

import logging

from minirag.application.ports import EmbeddingProvider
from minirag.config import Settings
from minirag.infrastructure.embedding.openai_provider import OpenAIEmbeddingProvider
from minirag.infrastructure.embedding.simple_provider import SimpleEmbeddingProvider

logger = logging.getLogger(__name__)


def create_embedding_provider(settings: Settings) -> EmbeddingProvider:
    """Build the embedding provider named by settings.embedding_backend."""
    backend = settings.embedding_backend
    if backend == "openai":
        if not settings.embedding_api_key:
            logger.warning("EMBEDDING_API_KEY is empty; embeddings will be unavailable")
        logger.info("Using OpenAI-compatible embeddings model=%s", settings.embedding_model)
        return OpenAIEmbeddingProvider(
            base_url=settings.embedding_api_url,
            api_key=settings.embedding_api_key,
            model=settings.embedding_model,
        )
    if backend == "simple":
        logger.info("Using local deterministic embeddings")
        return SimpleEmbeddingProvider()
    raise ValueError(f"Unsupported embedding backend: {backend}")
