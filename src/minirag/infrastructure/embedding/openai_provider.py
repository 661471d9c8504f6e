"""OpenAI-compatible embedding provider."""

import logging

from openai import AsyncOpenAI, OpenAIError

logger = logging.getLogger(__name__)


class OpenAIEmbeddingProvider:
    """Embedding provider using OpenAI-compatible API.

    Failures are logged and reported as an empty vector.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        model: str,
    ) -> None:
        self._client = AsyncOpenAI(base_url=base_url, api_key=api_key) if api_key else None
        self._model = model

    async def embed(self, text: str) -> list[float]:
        """Generate embedding for text, or [] when unavailable."""
        if self._client is None:
            logger.warning("Embedding API key is not configured")
            return []
        if not text:
            return []
        try:
            response = await self._client.embeddings.create(
                model=self._model,
                input=text,
            )
        except OpenAIError as e:
            logger.warning("Embedding request failed: %s", e)
            return []
        if not response.data:
            return []
        return list(response.data[0].embedding)
