"""Load document use case."""

import logging

from minirag.application.dto.chunking_config import ChunkingConfig
from minirag.application.dto.document_dto import DocumentLoadInput, DocumentLoadOutput
from minirag.application.ports import Chunker, ChunkStore, EmbeddingProvider
from minirag.domain.entities import Chunk
from minirag.domain.exceptions import DocumentTooLarge, ValidationError

logger = logging.getLogger(__name__)


class LoadDocumentUseCase:
    """Load document into the store: chunking, size check, embedding, save."""

    def __init__(
        self,
        store: ChunkStore,
        chunker: Chunker,
        embedding_provider: EmbeddingProvider,
        chunking_config: ChunkingConfig,
        max_chunks: int,
    ) -> None:
        self._store = store
        self._chunker = chunker
        self._embedding_provider = embedding_provider
        self._chunking_config = chunking_config
        self._max_chunks = max_chunks

    async def execute(self, input_data: DocumentLoadInput) -> DocumentLoadOutput:
        """Chunk, embed and store a document.

        The chunk limit is checked before any embedding call, so a rejected
        document leaves the store untouched.
        """
        if not input_data.content.strip():
            raise ValidationError("Document content is empty")

        segments = self._chunker.chunk(input_data.content, self._chunking_config)
        if len(segments) > self._max_chunks:
            logger.warning(
                "Rejected document source=%r chunks=%d limit=%d",
                input_data.source,
                len(segments),
                self._max_chunks,
            )
            raise DocumentTooLarge(len(segments), self._max_chunks)

        chunks = await self.build_chunks(segments, input_data.source)
        self._store.add(chunks)
        logger.info("Loaded document source=%r chunks=%d", input_data.source, len(chunks))
        return DocumentLoadOutput(source=input_data.source, chunks_added=len(chunks))

    async def build_chunks(self, segments: list[str], source: str) -> list[Chunk]:
        """Embed segments in order and wrap them as chunks numbered from 1."""
        chunks: list[Chunk] = []
        for position, content in enumerate(segments, start=1):
            embedding = await self._embedding_provider.embed(content)
            if not embedding:
                logger.warning("No embedding for chunk %s-%d, storing without vector", source, position)
            chunks.append(
                Chunk(
                    id=f"{source}-{position}",
                    content=content,
                    source=source,
                    embedding=tuple(embedding),
                )
            )
        return chunks
