"""Application entry point and composition root."""

import logging

from falcon.asgi import App

from minirag import __version__
from minirag.application.dto.chunking_config import ChunkingConfig
from minirag.application.ports import ChunkStore, EmbeddingProvider
from minirag.application.use_cases.document.load_document import LoadDocumentUseCase
from minirag.application.use_cases.search.similarity_search import SimilaritySearchUseCase
from minirag.application.use_cases.store.reset_store import ResetStoreUseCase
from minirag.config import Settings, get_settings
from minirag.infrastructure.chunking.sentence_chunker import SentenceChunker
from minirag.infrastructure.embedding.factory import create_embedding_provider
from minirag.infrastructure.store.in_memory_store import InMemoryChunkStore
from minirag.interfaces.api.app import create_app
from minirag.interfaces.api.resources.documents import UploadPDFResource, UploadTextResource
from minirag.interfaces.api.resources.health import HealthResource
from minirag.interfaces.api.resources.reset import ResetResource
from minirag.interfaces.api.resources.search import QueryResource
from minirag.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_minirag_app(
    settings: Settings | None = None,
    embedding_provider: EmbeddingProvider | None = None,
    store: ChunkStore | None = None,
) -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    if embedding_provider is None:
        embedding_provider = create_embedding_provider(settings)
    store = store if store is not None else InMemoryChunkStore()

    load_document = LoadDocumentUseCase(
        store=store,
        chunker=SentenceChunker(),
        embedding_provider=embedding_provider,
        chunking_config=ChunkingConfig(max_sentences=settings.max_sentences_per_chunk),
        max_chunks=settings.max_chunks,
    )
    similarity_search = SimilaritySearchUseCase(
        store=store,
        embedding_provider=embedding_provider,
        top_k=settings.top_k,
        min_score=settings.min_score,
    )
    reset_store = ResetStoreUseCase(store)

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    return create_app(
        health_resource=HealthResource(store),
        upload_text_resource=UploadTextResource(load_document),
        upload_pdf_resource=UploadPDFResource(load_document, settings.max_upload_bytes),
        query_resource=QueryResource(similarity_search),
        reset_resource=ResetResource(reset_store),
        cors_origins=cors_origins,
        static_dir=settings.static_dir,
    )


def main() -> None:
    """CLI entry point - run uvicorn with a single worker (state is in-process)."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("minirag v%s (%s)", __version__, settings.environment)

    app = create_minirag_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
