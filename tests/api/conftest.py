"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from minirag.config import Settings
from minirag.infrastructure.embedding.simple_provider import SimpleEmbeddingProvider
from minirag.main import create_minirag_app


@pytest.fixture
def settings() -> Settings:
    """Settings with local embeddings and no .env lookup."""
    return Settings(_env_file=None, embedding_backend="simple", max_upload_bytes=64 * 1024)


@pytest.fixture
def app(settings, store):
    """Falcon ASGI app wired through the composition root."""
    return create_minirag_app(settings, embedding_provider=SimpleEmbeddingProvider(), store=store)


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)
