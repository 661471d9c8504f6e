"""Health endpoint tests."""

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from minirag.infrastructure.store.in_memory_store import InMemoryChunkStore
from minirag.interfaces.api.resources.health import HealthResource

from tests.conftest import make_chunk


@pytest.fixture
def client(store: InMemoryChunkStore) -> TestClient:
    """Create test client with health endpoints."""
    app = App()
    health = HealthResource(store)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200 with store size."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"
    assert result.json["chunks"] == 0


def test_health_ready_counts_chunks(client: TestClient, store: InMemoryChunkStore) -> None:
    store.add([make_chunk("1", [1.0, 0.0]), make_chunk("2", [0.0, 1.0])])
    result = client.simulate_get("/v1/health/ready")
    assert result.json["chunks"] == 2
