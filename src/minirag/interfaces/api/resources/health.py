"""Health check endpoints."""

import falcon.asgi

from minirag.application.ports import ChunkStore


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, store: ChunkStore) -> None:
        self._store = store

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness with current store size."""
        resp.media = {"status": "ready", "chunks": len(self._store)}
        resp.status = falcon.HTTP_200
