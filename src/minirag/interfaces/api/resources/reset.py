"""Store reset API resource."""

import falcon
import falcon.asgi

from minirag.application.use_cases.store.reset_store import ResetStoreUseCase


class ResetResource:
    """POST /v1/reset - administrative clear of all stored chunks."""

    def __init__(self, reset_store: ResetStoreUseCase) -> None:
        self._reset_store = reset_store

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        self._reset_store.execute()
        resp.status = falcon.HTTP_204
