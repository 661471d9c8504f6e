"""Query API resource."""

import json

import falcon
import falcon.asgi

from minirag.application.use_cases.search.similarity_search import SimilaritySearchUseCase
from minirag.domain.exceptions import ValidationError


class QueryResource:
    """POST /v1/query - similarity search over stored chunks."""

    def __init__(self, similarity_search: SimilaritySearchUseCase) -> None:
        self._similarity_search = similarity_search

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Return chunks scoring at or above the minimum score, best first.

        The body is decoded as JSON whatever its Content-Type.
        """
        raw = await req.stream.read()
        try:
            body = json.loads(raw)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "invalid json"}
            return
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "invalid json"}
            return

        query = body.get("query")
        if not isinstance(query, str):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "query is required"}
            return

        try:
            outcome = await self._similarity_search.execute(query)
        except ValidationError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "query is required"}
            return

        resp.media = {
            "results": [
                {
                    "chunk_id": r.chunk.id,
                    "source": r.chunk.source,
                    "content": r.chunk.content,
                    "score": round(r.score, 6),
                }
                for r in outcome.results
            ],
        }
        resp.status = falcon.HTTP_200
