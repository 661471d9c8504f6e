"""Falcon ASGI application."""

import logging
from pathlib import Path

import falcon
import falcon.asgi
from falcon.asgi import App

from minirag.interfaces.api.middleware.request_logging import RequestLoggingMiddleware
from minirag.interfaces.api.resources.documents import UploadPDFResource, UploadTextResource
from minirag.interfaces.api.resources.health import HealthResource
from minirag.interfaces.api.resources.reset import ResetResource
from minirag.interfaces.api.resources.search import QueryResource

logger = logging.getLogger(__name__)


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Log unhandled exceptions and answer with a bare 500."""
    logger.error("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    health_resource: HealthResource,
    upload_text_resource: UploadTextResource,
    upload_pdf_resource: UploadPDFResource,
    query_resource: QueryResource,
    reset_resource: ResetResource,
    cors_origins: list[str] | None = None,
    static_dir: str = "",
) -> App:
    """Create Falcon ASGI app with routes."""
    middleware = [RequestLoggingMiddleware()]
    if cors_origins:
        # Only listed origins get CORS headers; preflight needs an existing route
        middleware.append(falcon.CORSMiddleware(allow_origins=cors_origins))
    app = falcon.asgi.App(middleware=middleware)

    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/upload", upload_text_resource)
    app.add_route("/v1/upload-pdf", upload_pdf_resource)
    app.add_route("/v1/query", query_resource)
    app.add_route("/v1/reset", reset_resource)

    if static_dir:
        static_path = Path(static_dir).resolve()
        if static_path.is_dir():
            app.add_static_route("/", str(static_path), fallback_filename="index.html")
        else:
            logger.warning("Static directory %s does not exist, frontend disabled", static_path)
    return app
