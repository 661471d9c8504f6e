"""Document upload API resources."""

import logging

import falcon
import falcon.asgi

from minirag.application.dto.document_dto import DocumentLoadInput
from minirag.application.use_cases.document.load_document import LoadDocumentUseCase
from minirag.domain.exceptions import DocumentTooLarge, ExtractionError, ValidationError
from minirag.infrastructure.document_parsers import normalize_whitespace, parse_pdf, parse_text

logger = logging.getLogger(__name__)

DEFAULT_TEXT_SOURCE = "doc1"
DEFAULT_PDF_FILENAME = "upload.pdf"


def _get_part_filename(part: object) -> str:
    """Filename of a multipart part, or a fixed fallback when absent."""
    raw = getattr(part, "filename", None) or ""
    return raw.strip() or DEFAULT_PDF_FILENAME


class UploadTextResource:
    """POST /v1/upload - raw request body is the document text."""

    def __init__(self, load_document: LoadDocumentUseCase) -> None:
        self._load_document = load_document

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Chunk, embed and store the body text."""
        data = await req.stream.read()
        if not data:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "empty body"}
            return

        source = req.get_param("source") or DEFAULT_TEXT_SOURCE
        try:
            out = await self._load_document.execute(
                DocumentLoadInput(content=parse_text(data).text, source=source)
            )
        except ValidationError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "empty body"}
            return
        except DocumentTooLarge:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "text too big"}
            return

        resp.media = {"chunks_added": out.chunks_added, "source": out.source}
        resp.status = falcon.HTTP_200


class UploadPDFResource:
    """POST /v1/upload-pdf - multipart form with a 'file' field."""

    def __init__(self, load_document: LoadDocumentUseCase, max_upload_bytes: int) -> None:
        self._load_document = load_document
        self._max_upload_bytes = max_upload_bytes

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Extract PDF text, normalize whitespace, then chunk, embed and store it."""
        if req.content_length is not None and req.content_length > self._max_upload_bytes:
            resp.status = falcon.HTTP_413
            resp.media = {"error": "upload too large"}
            return

        content_type = req.content_type or ""
        if "multipart/form-data" not in content_type:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "failed to parse form"}
            return

        data: bytes | None = None
        filename = DEFAULT_PDF_FILENAME
        try:
            form = await req.get_media()
            async for part in form:
                if part.name == "file":
                    data = await part.stream.read()
                    filename = _get_part_filename(part)
                    break
        except (falcon.MediaNotFoundError, falcon.MediaMalformedError) as e:
            logger.info("Rejected malformed multipart upload: %s", e)
            resp.status = falcon.HTTP_400
            resp.media = {"error": "failed to parse form"}
            return

        if data is None:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "missing file field"}
            return
        if len(data) > self._max_upload_bytes:
            resp.status = falcon.HTTP_413
            resp.media = {"error": "upload too large"}
            return

        try:
            text = self._extract_text(data, filename)
        except ExtractionError:
            logger.exception("PDF extraction failed filename=%r", filename)
            resp.status = falcon.HTTP_500
            resp.media = {"error": "failed to read pdf text"}
            return
        if not text:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "no text extracted from pdf"}
            return

        try:
            out = await self._load_document.execute(
                DocumentLoadInput(content=text, source=filename)
            )
        except DocumentTooLarge:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "pdf too big"}
            return

        resp.media = {"chunks_added": out.chunks_added, "filename": filename}
        resp.status = falcon.HTTP_200

    @staticmethod
    def _extract_text(data: bytes, filename: str) -> str:
        try:
            parsed = parse_pdf(data, filename)
        except ValueError as e:
            raise ExtractionError(str(e)) from e
        logger.debug("Extracted pdf filename=%r pages=%s", filename, parsed.page_count)
        return normalize_whitespace(parsed.text)
