"""Parser for PDF."""

import io

from pypdf import PdfReader

from minirag.infrastructure.document_parsers.base import ParseResult


def parse_pdf(data: bytes, filename: str | None = None) -> ParseResult:
    """Extract text from PDF bytes, one page after another."""
    try:
        reader = PdfReader(io.BytesIO(data))
        parts: list[str] = []
        for page in reader.pages:
            t = page.extract_text()
            if t:
                parts.append(t)
    except Exception as e:
        raise ValueError(f"Invalid or corrupted PDF: {e}") from e
    return ParseResult(text="\n".join(parts), page_count=len(reader.pages))
