"""Document parsers: extract text from uploaded files."""

from minirag.infrastructure.document_parsers.base import ParseResult
from minirag.infrastructure.document_parsers.pdf_parser import parse_pdf
from minirag.infrastructure.document_parsers.text_parser import (
    decode_text,
    normalize_whitespace,
    parse_text,
)

__all__ = ["ParseResult", "decode_text", "normalize_whitespace", "parse_pdf", "parse_text"]
