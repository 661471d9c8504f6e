"""Parser for plain text, plus whitespace normalization."""

from minirag.infrastructure.document_parsers.base import ParseResult


def decode_text(data: bytes) -> str:
    """Decode as UTF-8, falling back to cp1251 and then to replacement characters."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        pass
    try:
        return data.decode("cp1251")
    except UnicodeDecodeError:
        return data.decode("utf-8", errors="replace")


def normalize_whitespace(text: str) -> str:
    """Turn line breaks into spaces, collapse whitespace runs and trim."""
    return " ".join(text.split())


def parse_text(data: bytes, filename: str | None = None) -> ParseResult:
    """Treat as text; content is kept as-is apart from decoding."""
    return ParseResult(text=decode_text(data))
