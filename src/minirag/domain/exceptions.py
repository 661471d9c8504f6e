"""Domain exceptions."""


class MiniRAGError(Exception):
    """Base exception for minirag."""

    pass


class ValidationError(MiniRAGError):
    """Validation failed for input data."""

    pass


class DocumentTooLarge(MiniRAGError):
    """Document produced more chunks than the ingestion limit allows."""

    def __init__(self, chunk_count: int, limit: int) -> None:
        super().__init__(f"Document produced {chunk_count} chunks, limit is {limit}")
        self.chunk_count = chunk_count
        self.limit = limit


class ExtractionError(MiniRAGError):
    """Text could not be extracted from an uploaded document."""

    pass
