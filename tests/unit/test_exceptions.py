"""Unit tests for domain exceptions."""

import pytest

from minirag.domain.exceptions import (
    DocumentTooLarge,
    ExtractionError,
    MiniRAGError,
    ValidationError,
)


@pytest.mark.parametrize("exc_type", [ValidationError, DocumentTooLarge, ExtractionError])
def test_inherits_minirag_error(exc_type: type) -> None:
    assert issubclass(exc_type, MiniRAGError)


def test_document_too_large_carries_counts() -> None:
    err = DocumentTooLarge(7, 5)
    assert err.chunk_count == 7
    assert err.limit == 5
    assert "7" in str(err) and "5" in str(err)


def test_exception_message_preserved() -> None:
    with pytest.raises(ValidationError, match="query is required"):
        raise ValidationError("query is required")
