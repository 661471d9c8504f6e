"""Pytest fixtures for minirag tests."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from minirag.application.dto.chunking_config import ChunkingConfig
from minirag.domain.entities import Chunk
from minirag.infrastructure.embedding.simple_provider import embed_counts
from minirag.infrastructure.store.in_memory_store import InMemoryChunkStore


# --- Builders ---


def make_chunk(chunk_id: str, embedding: list[float], content: str = "", source: str = "test") -> Chunk:
    """Chunk with the given id and vector."""
    return Chunk(id=chunk_id, content=content or f"content {chunk_id}", source=source, embedding=tuple(embedding))


def make_text_pdf(text: str) -> bytes:
    """Single-page PDF showing text in Helvetica, with a valid xref table."""
    escaped = text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
    stream = f"BT /F1 12 Tf 72 712 Td ({escaped}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length " + str(len(stream)).encode() + b" >>\nstream\n" + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = bytearray(b"%PDF-1.4\n")
    offsets: list[int] = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"
    xref_offset = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n".encode()
    out += f"startxref\n{xref_offset}\n%%EOF\n".encode()
    return bytes(out)


def blank_pdf() -> bytes:
    """Valid PDF with one empty page."""
    import io

    from pypdf import PdfWriter

    w = PdfWriter()
    w.add_blank_page(width=72, height=72)
    buf = io.BytesIO()
    w.write(buf)
    return buf.getvalue()


def multipart_body(
    field: str, data: bytes, filename: str = "doc.pdf", boundary: str = "minirag-boundary"
) -> tuple[bytes, str]:
    """Encode one file field as multipart/form-data; returns (body, content_type)."""
    body = (
        f"--{boundary}\r\n"
        f'Content-Disposition: form-data; name="{field}"; filename="{filename}"\r\n'
        "Content-Type: application/pdf\r\n\r\n"
    ).encode() + data + f"\r\n--{boundary}--\r\n".encode()
    return body, f"multipart/form-data; boundary={boundary}"


# --- Fixtures ---


@pytest.fixture
def store() -> InMemoryChunkStore:
    """Fresh empty chunk store for each test."""
    return InMemoryChunkStore()


@pytest.fixture
def mock_embedding_provider():
    """AsyncMock for EmbeddingProvider - deterministic character-count vectors."""

    async def _embed(text: str) -> list[float]:
        return embed_counts(text)

    mock = AsyncMock()
    mock.embed = AsyncMock(side_effect=_embed)
    return mock


@pytest.fixture
def chunking_config() -> ChunkingConfig:
    """Default chunking config: three sentences per chunk."""
    return ChunkingConfig(max_sentences=3)
