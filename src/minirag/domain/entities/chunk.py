"""Chunk entity - text segment with embedding."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Chunk:
    """Chunk - bounded text segment with its vector embedding and provenance."""

    id: str
    content: str
    source: str
    embedding: tuple[float, ...] = field(default=(), repr=False)
