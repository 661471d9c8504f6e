"""Chunking configuration DTO."""

from dataclasses import dataclass


@dataclass
class ChunkingConfig:
    """Configuration for sentence chunking."""

    max_sentences: int = 3
