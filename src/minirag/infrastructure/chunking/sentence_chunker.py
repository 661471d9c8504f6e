"""Sentence-group text chunker implementation."""

from minirag.application.dto.chunking_config import ChunkingConfig


class SentenceChunker:
    """Chunker grouping consecutive period-delimited sentences."""

    def chunk(self, text: str, config: ChunkingConfig) -> list[str]:
        """Split on '.', drop empty sentences, join groups with '. ' and a trailing period."""
        if config.max_sentences < 1:
            raise ValueError(f"max_sentences must be positive, got {config.max_sentences}")

        chunks: list[str] = []
        buffer: list[str] = []
        for sentence in text.split("."):
            sentence = sentence.strip()
            if not sentence:
                continue
            buffer.append(sentence)
            if len(buffer) >= config.max_sentences:
                chunks.append(". ".join(buffer) + ".")
                buffer = []
        if buffer:
            chunks.append(". ".join(buffer) + ".")
        return chunks
