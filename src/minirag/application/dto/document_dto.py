"""Document DTOs."""

from dataclasses import dataclass


@dataclass
class DocumentLoadInput:
    """Input for loading a document into the store."""

    content: str
    source: str


@dataclass
class DocumentLoadOutput:
    """Output DTO for a loaded document."""

    source: str
    chunks_added: int
