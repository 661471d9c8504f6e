"""minirag - minimal in-memory retrieval-augmented-generation backend."""

__version__ = "0.1.0"
