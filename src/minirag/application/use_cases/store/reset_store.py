"""Reset store use case."""

import logging

from minirag.application.ports import ChunkStore

logger = logging.getLogger(__name__)


class ResetStoreUseCase:
    """Discard every stored chunk."""

    def __init__(self, store: ChunkStore) -> None:
        self._store = store

    def execute(self) -> int:
        """Clear the store and return how many chunks were dropped."""
        dropped = len(self._store)
        self._store.clear()
        logger.info("Store reset, dropped %d chunks", dropped)
        return dropped
