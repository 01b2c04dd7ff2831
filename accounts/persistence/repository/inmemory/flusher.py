"""In-memory flusher for testing."""

from accounts.domain.repository.flusher import Flusher


class InMemoryFlusher(Flusher):
    """Counts flushes; in-memory repositories store on save."""

    def __init__(self) -> None:
        self.flush_count = 0

    async def flush(self) -> None:
        self.flush_count += 1
