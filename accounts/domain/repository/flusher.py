"""Unit of work commit point."""

from abc import ABC, abstractmethod


class Flusher(ABC):
    """Commits the changes staged by repositories.

    Use cases call ``flush`` once, after every aggregate they touched has
    been saved.
    """

    @abstractmethod
    async def flush(self) -> None:
        pass
