"""Base use case."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass

    @staticmethod
    def now() -> datetime:
        return datetime.now(timezone.utc)
