"""PostgreSQL session flusher."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from accounts.domain.repository import Flusher


class SessionFlusher(Flusher):
    """Commits the request's database session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def flush(self) -> None:
        await self.session.commit()
        logfire.debug("Session committed by flusher")
