"""
Transcript repository.

Data access for call transcript lines.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.transcripts import Transcript
from .base import AsyncBaseRepository


class TranscriptRepository(AsyncBaseRepository[Transcript]):
    """Repository for transcript data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Transcript)

    async def get_by_call_id(self, call_id: str) -> List[Transcript]:
        """Get all transcript lines of a call, oldest first.

        Args:
            call_id: Voice platform call identifier

        Returns:
            List of Transcript instances in conversation order
        """
        stmt = (
            select(Transcript)
            .where(Transcript.call_id == call_id)
            .order_by(Transcript.timestamp.asc(), Transcript.id.asc())  # type: ignore
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
