"""
Call summary repository.

Data access for end-of-call summaries.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import as_utc, utc_now
from ..entities.call_summaries import CallSummary
from .base import AsyncBaseRepository


class CallSummaryRepository(AsyncBaseRepository[CallSummary]):
    """Repository for call summary data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, CallSummary)

    def _default_order(self) -> list:
        return [CallSummary.timestamp.desc(), CallSummary.id.desc()]  # type: ignore

    async def get_by_call_id(self, call_id: str) -> Optional[CallSummary]:
        """Get the most recent summary stored for a call.

        Args:
            call_id: Voice platform call identifier

        Returns:
            CallSummary instance or None
        """
        stmt = select(CallSummary).where(CallSummary.call_id == call_id).order_by(*self._default_order())
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_recent(self, hours: int, *, now: Optional[datetime] = None) -> List[CallSummary]:
        """Get summaries newer than ``hours`` ago, newest first.

        Args:
            hours: Size of the look-back window
            now: Reference time; naive values are read as UTC. Defaults to the current time

        Returns:
            List of CallSummary instances
        """
        cutoff = (as_utc(now) if now else utc_now()) - timedelta(hours=hours)
        stmt = select(CallSummary).where(CallSummary.timestamp >= cutoff).order_by(*self._default_order())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
