"""
Staff request repository.

Data access for dashboard requests and their message threads.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.staff_requests import StaffMessage, StaffRequest
from .base import AsyncBaseRepository, AsyncQueryBuilder


class StaffRequestRepository(AsyncBaseRepository[StaffRequest]):
    """Repository for staff request and staff message data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, StaffRequest)

    def _default_order(self) -> list:
        return [StaffRequest.created_at.desc(), StaffRequest.id.desc()]  # type: ignore

    async def get_by_room_number(self, room_number: str) -> List[StaffRequest]:
        """Get every request raised from a room, newest first."""
        stmt = select(StaffRequest).where(StaffRequest.room_number == room_number).order_by(*self._default_order())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def search(self, status: Optional[str] = None, room_number: Optional[str] = None) -> List[StaffRequest]:
        """List requests matching every given filter, newest first."""
        stmt = select(StaffRequest).order_by(*self._default_order())
        stmt = AsyncQueryBuilder.apply_filters(stmt, StaffRequest, {"status": status, "room_number": room_number})
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def add_message(self, request_id: int, sender: str, content: str) -> StaffMessage:
        """Append a message to a request thread.

        Args:
            request_id: StaffRequest primary key
            sender: ``staff`` or ``system``
            content: Message text

        Returns:
            Persisted StaffMessage
        """
        message = StaffMessage(request_id=request_id, sender=sender, content=content)
        self.session.add(message)
        await self.session.commit()
        await self.session.refresh(message)
        return message

    async def get_messages(self, request_id: int) -> List[StaffMessage]:
        """Get the message thread of a request, oldest first."""
        stmt = (
            select(StaffMessage)
            .where(StaffMessage.request_id == request_id)
            .order_by(StaffMessage.timestamp.asc(), StaffMessage.id.asc())  # type: ignore
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
