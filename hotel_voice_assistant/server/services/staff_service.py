"""
Staff Request Service.

Status changes and message threads for the staff dashboard. Every status
change leaves a ``system`` message in the thread and is pushed to the staff
room; when the request belongs to an order, the guest's order room is
notified too.
"""

from __future__ import annotations

from typing import List, Optional

from hotel_voice_assistant.core.database.base import utc_now
from hotel_voice_assistant.core.database.entities import StaffMessage, StaffRequest
from hotel_voice_assistant.core.database.repositories import RepositoryBundle
from hotel_voice_assistant.core.errors import NotFoundError
from hotel_voice_assistant.core.logging_config import get_logger
from hotel_voice_assistant.core.models.domain import MessageSender, StaffRequestStatus, parse_status

from .realtime import ConnectionManager

logger = get_logger(__name__)


class StaffRequestService:
    """Dashboard operations on staff requests."""

    def __init__(self, repos: RepositoryBundle, realtime: ConnectionManager) -> None:
        self.repos = repos
        self.realtime = realtime

    async def get(self, request_id: int) -> StaffRequest:
        request = await self.repos.staff_requests.get_by_id(request_id)
        if request is None:
            raise NotFoundError("Staff request", request_id)
        return request

    async def search(self, status: Optional[str] = None, room_number: Optional[str] = None) -> List[StaffRequest]:
        return await self.repos.staff_requests.search(status=status, room_number=room_number)

    async def messages(self, request_id: int) -> List[StaffMessage]:
        await self.get(request_id)
        return await self.repos.staff_requests.get_messages(request_id)

    async def update_status(self, request_id: int, status: str) -> StaffRequest:
        """
        Move a request to a new status.

        Raises:
            InvalidStatusError: ``status`` is not a ``StaffRequestStatus`` value.
            NotFoundError: The request does not exist.
        """
        new_status = parse_status(StaffRequestStatus, status)
        request = await self.get(request_id)
        request.status = new_status.value
        request.updated_at = utc_now()
        note = StaffMessage(
            request_id=request.id,
            sender=MessageSender.system.value,
            content=f"Status changed to {new_status.value}",
        )
        # A status change without its system message must never be committed.
        try:
            await self.repos.staff_requests.stage(request)
            await self.repos.staff_requests.stage(note)
            await self.repos.commit()
        except Exception:
            await self.repos.rollback()
            raise
        logger.info(f"Staff request {request_id} moved to {new_status.value}")

        await self.realtime.broadcast_staff_data_change(
            "status_update",
            {"requestId": request.id, "orderId": request.order_id},
            status=request.status,
        )
        if request.order_id:
            await self.realtime.notify_order_status(request.order_id, request.status)
        return request

    async def add_message(self, request_id: int, content: str) -> StaffMessage:
        """
        Post a staff message on a request thread.

        Raises:
            NotFoundError: The request does not exist.
        """
        await self.get(request_id)
        message = await self.repos.staff_requests.add_message(request_id, MessageSender.staff.value, content)
        await self.realtime.broadcast_staff_data_change(
            "new_message",
            {"requestId": request_id, "messageId": message.id, "content": content},
        )
        return message
