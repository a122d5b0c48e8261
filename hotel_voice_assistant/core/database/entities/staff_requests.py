"""
Staff request entity models.

A staff request is the dashboard view of something a guest asked for. Staff
move it through ``StaffRequestStatus`` and can attach messages to it; status
changes also leave a ``system`` message behind.

Tables: staff_requests, staff_messages
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field, Text

from hotel_voice_assistant.core.models.domain import StaffRequestStatus

from ..base import Base, utc_now


class StaffRequest(Base, table=True):
    """Request shown on the staff dashboard.

    Table: staff_requests
    """

    __tablename__ = "staff_requests"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    call_id: str = Field(max_length=128, index=True)
    room_number: str = Field(max_length=32, index=True)
    guest_name: Optional[str] = Field(default=None, max_length=256)
    order_id: Optional[str] = Field(default=None, max_length=64)
    content: str = Field(sa_type=Text)
    status: str = Field(default=StaffRequestStatus.new.value, max_length=32, index=True)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"StaffRequest(id={self.id}, room={self.room_number}, status={self.status})"


class StaffMessage(Base, table=True):
    """Message in a staff request thread.

    Table: staff_messages
    """

    __tablename__ = "staff_messages"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    request_id: int = Field(foreign_key="staff_requests.id", index=True)
    sender: str = Field(max_length=16)
    content: str = Field(sa_type=Text)
    timestamp: datetime = Field(default_factory=utc_now, index=True)

    def __repr__(self) -> str:
        return f"StaffMessage(id={self.id}, request_id={self.request_id}, sender={self.sender})"
