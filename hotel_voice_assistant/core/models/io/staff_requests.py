"""Staff request I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StaffMessageRead(BaseModel):
    """Stored message in a request thread."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    request_id: int
    sender: str
    content: str
    timestamp: datetime


class StaffMessageCreate(BaseModel):
    """Message posted by staff."""

    content: str = Field(min_length=1, description="Message text")


class StaffRequestRead(BaseModel):
    """Stored staff request."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    call_id: str
    room_number: str
    guest_name: Optional[str] = None
    order_id: Optional[str] = None
    content: str
    status: str
    created_at: datetime
    updated_at: datetime


class StaffRequestDetail(StaffRequestRead):
    """Staff request with its message thread."""

    messages: List[StaffMessageRead] = Field(default_factory=list)


class StaffRequestStatusUpdate(BaseModel):
    """New status for a staff request; checked against ``StaffRequestStatus`` by the service."""

    status: str = Field(min_length=1)
