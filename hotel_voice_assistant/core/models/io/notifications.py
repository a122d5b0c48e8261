"""Call summary e-mail I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class CallDetailsPayload(BaseModel):
    """Call details rendered into the summary e-mail."""

    room_number: str = Field(default="Unknown", description="Guest room")
    summary: str = Field(default="", description="Call summary text")
    timestamp: datetime = Field(description="When the call ended")
    duration: Optional[str] = Field(default=None, description="Call duration")
    service_requests: List[str] = Field(default_factory=list, description="Requested services or items")
    order_reference: Optional[str] = Field(default=None, description="Order reference, e.g. '#ORD-12345'")


class CallSummaryEmailRequest(BaseModel):
    """Request to e-mail a call summary to hotel staff."""

    to_email: Optional[str] = Field(default=None, description="Recipient; the configured default is used when absent")
    call_details: CallDetailsPayload


class EmailSendResult(BaseModel):
    success: bool
    message_id: Optional[str] = None
    error: Optional[str] = None
