"""Call summary I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CallSummaryCreate(BaseModel):
    """Summary posted at the end of a call."""

    call_id: str = Field(min_length=1, description="Voice platform call identifier")
    content: str = Field(min_length=1, description="Summary text")
    room_number: Optional[str] = Field(default=None, description="Guest room; extracted from the content when absent")
    duration: Optional[str] = Field(default=None, description="Call duration, 'mm:ss' or seconds")
    timestamp: Optional[datetime] = Field(default=None, description="When the summary was produced; defaults to now")


class CallSummaryRead(BaseModel):
    """Stored call summary."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    call_id: str
    content: str
    timestamp: datetime
    room_number: Optional[str] = None
    duration: Optional[str] = None


class RecentSummaries(BaseModel):
    """Summaries within a look-back window."""

    success: bool = True
    count: int
    summaries: List[CallSummaryRead]
    timeframe: str
