"""
Call summary entity.

Table: call_summaries
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field, Text

from ..base import Base, utc_now


class CallSummary(Base, table=True):
    """Summary of a finished call, as produced by the voice platform."""

    __tablename__ = "call_summaries"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    call_id: str = Field(max_length=128, index=True)
    content: str = Field(sa_type=Text)
    timestamp: datetime = Field(default_factory=utc_now, index=True)
    room_number: Optional[str] = Field(default=None, max_length=32)
    duration: Optional[str] = Field(default=None, max_length=16)

    def __repr__(self) -> str:
        return f"CallSummary(id={self.id}, call_id={self.call_id}, room={self.room_number})"
