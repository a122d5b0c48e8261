"""
Transcript entity.

A transcript is one line of a voice call, spoken either by the guest
(``user``) or by the voice assistant (``assistant``).

Table: transcripts
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field, Text

from ..base import Base, utc_now


class Transcript(Base, table=True):
    """One conversation turn of a call."""

    __tablename__ = "transcripts"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    call_id: str = Field(max_length=128, index=True)
    role: str = Field(max_length=16)
    content: str = Field(sa_type=Text)
    timestamp: datetime = Field(default_factory=utc_now, index=True)

    def __repr__(self) -> str:
        return f"Transcript(id={self.id}, call_id={self.call_id}, role={self.role})"
