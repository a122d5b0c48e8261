"""Transcript I/O models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from hotel_voice_assistant.core.models.domain import TranscriptRole


class TranscriptCreate(BaseModel):
    """One transcript line posted by the client or the webhook."""

    call_id: str = Field(min_length=1, description="Voice platform call identifier")
    role: TranscriptRole = Field(description="Speaker: user (guest) or assistant")
    content: str = Field(min_length=1, description="What was said")


class TranscriptRead(BaseModel):
    """Stored transcript line."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    call_id: str
    role: str
    content: str
    timestamp: datetime
