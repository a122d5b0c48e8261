"""Vapi integration I/O models."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class AssistantConfigRead(BaseModel):
    """Browser SDK configuration for one language."""

    language: str
    public_key: str
    assistant_id: str


class StartCallRequest(BaseModel):
    phone_number: str = Field(min_length=1, description="Number the assistant should call")
    language: Optional[str] = Field(default=None, description="Language of the assistant to use")


class TranscriptMessage(BaseModel):
    role: str
    content: str


class CallTranscriptRead(BaseModel):
    messages: List[TranscriptMessage] = Field(default_factory=list)


class WebhookAck(BaseModel):
    received: bool = True
    type: Optional[str] = None
    stored: Dict[str, Any] = Field(default_factory=dict)
