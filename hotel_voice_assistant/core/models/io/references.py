"""Reference material I/O models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from hotel_voice_assistant.core.models.domain import ReferenceType


class ReferenceItemIO(BaseModel):
    """Reference item as exchanged with the guest client."""

    model_config = ConfigDict(from_attributes=True)

    type: ReferenceType
    title: str = Field(min_length=1)
    url: str = Field(min_length=1)
    description: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)


class ReferenceItemCreate(ReferenceItemIO):
    """Reference item with its client-chosen key."""

    id: str = Field(min_length=1, description="Key in the reference map")
