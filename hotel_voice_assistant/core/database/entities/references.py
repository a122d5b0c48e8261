"""
Reference item entity.

Reference items are images, documents or links (menus, spa brochures, maps)
the guest UI shows when the conversation mentions one of their keywords.

Table: reference_items
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON
from sqlmodel import Field, Text

from ..base import Base, utc_now


class ReferenceItem(Base, table=True):
    """Keyed reference material; ``id`` is chosen by the client."""

    __tablename__ = "reference_items"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(primary_key=True, max_length=128)
    type: str = Field(max_length=16)
    title: str = Field(max_length=256)
    url: str = Field(sa_type=Text)
    description: Optional[str] = Field(default=None, sa_type=Text)
    keywords: List[str] = Field(default_factory=list, sa_type=JSON)
    created_at: datetime = Field(default_factory=utc_now, index=True)

    def __repr__(self) -> str:
        return f"ReferenceItem(id={self.id}, type={self.type}, title={self.title})"
