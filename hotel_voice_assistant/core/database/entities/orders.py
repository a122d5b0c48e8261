"""
Order entity.

An order is what the guest confirmed at the end of a call: the room, the
service type, the delivery window and a list of line items.

Table: orders
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON
from sqlmodel import Field, Text

from hotel_voice_assistant.core.models.domain import OrderStatus

from ..base import Base, utc_now


class Order(Base, table=True):
    """Persisted guest order.

    ``items`` is stored as JSON; each element mirrors ``OrderItem`` from the
    I/O models. ``total_amount`` is an integer amount in the hotel's currency.
    """

    __tablename__ = "orders"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    call_id: str = Field(max_length=128, index=True)
    room_number: str = Field(max_length=32, index=True)
    order_type: str = Field(max_length=256)
    delivery_time: str = Field(max_length=32)
    special_instructions: Optional[str] = Field(default=None, sa_type=Text)
    items: List[Dict[str, Any]] = Field(default_factory=list, sa_type=JSON)
    total_amount: int = Field(default=0)
    status: str = Field(default=OrderStatus.pending.value, max_length=32, index=True)
    created_at: datetime = Field(default_factory=utc_now, index=True)

    def __repr__(self) -> str:
        return f"Order(id={self.id}, room={self.room_number}, status={self.status})"
