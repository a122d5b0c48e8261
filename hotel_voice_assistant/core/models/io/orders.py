"""Order I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from hotel_voice_assistant.core.models.domain import DeliveryTime


class OrderItem(BaseModel):
    """Line item of an order."""

    id: str = Field(description="Client-side item identifier")
    name: str = Field(min_length=1, description="Item name")
    description: str = Field(default="", description="Item description")
    quantity: int = Field(default=1, ge=1, description="Quantity ordered")
    price: float = Field(default=0, ge=0, description="Unit price")
    service_type: Optional[str] = Field(default=None, description="Service category the item belongs to")


class OrderCreate(BaseModel):
    """
    Schema for submitting a guest order.

    The order status is not part of this schema: new orders always start as
    ``pending``.
    """

    call_id: str = Field(min_length=1, description="Call the order came out of")
    room_number: str = Field(min_length=1, description="Guest room number")
    order_type: str = Field(min_length=1, description="Service type(s), e.g. 'room-service'")
    delivery_time: DeliveryTime = Field(default=DeliveryTime.asap, description="Requested delivery window")
    special_instructions: Optional[str] = Field(default=None, description="Free-text notes for staff")
    items: List[OrderItem] = Field(default_factory=list, description="Ordered items")
    total_amount: int = Field(default=0, ge=0, description="Total in the hotel's currency")
    guest_name: Optional[str] = Field(default=None, description="Guest name shown on the staff dashboard")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "call_id": "call-123",
                "room_number": "201",
                "order_type": "room-service",
                "delivery_time": "asap",
                "items": [{"id": "1", "name": "Beef burger", "quantity": 2, "price": 12}],
                "total_amount": 24,
                "guest_name": "Tony",
            }
        }
    )


class OrderRead(BaseModel):
    """Stored order."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    call_id: str
    room_number: str
    order_type: str
    delivery_time: str
    special_instructions: Optional[str] = None
    items: List[OrderItem]
    total_amount: int
    status: str
    created_at: datetime


class OrderSubmitted(BaseModel):
    """Response to an order submission."""

    order: OrderRead
    reference: str = Field(description="Human-facing order reference, e.g. '#ORD-12345'")
    estimated_time: str = Field(description="Delivery estimate derived from the delivery window")
    staff_request_id: int = Field(description="Id of the staff request created for this order")


class OrderStatusUpdate(BaseModel):
    """New status for an order; checked against ``OrderStatus`` by the service."""

    status: str = Field(min_length=1)
