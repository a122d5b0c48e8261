"""
Order Intake Service.

Turns a confirmed guest order into persisted records and notifies staff:

1. Store the ``Order`` (always ``pending``).
2. Store a matching ``StaffRequest`` so it shows on the dashboard.
3. Push ``data_changed {type: new_request}`` to the staff room.

Status changes made by staff go through ``update_status`` so the guest's
order room and the staff room both hear about them.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional

from hotel_voice_assistant.core.database.entities import Order, StaffRequest
from hotel_voice_assistant.core.database.repositories import RepositoryBundle
from hotel_voice_assistant.core.errors import NotFoundError
from hotel_voice_assistant.core.logging_config import get_logger
from hotel_voice_assistant.core.models.domain import OrderStatus, StaffRequestStatus, parse_status
from hotel_voice_assistant.core.models.io.orders import OrderCreate, OrderItem
from hotel_voice_assistant.core.monitoring import log_order_event

from .realtime import ConnectionManager

logger = get_logger(__name__)


def generate_order_reference(rng: Optional[random.Random] = None) -> str:
    """Return a guest-facing reference such as ``#ORD-48213`` (five digits, 10000-99999)."""
    number = (rng or random).randint(10000, 99999)
    return f"#ORD-{number}"


def describe_items(items: Iterable[OrderItem], fallback: str) -> str:
    """Render items as ``"2 x Burger, 1 x Juice"``; ``fallback`` is used when there are none."""
    parts = [f"{item.quantity} x {item.name}" for item in items]
    return ", ".join(parts) if parts else fallback


@dataclass
class SubmittedOrder:
    order: Order
    reference: str
    estimated_time: str
    staff_request: StaffRequest


class OrderService:
    """Order intake and status changes."""

    def __init__(self, repos: RepositoryBundle, realtime: ConnectionManager) -> None:
        self.repos = repos
        self.realtime = realtime

    async def submit(self, order_in: OrderCreate) -> SubmittedOrder:
        """
        Persist a guest order and raise the matching staff request.

        Args:
            order_in: Validated order payload

        Returns:
            The stored order, its reference, the delivery estimate and the staff request
        """
        order = Order(
            call_id=order_in.call_id,
            room_number=order_in.room_number,
            order_type=order_in.order_type,
            delivery_time=order_in.delivery_time.value,
            special_instructions=order_in.special_instructions,
            items=[item.model_dump() for item in order_in.items],
            total_amount=order_in.total_amount,
            status=OrderStatus.pending.value,
        )
        content = describe_items(order_in.items, fallback=order_in.order_type)
        if order_in.special_instructions:
            content = f"{content} (note: {order_in.special_instructions})"

        # The order and its staff request are committed together or not at all.
        try:
            order = await self.repos.orders.stage(order)
            staff_request = await self.repos.staff_requests.stage(
                StaffRequest(
                    call_id=order_in.call_id,
                    room_number=order_in.room_number,
                    guest_name=order_in.guest_name,
                    order_id=str(order.id),
                    content=content,
                    status=StaffRequestStatus.new.value,
                )
            )
            await self.repos.commit()
        except Exception:
            await self.repos.rollback()
            raise

        reference = generate_order_reference()
        log_order_event("order_created", order.id, order.room_number, order.status)
        logger.info(f"Order {order.id} ({reference}) created for room {order.room_number}")

        await self.realtime.broadcast_staff_data_change(
            "new_request",
            {
                "requestId": staff_request.id,
                "orderId": str(order.id),
                "reference": reference,
                "roomNumber": order.room_number,
                "content": content,
            },
        )
        return SubmittedOrder(
            order=order,
            reference=reference,
            estimated_time=order_in.delivery_time.estimated_time,
            staff_request=staff_request,
        )

    async def get(self, order_id: int) -> Order:
        order = await self.repos.orders.get_by_id(order_id)
        if order is None:
            raise NotFoundError("Order", order_id)
        return order

    async def list_for_room(self, room_number: str) -> List[Order]:
        return await self.repos.orders.get_by_room_number(room_number)

    async def search(self, status: Optional[str] = None, room_number: Optional[str] = None) -> List[Order]:
        return await self.repos.orders.search(status=status, room_number=room_number)

    async def update_status(self, order_id: int, status: str) -> Order:
        """
        Change the status of an order and notify listeners.

        Raises:
            InvalidStatusError: ``status`` is not an ``OrderStatus`` value.
            NotFoundError: The order does not exist.
        """
        new_status = parse_status(OrderStatus, status)
        order = await self.repos.orders.update_status(order_id, new_status.value)
        if order is None:
            raise NotFoundError("Order", order_id)
        log_order_event("order_status_changed", order.id, order.room_number, order.status)

        await self.realtime.notify_order_status(order.id, order.status)
        await self.realtime.broadcast_staff_data_change("status_update", orderId=str(order.id), status=order.status)
        return order
