"""
Order Endpoints.

Guests submit orders and poll them by id or room; staff list them and move
them through their lifecycle.
"""

from typing import List, Optional

from fastapi import APIRouter

from hotel_voice_assistant.core.models.io.orders import (
    OrderCreate,
    OrderRead,
    OrderStatusUpdate,
    OrderSubmitted,
)
from hotel_voice_assistant.server.services.deps import OrderServiceDep, StaffDep

router = APIRouter()


@router.post(
    "/orders",
    response_model=OrderSubmitted,
    status_code=201,
    summary="Submit Order",
    description="Store a guest order, raise a staff request for it and notify the staff dashboards.",
    response_description="The stored order with its reference and delivery estimate.",
)
async def create_order(order_in: OrderCreate, orders: OrderServiceDep) -> OrderSubmitted:
    """
    Submit a guest order.

    New orders always start as ``pending``. The response carries a reference
    of the form ``#ORD-NNNNN`` and an estimated delivery time derived from the
    chosen delivery window.
    """
    submitted = await orders.submit(order_in)
    return OrderSubmitted(
        order=OrderRead.model_validate(submitted.order),
        reference=submitted.reference,
        estimated_time=submitted.estimated_time,
        staff_request_id=submitted.staff_request.id,
    )


@router.get(
    "/orders",
    response_model=List[OrderRead],
    summary="Search Orders",
    description="List orders, newest first, optionally filtered by status and room. Staff only.",
)
async def list_orders(
    orders: OrderServiceDep,
    _staff: StaffDep,
    status: Optional[str] = None,
    room_number: Optional[str] = None,
):
    return await orders.search(status=status, room_number=room_number)


@router.get(
    "/orders/room/{room_number}",
    response_model=List[OrderRead],
    summary="List Room Orders",
    description="All orders placed from a room, newest first.",
)
async def list_room_orders(room_number: str, orders: OrderServiceDep):
    return await orders.list_for_room(room_number)


@router.get(
    "/orders/{order_id}",
    response_model=OrderRead,
    summary="Get Order",
    responses={404: {"description": "Order not found"}},
)
async def get_order(order_id: int, orders: OrderServiceDep):
    return await orders.get(order_id)


@router.patch(
    "/orders/{order_id}/status",
    response_model=OrderRead,
    summary="Update Order Status",
    description="Move an order to a new status and notify the guest and staff. Staff only.",
    responses={400: {"description": "Invalid status"}, 404: {"description": "Order not found"}},
)
async def update_order_status(order_id: int, update: OrderStatusUpdate, orders: OrderServiceDep, _staff: StaffDep):
    return await orders.update_status(order_id, update.status)
