"""
Order repository.

Data access for guest orders, including room lookups and status changes.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.orders import Order
from .base import AsyncBaseRepository, AsyncQueryBuilder


class OrderRepository(AsyncBaseRepository[Order]):
    """Repository for order data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Order)

    def _default_order(self) -> list:
        return [Order.created_at.desc(), Order.id.desc()]  # type: ignore

    async def get_by_room_number(self, room_number: str) -> List[Order]:
        """Get every order placed from a room, newest first.

        Args:
            room_number: Guest room number

        Returns:
            List of Order instances
        """
        stmt = select(Order).where(Order.room_number == room_number).order_by(*self._default_order())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update_status(self, order_id: int, status: str) -> Optional[Order]:
        """Set the status of an order.

        Args:
            order_id: Order primary key
            status: New status value (already validated by the caller)

        Returns:
            Updated Order, or None if it does not exist
        """
        order = await self.get_by_id(order_id)
        if order is None:
            return None
        order.status = status
        return await self.update(order)

    async def search(self, status: Optional[str] = None, room_number: Optional[str] = None) -> List[Order]:
        """List orders matching every given filter.

        Args:
            status: Optional status filter
            room_number: Optional room filter

        Returns:
            List of Order instances, newest first
        """
        stmt = select(Order).order_by(*self._default_order())
        stmt = AsyncQueryBuilder.apply_filters(stmt, Order, {"status": status, "room_number": room_number})
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
