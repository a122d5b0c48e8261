"""
User repository.

Data access for staff accounts.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.users import User
from .base import AsyncBaseRepository


class UserRepository(AsyncBaseRepository[User]):
    """Repository for staff account data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get a user by username.

        Args:
            username: Exact (case-sensitive) username

        Returns:
            User instance or None
        """
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalars().first()
