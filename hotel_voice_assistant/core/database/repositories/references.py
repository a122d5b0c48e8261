"""
Reference item repository.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.references import ReferenceItem
from .base import AsyncBaseRepository


class ReferenceRepository(AsyncBaseRepository[ReferenceItem]):
    """Repository for reference material."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ReferenceItem)

    def _default_order(self) -> list:
        return [ReferenceItem.created_at.asc(), ReferenceItem.id.asc()]  # type: ignore

    async def upsert(self, item: ReferenceItem) -> ReferenceItem:
        """Insert a reference, or overwrite the one with the same id.

        The original ``created_at`` is kept on overwrite so insertion order is
        stable.
        """
        existing = await self.get_by_id(item.id)
        if existing is None:
            return await self.create(item)
        existing.type = item.type
        existing.title = item.title
        existing.url = item.url
        existing.description = item.description
        existing.keywords = list(item.keywords)
        return await self.update(existing)

    async def all(self) -> List[ReferenceItem]:
        return await self.list()
