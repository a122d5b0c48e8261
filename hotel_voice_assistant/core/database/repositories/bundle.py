"""
Repository bundle.

Groups every repository bound to one ``AsyncSession`` so services can take a
single dependency.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .call_summaries import CallSummaryRepository
from .orders import OrderRepository
from .references import ReferenceRepository
from .staff_requests import StaffRequestRepository
from .transcripts import TranscriptRepository
from .users import UserRepository


@dataclass(frozen=True)
class RepositoryBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    users: UserRepository
    transcripts: TranscriptRepository
    orders: OrderRepository
    summaries: CallSummaryRepository
    staff_requests: StaffRequestRepository
    references: ReferenceRepository

    @property
    def session(self) -> AsyncSession:
        return self.users.session

    async def commit(self) -> None:
        """Commit everything staged through any repository of the bundle."""
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()


def build_repositories(session: AsyncSession) -> RepositoryBundle:
    """Build a ``RepositoryBundle`` sharing one session.

    Args:
        session: Async session used by every repository

    Returns:
        Bundle containing all repository instances
    """
    return RepositoryBundle(
        users=UserRepository(session),
        transcripts=TranscriptRepository(session),
        orders=OrderRepository(session),
        summaries=CallSummaryRepository(session),
        staff_requests=StaffRequestRepository(session),
        references=ReferenceRepository(session),
    )
