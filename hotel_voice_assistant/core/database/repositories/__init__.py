"""
Database repositories.

One repository per aggregate, all built on ``AsyncBaseRepository``:

- UserRepository: staff accounts
- TranscriptRepository: call transcript lines
- OrderRepository: guest orders
- CallSummaryRepository: end-of-call summaries
- StaffRequestRepository: staff requests and message threads
- ReferenceRepository: reference material
"""

from .base import AsyncBaseRepository, AsyncQueryBuilder
from .bundle import RepositoryBundle, build_repositories
from .call_summaries import CallSummaryRepository
from .orders import OrderRepository
from .references import ReferenceRepository
from .staff_requests import StaffRequestRepository
from .transcripts import TranscriptRepository
from .users import UserRepository

__all__ = [
    "AsyncBaseRepository",
    "AsyncQueryBuilder",
    "CallSummaryRepository",
    "OrderRepository",
    "ReferenceRepository",
    "RepositoryBundle",
    "StaffRequestRepository",
    "TranscriptRepository",
    "UserRepository",
    "build_repositories",
]
