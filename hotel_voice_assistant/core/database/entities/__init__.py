"""
Database entity models.

Each module holds the table (or tightly related tables) of one aggregate:

- users: Staff accounts
- transcripts: Per-call conversation lines
- orders: Guest service orders
- call_summaries: End-of-call summaries
- staff_requests: Dashboard requests and their message threads
- references: Reference material surfaced during calls
"""

from . import (
    call_summaries,
    orders,
    references,
    staff_requests,
    transcripts,
    users,
)
from .call_summaries import CallSummary
from .orders import Order
from .references import ReferenceItem
from .staff_requests import StaffMessage, StaffRequest
from .transcripts import Transcript
from .users import User

__all__ = [
    "CallSummary",
    "Order",
    "ReferenceItem",
    "StaffMessage",
    "StaffRequest",
    "Transcript",
    "User",
    "call_summaries",
    "orders",
    "references",
    "staff_requests",
    "transcripts",
    "users",
]
