"""
Centralized database layer for the hotel voice assistant.

Structure:
- entities/: SQLModel table definitions, one module per aggregate
- repositories/: Async data access layer, one repository per aggregate
- session.py: Global engine and session factory management
- utils.py: Engine/session factory helpers
"""

from .base import Base, as_utc, utc_now
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    normalize_database_url,
)

__all__ = [
    "Base",
    "as_utc",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
    "normalize_database_url",
    "utc_now",
]
