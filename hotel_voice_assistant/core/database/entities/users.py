"""
Staff user entity.

Table: users
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now


class User(Base, table=True):
    """Staff account able to sign in to the dashboard.

    Passwords are never stored in clear text; ``password_hash`` holds the
    PBKDF2 encoding produced by ``server.core.security.hash_password``.
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(max_length=128, unique=True, index=True)
    password_hash: str = Field(max_length=256)
    created_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"User(id={self.id}, username={self.username})"
