"""
Staff account management: login checks and the startup seed account.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from hotel_voice_assistant.core.database.entities import User
from hotel_voice_assistant.core.database.repositories import UserRepository
from hotel_voice_assistant.core.errors import AuthenticationError
from hotel_voice_assistant.core.logging_config import get_logger
from hotel_voice_assistant.server.core.config import AuthConfig, settings
from hotel_voice_assistant.server.core.security import hash_password, verify_password

logger = get_logger(__name__)


async def authenticate(users: UserRepository, username: str, password: str) -> User:
    """
    Return the staff user for valid credentials.

    Raises:
        AuthenticationError: Unknown user or wrong password.
    """
    user = await users.get_by_username(username)
    if user is None or not verify_password(password, user.password_hash):
        logger.info(f"Failed staff login for '{username}'")
        raise AuthenticationError("Invalid username or password")
    return user


async def ensure_default_staff(session: AsyncSession, config: Optional[AuthConfig] = None) -> Optional[User]:
    """
    Seed the configured staff account when it does not exist yet.

    Returns:
        The created user, or None when seeding was skipped.
    """
    cfg = config or settings.auth
    if not cfg.staff_password:
        logger.warning("AUTH__STAFF_PASSWORD is not set; default staff account not seeded")
        return None
    users = UserRepository(session)
    if await users.get_by_username(cfg.staff_username) is not None:
        return None
    user = await users.create(User(username=cfg.staff_username, password_hash=hash_password(cfg.staff_password)))
    logger.info(f"Seeded staff account '{cfg.staff_username}'")
    return user
