from typing import AsyncGenerator, Dict

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_voice_assistant.core.database import get_session
from hotel_voice_assistant.core.database.entities import User
from hotel_voice_assistant.server.core.security import create_access_token, hash_password
from hotel_voice_assistant.server.main import app
from hotel_voice_assistant.server.services.realtime import ConnectionManager, get_connection_manager

STAFF_USERNAME = "staff"
STAFF_PASSWORD = "s3cret-pass"


@pytest.fixture
def manager() -> ConnectionManager:
    """A connection manager with no clients, isolated from the process-wide one."""
    return ConnectionManager()


@pytest_asyncio.fixture(name="client")
async def client_fixture(session: AsyncSession, manager: ConnectionManager) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client against the app with the test session and connection manager injected."""

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_connection_manager] = lambda: manager

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def staff_user(session: AsyncSession) -> User:
    user = User(username=STAFF_USERNAME, password_hash=hash_password(STAFF_PASSWORD, iterations=1000))
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    token = create_access_token(1, STAFF_USERNAME)
    return {"Authorization": f"Bearer {token}"}
