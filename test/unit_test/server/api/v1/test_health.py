from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from hotel_voice_assistant.core.database import get_session
from hotel_voice_assistant.server.core.config import DatabaseConfig, settings
from hotel_voice_assistant.server.main import app

# Mark all tests in this module as async
pytestmark = pytest.mark.asyncio


async def test_health_check(client: AsyncClient):
    response = await client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["environment"] == "test"
    assert data["hasDB"] is True
    assert "time" in data


async def test_health_without_configured_database(client: AsyncClient):
    with patch.object(settings, "database", DatabaseConfig()):
        response = await client.get("/api/health")

    assert response.json()["hasDB"] is False


async def test_version(client: AsyncClient):
    response = await client.get("/api/version")
    assert response.status_code == 200
    data = response.json()
    assert "version" in data
    assert data["schema_version"] == "v1"


async def test_db_test_requires_staff(client: AsyncClient):
    response = await client.get("/api/db-test")
    assert response.status_code == 401


async def test_db_test(client: AsyncClient, auth_headers):
    response = await client.get("/api/db-test", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"success": True}


async def test_db_test_reports_failure(client: AsyncClient, auth_headers):
    broken = AsyncMock()
    broken.execute.side_effect = OperationalError("SELECT 1", {}, Exception("connection refused"))

    async def broken_session():
        yield broken

    app.dependency_overrides[get_session] = broken_session

    response = await client.get("/api/db-test", headers=auth_headers)
    assert response.status_code == 500
    assert response.json()["success"] is False


async def test_docs_under_api_prefix(client: AsyncClient):
    response = await client.get("/api/openapi.json")
    assert response.status_code == 200
    assert "/api/orders" in response.json()["paths"]
