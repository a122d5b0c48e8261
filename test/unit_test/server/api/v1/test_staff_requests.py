import pytest
from httpx import AsyncClient

from hotel_voice_assistant.core.database.entities import StaffRequest

pytestmark = pytest.mark.asyncio


@pytest.fixture
async def staff_request(repos) -> StaffRequest:
    return await repos.staff_requests.create(
        StaffRequest(call_id="call-1", room_number="201", content="Extra pillows", order_id="5")
    )


async def test_requires_staff(client: AsyncClient):
    response = await client.get("/api/staff/requests")

    assert response.status_code == 401
    assert response.json()["error_type"] == "AuthenticationError"


async def test_list_with_filters(client: AsyncClient, auth_headers, repos, staff_request):
    await repos.staff_requests.create(StaffRequest(call_id="c", room_number="305", content="Taxi"))

    response = await client.get("/api/staff/requests", params={"room_number": "201"}, headers=auth_headers)

    assert [r["id"] for r in response.json()] == [staff_request.id]


async def test_detail_includes_messages(client: AsyncClient, auth_headers, staff_request):
    await client.post(
        f"/api/staff/requests/{staff_request.id}/messages", json={"content": "On our way"}, headers=auth_headers
    )

    response = await client.get(f"/api/staff/requests/{staff_request.id}", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["content"] == "Extra pillows"
    assert [(m["sender"], m["content"]) for m in data["messages"]] == [("staff", "On our way")]


async def test_detail_missing(client: AsyncClient, auth_headers):
    response = await client.get("/api/staff/requests/404", headers=auth_headers)

    assert response.status_code == 404


async def test_update_status(client: AsyncClient, auth_headers, staff_request):
    response = await client.patch(
        f"/api/staff/requests/{staff_request.id}/status", json={"status": "Doing"}, headers=auth_headers
    )

    assert response.status_code == 200
    assert response.json()["status"] == "Doing"

    messages = await client.get(f"/api/staff/requests/{staff_request.id}/messages", headers=auth_headers)
    assert [m["content"] for m in messages.json()] == ["Status changed to Doing"]


async def test_update_status_rejects_unknown_value(client: AsyncClient, auth_headers, staff_request):
    response = await client.patch(
        f"/api/staff/requests/{staff_request.id}/status", json={"status": "doing"}, headers=auth_headers
    )

    assert response.status_code == 400


async def test_post_message_validation(client: AsyncClient, auth_headers, staff_request):
    response = await client.post(
        f"/api/staff/requests/{staff_request.id}/messages", json={"content": ""}, headers=auth_headers
    )

    assert response.status_code == 422


async def test_post_message_missing_request(client: AsyncClient, auth_headers):
    response = await client.post("/api/staff/requests/404/messages", json={"content": "hi"}, headers=auth_headers)

    assert response.status_code == 404
