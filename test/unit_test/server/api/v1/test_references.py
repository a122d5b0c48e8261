import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

MENU = {
    "id": "menu",
    "type": "image",
    "title": "Room service menu",
    "url": "https://cdn.example.com/menu.png",
    "keywords": ["menu", "food"],
}
SPA = {
    "id": "spa",
    "type": "document",
    "title": "Spa brochure",
    "url": "https://cdn.example.com/spa.pdf",
    "keywords": ["spa", "massage"],
}


async def test_upsert_and_map(client: AsyncClient):
    assert (await client.post("/api/references", json=MENU)).status_code == 201
    assert (await client.post("/api/references", json=SPA)).status_code == 201
    await client.post("/api/references", json={**MENU, "title": "Dinner menu"})

    response = await client.get("/api/references")

    data = response.json()
    assert list(data) == ["menu", "spa"]
    assert data["menu"]["title"] == "Dinner menu"
    assert "id" not in data["menu"]


async def test_invalid_type(client: AsyncClient):
    response = await client.post("/api/references", json={**MENU, "type": "video"})

    assert response.status_code == 422


async def test_search(client: AsyncClient):
    await client.post("/api/references", json=MENU)
    await client.post("/api/references", json=SPA)

    response = await client.get("/api/references/search", params={"content": "Could I see the FOOD menu?"})

    assert [item["title"] for item in response.json()] == ["Room service menu"]


async def test_search_requires_content(client: AsyncClient):
    response = await client.get("/api/references/search")

    assert response.status_code == 422
