import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_list_events_sorted_by_date(api_client: AsyncClient):
	response = await api_client.get("/api/events")
	assert response.status_code == 200
	data = response.json()
	assert [e["id"] for e in data] == [101, 102, 103, 104]
	dates = [e["date"] for e in data]
	assert dates == sorted(dates)


@pytest.mark.asyncio
async def test_list_events_uses_camel_case(api_client: AsyncClient):
	data = (await api_client.get("/api/events")).json()
	workshop = next(e for e in data if e["id"] == 102)
	assert workshop["requiresVerification"] is True
	assert workshop["spotsLeft"] == 8
	assert workshop["clubId"] == 1
	assert workshop["free"] is False
	assert workshop["price"] == 10


@pytest.mark.asyncio
async def test_list_events_filters(api_client: AsyncClient):
	social = (await api_client.get("/api/events", params={"category": "social"})).json()
	assert [e["id"] for e in social] == [101, 104]

	paid = (await api_client.get("/api/events", params={"free": "false"})).json()
	assert [e["id"] for e in paid] == [102, 104]


@pytest.mark.asyncio
async def test_get_event(api_client: AsyncClient):
	response = await api_client.get("/api/events/103")
	assert response.status_code == 200
	assert response.json()["title"] == "Tech Talk: Building Scalable APIs"


@pytest.mark.asyncio
async def test_get_unknown_event_returns_error_envelope(api_client: AsyncClient):
	response = await api_client.get("/api/events/999")
	assert response.status_code == 404
	assert response.json() == {"ok": False, "error": "Event not found"}
