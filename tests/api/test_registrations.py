import pytest
from httpx import AsyncClient

from tests.helpers import as_user


async def _verify(client: AsyncClient, user_id: int = 1) -> None:
	code = (await client.post("/api/verify/request", headers=as_user(user_id))).json()["demoCode"]
	response = await client.post("/api/verify/confirm", json={"code": code}, headers=as_user(user_id))
	assert response.status_code == 200


async def _paid_intent(client: AsyncClient, event_id: int, user_id: int = 1) -> str:
	payment_id = (await client.post("/api/payments/intent", json={"eventId": event_id}, headers=as_user(user_id))).json()["paymentId"]
	await client.post("/api/payments/confirm", json={"paymentId": payment_id}, headers=as_user(user_id))
	return payment_id


@pytest.mark.asyncio
async def test_preview_free_event(api_client: AsyncClient):
	response = await api_client.post("/api/registrations/preview", json={"eventId": 101})
	assert response.status_code == 200
	assert response.json() == {
		"ok": True,
		"event": {"id": 101, "title": "Club Fair", "price": 0, "free": True},
		"needsPayment": False,
		"needsVerification": False,
	}


@pytest.mark.asyncio
async def test_preview_reflects_verification(api_client: AsyncClient):
	before = (await api_client.post("/api/registrations/preview", json={"eventId": 102})).json()
	assert before["needsPayment"] is True
	assert before["needsVerification"] is True

	await _verify(api_client)
	after = (await api_client.post("/api/registrations/preview", json={"eventId": 102})).json()
	assert after["needsVerification"] is False
	assert after["needsPayment"] is True


@pytest.mark.asyncio
async def test_preview_unknown_event(api_client: AsyncClient):
	response = await api_client.post("/api/registrations/preview", json={"eventId": 5})
	assert response.status_code == 404


@pytest.mark.asyncio
async def test_register_free_event(api_client: AsyncClient, store):
	response = await api_client.post("/api/registrations/register", json={"eventId": 101})
	assert response.status_code == 200
	assert response.json() == {"ok": True, "registered": True}
	assert store.events[101].spots_left == 19

	mine = (await api_client.get("/api/registrations/me")).json()
	assert len(mine) == 1
	assert mine[0]["userId"] == 1
	assert mine[0]["eventId"] == 101
	assert mine[0]["event"]["title"] == "Club Fair"
	assert mine[0]["at"]


@pytest.mark.asyncio
async def test_register_twice_is_reported_not_repeated(api_client: AsyncClient, store):
	await api_client.post("/api/registrations/register", json={"eventId": 103})
	second = await api_client.post("/api/registrations/register", json={"eventId": 103})
	assert second.status_code == 200
	assert second.json() == {"ok": True, "message": "Already registered"}
	assert store.events[103].spots_left == 14
	assert len(store.registrations) == 1


@pytest.mark.asyncio
async def test_register_paid_event_without_payment(api_client: AsyncClient, store):
	response = await api_client.post("/api/registrations/register", json={"eventId": 104})
	assert response.status_code == 400
	assert response.json() == {"ok": False, "error": "Missing or invalid payment"}
	assert store.events[104].spots_left == 12
	assert store.registrations == []


@pytest.mark.asyncio
async def test_register_with_unconfirmed_payment(api_client: AsyncClient):
	payment_id = (await api_client.post("/api/payments/intent", json={"eventId": 104})).json()["paymentId"]
	response = await api_client.post("/api/registrations/register", json={"eventId": 104, "paymentId": payment_id})
	assert response.status_code == 400
	assert response.json()["error"] == "Payment not completed"


@pytest.mark.asyncio
async def test_register_with_payment_for_other_event(api_client: AsyncClient):
	payment_id = await _paid_intent(api_client, 102)
	response = await api_client.post("/api/registrations/register", json={"eventId": 104, "paymentId": payment_id})
	assert response.status_code == 400
	assert response.json()["error"] == "Missing or invalid payment"


@pytest.mark.asyncio
async def test_register_with_someone_elses_payment(api_client: AsyncClient):
	payment_id = await _paid_intent(api_client, 104, user_id=1)
	response = await api_client.post(
		"/api/registrations/register",
		json={"eventId": 104, "paymentId": payment_id},
		headers=as_user(2),
	)
	assert response.status_code == 400
	assert response.json()["error"] == "Missing or invalid payment"


@pytest.mark.asyncio
async def test_register_paid_event(api_client: AsyncClient, store):
	payment_id = await _paid_intent(api_client, 104)
	response = await api_client.post("/api/registrations/register", json={"eventId": 104, "paymentId": payment_id})
	assert response.json() == {"ok": True, "registered": True}
	assert store.payments[payment_id].consumed is True
	assert store.events[104].spots_left == 11


@pytest.mark.asyncio
async def test_register_requires_verification_before_payment(api_client: AsyncClient, store):
	payment_id = await _paid_intent(api_client, 102)
	response = await api_client.post("/api/registrations/register", json={"eventId": 102, "paymentId": payment_id})
	assert response.status_code == 400
	assert response.json()["error"] == "Verification required"
	# A rejected registration must not burn the payment.
	assert store.payments[payment_id].consumed is False

	await _verify(api_client)
	response = await api_client.post("/api/registrations/register", json={"eventId": 102, "paymentId": payment_id})
	assert response.json() == {"ok": True, "registered": True}


@pytest.mark.asyncio
async def test_register_full_event(api_client: AsyncClient, store):
	store.events[101].spots_left = 1
	first = await api_client.post("/api/registrations/register", json={"eventId": 101}, headers=as_user(1))
	assert first.status_code == 200

	second = await api_client.post("/api/registrations/register", json={"eventId": 101}, headers=as_user(2))
	assert second.status_code == 400
	assert second.json() == {"ok": False, "error": "Event is full"}
	assert store.events[101].spots_left == 0

	# The user holding the last seat is told so, not that the event is full.
	again = await api_client.post("/api/registrations/register", json={"eventId": 101}, headers=as_user(1))
	assert again.json() == {"ok": True, "message": "Already registered"}


@pytest.mark.asyncio
async def test_registrations_are_per_user(api_client: AsyncClient):
	await api_client.post("/api/registrations/register", json={"eventId": 101}, headers=as_user(1))
	await api_client.post("/api/registrations/register", json={"eventId": 103}, headers=as_user(2))

	mine = (await api_client.get("/api/registrations/me", headers=as_user(2))).json()
	assert [r["eventId"] for r in mine] == [103]


@pytest.mark.asyncio
async def test_invalid_user_header(api_client: AsyncClient):
	response = await api_client.get("/api/registrations/me", headers={"X-User-Id": "alice"})
	assert response.status_code == 400
	assert response.json() == {"ok": False, "error": "Invalid X-User-Id header"}
