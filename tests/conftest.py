import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from campus_events_api.app.core import store as store_module
from campus_events_api.app.main import app


@pytest.fixture(autouse=True)
def store():
	"""Fresh seeded store for every test."""
	seeded = store_module.init_store()
	try:
		yield seeded
	finally:
		store_module.reset_store()


@pytest_asyncio.fixture
async def api_client():
	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://testserver") as client:
		yield client


@pytest.fixture
def test_client():
	# No context manager: entering it would run startup and reseed the store.
	return TestClient(app)
