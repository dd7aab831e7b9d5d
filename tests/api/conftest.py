"""API test fixtures - FastAPI test client over the shared test database.

Invariants:
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the readiness probe sees the test engine
"""

import pytest
from httpx import ASGITransport, AsyncClient

from devconnect.infrastructure.database import get_db, DatabaseSessionManager
import devconnect.infrastructure.database as db_module
from devconnect.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def register(client):
    """Register a user through the API and return its bearer headers."""
    async def _register(
        name="Jane Dev", email="jane@devmail.io", password="secret123",
    ) -> dict:
        res = await client.post(
            "/api/users",
            json={"name": name, "email": email, "password": password},
        )
        assert res.status_code == 200, res.text
        return {"Authorization": f"Bearer {res.json()['token']}"}
    return _register


@pytest.fixture
async def auth_headers(register):
    return await register()
