"""
Fixtures for integration tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.database import Database


@pytest.fixture
async def client(seeded_db):
    """
    HTTP client for testing API endpoints.

    Points the Database singleton at the seeded test database. The ASGI
    transport doesn't run the lifespan, so no real connection is made.
    """
    original_db = Database.db
    Database.db = seeded_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    Database.db = original_db
