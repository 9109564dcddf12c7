"""API test fixtures: FastAPI app with DB session and blob store overridden.

Invariants:
    - get_db yields sessions from the per-test in-memory SQLite engine
    - get_blob_store returns a FileBlobStore rooted in tmp_path
    - Lifespan is not run (ASGITransport), so no real pool is created
"""

import pytest
from httpx import ASGITransport, AsyncClient

from inventory_service.api.dependencies import get_blob_store
from inventory_service.infrastructure.database import get_db
from inventory_service.main import app


@pytest.fixture
async def client(test_session_factory, blob_store):
    """FastAPI test client with DB and blob store dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_blob_store] = lambda: blob_store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def jpeg_bytes():
    return b"\xff\xd8\xff\xe0" + b"fake-jpeg-payload" * 8
