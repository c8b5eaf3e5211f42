"""
Pytest fixtures - fake search index, API client, fast settings.
Challenge: Isolated tests; no real Meilisearch in unit tests.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from catalog.config import Settings
from catalog.main import app
from catalog.search.meilisearch_client import get_meilisearch
from tests.fakes import PRODUCTS, FakeSearchIndex, RecordingSleep


@pytest.fixture
def fake_index() -> FakeSearchIndex:
    return FakeSearchIndex(documents=[dict(p) for p in PRODUCTS])


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def ingest_settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        data_file=str(tmp_path / "sku.json"),
        batch_size=1000,
        batch_pause_seconds=0.1,
        poll_interval_seconds=0.5,
        poll_timeout_seconds=None,
    )


@pytest_asyncio.fixture
async def client(fake_index: FakeSearchIndex):
    async def override_get_meilisearch():
        return fake_index

    app.dependency_overrides[get_meilisearch] = override_get_meilisearch
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
