"""Root conftest: fresh store, app and HTTP client per test."""

import itertools
import os
from datetime import datetime, timedelta, timezone

# Settings are read at import time; keep tests on an empty store
os.environ.setdefault("SEED_SAMPLE_DATA", "false")
os.environ.setdefault("APP_ENV", "test")

import pytest
from httpx import ASGITransport, AsyncClient

from cms.api.main import create_application
from cms.shared.db import MemoryStore


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def app(store):
    return create_application(store=store)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def clock(monkeypatch):
    """Strictly increasing timestamps, one second apart per clock read."""
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    ticks = itertools.count()

    def fake_utcnow():
        return start + timedelta(seconds=next(ticks))

    monkeypatch.setattr("cms.shared.models.base.utcnow", fake_utcnow)
    monkeypatch.setattr("cms.shared.repositories.base.utcnow", fake_utcnow)
    return fake_utcnow


@pytest.fixture
def content_fields():
    """Insert fields for a content item, snake_case as repositories take them."""
    return {
        "title": "Hi",
        "content": "<p>x</p>",
        "slug": "hi",
        "category": "blog",
        "tags": [],
        "status": "draft",
    }


@pytest.fixture
def content_payload(content_fields):
    """POST /api/content body."""
    return dict(content_fields)
