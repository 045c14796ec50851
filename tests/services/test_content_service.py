"""Tests for ContentService: listing rules and not-found policy."""

import pytest

from cms.shared.core.exceptions import ContentNotFoundError
from cms.shared.models import ContentStatus
from cms.shared.schemas import ContentCreate, ContentUpdate
from cms.shared.services import ContentService


@pytest.fixture
def service(store):
    return ContentService(store)


async def _create(service, **overrides):
    fields = {
        "title": "Hi",
        "content": "<p>x</p>",
        "slug": "hi",
        "category": "blog",
        "tags": [],
        "status": "draft",
    }
    fields.update(overrides)
    return await service.create(ContentCreate(**fields))


async def test_create_defaults_content_type_to_richtext(service):
    content = await _create(service)
    assert content.content_type == "richtext"
    assert content.excerpt is None


async def test_list_all_orders_by_most_recent_update(service, clock):
    first = await _create(service, slug="first")
    second = await _create(service, slug="second")
    assert [c.id for c in await service.list_content()] == [second.id, first.id]

    await service.update(first.id, ContentUpdate(title="Edited"))
    assert [c.id for c in await service.list_content()] == [first.id, second.id]


async def test_search_wins_over_category_and_status(service):
    await _create(service, title="Welcome to Your CMS", slug="welcome", category="blog")
    await _create(service, title="Other", slug="other", category="notes", status="published")

    results = await service.list_content(category="notes", status=ContentStatus.PUBLISHED, search="cms")
    assert [c.slug for c in results] == ["welcome"]


async def test_category_wins_over_status(service):
    await _create(service, slug="a", category="blog", status="published")
    await _create(service, slug="b", category="notes", status="draft")

    results = await service.list_content(category="notes", status=ContentStatus.PUBLISHED)
    assert [c.slug for c in results] == ["b"]


async def test_status_filter_alone(service):
    await _create(service, slug="a", status="published")
    await _create(service, slug="b", status="draft")

    results = await service.list_content(status=ContentStatus.DRAFT)
    assert [c.slug for c in results] == ["b"]


async def test_empty_filters_count_as_absent(service):
    await _create(service, slug="a")
    await _create(service, slug="b")
    assert len(await service.list_content(category="", status="", search="")) == 2


async def test_unknown_status_matches_nothing(service):
    await _create(service, slug="a")
    assert await service.list_content(status="bogus") == []


async def test_update_merges_only_supplied_fields(service):
    created = await _create(service, tags=["one"], excerpt="Short")
    updated = await service.update(created.id, ContentUpdate(status="published"))

    assert updated.status == ContentStatus.PUBLISHED
    assert updated.tags == ["one"]
    assert updated.excerpt == "Short"
    assert updated.title == created.title


async def test_update_missing_raises_not_found_and_changes_nothing(service):
    existing = await _create(service)

    with pytest.raises(ContentNotFoundError) as exc_info:
        await service.update("missing-id", ContentUpdate(title="x"))

    assert exc_info.value.status_code == 404
    assert exc_info.value.to_dict() == {"error": "Content not found"}
    assert await service.list_content() == [existing]


async def test_delete_is_idempotent(service):
    created = await _create(service)
    await service.delete(created.id)
    await service.delete(created.id)
    await service.delete("never-existed")
    assert await service.get(created.id) is None


async def test_get_by_slug(service):
    created = await _create(service, slug="about")
    assert (await service.get_by_slug("about")).id == created.id
    assert await service.get_by_slug("missing") is None
