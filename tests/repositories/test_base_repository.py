"""Tests for BaseRepository: generic CRUD over one store collection."""

import uuid

from cms.shared.models import ContentStatus
from cms.shared.repositories import CategoryRepository, ContentRepository, MediaRepository


def _category(**overrides):
    fields = {"name": "Blog", "color": "#3B82F6", "slug": "blog"}
    fields.update(overrides)
    return fields


async def test_create_assigns_uuid_and_echoes_fields(store):
    repo = CategoryRepository(store)
    category = await repo.create(**_category(description="Posts"))

    assert uuid.UUID(category.id).version == 4
    assert category.name == "Blog"
    assert category.color == "#3B82F6"
    assert category.slug == "blog"
    assert category.description == "Posts"


async def test_create_assigns_unique_ids(store):
    repo = CategoryRepository(store)
    ids = {(await repo.create(**_category())).id for _ in range(20)}
    assert len(ids) == 20


async def test_create_content_starts_with_equal_timestamps(store, content_fields):
    content = await ContentRepository(store).create(**content_fields)
    assert content.created_at == content.updated_at


async def test_get_returns_equal_record(store):
    repo = CategoryRepository(store)
    created = await repo.create(**_category())
    assert await repo.get(created.id) == created


async def test_get_missing_returns_none(store):
    assert await CategoryRepository(store).get("does-not-exist") is None


async def test_returned_records_are_snapshots(store, content_fields):
    repo = ContentRepository(store)
    created = await repo.create(**{**content_fields, "tags": ["a"]})

    created.tags.append("mutated")
    created.title = "mutated"
    fetched = await repo.get(created.id)
    fetched.tags.append("again")

    stored = await repo.get(created.id)
    assert stored.tags == ["a"]
    assert stored.title == "Hi"


async def test_update_changes_only_given_field(store, content_fields, clock):
    repo = ContentRepository(store)
    before = await repo.create(**content_fields)

    after = await repo.update(before.id, title="New title")

    assert after.title == "New title"
    assert after.updated_at > before.updated_at
    unchanged = after.model_dump(exclude={"title", "updated_at"})
    assert unchanged == before.model_dump(exclude={"title", "updated_at"})


async def test_update_without_fields_still_bumps_updated_at(store, content_fields, clock):
    repo = ContentRepository(store)
    before = await repo.create(**content_fields)
    after = await repo.update(before.id)
    assert after.updated_at > before.updated_at
    assert after.created_at == before.created_at


async def test_update_ignores_id_and_created_at(store):
    repo = CategoryRepository(store)
    before = await repo.create(**_category())
    after = await repo.update(before.id, id="hijacked", created_at=None, name="Renamed")

    assert after.id == before.id
    assert after.created_at == before.created_at
    assert after.name == "Renamed"


async def test_update_category_has_no_updated_at(store):
    repo = CategoryRepository(store)
    created = await repo.create(**_category())
    updated = await repo.update(created.id, color="#000000")
    assert not hasattr(updated, "updated_at")
    assert updated.created_at == created.created_at


async def test_update_missing_returns_none_and_leaves_store(store):
    repo = CategoryRepository(store)
    existing = await repo.create(**_category())

    assert await repo.update("missing", name="x") is None
    assert await repo.list() == [existing]


async def test_update_with_none_clears_optional_field(store):
    repo = CategoryRepository(store)
    created = await repo.create(**_category(description="Posts"))
    updated = await repo.update(created.id, description=None)
    assert updated.description is None


async def test_delete_then_get_is_absent(store):
    repo = MediaRepository(store)
    media = await repo.create(
        filename="a.png", original_name="A.png", mime_type="image/png",
        size=10, url="https://cdn.example.com/a.png",
    )

    assert await repo.delete(media.id) is True
    assert await repo.get(media.id) is None


async def test_delete_missing_is_silent_noop(store):
    repo = CategoryRepository(store)
    existing = await repo.create(**_category())

    assert await repo.delete("never-existed") is False
    assert await repo.get("never-existed") is None
    assert await repo.count() == 1
    assert await repo.get(existing.id) == existing


async def test_list_filters_and_orders(store, content_fields, clock):
    repo = ContentRepository(store)
    first = await repo.create(**content_fields)
    second = await repo.create(**{**content_fields, "status": "published"})

    newest_first = await repo.list(order_by="updated_at")
    assert [c.id for c in newest_first] == [second.id, first.id]

    oldest_first = await repo.list(order_by="updated_at", order_desc=False)
    assert [c.id for c in oldest_first] == [first.id, second.id]

    published = await repo.list(filters={"status": ContentStatus.PUBLISHED})
    assert [c.id for c in published] == [second.id]


async def test_count_with_filters(store, content_fields):
    repo = ContentRepository(store)
    await repo.create(**content_fields)
    await repo.create(**{**content_fields, "category": "notes"})

    assert await repo.count() == 2
    assert await repo.count(filters={"category": "notes"}) == 1
    assert await repo.count(filters={"category": "missing"}) == 0
