"""Content API: HTTP contract for /api/content.

Invariants:
    - POST validates before touching the store (400 never mutates)
    - PATCH on an unknown id is 404 {"error": "Content not found"}
    - DELETE is 204 whether or not the id existed
"""

async def test_create_get_delete_scenario(client, content_payload):
    created = await client.post("/api/content", json=content_payload)
    assert created.status_code == 201
    body = created.json()
    assert body["id"]
    for key, value in content_payload.items():
        assert body[key] == value
    assert body["contentType"] == "richtext"
    assert body["createdAt"] == body["updatedAt"]

    fetched = await client.get(f"/api/content/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == body

    deleted = await client.delete(f"/api/content/{body['id']}")
    assert deleted.status_code == 204
    assert deleted.content == b""

    gone = await client.get(f"/api/content/{body['id']}")
    assert gone.status_code == 404
    assert gone.json() == {"error": "Content not found"}


async def test_create_missing_title_is_400_with_details(client, content_payload, store):
    del content_payload["title"]

    res = await client.post("/api/content", json=content_payload)

    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Invalid data"
    assert any(detail["loc"][-1] == "title" for detail in body["details"])
    assert store.counts()["content"] == 0


async def test_create_with_invalid_status_is_400(client, content_payload):
    res = await client.post("/api/content", json={**content_payload, "status": "deleted"})
    assert res.status_code == 400
    assert any(detail["loc"][-1] == "status" for detail in res.json()["details"])


async def test_create_ignores_client_supplied_id(client, content_payload):
    res = await client.post("/api/content", json={**content_payload, "id": "mine"})
    assert res.status_code == 201
    assert res.json()["id"] != "mine"


async def test_create_page_content_round_trips_camel_case_keys(client, content_payload):
    payload = {
        **content_payload,
        "contentType": "page",
        "pageCSS": ".hero { color: red; }",
        "featuredImage": "https://cdn.example.com/hero.png",
        "excerpt": "Landing",
    }
    res = await client.post("/api/content", json=payload)

    body = res.json()
    assert body["contentType"] == "page"
    assert body["pageCSS"] == ".hero { color: red; }"
    assert body["featuredImage"] == "https://cdn.example.com/hero.png"
    assert body["excerpt"] == "Landing"


async def test_patch_unknown_id_is_404(client):
    res = await client.patch("/api/content/unknown-id", json={"title": "x"})
    assert res.status_code == 404
    assert res.json() == {"error": "Content not found"}


async def test_patch_merges_only_supplied_fields(client, content_payload, clock):
    created = (await client.post("/api/content", json={**content_payload, "tags": ["a"]})).json()

    res = await client.patch(f"/api/content/{created['id']}", json={"status": "published"})

    assert res.status_code == 200
    updated = res.json()
    assert updated["status"] == "published"
    assert updated["updatedAt"] > created["updatedAt"]
    for key in ("id", "title", "content", "slug", "category", "tags", "createdAt"):
        assert updated[key] == created[key]


async def test_patch_null_title_is_400_and_store_unchanged(client, content_payload):
    created = (await client.post("/api/content", json=content_payload)).json()

    res = await client.patch(f"/api/content/{created['id']}", json={"title": None})

    assert res.status_code == 400
    assert (await client.get(f"/api/content/{created['id']}")).json() == created


async def test_patch_null_excerpt_is_400_and_store_unchanged(client, content_payload):
    created = (await client.post("/api/content", json={**content_payload, "excerpt": "Short"})).json()

    res = await client.patch(f"/api/content/{created['id']}", json={"excerpt": None})

    assert res.status_code == 400
    assert res.json()["details"][0]["loc"] == ["body", "excerpt"]
    assert (await client.get(f"/api/content/{created['id']}")).json()["excerpt"] == "Short"


async def test_patch_invalid_body_on_unknown_id_is_400(client):
    res = await client.patch("/api/content/unknown-id", json={"tags": "not-a-list"})
    assert res.status_code == 400


async def test_delete_unknown_id_is_204(client):
    # unknown id still answers 204
    res = await client.delete("/api/content/never-existed")
    assert res.status_code == 204


async def test_get_by_slug(client, content_payload):
    created = (await client.post("/api/content", json={**content_payload, "slug": "about"})).json()

    res = await client.get("/api/content/slug/about")
    assert res.status_code == 200
    assert res.json() == created

    missing = await client.get("/api/content/slug/nope")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Content not found"}


async def test_list_filters(client, content_payload):
    await client.post("/api/content", json={
        **content_payload, "title": "Welcome to Your CMS", "slug": "welcome", "status": "published",
    })
    await client.post("/api/content", json={
        **content_payload, "title": "Note", "slug": "note", "category": "notes",
    })

    everything = await client.get("/api/content")
    assert everything.status_code == 200
    assert len(everything.json()) == 2

    search = await client.get("/api/content", params={"search": "cms"})
    assert [c["slug"] for c in search.json()] == ["welcome"]

    no_match = await client.get("/api/content", params={"search": "zzz-no-match"})
    assert no_match.json() == []

    by_category = await client.get("/api/content", params={"category": "notes"})
    assert [c["slug"] for c in by_category.json()] == ["note"]

    by_status = await client.get("/api/content", params={"status": "published"})
    assert [c["slug"] for c in by_status.json()] == ["welcome"]

    # search outranks category
    both = await client.get("/api/content", params={"search": "cms", "category": "notes"})
    assert [c["slug"] for c in both.json()] == ["welcome"]


async def _seed_two(client, content_payload):
    await client.post("/api/content", json={
        **content_payload, "title": "Welcome to Your CMS", "slug": "welcome", "status": "published",
    })
    await client.post("/api/content", json={**content_payload, "slug": "other"})


async def test_list_with_unknown_status_matches_nothing(client, content_payload):
    await _seed_two(client, content_payload)

    res = await client.get("/api/content", params={"status": "bogus"})
    assert res.status_code == 200
    assert res.json() == []


async def test_list_with_empty_status_returns_everything(client, content_payload):
    await _seed_two(client, content_payload)

    res = await client.get("/api/content?status=")
    assert res.status_code == 200
    assert len(res.json()) == 2


async def test_search_outranks_unknown_status(client, content_payload):
    await _seed_two(client, content_payload)

    res = await client.get("/api/content", params={"search": "cms", "status": "bogus"})
    assert res.status_code == 200
    assert [c["slug"] for c in res.json()] == ["welcome"]
