import pytest


@pytest.mark.asyncio
async def test_create_goes_through_store(fake_client, fake_repo):
    resp = await fake_client.post("/api/topics", json={"title": "Hi", "content": "World"})
    assert resp.json() == {"id": 1, "title": "Hi", "content": "World", "hidden": False}
    assert fake_repo.calls == ["save"]
    assert fake_repo.rows[1].title == "Hi"


@pytest.mark.asyncio
async def test_invalid_body_never_touches_store(fake_client, fake_repo):
    resp = await fake_client.post("/api/topics", json={"title": " ", "content": "x"})
    assert resp.status_code == 400
    resp = await fake_client.put("/api/topics/1", json={"title": "x"})
    assert resp.status_code == 400
    assert fake_repo.calls == []


@pytest.mark.asyncio
async def test_update_of_missing_topic_does_not_save(fake_client, fake_repo):
    resp = await fake_client.put("/api/topics/5", json={"title": "t", "content": "c"})
    assert resp.status_code == 404
    assert fake_repo.calls == ["find_by_id"]


@pytest.mark.asyncio
async def test_delete_checks_existence_first(fake_client, fake_repo):
    resp = await fake_client.delete("/api/topics/5")
    assert resp.status_code == 404
    assert fake_repo.calls == ["exists_by_id"]

    await fake_client.post("/api/topics", json={"title": "t", "content": "c"})
    fake_repo.calls.clear()
    resp = await fake_client.delete("/api/topics/1")
    assert resp.status_code == 204
    assert fake_repo.calls == ["exists_by_id", "delete_by_id"]
    assert fake_repo.rows == {}


@pytest.mark.asyncio
async def test_hide_only_flips_flag(fake_client, fake_repo):
    await fake_client.post("/api/topics", json={"title": "t", "content": "c"})
    resp = await fake_client.patch("/api/topics/1/hide")
    assert resp.json() == {"id": 1, "title": "t", "content": "c", "hidden": True}
    assert fake_repo.rows[1].hidden is True


@pytest.mark.asyncio
async def test_list_returns_store_contents(fake_client):
    for n in range(3):
        await fake_client.post("/api/topics", json={"title": f"t{n}", "content": "c"})
    await fake_client.patch("/api/topics/2/hide")
    resp = await fake_client.get("/api/topics")
    assert [(t["id"], t["hidden"]) for t in resp.json()] == [(1, False), (2, True), (3, False)]
