from __future__ import annotations


async def test_seeded_schedules_grouped(client):
    resp = await client.get("/api/v1/schedules/grouped")
    assert resp.status_code == 200
    body = resp.json()
    assert [s["title"] for s in body["feeding"]] == ["Morning Feed", "Evening Feed"]
    assert len(body["medication"]) == 1
    assert body["inspection"] == []


async def test_schedule_crud(client, store):
    resp = await client.post(
        "/api/v1/schedules",
        json={"type": "inspection", "title": "Fence check", "time": "08:15", "frequency": "Weekly"},
    )
    assert resp.status_code == 201, resp.text
    schedule_id = resp.json()["id"]

    resp = await client.patch(f"/api/v1/schedules/{schedule_id}", json={"title": "Perimeter"})
    assert resp.status_code == 200
    assert resp.json()["title"] == "Perimeter"
    assert resp.json()["time"] == "08:15"

    resp = await client.post(f"/api/v1/schedules/{schedule_id}/toggle")
    assert resp.json()["active"] is False

    resp = await client.delete(f"/api/v1/schedules/{schedule_id}")
    assert resp.status_code == 204
    ids = [s["id"] for s in (await client.get("/api/v1/schedules")).json()]
    assert ids == ["1", "2", "3", "4"]
    assert store.saves == 4


async def test_unknown_schedule_returns_not_found(client, store):
    resp = await client.patch("/api/v1/schedules/nope", json={"title": "x"})
    assert resp.status_code == 404
    assert resp.json()["code"] == "not_found"
    resp = await client.delete("/api/v1/schedules/nope")
    assert resp.status_code == 404
    assert store.saves == 0


async def test_invalid_schedule_type_is_rejected(client):
    resp = await client.post(
        "/api/v1/schedules", json={"type": "grooming", "title": "x", "time": "08:00"}
    )
    assert resp.status_code == 422
    body = resp.json()
    assert body["code"] == "validation_error"
    assert "feeding" in body["details"]["allowed"]
