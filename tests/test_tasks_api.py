# tests/test_tasks_api.py

from __future__ import annotations

from fastapi.testclient import TestClient

BASE = "/api/tasks"


def _create(client: TestClient, **fields) -> dict:
    payload = {"title": "A", "description": "B", "completed": False}
    payload.update(fields)
    resp = client.post(BASE, json=payload)
    assert resp.status_code == 201
    return resp.json()


def test_list_is_empty_initially(client: TestClient) -> None:
    resp = client.get(BASE)
    assert resp.status_code == 200
    assert resp.json() == []


def test_create_assigns_id_and_keeps_fields(client: TestClient) -> None:
    created = _create(client)
    assert created["id"] is not None
    assert created["title"] == "A"
    assert created["description"] == "B"
    assert created["completed"] is False


def test_create_ignores_client_supplied_id(client: TestClient) -> None:
    created = _create(client, id=999)
    assert created["id"] != 999
    assert client.get(f"{BASE}/999").status_code == 404


def test_create_defaults_completed_to_false(client: TestClient) -> None:
    resp = client.post(BASE, json={"title": "no flag"})
    assert resp.status_code == 201
    assert resp.json()["completed"] is False


def test_create_accepts_empty_title(client: TestClient) -> None:
    created = _create(client, title="")
    assert created["title"] == ""


def test_collection_route_with_trailing_slash(client: TestClient) -> None:
    resp = client.post(f"{BASE}/", json={"title": "slash"}, follow_redirects=False)
    assert resp.status_code == 201
    listed = client.get(f"{BASE}/", follow_redirects=False)
    assert listed.status_code == 200
    assert [t["title"] for t in listed.json()] == ["slash"]


def test_get_returns_created_task(client: TestClient) -> None:
    created = _create(client)
    resp = client.get(f"{BASE}/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == created


def test_get_missing_is_404_with_empty_body(client: TestClient) -> None:
    resp = client.get(f"{BASE}/12345")
    assert resp.status_code == 404
    assert resp.content == b""


def test_list_returns_all_tasks(client: TestClient) -> None:
    first = _create(client, title="one")
    second = _create(client, title="two")
    resp = client.get(BASE)
    assert resp.status_code == 200
    assert resp.json() == [first, second]


def test_update_replaces_fields_and_keeps_id(client: TestClient) -> None:
    created = _create(client)
    resp = client.put(
        f"{BASE}/{created['id']}",
        json={"id": 777, "title": "A2", "description": "B2", "completed": True},
    )
    assert resp.status_code == 200
    assert resp.json() == {
        "id": created["id"],
        "title": "A2",
        "description": "B2",
        "completed": True,
    }
    assert client.get(f"{BASE}/{created['id']}").json() == resp.json()


def test_update_missing_is_404_and_creates_nothing(client: TestClient) -> None:
    resp = client.put(f"{BASE}/42", json={"title": "ghost", "completed": True})
    assert resp.status_code == 404
    assert resp.content == b""
    assert client.get(BASE).json() == []
    assert client.get(f"{BASE}/42").status_code == 404


def test_delete_then_get_is_404(client: TestClient) -> None:
    created = _create(client)
    resp = client.delete(f"{BASE}/{created['id']}")
    assert resp.status_code == 204
    assert resp.content == b""
    assert client.get(f"{BASE}/{created['id']}").status_code == 404


def test_delete_missing_still_succeeds(client: TestClient) -> None:
    assert client.delete(f"{BASE}/9999").status_code == 204
    created = _create(client)
    assert client.delete(f"{BASE}/{created['id']}").status_code == 204
    assert client.delete(f"{BASE}/{created['id']}").status_code == 204


def test_deleted_id_is_not_reused_for_lookup(client: TestClient) -> None:
    created = _create(client)
    client.delete(f"{BASE}/{created['id']}")
    assert client.put(f"{BASE}/{created['id']}", json={"title": "x"}).status_code == 404


def test_root_and_health(client: TestClient) -> None:
    root = client.get("/")
    assert root.status_code == 200
    assert root.json()["status"] == "running"

    health = client.get("/health")
    assert health.status_code == 200
    body = health.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"


def test_new_task_never_takes_a_deleted_id(client: TestClient) -> None:
    first = _create(client, title="first")
    assert client.delete(f"{BASE}/{first['id']}").status_code == 204

    second = _create(client, title="second")
    assert second["id"] != first["id"]
    assert client.get(f"{BASE}/{first['id']}").status_code == 404
    assert client.get(f"{BASE}/{second['id']}").json() == second
