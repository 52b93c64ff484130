"""Integration tests for the role and permission API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient


def _create_permissions(client: TestClient, *names: str | None) -> list[int]:
    ids = []
    for name in names:
        response = client.post("/permissions/", json={"permission": name})
        assert response.status_code == 201
        ids.append(response.json()["id"])
    return ids


def test_second_role_with_same_key_is_rejected(client: TestClient) -> None:
    assert client.post("/roles/", json={"role_key": "admin"}).status_code == 201

    response = client.post("/roles/", json={"role_key": "admin"})

    assert response.status_code == 400
    assert "already in use" in response.json()["detail"]
    assert len(client.get("/roles/").json()) == 1


def test_role_permissions_are_read_back_in_order(client: TestClient) -> None:
    read, write, delete = _create_permissions(client, "read", "write", "delete")

    response = client.post(
        "/roles/", json={"role_key": "editor", "permission_ids": [write, delete, read]}
    )
    assert response.status_code == 201
    role_id = response.json()["id"]

    stored = client.get(f"/roles/{role_id}").json()
    assert [item["id"] for item in stored["permissions"]] == [write, delete, read]
    assert [item["permission"] for item in stored["permissions"]] == [
        "write",
        "delete",
        "read",
    ]


def test_replace_role_permissions(client: TestClient) -> None:
    read, write = _create_permissions(client, "read", "write")
    role_id = client.post(
        "/roles/", json={"role_key": "editor", "permission_ids": [read]}
    ).json()["id"]

    response = client.put(
        f"/roles/{role_id}/permissions", json={"permission_ids": [write, read]}
    )

    assert response.status_code == 200
    assert [item["id"] for item in response.json()["permissions"]] == [write, read]


def test_unknown_permission_is_rejected(client: TestClient) -> None:
    role_id = client.post("/roles/", json={"role_key": "editor"}).json()["id"]

    response = client.put(f"/roles/{role_id}/permissions", json={"permission_ids": [12]})

    assert response.status_code == 400
    assert client.get(f"/roles/{role_id}").json()["permissions"] == []


def test_update_role_key(client: TestClient) -> None:
    client.post("/roles/", json={"role_key": "admin"})
    role_id = client.post("/roles/", json={"role_key": "editor"}).json()["id"]

    conflict = client.put(f"/roles/{role_id}", json={"role_key": "admin"})
    assert conflict.status_code == 400

    renamed = client.put(f"/roles/{role_id}", json={"role_key": "author"})
    assert renamed.status_code == 200
    assert renamed.json()["role_key"] == "author"

    assert client.put("/roles/99", json={"role_key": "x"}).status_code == 404


def test_delete_role_keeps_users(client: TestClient) -> None:
    role_id = client.post("/roles/", json={"role_key": "guest"}).json()["id"]
    user_id = client.post(
        "/users/",
        json={"name": "Ana", "email": "ana@example.com", "password": "x", "role_id": role_id},
    ).json()["id"]

    assert client.delete(f"/roles/{role_id}").status_code == 204
    assert client.get(f"/roles/{role_id}").status_code == 404
    assert client.get(f"/users/{user_id}").json()["role"] is None


def test_permission_without_value_is_accepted(client: TestClient) -> None:
    response = client.post("/permissions/", json={})

    assert response.status_code == 201
    assert response.json()["permission"] is None


def test_permission_lifecycle(client: TestClient) -> None:
    (permission_id,) = _create_permissions(client, "read")
    other_id = _create_permissions(client, "write")[0]
    role_id = client.post(
        "/roles/", json={"role_key": "editor", "permission_ids": [permission_id, other_id]}
    ).json()["id"]

    renamed = client.put(f"/permissions/{permission_id}", json={"permission": "view"})
    assert renamed.status_code == 200
    assert renamed.json()["permission"] == "view"

    assert client.delete(f"/permissions/{permission_id}").status_code == 204
    assert client.get(f"/permissions/{permission_id}").status_code == 404
    remaining = client.get(f"/roles/{role_id}").json()["permissions"]
    assert [item["id"] for item in remaining] == [other_id]
    assert client.put("/permissions/99", json={}).status_code == 404
