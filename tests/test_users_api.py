"""Integration tests for the user API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient


def test_user_crud_flow(client: TestClient) -> None:
    """Exercise the full CRUD lifecycle for users."""

    role_response = client.post("/roles/", json={"role_key": "admin"})
    assert role_response.status_code == 201
    role_id = role_response.json()["id"]

    registration_payload = {
        "name": "Test User",
        "email": "user@example.com",
        "password": "Secret123",
        "role_id": role_id,
    }
    response = client.post("/users/", json=registration_payload)
    assert response.status_code == 201
    created_user = response.json()
    user_id = created_user["id"]
    assert created_user["role"]["role_key"] == "admin"
    assert "password" not in created_user

    list_response = client.get("/users/")
    assert list_response.status_code == 200
    assert [user["email"] for user in list_response.json()] == ["user@example.com"]

    detail_response = client.get(f"/users/{user_id}")
    assert detail_response.status_code == 200
    assert detail_response.json()["name"] == "Test User"

    update_response = client.put(
        f"/users/{user_id}",
        json={"name": "Updated User", "email": "updated@example.com", "clear_role": True},
    )
    assert update_response.status_code == 200
    assert update_response.json()["email"] == "updated@example.com"
    assert update_response.json()["role"] is None

    delete_response = client.delete(f"/users/{user_id}")
    assert delete_response.status_code == 204

    not_found_response = client.get(f"/users/{user_id}")
    assert not_found_response.status_code == 404


def test_user_without_name_is_rejected(client: TestClient) -> None:
    response = client.post("/users/", json={"email": "a@b.com", "password": "x"})

    assert response.status_code == 422
    assert client.get("/users/").json() == []


def test_user_with_blank_name_is_rejected(client: TestClient) -> None:
    response = client.post(
        "/users/", json={"name": "   ", "email": "a@b.com", "password": "x"}
    )

    assert response.status_code == 400


def test_user_with_unknown_role_is_rejected(client: TestClient) -> None:
    response = client.post(
        "/users/",
        json={"name": "Ana", "email": "a@b.com", "password": "x", "role_id": 5},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Role not found"


def test_duplicate_emails_are_accepted(client: TestClient) -> None:
    payload = {"name": "Ana", "email": "shared@example.com", "password": "x"}

    assert client.post("/users/", json=payload).status_code == 201
    assert client.post("/users/", json={**payload, "name": "Luis"}).status_code == 201


def test_list_users_by_role(client: TestClient) -> None:
    role_id = client.post("/roles/", json={"role_key": "editor"}).json()["id"]
    client.post(
        "/users/",
        json={"name": "Ana", "email": "ana@example.com", "password": "x", "role_id": role_id},
    )
    client.post("/users/", json={"name": "Luis", "email": "luis@example.com", "password": "x"})

    response = client.get("/users/", params={"role_id": role_id})

    assert response.status_code == 200
    assert [user["name"] for user in response.json()] == ["Ana"]


def test_update_missing_user_returns_404(client: TestClient) -> None:
    response = client.put("/users/99", json={"name": "Nobody"})

    assert response.status_code == 404


def test_email_is_stored_as_plain_text(client: TestClient) -> None:
    response = client.post("/users/", json={"name": "Ana", "email": "ana", "password": "x"})

    assert response.status_code == 201
    assert response.json()["email"] == "ana"
    assert client.get(f"/users/{response.json()['id']}").json()["email"] == "ana"


def test_email_case_is_preserved(client: TestClient) -> None:
    response = client.post(
        "/users/", json={"name": "Ana", "email": "Ana@EXAMPLE.COM", "password": "x"}
    )
    assert response.status_code == 201
    user_id = response.json()["id"]

    updated = client.put(f"/users/{user_id}", json={"email": "Other@EXAMPLE.COM"})

    assert updated.status_code == 200
    assert client.get(f"/users/{user_id}").json()["email"] == "Other@EXAMPLE.COM"


def test_empty_email_is_rejected(client: TestClient) -> None:
    response = client.post("/users/", json={"name": "Ana", "email": "", "password": "x"})

    assert response.status_code == 422
