"""Users and user roles."""

import uuid

import httpx

from tests.conftest import make_user


async def test_user_update_only_touches_allowed_fields(
    client: httpx.AsyncClient, user, auth_headers
):
    response = await client.put(
        f"/api/users/{user.id}",
        json={"difficultyLevel": "beginner", "suitableMethod": "visual", "email": "x@y.z"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["difficultyLevel"] == "beginner"
    assert body["suitableMethod"] == "visual"
    # not on the allow-list
    assert body["email"] == user.email
    # omitted fields keep their value
    assert body["firstName"] == "Ada"
    assert body["age"] == 12


async def test_password_change_is_rehashed(client: httpx.AsyncClient, user, auth_headers):
    response = await client.put(
        f"/api/users/{user.id}", json={"password": "n3w-pass"}, headers=auth_headers
    )
    assert response.status_code == 200

    old = await client.post(
        "/api/auth/token", data={"username": user.email, "password": "secret123"}
    )
    new = await client.post(
        "/api/auth/token", data={"username": user.email, "password": "n3w-pass"}
    )
    assert old.status_code == 401
    assert new.status_code == 200


async def test_empty_password_is_rejected(client: httpx.AsyncClient, user, auth_headers):
    response = await client.put(
        f"/api/users/{user.id}", json={"password": ""}, headers=auth_headers
    )
    assert response.status_code == 400


async def test_user_is_populated_with_role(
    client: httpx.AsyncClient, session_factory, auth_headers
):
    role = await client.post(
        "/api/user-roles", json={"name": "student"}, headers=auth_headers
    )
    assert role.status_code == 201
    role_id = role.json()["id"]
    pupil = await make_user(session_factory, "pupil", role_id=uuid.UUID(role_id))

    fetched = await client.get(f"/api/users/{pupil.id}", headers=auth_headers)
    assert fetched.json()["role"]["name"] == "student"

    # deleting the role leaves a dangling reference that reads as null
    await client.delete(f"/api/user-roles/{role_id}", headers=auth_headers)
    fetched = await client.get(f"/api/users/{pupil.id}", headers=auth_headers)
    assert fetched.json()["roleId"] == role_id
    assert fetched.json()["role"] is None


async def test_duplicate_role_name_is_conflict(client: httpx.AsyncClient, auth_headers):
    first = await client.post("/api/user-roles", json={"name": "teacher"}, headers=auth_headers)
    assert first.status_code == 201
    assert first.json()["status"] == 1

    second = await client.post(
        "/api/user-roles", json={"name": "teacher", "status": 0}, headers=auth_headers
    )
    assert second.status_code == 409


async def test_role_rename_into_existing_name_is_conflict(
    client: httpx.AsyncClient, auth_headers
):
    await client.post("/api/user-roles", json={"name": "admin"}, headers=auth_headers)
    other = await client.post("/api/user-roles", json={"name": "parent"}, headers=auth_headers)

    response = await client.put(
        f"/api/user-roles/{other.json()['id']}", json={"name": "admin"}, headers=auth_headers
    )
    assert response.status_code == 409


async def test_role_status_must_be_a_flag(client: httpx.AsyncClient, auth_headers):
    response = await client.post(
        "/api/user-roles", json={"name": "guest", "status": 5}, headers=auth_headers
    )
    assert response.status_code == 400


async def test_unknown_user_is_not_found(client: httpx.AsyncClient, auth_headers):
    missing = uuid.uuid4()
    assert (await client.get(f"/api/users/{missing}", headers=auth_headers)).status_code == 404
    assert (
        await client.delete(f"/api/users/{missing}", headers=auth_headers)
    ).status_code == 404
