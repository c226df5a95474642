"""Sign-up, token issuance and bearer authentication."""

import httpx

from tests.conftest import bearer, make_user

SIGNUP = {
    "username": "grace",
    "email": "grace@example.com",
    "password": "hopper42",
    "firstName": "Grace",
    "lastName": "Hopper",
    "age": 13,
    "phoneNumber": "0711111111",
}


async def test_signup_returns_token_that_authenticates(client: httpx.AsyncClient):
    response = await client.post("/api/auth/signup", json=SIGNUP)
    assert response.status_code == 201
    token = response.json()["accessToken"]

    me = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    body = me.json()
    assert body["username"] == "grace"
    assert body["firstName"] == "Grace"
    assert "passwordHash" not in body
    assert "password_hash" not in body


async def test_signup_duplicate_email_is_conflict(client: httpx.AsyncClient):
    assert (await client.post("/api/auth/signup", json=SIGNUP)).status_code == 201
    again = await client.post("/api/auth/signup", json={**SIGNUP, "username": "grace2"})
    assert again.status_code == 409


async def test_signup_missing_field_is_bad_request(client: httpx.AsyncClient):
    payload = {k: v for k, v in SIGNUP.items() if k != "email"}
    response = await client.post("/api/auth/signup", json=payload)
    assert response.status_code == 400
    assert isinstance(response.json()["detail"], list)


async def test_token_with_form_credentials(client: httpx.AsyncClient, user):
    response = await client.post(
        "/api/auth/token", data={"username": user.email, "password": "secret123"}
    )
    assert response.status_code == 200
    assert response.json()["tokenType"] == "bearer"


async def test_token_with_wrong_password_is_unauthorized(client: httpx.AsyncClient, user):
    response = await client.post(
        "/api/auth/token", data={"username": user.email, "password": "nope"}
    )
    assert response.status_code == 401


async def test_disabled_account_cannot_log_in(client: httpx.AsyncClient, session_factory):
    disabled = await make_user(session_factory, "blocked", status=0)
    response = await client.post(
        "/api/auth/token", data={"username": disabled.email, "password": "secret123"}
    )
    assert response.status_code == 403


async def test_routes_require_a_bearer_token(client: httpx.AsyncClient):
    assert (await client.get("/api/teacher-guides")).status_code == 401
    bad = await client.get(
        "/api/teacher-guides", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert bad.status_code == 401


async def test_token_of_deleted_user_is_rejected(client: httpx.AsyncClient, session_factory):
    admin = await make_user(session_factory, "admin")
    doomed = await make_user(session_factory, "doomed")
    deleted = await client.delete(f"/api/users/{doomed.id}", headers=bearer(admin))
    assert deleted.status_code == 200

    response = await client.get("/api/auth/me", headers=bearer(doomed))
    assert response.status_code == 401


async def test_owner_stamping_creates_accept_anonymous_callers(
    client: httpx.AsyncClient, user
):
    guide = {"courseInfo": "Loops", "originalTeacherGuide": "for and while"}

    anonymous = await client.post(
        "/api/teacher-guides", json={**guide, "createdBy": str(user.id)}
    )
    assert anonymous.status_code == 201
    assert anonymous.json()["createdBy"] == str(user.id)

    no_owner = await client.post("/api/teacher-guides", json=guide)
    assert no_owner.status_code == 400
    assert no_owner.json()["detail"] == "createdBy is required"

    completion = await client.post(
        "/api/completed-lectures",
        json={"lectureId": "intro", "lectureType": "python", "userId": str(user.id)},
    )
    assert completion.status_code == 201
    assert completion.json()["userId"] == str(user.id)


async def test_authenticated_caller_wins_over_body_owner(
    client: httpx.AsyncClient, session_factory, user, auth_headers
):
    other = await make_user(session_factory, "bob")
    response = await client.post(
        "/api/starting-paper-titles",
        json={"paperTitle": "Entrance", "paperNumber": 1, "createdBy": str(other.id)},
        headers=auth_headers,
    )
    assert response.status_code == 201
    assert response.json()["createdBy"] == str(user.id)


async def test_anonymous_create_with_bad_token_is_unauthorized(client: httpx.AsyncClient):
    response = await client.post(
        "/api/teacher-guides",
        json={"courseInfo": "Loops", "originalTeacherGuide": "for and while"},
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert response.status_code == 401
