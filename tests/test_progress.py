"""Student performance aggregates, their history and learning-style counters."""

import asyncio
import uuid

import httpx


async def test_history_average_is_zero_without_papers(
    client: httpx.AsyncClient, user, auth_headers
):
    response = await client.post(
        "/api/student-performance-history",
        json={"userId": str(user.id), "totalScore": 80, "paperCount": 0},
        headers=auth_headers,
    )
    assert response.status_code == 201
    assert response.json()["averageScore"] == 0

    scored = await client.post(
        "/api/student-performance-history",
        json={"userId": str(user.id), "totalScore": 80, "paperCount": 4},
        headers=auth_headers,
    )
    assert scored.json()["averageScore"] == 20


async def test_performance_by_user_is_null_when_absent(
    client: httpx.AsyncClient, auth_headers
):
    response = await client.get(
        f"/api/student-performance/user/{uuid.uuid4()}", headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json() is None


async def test_performance_update_by_user_recomputes_average(
    client: httpx.AsyncClient, user, auth_headers
):
    created = await client.post(
        "/api/student-performance",
        json={"userId": str(user.id), "totalScore": 30, "paperCount": 3, "lectureCount": 2},
        headers=auth_headers,
    )
    assert created.json()["averageScore"] == 10

    updated = await client.put(
        f"/api/student-performance/user/{user.id}",
        json={"totalScore": 90},
        headers=auth_headers,
    )
    assert updated.status_code == 200
    body = updated.json()
    assert body["totalScore"] == 90
    assert body["paperCount"] == 3
    assert body["lectureCount"] == 2
    assert body["averageScore"] == 30

    fetched = await client.get(f"/api/student-performance/user/{user.id}", headers=auth_headers)
    assert fetched.json()["averageScore"] == 30
    assert fetched.json()["user"]["username"] == "ada"


async def test_update_by_unknown_user_is_not_found(client: httpx.AsyncClient, auth_headers):
    response = await client.put(
        f"/api/student-performance/user/{uuid.uuid4()}",
        json={"totalScore": 1},
        headers=auth_headers,
    )
    assert response.status_code == 404


async def test_history_update_by_user_touches_latest_snapshot(
    client: httpx.AsyncClient, user, auth_headers
):
    first = await client.post(
        "/api/student-performance-history",
        json={"userId": str(user.id), "totalScore": 10, "paperCount": 1},
        headers=auth_headers,
    )
    await asyncio.sleep(0.01)
    second = await client.post(
        "/api/student-performance-history",
        json={"userId": str(user.id), "totalScore": 20, "paperCount": 1},
        headers=auth_headers,
    )

    updated = await client.put(
        f"/api/student-performance-history/user/{user.id}",
        json={"paperCount": 2},
        headers=auth_headers,
    )
    assert updated.json()["id"] == second.json()["id"]
    assert updated.json()["averageScore"] == 10

    history = await client.get(
        f"/api/student-performance-history/user/{user.id}", headers=auth_headers
    )
    assert [h["id"] for h in history.json()] == [second.json()["id"], first.json()["id"]]
    assert history.json()[1]["paperCount"] == 1


async def test_negative_counters_are_rejected(client: httpx.AsyncClient, user, auth_headers):
    response = await client.post(
        "/api/student-performance",
        json={"userId": str(user.id), "paperCount": -1},
        headers=auth_headers,
    )
    assert response.status_code == 400


async def test_performance_record_crud(client: httpx.AsyncClient, user, auth_headers):
    created = await client.post(
        "/api/student-performance",
        json={"userId": str(user.id), "totalStudyTime": 45.5},
        headers=auth_headers,
    )
    url = f"/api/student-performance/{created.json()['id']}"

    updated = await client.put(url, json={"resourceScore": 12}, headers=auth_headers)
    assert updated.json()["resourceScore"] == 12
    assert updated.json()["totalStudyTime"] == 45.5

    assert (await client.delete(url, headers=auth_headers)).status_code == 200
    assert (await client.get(url, headers=auth_headers)).status_code == 404


# ============= Learning type =============


async def test_learning_type_update_ignores_unknown_fields(
    client: httpx.AsyncClient, user, auth_headers
):
    created = await client.post(
        "/api/learning-type", json={"userId": str(user.id)}, headers=auth_headers
    )
    assert created.status_code == 201
    assert created.json()["visualLearningCount"] == 0

    response = await client.put(
        f"/api/learning-type/{created.json()['id']}",
        json={"visualLearningCount": 3, "notAllowedField": "x"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["visualLearningCount"] == 3
    assert body["auditoryLearningCount"] == 0
    assert "notAllowedField" not in body
    assert body["user"]["username"] == "ada"


async def test_learning_type_is_unique_per_user(
    client: httpx.AsyncClient, user, auth_headers
):
    payload = {"userId": str(user.id)}
    assert (
        await client.post("/api/learning-type", json=payload, headers=auth_headers)
    ).status_code == 201

    again = await client.post("/api/learning-type", json=payload, headers=auth_headers)
    assert again.status_code == 409
    assert again.json()["detail"] == "LearningType already exists for this user"


async def test_learning_type_by_user(client: httpx.AsyncClient, user, auth_headers):
    missing = await client.get(f"/api/learning-type/user/{user.id}", headers=auth_headers)
    assert missing.status_code == 404
    assert missing.json()["detail"] == "LearningType not found for this user"

    await client.post("/api/learning-type", json={"userId": str(user.id)}, headers=auth_headers)
    found = await client.get(f"/api/learning-type/user/{user.id}", headers=auth_headers)
    assert found.status_code == 200
    assert found.json()["userId"] == str(user.id)
