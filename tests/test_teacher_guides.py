"""Resource CRUD contract, exercised on teacher guides and their feedback."""

import uuid

import httpx


async def test_create_echoes_fields_and_adds_record_metadata(
    client: httpx.AsyncClient, user, teacher_guide
):
    assert teacher_guide["courseInfo"] == "Python basics: variables and loops"
    assert teacher_guide["createdBy"] == str(user.id)
    for key in ("id", "createdAt", "updatedAt"):
        assert key in teacher_guide


async def test_authenticated_user_overrides_created_by(
    client: httpx.AsyncClient, user, auth_headers
):
    response = await client.post(
        "/api/teacher-guides",
        json={
            "courseInfo": "Functions",
            "originalTeacherGuide": "def, return, arguments",
            "createdBy": str(uuid.uuid4()),
        },
        headers=auth_headers,
    )
    assert response.status_code == 201
    assert response.json()["createdBy"] == str(user.id)


async def test_list_and_get_populate_the_creator(
    client: httpx.AsyncClient, teacher_guide, auth_headers
):
    listed = await client.get("/api/teacher-guides", headers=auth_headers)
    assert listed.status_code == 200
    assert listed.json()[0]["creator"]["username"] == "ada"

    fetched = await client.get(
        f"/api/teacher-guides/{teacher_guide['id']}", headers=auth_headers
    )
    assert fetched.status_code == 200
    assert fetched.json()["creator"]["email"] == "ada@example.com"


async def test_update_leaves_omitted_fields_untouched(
    client: httpx.AsyncClient, teacher_guide, auth_headers
):
    response = await client.put(
        f"/api/teacher-guides/{teacher_guide['id']}",
        json={"courseInfo": "Python basics, revised"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["courseInfo"] == "Python basics, revised"
    assert body["originalTeacherGuide"] == teacher_guide["originalTeacherGuide"]


async def test_missing_required_field_is_bad_request(
    client: httpx.AsyncClient, auth_headers
):
    response = await client.post(
        "/api/teacher-guides", json={"courseInfo": "no body"}, headers=auth_headers
    )
    assert response.status_code == 400


async def test_unknown_and_malformed_ids(client: httpx.AsyncClient, auth_headers):
    missing = uuid.uuid4()
    get_missing = await client.get(f"/api/teacher-guides/{missing}", headers=auth_headers)
    assert get_missing.status_code == 404

    put_missing = await client.put(
        f"/api/teacher-guides/{missing}", json={"courseInfo": "x"}, headers=auth_headers
    )
    assert put_missing.status_code == 404

    delete_missing = await client.delete(
        f"/api/teacher-guides/{missing}", headers=auth_headers
    )
    assert delete_missing.status_code == 404

    malformed = await client.get("/api/teacher-guides/not-a-uuid", headers=auth_headers)
    assert malformed.status_code == 400
    assert malformed.json()["detail"] == "Invalid id"


async def test_delete_returns_message_and_removes(
    client: httpx.AsyncClient, teacher_guide, auth_headers
):
    url = f"/api/teacher-guides/{teacher_guide['id']}"
    deleted = await client.delete(url, headers=auth_headers)
    assert deleted.status_code == 200
    assert "message" in deleted.json()
    assert (await client.get(url, headers=auth_headers)).status_code == 404


async def test_feedback_listed_by_guide_and_populated(
    client: httpx.AsyncClient, user, teacher_guide, auth_headers
):
    for text in ("Clear examples", "Needs more exercises"):
        created = await client.post(
            "/api/teacher-guide-feedbacks",
            json={"teacherGuideId": teacher_guide["id"], "studentFeedback": text},
            headers=auth_headers,
        )
        assert created.status_code == 201
        assert created.json()["studentId"] == str(user.id)

    response = await client.get(
        f"/api/teacher-guide-feedbacks/guideId/{teacher_guide['id']}", headers=auth_headers
    )
    assert response.status_code == 200
    feedbacks = response.json()
    assert [f["studentFeedback"] for f in feedbacks] == [
        "Needs more exercises",
        "Clear examples",
    ]
    assert feedbacks[0]["teacherGuide"]["courseInfo"] == teacher_guide["courseInfo"]
    assert feedbacks[0]["student"]["username"] == "ada"


async def test_deleting_guide_does_not_cascade_to_feedback(
    client: httpx.AsyncClient, teacher_guide, auth_headers
):
    created = await client.post(
        "/api/teacher-guide-feedbacks",
        json={"teacherGuideId": teacher_guide["id"], "studentFeedback": "Great"},
        headers=auth_headers,
    )
    feedback_id = created.json()["id"]
    await client.delete(f"/api/teacher-guides/{teacher_guide['id']}", headers=auth_headers)

    fetched = await client.get(
        f"/api/teacher-guide-feedbacks/{feedback_id}", headers=auth_headers
    )
    assert fetched.status_code == 200
    assert fetched.json()["teacherGuideId"] == teacher_guide["id"]
    assert fetched.json()["teacherGuide"] is None


async def test_feedback_by_malformed_guide_id_is_bad_request(
    client: httpx.AsyncClient, auth_headers
):
    response = await client.get(
        "/api/teacher-guide-feedbacks/guideId/123", headers=auth_headers
    )
    assert response.status_code == 400


async def test_feedback_update(client: httpx.AsyncClient, teacher_guide, auth_headers):
    created = await client.post(
        "/api/teacher-guide-feedbacks",
        json={"teacherGuideId": teacher_guide["id"], "studentFeedback": "Good"},
        headers=auth_headers,
    )
    url = f"/api/teacher-guide-feedbacks/{created.json()['id']}"

    updated = await client.put(url, json={"studentFeedback": "Very good"}, headers=auth_headers)
    assert updated.status_code == 200
    assert updated.json()["studentFeedback"] == "Very good"
    assert updated.json()["teacherGuideId"] == teacher_guide["id"]
