"""Python papers, starting-paper titles and their MCQ questions."""

import httpx
import pytest


@pytest.fixture()
async def starting_paper(client, auth_headers) -> dict:
    response = await client.post(
        "/api/starting-paper-titles",
        json={"paperTitle": "Placement test", "paperNumber": 1},
        headers=auth_headers,
    )
    assert response.status_code == 201
    return response.json()


def mcq(paper_id: str, n: int = 1, **overrides) -> dict:
    payload = {
        "startingPaperId": paper_id,
        "questionTitle": f"What does print({n}) output?",
        "category": "basics",
        "answers": [str(n), f"'{n}'"],
        "correctAnswer": str(n),
    }
    payload.update(overrides)
    return payload


async def test_correct_answer_must_be_an_option(
    client: httpx.AsyncClient, starting_paper, auth_headers
):
    rejected = await client.post(
        "/api/starting-paper-questions",
        json={
            "startingPaperId": starting_paper["id"],
            "questionTitle": "Pick one",
            "answers": ["A", "B"],
            "correctanser": "C",
        },
        headers=auth_headers,
    )
    assert rejected.status_code == 400

    accepted = await client.post(
        "/api/starting-paper-questions",
        json={
            "startingPaperId": starting_paper["id"],
            "questionTitle": "Pick one",
            "answers": ["A", "B"],
            "correctanser": "A",
        },
        headers=auth_headers,
    )
    assert accepted.status_code == 201
    assert accepted.json()["correctAnswer"] == "A"


async def test_open_question_without_options(
    client: httpx.AsyncClient, starting_paper, auth_headers
):
    response = await client.post(
        "/api/starting-paper-questions",
        json=mcq(starting_paper["id"], answers=[], correctAnswer="anything"),
        headers=auth_headers,
    )
    assert response.status_code == 201
    assert response.json()["answers"] == []


async def test_update_keeps_answer_consistent(
    client: httpx.AsyncClient, starting_paper, auth_headers
):
    created = await client.post(
        "/api/starting-paper-questions", json=mcq(starting_paper["id"]), headers=auth_headers
    )
    url = f"/api/starting-paper-questions/{created.json()['id']}"

    bad_answer = await client.put(url, json={"correctAnswer": "Z"}, headers=auth_headers)
    assert bad_answer.status_code == 400

    bad_options = await client.put(url, json={"answers": ["X", "Y"]}, headers=auth_headers)
    assert bad_options.status_code == 400

    ok = await client.put(
        url, json={"answers": ["X", "Y"], "correctAnswer": "Y"}, headers=auth_headers
    )
    assert ok.status_code == 200
    assert ok.json()["answers"] == ["X", "Y"]
    assert ok.json()["correctAnswer"] == "Y"


async def test_update_rejects_blank_correct_answer(
    client: httpx.AsyncClient, starting_paper, auth_headers
):
    created = await client.post(
        "/api/starting-paper-questions",
        json={
            "startingPaperId": starting_paper["id"],
            "questionTitle": "Pick one",
            "answers": ["A", "B"],
            "correctanser": "A",
        },
        headers=auth_headers,
    )
    url = f"/api/starting-paper-questions/{created.json()['id']}"

    blank = await client.put(url, json={"correctAnswer": ""}, headers=auth_headers)
    assert blank.status_code == 400

    fetched = await client.get(url, headers=auth_headers)
    assert fetched.json()["correctAnswer"] == "A"


async def test_questions_by_paper_caps_page_size(
    client: httpx.AsyncClient, starting_paper, auth_headers
):
    for n in range(3):
        await client.post(
            "/api/starting-paper-questions",
            json=mcq(starting_paper["id"], n),
            headers=auth_headers,
        )

    response = await client.get(
        f"/api/starting-paper-questions/by-paper/{starting_paper['id']}",
        params={"limit": 500},
        headers=auth_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["pageSize"] == 100
    assert body["total"] == 3
    assert body["pages"] == 1
    assert body["items"][0]["questionTitle"] == "What does print(2) output?"


async def test_starting_title_is_owned_by_caller(
    client: httpx.AsyncClient, user, starting_paper, auth_headers
):
    assert starting_paper["createdBy"] == str(user.id)

    listed = await client.get("/api/starting-paper-titles", headers=auth_headers)
    assert listed.json()[0]["creator"]["username"] == "ada"

    updated = await client.put(
        f"/api/starting-paper-titles/{starting_paper['id']}",
        json={"paperNumber": 2},
        headers=auth_headers,
    )
    assert updated.json()["paperNumber"] == 2
    assert updated.json()["paperTitle"] == "Placement test"


async def test_python_paper_crud(client: httpx.AsyncClient, teacher_guide, auth_headers):
    created = await client.post(
        "/api/python/papers",
        json={
            "paperTitle": "Functions quiz",
            "paperDifficulty": "medium",
            "teacherGuideId": teacher_guide["id"],
        },
        headers=auth_headers,
    )
    assert created.status_code == 201
    url = f"/api/python/papers/{created.json()['id']}"

    fetched = await client.get(url, headers=auth_headers)
    assert fetched.json()["teacherGuide"]["courseInfo"] == teacher_guide["courseInfo"]

    missing_title = await client.post(
        "/api/python/papers",
        json={"teacherGuideId": teacher_guide["id"]},
        headers=auth_headers,
    )
    assert missing_title.status_code == 400

    assert (await client.delete(url, headers=auth_headers)).status_code == 200
    assert (await client.get(url, headers=auth_headers)).status_code == 404
