"""Learning-style content items, including media upload behaviour."""

import uuid

import httpx


def video_file(name: str = "intro.mp4"):
    return {"video": (name, b"\x00\x00\x00\x18ftypmp42", "video/mp4")}


async def create_visual(client, teacher_guide, auth_headers, **files):
    return await client.post(
        "/api/visual/learning",
        data={"teacherGuideId": teacher_guide["id"], "title": "Loops in pictures"},
        files=files or video_file(),
        headers=auth_headers,
    )


async def test_visual_create_stores_uploaded_url(
    client: httpx.AsyncClient, teacher_guide, auth_headers, media_storage
):
    response = await create_visual(client, teacher_guide, auth_headers)
    assert response.status_code == 201
    body = response.json()

    resource_type, upload = media_storage.uploads[0]
    assert resource_type == "video"
    assert upload.blob_name.startswith("visual/learning/")
    assert upload.blob_name.endswith("_intro.mp4")
    assert body["videoUrl"] == upload.url
    assert body["title"] == "Loops in pictures"


async def test_visual_create_without_file_is_bad_request(
    client: httpx.AsyncClient, teacher_guide, auth_headers, media_storage
):
    response = await client.post(
        "/api/visual/learning",
        data={"teacherGuideId": teacher_guide["id"], "title": "No video"},
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert "video" in response.json()["detail"]
    assert media_storage.uploads == []


async def test_upload_failure_writes_no_row(
    client: httpx.AsyncClient, teacher_guide, auth_headers, media_storage
):
    media_storage.fail_with = "container unavailable"
    response = await create_visual(client, teacher_guide, auth_headers)
    assert response.status_code == 400
    assert response.json()["detail"].startswith("Upload error")

    listed = await client.get("/api/visual/learning", headers=auth_headers)
    assert listed.json() == []


async def test_visual_update_replaces_url_only_with_new_file(
    client: httpx.AsyncClient, teacher_guide, auth_headers, media_storage
):
    created = (await create_visual(client, teacher_guide, auth_headers)).json()
    url = f"/api/visual/learning/{created['id']}"

    renamed = await client.put(url, data={"title": "Loops, animated"}, headers=auth_headers)
    assert renamed.status_code == 200
    assert renamed.json()["title"] == "Loops, animated"
    assert renamed.json()["videoUrl"] == created["videoUrl"]

    replaced = await client.put(url, files=video_file("v2.mp4"), headers=auth_headers)
    assert replaced.status_code == 200
    assert replaced.json()["videoUrl"] != created["videoUrl"]
    assert replaced.json()["videoUrl"].endswith("_v2.mp4")
    assert replaced.json()["title"] == "Loops, animated"


async def test_visual_get_populates_teacher_guide(
    client: httpx.AsyncClient, teacher_guide, auth_headers
):
    created = (await create_visual(client, teacher_guide, auth_headers)).json()
    fetched = await client.get(f"/api/visual/learning/{created['id']}", headers=auth_headers)
    assert fetched.json()["teacherGuide"] == {
        "id": teacher_guide["id"],
        "courseInfo": teacher_guide["courseInfo"],
    }


async def test_auditory_create_and_delete(
    client: httpx.AsyncClient, teacher_guide, auth_headers, media_storage
):
    response = await client.post(
        "/api/auditory/learning",
        data={"teacherGuideId": teacher_guide["id"], "title": "Listen: lists"},
        files={"audio": ("lists.mp3", b"ID3fake", "audio/mpeg")},
        headers=auth_headers,
    )
    assert response.status_code == 201
    assert response.json()["audioUrl"].startswith(media_storage.base_url)

    item_url = f"/api/auditory/learning/{response.json()['id']}"
    assert (await client.delete(item_url, headers=auth_headers)).status_code == 200
    assert (await client.delete(item_url, headers=auth_headers)).status_code == 404


async def test_auditory_create_with_malformed_guide_id(
    client: httpx.AsyncClient, auth_headers
):
    response = await client.post(
        "/api/auditory/learning",
        data={"teacherGuideId": "guide-1", "title": "Listen"},
        files={"audio": ("a.mp3", b"ID3", "audio/mpeg")},
        headers=auth_headers,
    )
    assert response.status_code == 400


async def test_kinesthetic_crud(client: httpx.AsyncClient, teacher_guide, auth_headers):
    created = await client.post(
        "/api/kinesthetic/learning",
        json={
            "teacherGuideId": teacher_guide["id"],
            "title": "Build a counter",
            "question": "Print 1 to 5",
            "instruction": "Use range()",
            "answer": "for i in range(1, 6): print(i)",
        },
        headers=auth_headers,
    )
    assert created.status_code == 201
    item_url = f"/api/kinesthetic/learning/{created.json()['id']}"

    updated = await client.put(item_url, json={"answer": "print(*range(1, 6))"}, headers=auth_headers)
    assert updated.status_code == 200
    assert updated.json()["answer"] == "print(*range(1, 6))"
    assert updated.json()["instruction"] == "Use range()"

    # the guide goes away; the item keeps its reference, which now reads as null
    await client.delete(f"/api/teacher-guides/{teacher_guide['id']}", headers=auth_headers)
    fetched = await client.get(item_url, headers=auth_headers)
    assert fetched.status_code == 200
    assert fetched.json()["teacherGuideId"] == teacher_guide["id"]
    assert fetched.json()["teacherGuide"] is None


async def test_read_write_crud(client: httpx.AsyncClient, teacher_guide, auth_headers):
    created = await client.post(
        "/api/readwrite/learning",
        json={"teacherGuideId": teacher_guide["id"], "title": "Strings", "description": "Slicing"},
        headers=auth_headers,
    )
    assert created.status_code == 201

    listed = await client.get("/api/readwrite/learning", headers=auth_headers)
    assert [i["title"] for i in listed.json()] == ["Strings"]

    missing = await client.put(
        f"/api/readwrite/learning/{uuid.uuid4()}", json={"title": "x"}, headers=auth_headers
    )
    assert missing.status_code == 404
