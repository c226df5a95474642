"""Shared pytest fixtures for the LMS API test suite."""

from collections.abc import AsyncGenerator

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from lms_api.database.db import Base, get_db
from lms_api.main import app
from lms_api.models.users import User
from lms_api.services.auths import hash_password, token_for
from lms_api.services.media import get_media_storage
from lms_api.storage.media import (
    PDF_CONTENT_TYPE,
    MediaUploadError,
    UploadResult,
    build_blob_name,
)

# ---------------------------------------------------------------------------
# Async engine & session fixtures (in-memory SQLite)
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture()
async def async_engine():
    """Fresh in-memory database per test; StaticPool keeps it on one connection."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture()
def session_factory(async_engine):
    return async_sessionmaker(
        async_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


# ---------------------------------------------------------------------------
# Media storage stand-in
# ---------------------------------------------------------------------------


class InMemoryMediaStorage:
    """Records uploads instead of talking to Azure."""

    base_url = "https://media.test/lms-media"

    def __init__(self):
        self.uploads = []
        self.fail_with = None

    def upload_bytes(
        self,
        file_content,
        filename,
        folder,
        resource_type="raw",
        content_type=None,
        force_pdf=False,
    ):
        if self.fail_with:
            raise MediaUploadError(self.fail_with)
        blob_name = build_blob_name(folder, filename, force_pdf=force_pdf)
        if force_pdf:
            content_type = PDF_CONTENT_TYPE
        result = UploadResult(
            blob_name=blob_name,
            url=f"{self.base_url}/{blob_name}",
            size_bytes=len(file_content),
            content_type=content_type,
        )
        self.uploads.append((resource_type, result))
        return result


@pytest.fixture()
def media_storage() -> InMemoryMediaStorage:
    return InMemoryMediaStorage()


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------


@pytest.fixture()
async def client(
    session_factory, media_storage
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTPX async client wired to the FastAPI app with test DB override."""

    async def _override_get_db():
        # a new session per request, like production
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_media_storage] = lambda: media_storage

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://testserver",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Convenience / data fixtures
# ---------------------------------------------------------------------------


async def make_user(session_factory, username: str = "ada", **overrides) -> User:
    values = dict(
        username=username,
        email=f"{username}@example.com",
        password_hash=hash_password("secret123"),
        first_name="Ada",
        last_name="Lovelace",
        age=12,
        phone_number="0771234567",
    )
    values.update(overrides)
    async with session_factory() as session:
        user = User(**values)
        session.add(user)
        await session.commit()
        await session.refresh(user)
        return user


def bearer(user: User) -> dict:
    return {"Authorization": f"Bearer {token_for(user)}"}


@pytest.fixture()
async def user(session_factory) -> User:
    return await make_user(session_factory)


@pytest.fixture()
def auth_headers(user) -> dict:
    return bearer(user)


@pytest.fixture()
async def teacher_guide(client, auth_headers) -> dict:
    response = await client.post(
        "/api/teacher-guides",
        json={
            "courseInfo": "Python basics: variables and loops",
            "originalTeacherGuide": "Week 1 covers print(), variables and for-loops.",
        },
        headers=auth_headers,
    )
    assert response.status_code == 201
    return response.json()
