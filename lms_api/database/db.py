from typing import AsyncGenerator

from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from lms_api.core.config import settings

load_dotenv()


def _engine_options() -> dict:
    if settings.is_sqlite:
        # local runs only; aiosqlite shares one file across threads
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": 5,
        "max_overflow": 10,
        "pool_timeout": 30,
        "pool_recycle": 300,
        "pool_pre_ping": True,
    }


async_engine = create_async_engine(
    settings.DATABASE_URL, echo=settings.DB_ECHO, **_engine_options()
)

AsyncSessionLocal = async_sessionmaker(
    async_engine, expire_on_commit=False, autoflush=False
)

Base = declarative_base()


async def init_db() -> None:
    """Create any missing tables. Schema changes go through alembic."""
    import lms_api.models  # noqa: F401

    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    One session per request. Services commit their own writes; anything left
    pending is committed here, and an error rolls the request back.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
