"""
FastAPI routers for per-student progress: performance aggregates,
their history and learning-style counters
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from lms_api.database.db import get_db
from lms_api.models.users import User as UserModel
from lms_api.schemas.base import MessageResponse
from lms_api.schemas.progress import (
    LearningTypeCreate,
    LearningTypeDetail,
    LearningTypeResponse,
    LearningTypeUpdate,
    PerformanceCreate,
    PerformanceDetail,
    PerformanceResponse,
    PerformanceUpdate,
)
from lms_api.services.auths import get_current_user
from lms_api.services.progress import (
    LearningTypeService,
    PerformanceService,
    history_service,
    performance_service,
)
from lms_api.utils import to_uuid

logger = logging.getLogger(__name__)


def build_performance_router(prefix: str, tag: str, service: PerformanceService) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[tag])

    @router.post("", response_model=PerformanceResponse, status_code=status.HTTP_201_CREATED)
    async def create_performance(
        record: PerformanceCreate,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
    ):
        logger.info(f"Recording {tag} for user {record.user_id}")
        return await service.create_record(db, record)

    @router.get("", response_model=List[PerformanceDetail])
    async def list_performance(
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
    ):
        return await service.list_records(db)

    @router.put("/user/{user_id}", response_model=PerformanceResponse)
    async def update_performance_for_user(
        user_id: str,
        record: PerformanceUpdate,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
    ):
        """Partial counter update of the user's most recent record."""
        return await service.update_by_user(db, to_uuid(user_id, "user id"), record)

    @router.get("/{record_id}", response_model=PerformanceDetail)
    async def get_performance(
        record_id: str,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
    ):
        return await service.get_record(db, to_uuid(record_id))

    @router.put("/{record_id}", response_model=PerformanceResponse)
    async def update_performance(
        record_id: str,
        record: PerformanceUpdate,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
    ):
        return await service.update_record(db, to_uuid(record_id), record)

    @router.delete("/{record_id}", response_model=MessageResponse)
    async def delete_performance(
        record_id: str,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
    ):
        return await service.delete_record(db, to_uuid(record_id))

    return router


performance_router = build_performance_router(
    "/student-performance", "student performance", performance_service
)
history_router = build_performance_router(
    "/student-performance-history", "student performance history", history_service
)
learning_type_router = APIRouter(prefix="/learning-type", tags=["learning type"])


@performance_router.get("/user/{user_id}", response_model=Optional[PerformanceDetail])
async def get_performance_for_user(
    user_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """The live aggregate for a user, or ``null`` if none has been recorded yet."""
    return await performance_service.get_by_user(db, to_uuid(user_id, "user id"))


@history_router.get("/user/{user_id}", response_model=List[PerformanceDetail])
async def list_history_for_user(
    user_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await history_service.list_by_user(db, to_uuid(user_id, "user id"))


# ============= Learning type =============


@learning_type_router.post(
    "", response_model=LearningTypeResponse, status_code=status.HTTP_201_CREATED
)
async def create_learning_type(
    learning_type: LearningTypeCreate,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await LearningTypeService.create_learning_type(db, learning_type)


@learning_type_router.get("", response_model=List[LearningTypeDetail])
async def list_learning_types(
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await LearningTypeService.list_learning_types(db)


@learning_type_router.get("/user/{user_id}", response_model=LearningTypeDetail)
async def get_learning_type_for_user(
    user_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await LearningTypeService.get_by_user(db, to_uuid(user_id, "user id"))


@learning_type_router.get("/{learning_type_id}", response_model=LearningTypeDetail)
async def get_learning_type(
    learning_type_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await LearningTypeService.get_learning_type(db, to_uuid(learning_type_id))


@learning_type_router.put("/{learning_type_id}", response_model=LearningTypeDetail)
async def update_learning_type(
    learning_type_id: str,
    learning_type: LearningTypeUpdate,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Only the eight counter fields are written; anything else is dropped."""
    return await LearningTypeService.update_learning_type(
        db, to_uuid(learning_type_id), learning_type
    )


@learning_type_router.delete("/{learning_type_id}", response_model=MessageResponse)
async def delete_learning_type(
    learning_type_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await LearningTypeService.delete_learning_type(db, to_uuid(learning_type_id))
