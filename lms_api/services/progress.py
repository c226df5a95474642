"""
Per-student progress: the live performance aggregate, its history
snapshots and the learning-style counters.
"""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from lms_api.models.progress import LearningType, StudentPerformance, StudentPerformanceHistory
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
from lms_api.services.base import CRUDService

logger = logging.getLogger(__name__)

performances = CRUDService(
    StudentPerformance, label="Student performance", populate=("user",)
)
histories = CRUDService(
    StudentPerformanceHistory, label="Student performance history", populate=("user",)
)
learning_types = CRUDService(
    LearningType,
    label="Learning type",
    populate=("user",),
    conflict_detail="LearningType already exists for this user",
)


def average_score(total_score: Optional[float], paper_count: Optional[int]) -> float:
    if not paper_count:
        return 0
    return (total_score or 0) / paper_count


def merged_counters(record, values: Dict[str, Any]) -> Dict[str, Any]:
    """Apply a partial counter update and recompute the derived average."""
    values = {k: v for k, v in values.items() if v is not None}
    total_score = values.get("total_score", record.total_score)
    paper_count = values.get("paper_count", record.paper_count)
    values["average_score"] = average_score(total_score, paper_count)
    return values


class PerformanceService:
    """Shared by the live aggregate and its history snapshots."""

    def __init__(self, crud: CRUDService):
        self.crud = crud
        self.model = crud.model

    async def create_record(self, db: AsyncSession, data: PerformanceCreate):
        values = data.model_dump()
        values["average_score"] = average_score(values["total_score"], values["paper_count"])
        record = await self.crud.create(db, **values)
        return PerformanceResponse.model_validate(record)

    async def list_records(self, db: AsyncSession):
        return [PerformanceDetail.model_validate(r) for r in await self.crud.list(db)]

    async def get_record(self, db: AsyncSession, record_id: UUID):
        return PerformanceDetail.model_validate(await self.crud.get(db, record_id))

    async def update_record(self, db: AsyncSession, record_id: UUID, data: PerformanceUpdate):
        record = await self.crud.get(db, record_id, populate=False)
        values = merged_counters(record, data.model_dump(exclude_unset=True))
        record = await self.crud.apply(db, record, values)
        return PerformanceResponse.model_validate(record)

    async def delete_record(self, db: AsyncSession, record_id: UUID):
        return await self.crud.delete(db, record_id)

    async def latest_for_user(self, db: AsyncSession, user_id: UUID):
        return await self.crud.latest(db, self.model.user_id == user_id)

    async def get_by_user(self, db: AsyncSession, user_id: UUID) -> Optional[PerformanceDetail]:
        record = await self.latest_for_user(db, user_id)
        if record is None:
            return None
        return PerformanceDetail.model_validate(record)

    async def list_by_user(self, db: AsyncSession, user_id: UUID):
        records = await self.crud.list(db, self.model.user_id == user_id, newest_first=True)
        return [PerformanceDetail.model_validate(r) for r in records]

    async def update_by_user(self, db: AsyncSession, user_id: UUID, data: PerformanceUpdate):
        record = await self.latest_for_user(db, user_id)
        if record is None:
            raise self.crud.not_found()
        values = merged_counters(record, data.model_dump(exclude_unset=True))
        record = await self.crud.apply(db, record, values)
        logger.info(f"{self.crud.label} for user {user_id} now averages {record.average_score}")
        return PerformanceResponse.model_validate(record)


performance_service = PerformanceService(performances)
history_service = PerformanceService(histories)


class LearningTypeService:

    @staticmethod
    async def create_learning_type(db: AsyncSession, data: LearningTypeCreate):
        existing = await learning_types.find_one(
            db, LearningType.user_id == data.user_id, populate=False
        )
        if existing:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail=learning_types.conflict_detail
            )
        created = await learning_types.create(db, user_id=data.user_id)
        return LearningTypeResponse.model_validate(created)

    @staticmethod
    async def list_learning_types(db: AsyncSession):
        return [LearningTypeDetail.model_validate(t) for t in await learning_types.list(db)]

    @staticmethod
    async def get_learning_type(db: AsyncSession, learning_type_id: UUID):
        return LearningTypeDetail.model_validate(
            await learning_types.get(db, learning_type_id)
        )

    @staticmethod
    async def get_by_user(db: AsyncSession, user_id: UUID):
        found = await learning_types.find_one(db, LearningType.user_id == user_id)
        if found is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="LearningType not found for this user",
            )
        return LearningTypeDetail.model_validate(found)

    @staticmethod
    async def update_learning_type(
        db: AsyncSession, learning_type_id: UUID, data: LearningTypeUpdate
    ):
        # the schema only knows the eight counters; anything else never gets here
        await learning_types.update(
            db, learning_type_id, data.model_dump(exclude_unset=True)
        )
        return LearningTypeDetail.model_validate(
            await learning_types.get(db, learning_type_id)
        )

    @staticmethod
    async def delete_learning_type(db: AsyncSession, learning_type_id: UUID):
        return await learning_types.delete(db, learning_type_id)
