"""
Async CRUD plumbing shared by every resource service.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, Type, TypeVar
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import desc, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from lms_api.database.db import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class CRUDService(Generic[ModelType]):
    def __init__(
        self,
        model: Type[ModelType],
        *,
        label: str,
        populate: Sequence[str] = (),
        conflict_detail: Optional[str] = None,
    ):
        """
        CRUD object with default create, read, update, delete operations.

        **Parameters**

        * `model`: SQLAlchemy model class
        * `label`: human-readable name used in error messages
        * `populate`: view-only relationships resolved on list/get
        * `conflict_detail`: message for unique-constraint violations
        """
        self.model = model
        self.label = label
        self.populate = tuple(populate)
        self.conflict_detail = conflict_detail or f"{label} already exists"

    def _select(self, populate: bool = True):
        query = select(self.model)
        if populate and self.populate:
            # rows already in the session still need their references resolved
            query = query.execution_options(populate_existing=True)
            for attr in self.populate:
                query = query.options(selectinload(getattr(self.model, attr)))
        return query

    def _newest_first(self):
        # id breaks ties between rows written in the same instant
        return desc(self.model.created_at), desc(self.model.id)

    def not_found(self) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"{self.label} not found"
        )

    async def find(
        self, db: AsyncSession, obj_id: UUID, *, populate: bool = True
    ) -> Optional[ModelType]:
        query = self._select(populate).where(self.model.id == obj_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get(
        self, db: AsyncSession, obj_id: UUID, *, populate: bool = True
    ) -> ModelType:
        try:
            obj = await self.find(db, obj_id, populate=populate)
            if obj is None:
                raise self.not_found()
            return obj
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Failed to fetch {self.label} {obj_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    async def find_one(self, db: AsyncSession, *filters, populate: bool = True):
        query = self._select(populate).where(*filters).limit(1)
        result = await db.execute(query)
        return result.scalars().first()

    async def latest(self, db: AsyncSession, *filters) -> Optional[ModelType]:
        query = self._select().where(*filters).order_by(*self._newest_first()).limit(1)
        result = await db.execute(query)
        return result.scalars().first()

    async def list(
        self, db: AsyncSession, *filters, newest_first: bool = False
    ) -> List[ModelType]:
        try:
            query = self._select().where(*filters)
            if newest_first:
                query = query.order_by(*self._newest_first())
            else:
                query = query.order_by(self.model.created_at, self.model.id)
            result = await db.execute(query)
            return list(result.scalars().all())
        except Exception as e:
            logger.error(f"Failed to list {self.label}: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    async def page(
        self, db: AsyncSession, *filters, offset: int, limit: int
    ) -> Tuple[List[ModelType], int]:
        """Newest-first slice plus the total number of matching rows."""
        try:
            query = (
                self._select()
                .where(*filters)
                .order_by(*self._newest_first())
                .offset(offset)
                .limit(limit)
            )
            result = await db.execute(query)
            items = list(result.scalars().all())

            count_query = select(func.count()).select_from(self.model).where(*filters)
            total = (await db.execute(count_query)).scalar_one()
            return items, total
        except Exception as e:
            logger.error(f"Failed to page {self.label}: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    async def create(self, db: AsyncSession, **values: Any) -> ModelType:
        try:
            obj = self.model(**values)
            db.add(obj)
            await db.commit()
            await db.refresh(obj)
            logger.info(f"Created {self.label} {obj.id}")
            return obj
        except IntegrityError as e:
            await db.rollback()
            logger.info(f"{self.label} conflict: {e.orig}")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail=self.conflict_detail
            )
        except HTTPException:
            raise
        except Exception as e:
            await db.rollback()
            logger.error(f"Failed to create {self.label}: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    async def update(
        self, db: AsyncSession, obj_id: UUID, values: Dict[str, Any]
    ) -> ModelType:
        """Set every given field that is not None; untouched fields keep their value."""
        try:
            obj = await self.find(db, obj_id, populate=False)
            if obj is None:
                raise self.not_found()
            return await self.apply(db, obj, values)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Failed to update {self.label} {obj_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    async def apply(
        self, db: AsyncSession, obj: ModelType, values: Dict[str, Any]
    ) -> ModelType:
        try:
            for key, value in values.items():
                if value is not None:
                    setattr(obj, key, value)
            await db.commit()
            await db.refresh(obj)
            return obj
        except IntegrityError as e:
            await db.rollback()
            logger.info(f"{self.label} conflict: {e.orig}")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail=self.conflict_detail
            )
        except Exception as e:
            await db.rollback()
            logger.error(f"Failed to save {self.label} {obj.id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    async def delete(self, db: AsyncSession, obj_id: UUID) -> Dict[str, str]:
        try:
            obj = await self.find(db, obj_id, populate=False)
            if obj is None:
                raise self.not_found()
            await db.delete(obj)
            await db.commit()
            logger.info(f"Deleted {self.label} {obj_id}")
            return {"message": f"{self.label} deleted successfully"}
        except HTTPException:
            raise
        except Exception as e:
            await db.rollback()
            logger.error(f"Failed to delete {self.label} {obj_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))
