"""
Question/answer services.

The four Q&A kinds only differ in which parent they hang off, so one
service class is configured per kind.
"""

from typing import Type
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from lms_api.models.qanda import AuditoryQandA, PythonQandA, ReadAndWriteQandA, VisualQandA
from lms_api.schemas import qanda as schemas
from lms_api.schemas.base import Page
from lms_api.services.base import CRUDService
from lms_api.utils import PageParams


class QandAService:
    def __init__(
        self,
        crud: CRUDService,
        parent_field: str,
        response: Type[BaseModel],
        detail: Type[BaseModel],
    ):
        self.crud = crud
        self.parent_column = getattr(crud.model, parent_field)
        self.response = response
        self.detail = detail

    async def create_item(self, db: AsyncSession, data: BaseModel):
        item = await self.crud.create(db, **data.model_dump())
        return self.response.model_validate(item)

    async def list_items(self, db: AsyncSession):
        return [self.detail.model_validate(i) for i in await self.crud.list(db)]

    async def get_item(self, db: AsyncSession, item_id: UUID):
        return self.detail.model_validate(await self.crud.get(db, item_id))

    async def update_item(self, db: AsyncSession, item_id: UUID, data: BaseModel):
        item = await self.crud.update(db, item_id, data.model_dump(exclude_unset=True))
        return self.response.model_validate(item)

    async def delete_item(self, db: AsyncSession, item_id: UUID):
        return await self.crud.delete(db, item_id)

    async def list_by_parent(self, db: AsyncSession, parent_id: UUID):
        items = await self.crud.list(db, self.parent_column == parent_id, newest_first=True)
        return [self.detail.model_validate(i) for i in items]

    async def page_by_parent(self, db: AsyncSession, parent_id: UUID, params: PageParams):
        items, total = await self.crud.page(
            db, self.parent_column == parent_id, offset=params.offset, limit=params.limit
        )
        return Page[self.detail](
            items=[self.detail.model_validate(i) for i in items],
            total=total,
            page=params.page,
            page_size=params.limit,
            pages=params.pages(total),
        )


visual_qanda_service = QandAService(
    CRUDService(VisualQandA, label="Visual Q&A", populate=("parent",)),
    "visual_learning_id",
    schemas.VisualQandAResponse,
    schemas.VisualQandADetail,
)

auditory_qanda_service = QandAService(
    CRUDService(AuditoryQandA, label="Auditory Q&A", populate=("parent",)),
    "auditory_learning_id",
    schemas.AuditoryQandAResponse,
    schemas.AuditoryQandADetail,
)

read_write_qanda_service = QandAService(
    CRUDService(ReadAndWriteQandA, label="Read and write Q&A", populate=("parent",)),
    "read_and_write_learning_id",
    schemas.ReadAndWriteQandAResponse,
    schemas.ReadAndWriteQandADetail,
)

python_qanda_service = QandAService(
    CRUDService(PythonQandA, label="Python Q&A", populate=("parent",)),
    "paper_id",
    schemas.PythonQandAResponse,
    schemas.PythonQandADetail,
)
