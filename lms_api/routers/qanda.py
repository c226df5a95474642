"""
Q&A routers. Every kind exposes the same CRUD surface plus one route that
lists the questions attached to a given parent.
"""

from typing import List, Type

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from lms_api.database.db import get_db
from lms_api.models.users import User as UserModel
from lms_api.schemas import qanda as schemas
from lms_api.schemas.base import MessageResponse, Page
from lms_api.services.auths import get_current_user
from lms_api.services.qanda import (
    QandAService,
    auditory_qanda_service,
    python_qanda_service,
    read_write_qanda_service,
    visual_qanda_service,
)
from lms_api.utils import PageParams, page_params, to_uuid


def build_qanda_router(
    prefix: str,
    tag: str,
    service: QandAService,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    response_schema: Type[BaseModel],
    detail_schema: Type[BaseModel],
    parent_path: str,
    paginated: bool = False,
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[tag])

    @router.post("", response_model=response_schema, status_code=status.HTTP_201_CREATED)
    async def create_qanda(
        item: create_schema,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
    ):
        return await service.create_item(db, item)

    @router.get("", response_model=List[detail_schema])
    async def list_qanda(
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
    ):
        return await service.list_items(db)

    if paginated:

        @router.get(parent_path + "/{parent_id}", response_model=Page[detail_schema])
        async def page_qanda_by_parent(
            parent_id: str,
            params: PageParams = Depends(page_params),
            current_user: UserModel = Depends(get_current_user),
            db: AsyncSession = Depends(get_db),
        ):
            return await service.page_by_parent(
                db, to_uuid(parent_id, "parent id"), params
            )

    else:

        @router.get(parent_path + "/{parent_id}", response_model=List[detail_schema])
        async def list_qanda_by_parent(
            parent_id: str,
            current_user: UserModel = Depends(get_current_user),
            db: AsyncSession = Depends(get_db),
        ):
            return await service.list_by_parent(db, to_uuid(parent_id, "parent id"))

    @router.get("/{item_id}", response_model=detail_schema)
    async def get_qanda(
        item_id: str,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
    ):
        return await service.get_item(db, to_uuid(item_id))

    @router.put("/{item_id}", response_model=response_schema)
    async def update_qanda(
        item_id: str,
        item: update_schema,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
    ):
        return await service.update_item(db, to_uuid(item_id), item)

    @router.delete("/{item_id}", response_model=MessageResponse)
    async def delete_qanda(
        item_id: str,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
    ):
        return await service.delete_item(db, to_uuid(item_id))

    return router


visual_qanda_router = build_qanda_router(
    "/visual/qanda",
    "visual Q&A",
    visual_qanda_service,
    schemas.VisualQandACreate,
    schemas.VisualQandAUpdate,
    schemas.VisualQandAResponse,
    schemas.VisualQandADetail,
    parent_path="/visualId",
)

auditory_qanda_router = build_qanda_router(
    "/auditory/qanda",
    "auditory Q&A",
    auditory_qanda_service,
    schemas.AuditoryQandACreate,
    schemas.AuditoryQandAUpdate,
    schemas.AuditoryQandAResponse,
    schemas.AuditoryQandADetail,
    parent_path="/auditoryId",
    paginated=True,
)

read_write_qanda_router = build_qanda_router(
    "/readwrite/qanda",
    "read and write Q&A",
    read_write_qanda_service,
    schemas.ReadAndWriteQandACreate,
    schemas.ReadAndWriteQandAUpdate,
    schemas.ReadAndWriteQandAResponse,
    schemas.ReadAndWriteQandADetail,
    parent_path="/readId",
)

python_qanda_router = build_qanda_router(
    "/python/qanda",
    "python Q&A",
    python_qanda_service,
    schemas.PythonQandACreate,
    schemas.PythonQandAUpdate,
    schemas.PythonQandAResponse,
    schemas.PythonQandADetail,
    parent_path="/paper",
)
