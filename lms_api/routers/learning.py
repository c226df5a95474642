"""
Routers for the four learning-style content items.

Visual and auditory items are posted as multipart forms carrying the media
file; kinesthetic and read/write items are plain JSON.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from lms_api.database.db import get_db
from lms_api.models.users import User as UserModel
from lms_api.schemas.base import MessageResponse
from lms_api.schemas.learning import (
    AuditoryLearningDetail,
    AuditoryLearningResponse,
    KinestheticLearningCreate,
    KinestheticLearningDetail,
    KinestheticLearningResponse,
    KinestheticLearningUpdate,
    ReadAndWriteLearningCreate,
    ReadAndWriteLearningDetail,
    ReadAndWriteLearningResponse,
    ReadAndWriteLearningUpdate,
    VisualLearningDetail,
    VisualLearningResponse,
)
from lms_api.services.auths import get_current_user
from lms_api.services.learning import (
    AuditoryLearningService,
    KinestheticLearningService,
    ReadAndWriteLearningService,
    VisualLearningService,
)
from lms_api.services.media import get_media_storage
from lms_api.storage.media import MediaStorageManager
from lms_api.utils import MediaItemForm, parse_media_item_form, to_uuid

visual_learning_router = APIRouter(prefix="/visual/learning", tags=["visual learning"])
auditory_learning_router = APIRouter(
    prefix="/auditory/learning", tags=["auditory learning"]
)
kinesthetic_learning_router = APIRouter(
    prefix="/kinesthetic/learning", tags=["kinesthetic learning"]
)
read_write_learning_router = APIRouter(
    prefix="/readwrite/learning", tags=["read and write learning"]
)


# ============= Visual =============


@visual_learning_router.post(
    "", response_model=VisualLearningResponse, status_code=status.HTTP_201_CREATED
)
async def create_visual_learning(
    form: MediaItemForm = Depends(parse_media_item_form),
    video: Optional[UploadFile] = File(None),
    storage: Optional[MediaStorageManager] = Depends(get_media_storage),
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await VisualLearningService.create_item(db, form, video, storage)


@visual_learning_router.get("", response_model=List[VisualLearningDetail])
async def list_visual_learning(
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await VisualLearningService.list_items(db)


@visual_learning_router.get("/{item_id}", response_model=VisualLearningDetail)
async def get_visual_learning(
    item_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await VisualLearningService.get_item(db, to_uuid(item_id))


@visual_learning_router.put("/{item_id}", response_model=VisualLearningResponse)
async def update_visual_learning(
    item_id: str,
    form: MediaItemForm = Depends(parse_media_item_form),
    video: Optional[UploadFile] = File(None),
    storage: Optional[MediaStorageManager] = Depends(get_media_storage),
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await VisualLearningService.update_item(
        db, to_uuid(item_id), form, video, storage
    )


@visual_learning_router.delete("/{item_id}", response_model=MessageResponse)
async def delete_visual_learning(
    item_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await VisualLearningService.delete_item(db, to_uuid(item_id))


# ============= Auditory =============


@auditory_learning_router.post(
    "", response_model=AuditoryLearningResponse, status_code=status.HTTP_201_CREATED
)
async def create_auditory_learning(
    form: MediaItemForm = Depends(parse_media_item_form),
    audio: Optional[UploadFile] = File(None),
    storage: Optional[MediaStorageManager] = Depends(get_media_storage),
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await AuditoryLearningService.create_item(db, form, audio, storage)


@auditory_learning_router.get("", response_model=List[AuditoryLearningDetail])
async def list_auditory_learning(
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await AuditoryLearningService.list_items(db)


@auditory_learning_router.get("/{item_id}", response_model=AuditoryLearningDetail)
async def get_auditory_learning(
    item_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await AuditoryLearningService.get_item(db, to_uuid(item_id))


@auditory_learning_router.put("/{item_id}", response_model=AuditoryLearningResponse)
async def update_auditory_learning(
    item_id: str,
    form: MediaItemForm = Depends(parse_media_item_form),
    audio: Optional[UploadFile] = File(None),
    storage: Optional[MediaStorageManager] = Depends(get_media_storage),
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await AuditoryLearningService.update_item(
        db, to_uuid(item_id), form, audio, storage
    )


@auditory_learning_router.delete("/{item_id}", response_model=MessageResponse)
async def delete_auditory_learning(
    item_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await AuditoryLearningService.delete_item(db, to_uuid(item_id))


# ============= Kinesthetic =============


@kinesthetic_learning_router.post(
    "", response_model=KinestheticLearningResponse, status_code=status.HTTP_201_CREATED
)
async def create_kinesthetic_learning(
    item: KinestheticLearningCreate,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await KinestheticLearningService.create_item(db, item)


@kinesthetic_learning_router.get("", response_model=List[KinestheticLearningDetail])
async def list_kinesthetic_learning(
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await KinestheticLearningService.list_items(db)


@kinesthetic_learning_router.get("/{item_id}", response_model=KinestheticLearningDetail)
async def get_kinesthetic_learning(
    item_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await KinestheticLearningService.get_item(db, to_uuid(item_id))


@kinesthetic_learning_router.put(
    "/{item_id}", response_model=KinestheticLearningResponse
)
async def update_kinesthetic_learning(
    item_id: str,
    item: KinestheticLearningUpdate,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await KinestheticLearningService.update_item(db, to_uuid(item_id), item)


@kinesthetic_learning_router.delete("/{item_id}", response_model=MessageResponse)
async def delete_kinesthetic_learning(
    item_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await KinestheticLearningService.delete_item(db, to_uuid(item_id))


# ============= Read & write =============


@read_write_learning_router.post(
    "", response_model=ReadAndWriteLearningResponse, status_code=status.HTTP_201_CREATED
)
async def create_read_write_learning(
    item: ReadAndWriteLearningCreate,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await ReadAndWriteLearningService.create_item(db, item)


@read_write_learning_router.get("", response_model=List[ReadAndWriteLearningDetail])
async def list_read_write_learning(
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await ReadAndWriteLearningService.list_items(db)


@read_write_learning_router.get(
    "/{item_id}", response_model=ReadAndWriteLearningDetail
)
async def get_read_write_learning(
    item_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await ReadAndWriteLearningService.get_item(db, to_uuid(item_id))


@read_write_learning_router.put(
    "/{item_id}", response_model=ReadAndWriteLearningResponse
)
async def update_read_write_learning(
    item_id: str,
    item: ReadAndWriteLearningUpdate,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await ReadAndWriteLearningService.update_item(db, to_uuid(item_id), item)


@read_write_learning_router.delete("/{item_id}", response_model=MessageResponse)
async def delete_read_write_learning(
    item_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await ReadAndWriteLearningService.delete_item(db, to_uuid(item_id))
