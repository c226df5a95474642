"""
Services for the four learning-style content items.

Visual and auditory items carry an uploaded media file; the URL returned by
the media host is what gets stored.
"""

from typing import Optional
from uuid import UUID

from fastapi import HTTPException, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from lms_api.models.learning import (
    AuditoryLearning,
    KinestheticLearning,
    ReadAndWriteLearning,
    VisualLearning,
)
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
from lms_api.services.base import CRUDService
from lms_api.services.media import (
    AUDITORY_FOLDER,
    VISUAL_FOLDER,
    has_file,
    upload_media,
)
from lms_api.storage.media import MediaStorageManager
from lms_api.utils import MediaItemForm

visual_items = CRUDService(VisualLearning, label="Visual learning", populate=("teacher_guide",))
auditory_items = CRUDService(
    AuditoryLearning, label="Auditory learning", populate=("teacher_guide",)
)
kinesthetic_items = CRUDService(
    KinestheticLearning, label="Kinesthetic learning", populate=("teacher_guide",)
)
read_write_items = CRUDService(
    ReadAndWriteLearning, label="Read and write learning", populate=("teacher_guide",)
)


def _require_media_fields(form: MediaItemForm, upload: Optional[UploadFile], kind: str):
    missing = []
    if form.teacher_guide_id is None:
        missing.append("teacherGuideId")
    if not form.title:
        missing.append("title")
    if not has_file(upload):
        missing.append(kind)
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Missing required fields: {', '.join(missing)}",
        )


class VisualLearningService:

    @staticmethod
    async def create_item(
        db: AsyncSession,
        form: MediaItemForm,
        video: Optional[UploadFile],
        storage: Optional[MediaStorageManager],
    ) -> VisualLearningResponse:
        _require_media_fields(form, video, "video")
        video_url = await upload_media(storage, video, VISUAL_FOLDER, "video")
        item = await visual_items.create(
            db,
            teacher_guide_id=form.teacher_guide_id,
            title=form.title,
            video_url=video_url,
        )
        return VisualLearningResponse.model_validate(item)

    @staticmethod
    async def list_items(db: AsyncSession):
        return [VisualLearningDetail.model_validate(i) for i in await visual_items.list(db)]

    @staticmethod
    async def get_item(db: AsyncSession, item_id: UUID):
        return VisualLearningDetail.model_validate(await visual_items.get(db, item_id))

    @staticmethod
    async def update_item(
        db: AsyncSession,
        item_id: UUID,
        form: MediaItemForm,
        video: Optional[UploadFile],
        storage: Optional[MediaStorageManager],
    ) -> VisualLearningResponse:
        item = await visual_items.get(db, item_id, populate=False)
        values = {"teacher_guide_id": form.teacher_guide_id, "title": form.title}
        if has_file(video):
            values["video_url"] = await upload_media(storage, video, VISUAL_FOLDER, "video")
        item = await visual_items.apply(db, item, values)
        return VisualLearningResponse.model_validate(item)

    @staticmethod
    async def delete_item(db: AsyncSession, item_id: UUID):
        return await visual_items.delete(db, item_id)


class AuditoryLearningService:

    @staticmethod
    async def create_item(
        db: AsyncSession,
        form: MediaItemForm,
        audio: Optional[UploadFile],
        storage: Optional[MediaStorageManager],
    ) -> AuditoryLearningResponse:
        _require_media_fields(form, audio, "audio")
        # the media host files audio under its video resource type
        audio_url = await upload_media(storage, audio, AUDITORY_FOLDER, "video")
        item = await auditory_items.create(
            db,
            teacher_guide_id=form.teacher_guide_id,
            title=form.title,
            audio_url=audio_url,
        )
        return AuditoryLearningResponse.model_validate(item)

    @staticmethod
    async def list_items(db: AsyncSession):
        return [
            AuditoryLearningDetail.model_validate(i) for i in await auditory_items.list(db)
        ]

    @staticmethod
    async def get_item(db: AsyncSession, item_id: UUID):
        return AuditoryLearningDetail.model_validate(await auditory_items.get(db, item_id))

    @staticmethod
    async def update_item(
        db: AsyncSession,
        item_id: UUID,
        form: MediaItemForm,
        audio: Optional[UploadFile],
        storage: Optional[MediaStorageManager],
    ) -> AuditoryLearningResponse:
        item = await auditory_items.get(db, item_id, populate=False)
        values = {"teacher_guide_id": form.teacher_guide_id, "title": form.title}
        if has_file(audio):
            values["audio_url"] = await upload_media(storage, audio, AUDITORY_FOLDER, "video")
        item = await auditory_items.apply(db, item, values)
        return AuditoryLearningResponse.model_validate(item)

    @staticmethod
    async def delete_item(db: AsyncSession, item_id: UUID):
        return await auditory_items.delete(db, item_id)


class KinestheticLearningService:

    @staticmethod
    async def create_item(db: AsyncSession, data: KinestheticLearningCreate):
        item = await kinesthetic_items.create(db, **data.model_dump())
        return KinestheticLearningResponse.model_validate(item)

    @staticmethod
    async def list_items(db: AsyncSession):
        return [
            KinestheticLearningDetail.model_validate(i)
            for i in await kinesthetic_items.list(db)
        ]

    @staticmethod
    async def get_item(db: AsyncSession, item_id: UUID):
        return KinestheticLearningDetail.model_validate(
            await kinesthetic_items.get(db, item_id)
        )

    @staticmethod
    async def update_item(db: AsyncSession, item_id: UUID, data: KinestheticLearningUpdate):
        item = await kinesthetic_items.update(
            db, item_id, data.model_dump(exclude_unset=True)
        )
        return KinestheticLearningResponse.model_validate(item)

    @staticmethod
    async def delete_item(db: AsyncSession, item_id: UUID):
        return await kinesthetic_items.delete(db, item_id)


class ReadAndWriteLearningService:

    @staticmethod
    async def create_item(db: AsyncSession, data: ReadAndWriteLearningCreate):
        item = await read_write_items.create(db, **data.model_dump())
        return ReadAndWriteLearningResponse.model_validate(item)

    @staticmethod
    async def list_items(db: AsyncSession):
        return [
            ReadAndWriteLearningDetail.model_validate(i)
            for i in await read_write_items.list(db)
        ]

    @staticmethod
    async def get_item(db: AsyncSession, item_id: UUID):
        return ReadAndWriteLearningDetail.model_validate(
            await read_write_items.get(db, item_id)
        )

    @staticmethod
    async def update_item(
        db: AsyncSession, item_id: UUID, data: ReadAndWriteLearningUpdate
    ):
        item = await read_write_items.update(
            db, item_id, data.model_dump(exclude_unset=True)
        )
        return ReadAndWriteLearningResponse.model_validate(item)

    @staticmethod
    async def delete_item(db: AsyncSession, item_id: UUID):
        return await read_write_items.delete(db, item_id)
