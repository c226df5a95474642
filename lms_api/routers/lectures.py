import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from lms_api.database.db import get_db
from lms_api.models.users import User as UserModel
from lms_api.schemas.base import MessageResponse
from lms_api.schemas.lectures import (
    CompletedLectureCreate,
    CompletedLectureResponse,
    CompletedLectureUpdate,
    CompletionStatus,
    FeedbackCreate,
    FeedbackDetail,
    FeedbackResponse,
    FeedbackUpdate,
    PythonVideoLectureDetail,
    PythonVideoLectureResponse,
)
from lms_api.services.auths import get_current_user, get_optional_user
from lms_api.services.lectures import (
    CompletedLectureService,
    FeedbackService,
    PythonVideoLectureService,
)
from lms_api.services.media import get_media_storage
from lms_api.storage.media import MediaStorageManager
from lms_api.utils import LectureForm, optional_uuid, parse_lecture_form, to_uuid

logger = logging.getLogger(__name__)

video_lectures_router = APIRouter(
    prefix="/python/video-lectures", tags=["python video lectures"]
)
feedbacks_router = APIRouter(prefix="/feedbacks", tags=["feedbacks"])
completed_lectures_router = APIRouter(
    prefix="/completed-lectures", tags=["completed lectures"]
)


# ============= Python video lectures =============


@video_lectures_router.post(
    "", response_model=PythonVideoLectureResponse, status_code=status.HTTP_201_CREATED
)
async def create_video_lecture(
    form: LectureForm = Depends(parse_lecture_form),
    video: Optional[UploadFile] = File(None),
    pdf_materials: Optional[List[UploadFile]] = File(None, alias="pdfMaterials"),
    storage: Optional[MediaStorageManager] = Depends(get_media_storage),
    current_user: Optional[UserModel] = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db),
):
    """Expects a ``video`` file and up to ten ``pdfMaterials`` files."""
    logger.info(f"Creating python video lecture: {form.lecture_title}")
    return await PythonVideoLectureService.create_lecture(
        db, form, video, pdf_materials, storage, current_user
    )


@video_lectures_router.get("", response_model=List[PythonVideoLectureDetail])
async def list_video_lectures(
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await PythonVideoLectureService.list_lectures(db)


@video_lectures_router.get("/{lecture_id}", response_model=PythonVideoLectureDetail)
async def get_video_lecture(
    lecture_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await PythonVideoLectureService.get_lecture(db, to_uuid(lecture_id))


@video_lectures_router.put("/{lecture_id}", response_model=PythonVideoLectureResponse)
async def update_video_lecture(
    lecture_id: str,
    form: LectureForm = Depends(parse_lecture_form),
    video: Optional[UploadFile] = File(None),
    pdf_materials: Optional[List[UploadFile]] = File(None, alias="pdfMaterials"),
    storage: Optional[MediaStorageManager] = Depends(get_media_storage),
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Update a lecture, media included.

    ``existingPdfUrls`` (a JSON list) is the set of stored PDFs to keep; new
    ``pdfMaterials`` uploads are added to it. Without it, uploads are appended.
    """
    return await PythonVideoLectureService.update_lecture(
        db, to_uuid(lecture_id), form, video, pdf_materials, storage
    )


@video_lectures_router.delete("/{lecture_id}", response_model=MessageResponse)
async def delete_video_lecture(
    lecture_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await PythonVideoLectureService.delete_lecture(db, to_uuid(lecture_id))


# ============= Feedback =============


@feedbacks_router.post(
    "", response_model=FeedbackResponse, status_code=status.HTTP_201_CREATED
)
async def create_feedback(
    feedback: FeedbackCreate,
    current_user: Optional[UserModel] = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db),
):
    return await FeedbackService.create_feedback(db, feedback, current_user)


@feedbacks_router.get("", response_model=List[FeedbackDetail])
async def list_feedbacks(
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await FeedbackService.list_feedbacks(db)


@feedbacks_router.get("/video/{video_lecture_id}", response_model=List[FeedbackDetail])
async def list_feedbacks_for_video(
    video_lecture_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await FeedbackService.list_by_video(
        db, to_uuid(video_lecture_id, "video lecture id")
    )


@feedbacks_router.get("/user/{user_id}", response_model=List[FeedbackDetail])
async def list_feedbacks_for_user(
    user_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await FeedbackService.list_by_user(db, to_uuid(user_id, "user id"))


@feedbacks_router.get(
    "/user/{user_id}/video/{video_lecture_id}", response_model=FeedbackDetail
)
async def get_feedback_for_user_and_video(
    user_id: str,
    video_lecture_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await FeedbackService.get_by_user_and_video(
        db, to_uuid(user_id, "user id"), to_uuid(video_lecture_id, "video lecture id")
    )


@feedbacks_router.get("/{feedback_id}", response_model=FeedbackDetail)
async def get_feedback(
    feedback_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await FeedbackService.get_feedback(db, to_uuid(feedback_id))


@feedbacks_router.put("/{feedback_id}", response_model=FeedbackResponse)
async def update_feedback(
    feedback_id: str,
    feedback: FeedbackUpdate,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await FeedbackService.update_feedback(db, to_uuid(feedback_id), feedback)


@feedbacks_router.delete("/{feedback_id}", response_model=MessageResponse)
async def delete_feedback(
    feedback_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await FeedbackService.delete_feedback(db, to_uuid(feedback_id))


# ============= Completed lectures =============


@completed_lectures_router.post(
    "", response_model=CompletedLectureResponse, status_code=status.HTTP_201_CREATED
)
async def mark_lecture_completed(
    completion: CompletedLectureCreate,
    current_user: Optional[UserModel] = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db),
):
    return await CompletedLectureService.mark_completed(db, completion, current_user)


@completed_lectures_router.get("", response_model=List[CompletedLectureResponse])
async def list_completed_lectures(
    user_id: Optional[str] = Query(None, alias="userId"),
    lecture_type: Optional[str] = Query(None, alias="lectureType"),
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Completions of ``userId`` (default: the caller), optionally of one lecture type."""
    owner = optional_uuid(user_id, "userId") or current_user.id
    return await CompletedLectureService.list_completed(db, owner, lecture_type)


@completed_lectures_router.get("/is-completed", response_model=CompletionStatus)
async def is_lecture_completed(
    lecture_id: str = Query(..., alias="lectureId"),
    lecture_type: str = Query(..., alias="lectureType"),
    user_id: Optional[str] = Query(None, alias="userId"),
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    owner = optional_uuid(user_id, "userId") or current_user.id
    return await CompletedLectureService.is_completed(db, owner, lecture_id, lecture_type)


@completed_lectures_router.get("/{completion_id}", response_model=CompletedLectureResponse)
async def get_completed_lecture(
    completion_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await CompletedLectureService.get_completed(db, to_uuid(completion_id))


@completed_lectures_router.put("/{completion_id}", response_model=CompletedLectureResponse)
async def update_completed_lecture(
    completion_id: str,
    completion: CompletedLectureUpdate,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await CompletedLectureService.update_completed(
        db, to_uuid(completion_id), completion
    )


@completed_lectures_router.delete("/{completion_id}", response_model=MessageResponse)
async def delete_completed_lecture(
    completion_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await CompletedLectureService.delete_completed(db, to_uuid(completion_id))
