import logging
from typing import List, Optional
from uuid import UUID

from fastapi import HTTPException, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from lms_api.models.lectures import CompletedLecture, Feedback, PythonVideoLecture
from lms_api.models.users import User
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
from lms_api.services.auths import owner_id
from lms_api.services.base import CRUDService
from lms_api.services.media import (
    LECTURE_VIDEO_FOLDER,
    has_file,
    upload_media,
    upload_pdfs,
)
from lms_api.storage.media import MediaStorageManager
from lms_api.utils import LectureForm, merge_pdf_materials, optional_uuid, parse_keep_list

logger = logging.getLogger(__name__)

lectures = CRUDService(
    PythonVideoLecture, label="Python video lecture", populate=("teacher_guide", "creator")
)
feedbacks = CRUDService(
    Feedback,
    label="Feedback",
    populate=("video_lecture", "user"),
    conflict_detail="You have already submitted feedback for this video.",
)
completions = CRUDService(
    CompletedLecture,
    label="Completed lecture",
    conflict_detail="Lecture already marked as completed",
)


class PythonVideoLectureService:

    @staticmethod
    async def create_lecture(
        db: AsyncSession,
        form: LectureForm,
        video: Optional[UploadFile],
        pdf_materials: Optional[List[UploadFile]],
        storage: Optional[MediaStorageManager],
        current_user: Optional[User],
    ) -> PythonVideoLectureResponse:
        if form.lecture_type is None or not form.lecture_title:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="lectureType and lectureTitle are required",
            )
        created_by = owner_id(
            current_user, optional_uuid(form.created_by, "createdBy"), "createdBy"
        )
        teacher_guide_id = optional_uuid(form.teacher_guide_id, "teacherGuideId")

        video_url = None
        if has_file(video):
            video_url = await upload_media(storage, video, LECTURE_VIDEO_FOLDER, "video")
        pdf_urls = await upload_pdfs(storage, pdf_materials)

        lecture = await lectures.create(
            db,
            lecture_type=form.lecture_type,
            lecture_title=form.lecture_title,
            lecture_difficulty=form.lecture_difficulty,
            teacher_guide_id=teacher_guide_id,
            video_url=video_url,
            description=form.description,
            pdf_materials=pdf_urls,
            created_by=created_by,
        )
        return PythonVideoLectureResponse.model_validate(lecture)

    @staticmethod
    async def list_lectures(db: AsyncSession):
        return [
            PythonVideoLectureDetail.model_validate(lecture)
            for lecture in await lectures.list(db)
        ]

    @staticmethod
    async def get_lecture(db: AsyncSession, lecture_id: UUID):
        return PythonVideoLectureDetail.model_validate(await lectures.get(db, lecture_id))

    @staticmethod
    async def update_lecture(
        db: AsyncSession,
        lecture_id: UUID,
        form: LectureForm,
        video: Optional[UploadFile],
        pdf_materials: Optional[List[UploadFile]],
        storage: Optional[MediaStorageManager],
    ) -> PythonVideoLectureResponse:
        lecture = await lectures.get(db, lecture_id, populate=False)
        keep = parse_keep_list(form.existing_pdf_urls)

        values = {
            "lecture_type": form.lecture_type,
            "lecture_title": form.lecture_title or None,
            "lecture_difficulty": form.lecture_difficulty,
            "description": form.description,
        }
        if has_file(video):
            values["video_url"] = await upload_media(
                storage, video, LECTURE_VIDEO_FOLDER, "video"
            )
        uploaded = await upload_pdfs(storage, pdf_materials)
        values["pdf_materials"] = merge_pdf_materials(lecture.pdf_materials, keep, uploaded)

        if form.teacher_guide_id == "":
            # an empty field detaches the lecture from its guide
            lecture.teacher_guide_id = None
        else:
            values["teacher_guide_id"] = optional_uuid(form.teacher_guide_id, "teacherGuideId")

        lecture = await lectures.apply(db, lecture, values)
        logger.info(
            f"Updated lecture {lecture_id} with {len(lecture.pdf_materials)} pdf material(s)"
        )
        return PythonVideoLectureResponse.model_validate(lecture)

    @staticmethod
    async def delete_lecture(db: AsyncSession, lecture_id: UUID):
        return await lectures.delete(db, lecture_id)


class FeedbackService:

    @staticmethod
    async def create_feedback(
        db: AsyncSession, data: FeedbackCreate, current_user: Optional[User]
    ) -> FeedbackResponse:
        user_id = owner_id(current_user, data.user_id, "userId")
        existing = await feedbacks.find_one(
            db,
            Feedback.user_id == user_id,
            Feedback.video_lecture_id == data.video_lecture_id,
            populate=False,
        )
        if existing:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail=feedbacks.conflict_detail
            )
        feedback = await feedbacks.create(
            db,
            feedback=data.feedback,
            rating=data.rating,
            video_lecture_id=data.video_lecture_id,
            user_id=user_id,
        )
        return FeedbackResponse.model_validate(feedback)

    @staticmethod
    async def list_feedbacks(db: AsyncSession):
        return [FeedbackDetail.model_validate(f) for f in await feedbacks.list(db)]

    @staticmethod
    async def get_feedback(db: AsyncSession, feedback_id: UUID):
        return FeedbackDetail.model_validate(await feedbacks.get(db, feedback_id))

    @staticmethod
    async def list_by_video(db: AsyncSession, video_lecture_id: UUID):
        items = await feedbacks.list(
            db, Feedback.video_lecture_id == video_lecture_id, newest_first=True
        )
        return [FeedbackDetail.model_validate(f) for f in items]

    @staticmethod
    async def list_by_user(db: AsyncSession, user_id: UUID):
        items = await feedbacks.list(db, Feedback.user_id == user_id, newest_first=True)
        return [FeedbackDetail.model_validate(f) for f in items]

    @staticmethod
    async def get_by_user_and_video(
        db: AsyncSession, user_id: UUID, video_lecture_id: UUID
    ) -> FeedbackDetail:
        feedback = await feedbacks.find_one(
            db,
            Feedback.user_id == user_id,
            Feedback.video_lecture_id == video_lecture_id,
        )
        if feedback is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Feedback not found for this user and video",
            )
        return FeedbackDetail.model_validate(feedback)

    @staticmethod
    async def update_feedback(db: AsyncSession, feedback_id: UUID, data: FeedbackUpdate):
        feedback = await feedbacks.update(db, feedback_id, data.model_dump(exclude_unset=True))
        return FeedbackResponse.model_validate(feedback)

    @staticmethod
    async def delete_feedback(db: AsyncSession, feedback_id: UUID):
        return await feedbacks.delete(db, feedback_id)


class CompletedLectureService:

    @staticmethod
    async def mark_completed(
        db: AsyncSession, data: CompletedLectureCreate, current_user: Optional[User]
    ) -> CompletedLectureResponse:
        user_id = owner_id(current_user, data.user_id, "userId")
        existing = await completions.find_one(
            db,
            CompletedLecture.user_id == user_id,
            CompletedLecture.lecture_id == data.lecture_id,
            CompletedLecture.lecture_type == data.lecture_type,
        )
        if existing:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail=completions.conflict_detail
            )
        values = dict(
            user_id=user_id, lecture_id=data.lecture_id, lecture_type=data.lecture_type
        )
        if data.completed_at is not None:
            values["completed_at"] = data.completed_at
        completion = await completions.create(db, **values)
        return CompletedLectureResponse.model_validate(completion)

    @staticmethod
    async def list_completed(
        db: AsyncSession, user_id: UUID, lecture_type: Optional[str] = None
    ):
        filters = [CompletedLecture.user_id == user_id]
        if lecture_type:
            filters.append(CompletedLecture.lecture_type == lecture_type)
        return [
            CompletedLectureResponse.model_validate(c)
            for c in await completions.list(db, *filters)
        ]

    @staticmethod
    async def is_completed(
        db: AsyncSession, user_id: UUID, lecture_id: str, lecture_type: str
    ) -> CompletionStatus:
        completion = await completions.find_one(
            db,
            CompletedLecture.user_id == user_id,
            CompletedLecture.lecture_id == lecture_id,
            CompletedLecture.lecture_type == lecture_type,
        )
        return CompletionStatus(completed=completion is not None)

    @staticmethod
    async def get_completed(db: AsyncSession, completion_id: UUID):
        return CompletedLectureResponse.model_validate(
            await completions.get(db, completion_id)
        )

    @staticmethod
    async def update_completed(
        db: AsyncSession, completion_id: UUID, data: CompletedLectureUpdate
    ):
        # moving onto an existing (user, lecture, type) hits the unique constraint: 409
        completion = await completions.update(
            db, completion_id, data.model_dump(exclude_unset=True)
        )
        return CompletedLectureResponse.model_validate(completion)

    @staticmethod
    async def delete_completed(db: AsyncSession, completion_id: UUID):
        return await completions.delete(db, completion_id)
