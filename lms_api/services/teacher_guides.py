from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lms_api.models.teacher_guides import TeacherGuide, TeacherGuideFeedback
from lms_api.models.users import User
from lms_api.schemas.teacher_guides import (
    TeacherGuideCreate,
    TeacherGuideDetail,
    TeacherGuideFeedbackCreate,
    TeacherGuideFeedbackDetail,
    TeacherGuideFeedbackResponse,
    TeacherGuideFeedbackUpdate,
    TeacherGuideResponse,
    TeacherGuideUpdate,
)
from lms_api.services.auths import owner_id
from lms_api.services.base import CRUDService

guides = CRUDService(TeacherGuide, label="Teacher guide", populate=("creator",))
guide_feedbacks = CRUDService(
    TeacherGuideFeedback,
    label="Teacher guide feedback",
    populate=("teacher_guide", "student"),
)


class TeacherGuideService:

    @staticmethod
    async def create_guide(
        db: AsyncSession, data: TeacherGuideCreate, current_user: Optional[User]
    ) -> TeacherGuideResponse:
        guide = await guides.create(
            db,
            course_info=data.course_info,
            original_teacher_guide=data.original_teacher_guide,
            created_by=owner_id(current_user, data.created_by, "createdBy"),
        )
        return TeacherGuideResponse.model_validate(guide)

    @staticmethod
    async def list_guides(db: AsyncSession):
        return [TeacherGuideDetail.model_validate(g) for g in await guides.list(db)]

    @staticmethod
    async def get_guide(db: AsyncSession, guide_id: UUID) -> TeacherGuideDetail:
        return TeacherGuideDetail.model_validate(await guides.get(db, guide_id))

    @staticmethod
    async def update_guide(
        db: AsyncSession, guide_id: UUID, data: TeacherGuideUpdate
    ) -> TeacherGuideResponse:
        guide = await guides.update(db, guide_id, data.model_dump(exclude_unset=True))
        return TeacherGuideResponse.model_validate(guide)

    @staticmethod
    async def delete_guide(db: AsyncSession, guide_id: UUID):
        return await guides.delete(db, guide_id)


class TeacherGuideFeedbackService:

    @staticmethod
    async def create_feedback(
        db: AsyncSession, data: TeacherGuideFeedbackCreate, current_user: Optional[User]
    ) -> TeacherGuideFeedbackResponse:
        feedback = await guide_feedbacks.create(
            db,
            teacher_guide_id=data.teacher_guide_id,
            student_id=owner_id(current_user, data.student_id, "studentId"),
            student_feedback=data.student_feedback,
        )
        return TeacherGuideFeedbackResponse.model_validate(feedback)

    @staticmethod
    async def list_feedbacks(db: AsyncSession):
        return [
            TeacherGuideFeedbackDetail.model_validate(f)
            for f in await guide_feedbacks.list(db)
        ]

    @staticmethod
    async def get_feedback(db: AsyncSession, feedback_id: UUID):
        return TeacherGuideFeedbackDetail.model_validate(
            await guide_feedbacks.get(db, feedback_id)
        )

    @staticmethod
    async def list_by_guide(db: AsyncSession, guide_id: UUID):
        feedbacks = await guide_feedbacks.list(
            db, TeacherGuideFeedback.teacher_guide_id == guide_id, newest_first=True
        )
        return [TeacherGuideFeedbackDetail.model_validate(f) for f in feedbacks]

    @staticmethod
    async def update_feedback(
        db: AsyncSession, feedback_id: UUID, data: TeacherGuideFeedbackUpdate
    ):
        feedback = await guide_feedbacks.update(
            db, feedback_id, data.model_dump(exclude_unset=True)
        )
        return TeacherGuideFeedbackResponse.model_validate(feedback)

    @staticmethod
    async def delete_feedback(db: AsyncSession, feedback_id: UUID):
        return await guide_feedbacks.delete(db, feedback_id)
