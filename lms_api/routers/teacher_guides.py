import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from lms_api.database.db import get_db
from lms_api.models.users import User as UserModel
from lms_api.schemas.base import MessageResponse
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
from lms_api.services.auths import get_current_user, get_optional_user
from lms_api.services.teacher_guides import TeacherGuideFeedbackService, TeacherGuideService
from lms_api.utils import to_uuid

logger = logging.getLogger(__name__)

teacher_guides_router = APIRouter(prefix="/teacher-guides", tags=["teacher guides"])
guide_feedbacks_router = APIRouter(
    prefix="/teacher-guide-feedbacks", tags=["teacher guide feedbacks"]
)


# ============= Teacher guides =============


@teacher_guides_router.post(
    "", response_model=TeacherGuideResponse, status_code=status.HTTP_201_CREATED
)
async def create_teacher_guide(
    guide: TeacherGuideCreate,
    current_user: Optional[UserModel] = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Create a teacher guide.

    The guide is owned by the authenticated user; ``createdBy`` in the body
    is only used when no user is attached to the request.
    """
    logger.info(f"Creating teacher guide: {guide.course_info[:40]}")
    return await TeacherGuideService.create_guide(db, guide, current_user)


@teacher_guides_router.get("", response_model=List[TeacherGuideDetail])
async def list_teacher_guides(
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await TeacherGuideService.list_guides(db)


@teacher_guides_router.get("/{guide_id}", response_model=TeacherGuideDetail)
async def get_teacher_guide(
    guide_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await TeacherGuideService.get_guide(db, to_uuid(guide_id))


@teacher_guides_router.put("/{guide_id}", response_model=TeacherGuideResponse)
async def update_teacher_guide(
    guide_id: str,
    guide: TeacherGuideUpdate,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await TeacherGuideService.update_guide(db, to_uuid(guide_id), guide)


@teacher_guides_router.delete("/{guide_id}", response_model=MessageResponse)
async def delete_teacher_guide(
    guide_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await TeacherGuideService.delete_guide(db, to_uuid(guide_id))


# ============= Teacher guide feedbacks =============


@guide_feedbacks_router.post(
    "", response_model=TeacherGuideFeedbackResponse, status_code=status.HTTP_201_CREATED
)
async def create_guide_feedback(
    feedback: TeacherGuideFeedbackCreate,
    current_user: Optional[UserModel] = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db),
):
    return await TeacherGuideFeedbackService.create_feedback(db, feedback, current_user)


@guide_feedbacks_router.get("", response_model=List[TeacherGuideFeedbackDetail])
async def list_guide_feedbacks(
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await TeacherGuideFeedbackService.list_feedbacks(db)


@guide_feedbacks_router.get(
    "/guideId/{guide_id}", response_model=List[TeacherGuideFeedbackDetail]
)
async def list_feedbacks_for_guide(
    guide_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await TeacherGuideFeedbackService.list_by_guide(
        db, to_uuid(guide_id, "teacher guide id")
    )


@guide_feedbacks_router.get("/{feedback_id}", response_model=TeacherGuideFeedbackDetail)
async def get_guide_feedback(
    feedback_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await TeacherGuideFeedbackService.get_feedback(db, to_uuid(feedback_id))


@guide_feedbacks_router.put("/{feedback_id}", response_model=TeacherGuideFeedbackResponse)
async def update_guide_feedback(
    feedback_id: str,
    feedback: TeacherGuideFeedbackUpdate,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await TeacherGuideFeedbackService.update_feedback(
        db, to_uuid(feedback_id), feedback
    )


@guide_feedbacks_router.delete("/{feedback_id}", response_model=MessageResponse)
async def delete_guide_feedback(
    feedback_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await TeacherGuideFeedbackService.delete_feedback(db, to_uuid(feedback_id))
