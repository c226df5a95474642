from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from lms_api.schemas.base import APIModel, GuideSummary, RecordResponse, UserSummary


# ============= Python video lectures =============


class PythonVideoLectureResponse(RecordResponse):
    lecture_type: int = Field(..., description="1=video, 2=no video, 3=material only")
    lecture_title: str
    lecture_difficulty: Optional[str] = None
    teacher_guide_id: Optional[UUID] = None
    video_url: Optional[str] = None
    description: Optional[str] = None
    pdf_materials: List[str] = Field(default_factory=list)
    created_by: UUID


class PythonVideoLectureDetail(PythonVideoLectureResponse):
    teacher_guide: Optional[GuideSummary] = None
    creator: Optional[UserSummary] = None


class LectureSummary(APIModel):
    id: UUID
    lecture_title: str


# ============= Feedback =============


class FeedbackCreate(APIModel):
    feedback: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)
    video_lecture_id: UUID
    user_id: Optional[UUID] = Field(
        default=None, description="Ignored when the request is authenticated"
    )


class FeedbackUpdate(APIModel):
    feedback: Optional[str] = Field(default=None, min_length=1)
    rating: Optional[int] = Field(default=None, ge=1, le=5)


class FeedbackResponse(RecordResponse):
    feedback: str
    rating: int
    video_lecture_id: UUID
    user_id: UUID


class FeedbackDetail(FeedbackResponse):
    video_lecture: Optional[LectureSummary] = None
    user: Optional[UserSummary] = None


# ============= Completed lectures =============


class CompletedLectureCreate(APIModel):
    lecture_id: str = Field(..., min_length=1)
    lecture_type: str = Field(..., min_length=1)
    completed_at: Optional[datetime] = None
    user_id: Optional[UUID] = Field(
        default=None, description="Ignored when the request is authenticated"
    )


class CompletedLectureUpdate(APIModel):
    lecture_id: Optional[str] = Field(default=None, min_length=1)
    lecture_type: Optional[str] = Field(default=None, min_length=1)
    completed_at: Optional[datetime] = None


class CompletedLectureResponse(RecordResponse):
    user_id: UUID
    lecture_id: str
    lecture_type: str
    completed_at: datetime


class CompletionStatus(APIModel):
    completed: bool
