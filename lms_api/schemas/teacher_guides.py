from typing import Optional
from uuid import UUID

from pydantic import Field

from lms_api.schemas.base import APIModel, GuideSummary, RecordResponse, UserSummary


class TeacherGuideCreate(APIModel):
    course_info: str = Field(..., min_length=1)
    original_teacher_guide: str = Field(..., min_length=1)
    created_by: Optional[UUID] = Field(
        default=None, description="Ignored when the request is authenticated"
    )


class TeacherGuideUpdate(APIModel):
    course_info: Optional[str] = Field(default=None, min_length=1)
    original_teacher_guide: Optional[str] = Field(default=None, min_length=1)


class TeacherGuideResponse(RecordResponse):
    course_info: str
    original_teacher_guide: str
    created_by: UUID


class TeacherGuideDetail(TeacherGuideResponse):
    creator: Optional[UserSummary] = None


class TeacherGuideFeedbackCreate(APIModel):
    teacher_guide_id: UUID
    student_feedback: str = Field(..., min_length=1)
    student_id: Optional[UUID] = Field(
        default=None, description="Ignored when the request is authenticated"
    )


class TeacherGuideFeedbackUpdate(APIModel):
    student_feedback: Optional[str] = Field(default=None, min_length=1)


class TeacherGuideFeedbackResponse(RecordResponse):
    teacher_guide_id: UUID
    student_id: UUID
    student_feedback: str


class TeacherGuideFeedbackDetail(TeacherGuideFeedbackResponse):
    teacher_guide: Optional[GuideSummary] = None
    student: Optional[UserSummary] = None
