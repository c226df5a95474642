from typing import List, Optional
from uuid import UUID

from pydantic import AliasChoices, Field

from lms_api.schemas.base import APIModel, GuideSummary, RecordResponse, UserSummary


# ============= Python papers =============


class PythonPaperCreate(APIModel):
    paper_title: str = Field(..., min_length=1)
    paper_difficulty: Optional[str] = None
    teacher_guide_id: UUID


class PythonPaperUpdate(APIModel):
    paper_title: Optional[str] = Field(default=None, min_length=1)
    paper_difficulty: Optional[str] = None
    teacher_guide_id: Optional[UUID] = None


class PythonPaperResponse(RecordResponse):
    paper_title: str
    paper_difficulty: Optional[str] = None
    teacher_guide_id: UUID


class PythonPaperDetail(PythonPaperResponse):
    teacher_guide: Optional[GuideSummary] = None


# ============= Starting paper titles =============


class StartingPaperTitleCreate(APIModel):
    paper_title: str = Field(..., min_length=1)
    paper_number: int
    created_by: Optional[UUID] = Field(
        default=None, description="Ignored when the request is authenticated"
    )


class StartingPaperTitleUpdate(APIModel):
    paper_title: Optional[str] = Field(default=None, min_length=1)
    paper_number: Optional[int] = None


class StartingPaperTitleResponse(RecordResponse):
    paper_title: str
    paper_number: int
    created_by: UUID


class StartingPaperTitleDetail(StartingPaperTitleResponse):
    creator: Optional[UserSummary] = None


# ============= Starting paper questions =============

# Older clients post the misspelled ``correctanser`` key.
_correct_answer_field = dict(
    validation_alias=AliasChoices("correctAnswer", "correctanser", "correct_answer"),
)


class StartingPaperQuestionCreate(APIModel):
    starting_paper_id: UUID
    question_title: str = Field(..., min_length=1)
    category: Optional[str] = None
    answers: List[str] = Field(default_factory=list)
    correct_answer: str = Field(..., min_length=1, **_correct_answer_field)


class StartingPaperQuestionUpdate(APIModel):
    question_title: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = None
    answers: Optional[List[str]] = None
    correct_answer: Optional[str] = Field(
        default=None, min_length=1, **_correct_answer_field
    )


class StartingPaperQuestionResponse(RecordResponse):
    starting_paper_id: UUID
    question_title: str
    category: Optional[str] = None
    answers: List[str]
    correct_answer: str
