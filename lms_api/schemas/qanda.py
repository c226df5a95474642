from typing import Optional
from uuid import UUID

from pydantic import Field

from lms_api.schemas.base import APIModel, RecordResponse


class QandABase(APIModel):
    question_title: str = Field(..., min_length=1)
    question_answer: str = Field(..., min_length=1)
    topic_tag: Optional[str] = None
    score: float = 0


class QandAUpdateBase(APIModel):
    question_title: Optional[str] = Field(default=None, min_length=1)
    question_answer: Optional[str] = Field(default=None, min_length=1)
    topic_tag: Optional[str] = None
    score: Optional[float] = None


class QandAResponseBase(RecordResponse):
    question_title: str
    question_answer: str
    topic_tag: Optional[str] = None
    score: float


class LearningItemSummary(APIModel):
    id: UUID
    title: str
    teacher_guide_id: UUID


class PaperSummary(APIModel):
    id: UUID
    paper_title: str


# ============= Visual =============


class VisualQandACreate(QandABase):
    visual_learning_id: UUID


class VisualQandAUpdate(QandAUpdateBase):
    visual_learning_id: Optional[UUID] = None


class VisualQandAResponse(QandAResponseBase):
    visual_learning_id: UUID


class VisualQandADetail(VisualQandAResponse):
    parent: Optional[LearningItemSummary] = None


# ============= Auditory =============


class AuditoryQandACreate(QandABase):
    auditory_learning_id: UUID


class AuditoryQandAUpdate(QandAUpdateBase):
    auditory_learning_id: Optional[UUID] = None


class AuditoryQandAResponse(QandAResponseBase):
    auditory_learning_id: UUID


class AuditoryQandADetail(AuditoryQandAResponse):
    parent: Optional[LearningItemSummary] = None


# ============= Read & write =============


class ReadAndWriteQandACreate(QandABase):
    read_and_write_learning_id: UUID


class ReadAndWriteQandAUpdate(QandAUpdateBase):
    read_and_write_learning_id: Optional[UUID] = None


class ReadAndWriteQandAResponse(QandAResponseBase):
    read_and_write_learning_id: UUID


class ReadAndWriteQandADetail(ReadAndWriteQandAResponse):
    parent: Optional[LearningItemSummary] = None


# ============= Python papers =============


class PythonQandACreate(QandABase):
    paper_id: UUID


class PythonQandAUpdate(QandAUpdateBase):
    paper_id: Optional[UUID] = None


class PythonQandAResponse(QandAResponseBase):
    paper_id: UUID


class PythonQandADetail(PythonQandAResponse):
    parent: Optional[PaperSummary] = None
