"""
Schemas for the four learning-style content items.

Visual and auditory items are created from multipart forms (see
``lms_api.utils``), so they only have response schemas here.
"""

from typing import Optional
from uuid import UUID

from pydantic import Field

from lms_api.schemas.base import APIModel, GuideSummary, RecordResponse


# ============= Visual / Auditory =============


class VisualLearningResponse(RecordResponse):
    teacher_guide_id: UUID
    title: str
    video_url: str


class VisualLearningDetail(VisualLearningResponse):
    teacher_guide: Optional[GuideSummary] = None


class AuditoryLearningResponse(RecordResponse):
    teacher_guide_id: UUID
    title: str
    audio_url: str


class AuditoryLearningDetail(AuditoryLearningResponse):
    teacher_guide: Optional[GuideSummary] = None


# ============= Kinesthetic =============


class KinestheticLearningCreate(APIModel):
    teacher_guide_id: UUID
    title: str = Field(..., min_length=1)
    question: str = Field(..., min_length=1)
    instruction: Optional[str] = None
    answer: str = Field(..., min_length=1)


class KinestheticLearningUpdate(APIModel):
    teacher_guide_id: Optional[UUID] = None
    title: Optional[str] = Field(default=None, min_length=1)
    question: Optional[str] = Field(default=None, min_length=1)
    instruction: Optional[str] = None
    answer: Optional[str] = Field(default=None, min_length=1)


class KinestheticLearningResponse(RecordResponse):
    teacher_guide_id: UUID
    title: str
    question: str
    instruction: Optional[str] = None
    answer: str


class KinestheticLearningDetail(KinestheticLearningResponse):
    teacher_guide: Optional[GuideSummary] = None


# ============= Read & write =============


class ReadAndWriteLearningCreate(APIModel):
    teacher_guide_id: UUID
    title: str = Field(..., min_length=1)
    description: Optional[str] = None


class ReadAndWriteLearningUpdate(APIModel):
    teacher_guide_id: Optional[UUID] = None
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None


class ReadAndWriteLearningResponse(RecordResponse):
    teacher_guide_id: UUID
    title: str
    description: Optional[str] = None


class ReadAndWriteLearningDetail(ReadAndWriteLearningResponse):
    teacher_guide: Optional[GuideSummary] = None
