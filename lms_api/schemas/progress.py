"""
Pydantic schemas for per-student progress aggregates
"""

from typing import Optional
from uuid import UUID

from pydantic import Field

from lms_api.schemas.base import APIModel, RecordResponse, UserSummary


# ============= Student performance (live + history) =============


class PerformanceCounters(APIModel):
    total_study_time: float = Field(default=0, ge=0)
    resource_score: float = Field(default=0, ge=0)
    total_score: float = Field(default=0, ge=0)
    paper_count: int = Field(default=0, ge=0)
    lecture_count: int = Field(default=0, ge=0)


class PerformanceCreate(PerformanceCounters):
    user_id: UUID


class PerformanceUpdate(APIModel):
    total_study_time: Optional[float] = Field(default=None, ge=0)
    resource_score: Optional[float] = Field(default=None, ge=0)
    total_score: Optional[float] = Field(default=None, ge=0)
    paper_count: Optional[int] = Field(default=None, ge=0)
    lecture_count: Optional[int] = Field(default=None, ge=0)


class PerformanceResponse(RecordResponse, PerformanceCounters):
    user_id: UUID
    average_score: float


class PerformanceDetail(PerformanceResponse):
    user: Optional[UserSummary] = None


# ============= Learning type =============


class LearningTypeCreate(APIModel):
    user_id: UUID


class LearningTypeUpdate(APIModel):
    """The only fields a learning-type update may touch."""

    visual_learning_count: Optional[int] = Field(default=None, ge=0)
    visual_learning_total_point: Optional[float] = None
    auditory_learning_count: Optional[int] = Field(default=None, ge=0)
    auditory_learning_total_point: Optional[float] = None
    kinesthetic_learning_count: Optional[int] = Field(default=None, ge=0)
    kinesthetic_learning_total_point: Optional[float] = None
    read_and_write_learning_count: Optional[int] = Field(default=None, ge=0)
    read_and_write_learning_total_point: Optional[float] = None


class LearningTypeResponse(RecordResponse):
    user_id: UUID
    visual_learning_count: int
    visual_learning_total_point: float
    auditory_learning_count: int
    auditory_learning_total_point: float
    kinesthetic_learning_count: int
    kinesthetic_learning_total_point: float
    read_and_write_learning_count: int
    read_and_write_learning_total_point: float


class LearningTypeDetail(LearningTypeResponse):
    user: Optional[UserSummary] = None
