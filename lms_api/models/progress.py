"""
SQLAlchemy models for per-student progress aggregates
"""

from sqlalchemy import Column, Float, Integer, Uuid
from sqlalchemy.orm import relationship

from lms_api.database.db import Base
from lms_api.models.base import RecordMixin


class PerformanceMixin(RecordMixin):
    total_study_time = Column(Float, nullable=False, default=0)
    resource_score = Column(Float, nullable=False, default=0)
    total_score = Column(Float, nullable=False, default=0)
    paper_count = Column(Integer, nullable=False, default=0)
    lecture_count = Column(Integer, nullable=False, default=0)
    average_score = Column(Float, nullable=False, default=0)  # total_score / paper_count


class StudentPerformance(PerformanceMixin, Base):
    """Live aggregate the student pages read and bump after each activity"""

    __tablename__ = "student_performance"

    user_id = Column(Uuid(as_uuid=True), nullable=False, index=True)

    user = relationship(
        "User",
        primaryjoin="foreign(StudentPerformance.user_id) == User.id",
        viewonly=True,
        lazy="raise",
    )

    def __repr__(self):
        return f"<StudentPerformance {self.user_id} avg={self.average_score}>"


class StudentPerformanceHistory(PerformanceMixin, Base):
    """Snapshots of a student's aggregate over time"""

    __tablename__ = "student_performance_history"

    user_id = Column(Uuid(as_uuid=True), nullable=False, index=True)

    user = relationship(
        "User",
        primaryjoin="foreign(StudentPerformanceHistory.user_id) == User.id",
        viewonly=True,
        lazy="raise",
    )

    def __repr__(self):
        return f"<StudentPerformanceHistory {self.user_id} on {self.created_at}>"


class LearningType(RecordMixin, Base):
    """Per-student counters and points for each learning style"""

    __tablename__ = "learning_types"

    user_id = Column(Uuid(as_uuid=True), nullable=False, unique=True)

    visual_learning_count = Column(Integer, nullable=False, default=0)
    visual_learning_total_point = Column(Float, nullable=False, default=0)
    auditory_learning_count = Column(Integer, nullable=False, default=0)
    auditory_learning_total_point = Column(Float, nullable=False, default=0)
    kinesthetic_learning_count = Column(Integer, nullable=False, default=0)
    kinesthetic_learning_total_point = Column(Float, nullable=False, default=0)
    read_and_write_learning_count = Column(Integer, nullable=False, default=0)
    read_and_write_learning_total_point = Column(Float, nullable=False, default=0)

    user = relationship(
        "User",
        primaryjoin="foreign(LearningType.user_id) == User.id",
        viewonly=True,
        lazy="raise",
    )

    def __repr__(self):
        return f"<LearningType {self.user_id}>"
