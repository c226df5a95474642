"""
Python video lectures, the feedback students leave on them, and the
per-student completion log used to unlock the next item.
"""

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship

from lms_api.database.db import Base
from lms_api.models.base import RecordMixin, utcnow


class PythonVideoLecture(RecordMixin, Base):
    __tablename__ = "python_video_lectures"

    lecture_type = Column(Integer, nullable=False)  # 1=video, 2=no video, 3=material only
    lecture_title = Column(String(255), nullable=False)
    lecture_difficulty = Column(String(50), nullable=True)
    teacher_guide_id = Column(Uuid(as_uuid=True), nullable=True, index=True)
    video_url = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    pdf_materials = Column(JSON, nullable=False, default=list)
    created_by = Column(Uuid(as_uuid=True), nullable=False, index=True)

    teacher_guide = relationship(
        "TeacherGuide",
        primaryjoin="foreign(PythonVideoLecture.teacher_guide_id) == TeacherGuide.id",
        viewonly=True,
        lazy="raise",
    )
    creator = relationship(
        "User",
        primaryjoin="foreign(PythonVideoLecture.created_by) == User.id",
        viewonly=True,
        lazy="raise",
    )

    def __repr__(self):
        return f"<PythonVideoLecture {self.lecture_title}>"


class Feedback(RecordMixin, Base):
    """One rating per student per lecture."""

    __tablename__ = "feedbacks"
    __table_args__ = (
        UniqueConstraint("user_id", "video_lecture_id", name="uq_feedback_user_video"),
    )

    feedback = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False)  # 1..5
    video_lecture_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    user_id = Column(Uuid(as_uuid=True), nullable=False, index=True)

    video_lecture = relationship(
        "PythonVideoLecture",
        primaryjoin="foreign(Feedback.video_lecture_id) == PythonVideoLecture.id",
        viewonly=True,
        lazy="raise",
    )
    user = relationship(
        "User",
        primaryjoin="foreign(Feedback.user_id) == User.id",
        viewonly=True,
        lazy="raise",
    )

    def __repr__(self):
        return f"<Feedback {self.user_id} -> {self.video_lecture_id}: {self.rating}>"


class CompletedLecture(RecordMixin, Base):
    __tablename__ = "completed_lectures"
    __table_args__ = (
        UniqueConstraint(
            "user_id",
            "lecture_id",
            "lecture_type",
            name="uq_completed_lecture_user_lecture_type",
        ),
    )

    user_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    lecture_id = Column(String(64), nullable=False)
    lecture_type = Column(String(50), nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    def __repr__(self):
        return f"<CompletedLecture {self.user_id} {self.lecture_type}/{self.lecture_id}>"
