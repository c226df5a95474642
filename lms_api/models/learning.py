"""
Content items for the four learning styles. Each one hangs off a TeacherGuide.
"""

from sqlalchemy import Column, String, Text, Uuid
from sqlalchemy.orm import relationship

from lms_api.database.db import Base
from lms_api.models.base import RecordMixin


def _guide_relationship(owner: str):
    return relationship(
        "TeacherGuide",
        primaryjoin=f"foreign({owner}.teacher_guide_id) == TeacherGuide.id",
        viewonly=True,
        lazy="raise",
    )


class VisualLearning(RecordMixin, Base):
    __tablename__ = "visual_learning"

    teacher_guide_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    video_url = Column(String, nullable=False)

    teacher_guide = _guide_relationship("VisualLearning")

    def __repr__(self):
        return f"<VisualLearning {self.title}>"


class AuditoryLearning(RecordMixin, Base):
    __tablename__ = "auditory_learning"

    teacher_guide_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    audio_url = Column(String, nullable=False)

    teacher_guide = _guide_relationship("AuditoryLearning")

    def __repr__(self):
        return f"<AuditoryLearning {self.title}>"


class KinestheticLearning(RecordMixin, Base):
    """Hands-on activity: a question, how to approach it, and the answer."""

    __tablename__ = "kinesthetic_learning"

    teacher_guide_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    question = Column(Text, nullable=False)
    instruction = Column(Text, nullable=True)
    answer = Column(Text, nullable=False)

    teacher_guide = _guide_relationship("KinestheticLearning")

    def __repr__(self):
        return f"<KinestheticLearning {self.title}>"


class ReadAndWriteLearning(RecordMixin, Base):
    __tablename__ = "read_and_write_learning"

    teacher_guide_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    teacher_guide = _guide_relationship("ReadAndWriteLearning")

    def __repr__(self):
        return f"<ReadAndWriteLearning {self.title}>"
