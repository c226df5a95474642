from sqlalchemy import Column, Text, Uuid
from sqlalchemy.orm import relationship

from lms_api.database.db import Base
from lms_api.models.base import RecordMixin


class TeacherGuide(RecordMixin, Base):
    """Instructional document authored by a teacher; parent of most content."""

    __tablename__ = "teacher_guides"

    course_info = Column(Text, nullable=False)
    original_teacher_guide = Column(Text, nullable=False)
    created_by = Column(Uuid(as_uuid=True), nullable=False, index=True)

    creator = relationship(
        "User",
        primaryjoin="foreign(TeacherGuide.created_by) == User.id",
        viewonly=True,
        lazy="raise",
    )

    def __repr__(self):
        return f"<TeacherGuide {self.id}>"


class TeacherGuideFeedback(RecordMixin, Base):
    __tablename__ = "teacher_guide_feedbacks"

    teacher_guide_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    student_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    student_feedback = Column(Text, nullable=False)

    teacher_guide = relationship(
        "TeacherGuide",
        primaryjoin="foreign(TeacherGuideFeedback.teacher_guide_id) == TeacherGuide.id",
        viewonly=True,
        lazy="raise",
    )
    student = relationship(
        "User",
        primaryjoin="foreign(TeacherGuideFeedback.student_id) == User.id",
        viewonly=True,
        lazy="raise",
    )

    def __repr__(self):
        return f"<TeacherGuideFeedback {self.student_id} -> {self.teacher_guide_id}>"
