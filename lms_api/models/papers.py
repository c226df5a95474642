from sqlalchemy import JSON, Column, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import relationship

from lms_api.database.db import Base
from lms_api.models.base import RecordMixin


class PythonPaper(RecordMixin, Base):
    __tablename__ = "python_papers"

    paper_title = Column(String(255), nullable=False)
    paper_difficulty = Column(String(50), nullable=True)
    teacher_guide_id = Column(Uuid(as_uuid=True), nullable=False, index=True)

    teacher_guide = relationship(
        "TeacherGuide",
        primaryjoin="foreign(PythonPaper.teacher_guide_id) == TeacherGuide.id",
        viewonly=True,
        lazy="raise",
    )

    def __repr__(self):
        return f"<PythonPaper {self.paper_title}>"


class StartingPaperTitle(RecordMixin, Base):
    """Entrance paper a new student sits before being assigned a learning style."""

    __tablename__ = "starting_paper_titles"

    paper_title = Column(String(255), nullable=False)
    paper_number = Column(Integer, nullable=False)
    created_by = Column(Uuid(as_uuid=True), nullable=False, index=True)

    creator = relationship(
        "User",
        primaryjoin="foreign(StartingPaperTitle.created_by) == User.id",
        viewonly=True,
        lazy="raise",
    )

    def __repr__(self):
        return f"<StartingPaperTitle {self.paper_number}: {self.paper_title}>"


class StartingPaperQuestion(RecordMixin, Base):
    __tablename__ = "starting_paper_questions"
    __table_args__ = (
        Index(
            "ix_starting_paper_questions_paper_created",
            "starting_paper_id",
            "created_at",
        ),
    )

    starting_paper_id = Column(Uuid(as_uuid=True), nullable=False)
    question_title = Column(Text, nullable=False)
    category = Column(String(100), nullable=True)
    answers = Column(JSON, nullable=False, default=list)  # optional MCQ options
    correct_answer = Column(Text, nullable=False)

    def __repr__(self):
        return f"<StartingPaperQuestion {self.id}>"
