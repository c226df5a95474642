"""
Question/answer pairs attached to a learning item or a Python paper.
"""

from sqlalchemy import Column, Float, String, Text, Uuid
from sqlalchemy.orm import relationship

from lms_api.database.db import Base
from lms_api.models.base import RecordMixin


class QandAMixin(RecordMixin):
    question_title = Column(Text, nullable=False)
    question_answer = Column(Text, nullable=False)
    topic_tag = Column(String(100), nullable=True)
    score = Column(Float, nullable=False, default=0)


class VisualQandA(QandAMixin, Base):
    __tablename__ = "visual_qanda"

    visual_learning_id = Column(Uuid(as_uuid=True), nullable=False, index=True)

    parent = relationship(
        "VisualLearning",
        primaryjoin="foreign(VisualQandA.visual_learning_id) == VisualLearning.id",
        viewonly=True,
        lazy="raise",
    )


class AuditoryQandA(QandAMixin, Base):
    __tablename__ = "auditory_qanda"

    auditory_learning_id = Column(Uuid(as_uuid=True), nullable=False, index=True)

    parent = relationship(
        "AuditoryLearning",
        primaryjoin="foreign(AuditoryQandA.auditory_learning_id) == AuditoryLearning.id",
        viewonly=True,
        lazy="raise",
    )


class ReadAndWriteQandA(QandAMixin, Base):
    __tablename__ = "read_and_write_qanda"

    read_and_write_learning_id = Column(Uuid(as_uuid=True), nullable=False, index=True)

    parent = relationship(
        "ReadAndWriteLearning",
        primaryjoin=(
            "foreign(ReadAndWriteQandA.read_and_write_learning_id) == ReadAndWriteLearning.id"
        ),
        viewonly=True,
        lazy="raise",
    )


class PythonQandA(QandAMixin, Base):
    __tablename__ = "python_qanda"

    paper_id = Column(Uuid(as_uuid=True), nullable=False, index=True)

    parent = relationship(
        "PythonPaper",
        primaryjoin="foreign(PythonQandA.paper_id) == PythonPaper.id",
        viewonly=True,
        lazy="raise",
    )
