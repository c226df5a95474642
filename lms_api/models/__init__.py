from lms_api.models.users import User, UserRole
from lms_api.models.teacher_guides import TeacherGuide, TeacherGuideFeedback
from lms_api.models.learning import (
    AuditoryLearning,
    KinestheticLearning,
    ReadAndWriteLearning,
    VisualLearning,
)
from lms_api.models.qanda import AuditoryQandA, PythonQandA, ReadAndWriteQandA, VisualQandA
from lms_api.models.papers import PythonPaper, StartingPaperQuestion, StartingPaperTitle
from lms_api.models.lectures import CompletedLecture, Feedback, PythonVideoLecture
from lms_api.models.progress import (
    LearningType,
    StudentPerformance,
    StudentPerformanceHistory,
)

__all__ = [
    "User",
    "UserRole",
    "TeacherGuide",
    "TeacherGuideFeedback",
    "VisualLearning",
    "AuditoryLearning",
    "KinestheticLearning",
    "ReadAndWriteLearning",
    "VisualQandA",
    "AuditoryQandA",
    "ReadAndWriteQandA",
    "PythonQandA",
    "PythonPaper",
    "StartingPaperTitle",
    "StartingPaperQuestion",
    "PythonVideoLecture",
    "Feedback",
    "CompletedLecture",
    "StudentPerformance",
    "StudentPerformanceHistory",
    "LearningType",
]
