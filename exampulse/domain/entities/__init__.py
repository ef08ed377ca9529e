"""Domain entities."""
from exampulse.domain.entities.exam_result import ExamResult, ExamType, SubjectScore

__all__ = ["ExamResult", "ExamType", "SubjectScore"]
