"""Domain repository interfaces (ABCs)."""
from exampulse.domain.repositories.exam_result_repository import IExamResultRepository

__all__ = ["IExamResultRepository"]
