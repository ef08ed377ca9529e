"""Application use cases."""
from exampulse.application.use_cases.record_exam_result_usecase import RecordExamResultUseCase
from exampulse.application.use_cases.exam_analytics_usecase import ExamAnalyticsUseCase

__all__ = ["RecordExamResultUseCase", "ExamAnalyticsUseCase"]
