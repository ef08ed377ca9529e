"""Application DTOs - Data Transfer Objects for use cases."""
from exampulse.application.dto.analytics_dto import (
    RecordExamResultRequestDTO,
    SubjectInsightDTO,
    InsightsResponseDTO,
)

__all__ = [
    "RecordExamResultRequestDTO",
    "SubjectInsightDTO",
    "InsightsResponseDTO",
]
