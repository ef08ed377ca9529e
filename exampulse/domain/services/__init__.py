"""Domain services - Pure business logic with no framework dependencies."""
from exampulse.domain.services.result_analytics import (
    filter_by_category,
    filter_by_time_range,
    subject_averages,
    progress_summary,
    subject_trend,
)
from exampulse.domain.services.exam_catalog import (
    SubjectAnswers,
    build_exam_result,
    compute_net,
    question_limits,
    subjects_for,
    total_questions,
)

__all__ = [
    "filter_by_category",
    "filter_by_time_range",
    "subject_averages",
    "progress_summary",
    "subject_trend",
    "SubjectAnswers",
    "build_exam_result",
    "compute_net",
    "question_limits",
    "subjects_for",
    "total_questions",
]
