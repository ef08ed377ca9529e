"""Domain value objects."""
from exampulse.domain.value_objects.analytics_options import (
    ResultFilter,
    TimeRange,
    SubjectTrend,
    SubjectAveraging,
)
from exampulse.domain.value_objects.progress_summary import ProgressSummary

__all__ = [
    "ResultFilter",
    "TimeRange",
    "SubjectTrend",
    "SubjectAveraging",
    "ProgressSummary",
]
