"""
ExamPulse – Application DTO: Analytics
========================================
Data Transfer Objects de entrada/salida de los casos de uso.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List

from exampulse.domain.entities.exam_result import ExamType
from exampulse.domain.services.exam_catalog import SubjectAnswers
from exampulse.domain.value_objects.analytics_options import (
    ResultFilter,
    SubjectTrend,
    TimeRange,
)
from exampulse.domain.value_objects.progress_summary import ProgressSummary


@dataclass
class RecordExamResultRequestDTO:
    """Hoja de respuestas de un deneme nuevo."""

    name: str
    exam_type: ExamType
    date: datetime
    answers: Dict[str, SubjectAnswers] = field(default_factory=dict)


@dataclass
class SubjectInsightDTO:
    """Promedio y tendencia de una materia."""

    subject: str
    average: float
    trend: SubjectTrend

    def to_dict(self) -> Dict[str, Any]:
        return {
            "subject": self.subject,
            "average": round(self.average, 2),
            "trend": self.trend.value,
        }


@dataclass
class InsightsResponseDTO:
    """Resumen + promedios + tendencias en un solo payload."""

    category: ResultFilter
    time_range: TimeRange
    summary: ProgressSummary
    subjects: List[SubjectInsightDTO] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "time_range": self.time_range.value,
            "summary": self.summary.to_dict(),
            "subjects": [s.to_dict() for s in self.subjects],
        }
