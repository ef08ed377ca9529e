"""
Exam Analytics Use Case.

Caso de uso para consultar resultados y calcular la analítica con los
defaults configurados (rango temporal, modo de promedio, umbral).
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from exampulse.application.dto.analytics_dto import InsightsResponseDTO, SubjectInsightDTO
from exampulse.domain.entities.exam_result import ExamResult, SubjectScore
from exampulse.domain.exceptions.domain_errors import ExamResultNotFoundError
from exampulse.domain.repositories.exam_result_repository import IExamResultRepository
from exampulse.domain.services import result_analytics
from exampulse.domain.services.result_analytics import DEFAULT_TREND_THRESHOLD
from exampulse.domain.value_objects.analytics_options import (
    ResultFilter,
    SubjectAveraging,
    SubjectTrend,
    TimeRange,
)
from exampulse.domain.value_objects.progress_summary import ProgressSummary
from exampulse.shared.logging.logger import get_logger

logger = get_logger("usecase.analytics")


class ExamAnalyticsUseCase:
    """
    Caso de uso: Analítica de denemes.

    Todas las consultas parten del conjunto filtrado por categoría,
    igual que la pantalla de resultados de la app.
    """

    def __init__(
        self,
        repository: IExamResultRepository,
        default_time_range: TimeRange | str = TimeRange.LAST_MONTH,
        averaging: SubjectAveraging | str = SubjectAveraging.MEAN,
        trend_threshold: float = DEFAULT_TREND_THRESHOLD,
    ):
        self._repository = repository
        self._default_time_range = TimeRange(default_time_range)
        self._averaging = SubjectAveraging(averaging)
        self._trend_threshold = trend_threshold

    def list_results(self, category: ResultFilter | str = ResultFilter.ALL) -> List[ExamResult]:
        """Resultados de la categoría, más reciente primero."""
        return result_analytics.filter_by_category(self._repository.list_all(), category)

    def get_result(self, result_id: str) -> ExamResult:
        result = self._repository.get(result_id)
        if result is None:
            raise ExamResultNotFoundError(result_id)
        return result

    def chart_data(self, category: ResultFilter | str = ResultFilter.ALL) -> List[SubjectScore]:
        """Promedio por materia, mayor primero."""
        return result_analytics.subject_averages(self.list_results(category))

    def progress(
        self,
        category: ResultFilter | str = ResultFilter.ALL,
        time_range: Optional[TimeRange | str] = None,
        averaging: Optional[SubjectAveraging | str] = None,
        reference_date: Optional[datetime] = None,
    ) -> ProgressSummary:
        summary = result_analytics.progress_summary(
            self.list_results(category),
            time_range=time_range or self._default_time_range,
            reference_date=reference_date,
            averaging=averaging or self._averaging,
        )
        logger.debug(
            "Progreso calculado | category=%s range=%s tests=%d improvement=%.2f",
            ResultFilter(category).value, TimeRange(time_range or self._default_time_range).value,
            summary.test_count, summary.improvement,
        )
        return summary

    def subject_trend(
        self,
        subject: str,
        category: ResultFilter | str = ResultFilter.ALL,
    ) -> SubjectTrend:
        return result_analytics.subject_trend(
            subject, self.list_results(category), threshold=self._trend_threshold,
        )

    def insights(
        self,
        category: ResultFilter | str = ResultFilter.ALL,
        time_range: Optional[TimeRange | str] = None,
        reference_date: Optional[datetime] = None,
    ) -> InsightsResponseDTO:
        """
        Resumen del rango + promedio y tendencia de cada materia.

        Promedios y tendencias usan todo el conjunto de la categoría;
        solo el resumen se recorta al rango temporal.
        """
        category = ResultFilter(category)
        time_range = TimeRange(time_range or self._default_time_range)
        results = self.list_results(category)

        subjects = [
            SubjectInsightDTO(
                subject=avg.subject,
                average=avg.score,
                trend=result_analytics.subject_trend(
                    avg.subject, results, threshold=self._trend_threshold,
                ),
            )
            for avg in result_analytics.subject_averages(results)
        ]
        summary = result_analytics.progress_summary(
            results, time_range=time_range,
            reference_date=reference_date, averaging=self._averaging,
        )
        return InsightsResponseDTO(
            category=category,
            time_range=time_range,
            summary=summary,
            subjects=subjects,
        )
