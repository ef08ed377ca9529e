"""
ExamPulse – Analytics options
===============================
Enumeraciones cerradas que parametrizan la analítica. Los valores
son los que acepta la API; label es el texto que muestra la app.
"""

from __future__ import annotations

from enum import Enum

from exampulse.domain.entities.exam_result import ExamType


class ResultFilter(str, Enum):
    """Filtro por categoría de examen ("all" = comodín)."""
    ALL = "all"
    TYT = "TYT"
    AYT = "AYT"
    YDT = "YDT"

    @property
    def label(self) -> str:
        return "Tümü" if self is ResultFilter.ALL else self.value

    @property
    def exam_type(self) -> ExamType | None:
        """ExamType equivalente, None para ALL."""
        if self is ResultFilter.ALL:
            return None
        return ExamType(self.value)


class TimeRange(str, Enum):
    """Ventana de recencia aplicada a la fecha del resultado."""
    LAST_WEEK = "lastWeek"
    LAST_MONTH = "lastMonth"
    LAST_THREE_MONTHS = "lastThreeMonths"
    ALL_TIME = "allTime"

    @property
    def label(self) -> str:
        return _TIME_RANGE_LABELS[self]


_TIME_RANGE_LABELS = {
    TimeRange.LAST_WEEK: "Son Hafta",
    TimeRange.LAST_MONTH: "Son Ay",
    TimeRange.LAST_THREE_MONTHS: "Son 3 Ay",
    TimeRange.ALL_TIME: "Tüm Zamanlar",
}


class SubjectTrend(str, Enum):
    """Tendencia de una materia entre el primer y el último deneme."""
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class SubjectAveraging(str, Enum):
    """
    Cómo se promedia cada materia para elegir mejor/peor materia.

    MEAN:             media aritmética real.
    RUNNING_PAIRWISE: cada aparición se promedia con el valor acumulado
                      ((acc + x) / 2). Depende del orden; solo existe
                      para reproducir los números de la app móvil.
    """
    MEAN = "mean"
    RUNNING_PAIRWISE = "running_pairwise"
