"""
ExamPulse – Domain Service: Result Analytics
===============================================
Estadísticas sobre denemes: filtros, promedios por materia, resumen
de progreso y tendencia por materia.

PRINCIPIO CENTRAL:
  Todas las funciones son PURAS. Reciben una secuencia de ExamResult
  y devuelven valores nuevos; no leen estado global ni settings.
  Los defaults configurables los resuelve el caso de uso.

SIN DATOS:
  Nada lanza excepciones por falta de datos. Una lista vacía produce
  una lista vacía, un ProgressSummary en cero o la tendencia STABLE.

VENTANAS TEMPORALES:
  lastWeek         → reference - 7 días
  lastMonth        → reference - 1 mes calendario
  lastThreeMonths  → reference - 3 meses calendario
  allTime          → sin límite

  Los meses se restan con dateutil.relativedelta: el 31/03 menos un
  mes es el 28/02 (o 29/02), no el 01/03 como daría timedelta(30).

══════════════════════════════════════════════════════════════════
  FORMULAS (referencia rapida)
══════════════════════════════════════════════════════════════════

  pct          = net / total * 100
  improvement  = pct(más reciente) - pct(más antiguo)
  tendencia    = último - primero  ≥ +umbral → improving
                                   ≤ -umbral → declining
                                   resto     → stable

══════════════════════════════════════════════════════════════════
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Optional, Sequence

from dateutil.relativedelta import relativedelta

from exampulse.domain.entities.exam_result import ExamResult, SubjectScore, to_naive_utc
from exampulse.domain.value_objects.analytics_options import (
    ResultFilter,
    SubjectAveraging,
    SubjectTrend,
    TimeRange,
)
from exampulse.domain.value_objects.progress_summary import ProgressSummary

DEFAULT_TREND_THRESHOLD = 2.0

_EMPTY_SUMMARY = ProgressSummary()

_WINDOWS: dict[TimeRange, relativedelta] = {
    TimeRange.LAST_WEEK: relativedelta(days=7),
    TimeRange.LAST_MONTH: relativedelta(months=1),
    TimeRange.LAST_THREE_MONTHS: relativedelta(months=3),
}


# ═══════════════════════════════════════════════════════════════════
#  FILTROS
# ═══════════════════════════════════════════════════════════════════

def filter_by_category(
    results: Iterable[ExamResult],
    category: ResultFilter | str,
) -> list[ExamResult]:
    """Resultados de la categoría pedida; ALL devuelve todos."""
    category = ResultFilter(category)
    if category is ResultFilter.ALL:
        return list(results)
    exam_type = category.exam_type
    return [r for r in results if r.exam_type == exam_type]


def filter_by_time_range(
    results: Iterable[ExamResult],
    time_range: TimeRange | str,
    reference_date: Optional[datetime] = None,
) -> list[ExamResult]:
    """
    Resultados con date >= reference_date - ventana.

    Args:
        results: Resultados a filtrar (se conserva el orden).
        time_range: Ventana de recencia.
        reference_date: "Ahora". Se normaliza a naive UTC como las
                        fechas de ExamResult; None = hora UTC actual.
    """
    time_range = TimeRange(time_range)
    results = list(results)
    if time_range is TimeRange.ALL_TIME:
        return results

    if reference_date is None:
        reference_date = _utc_now()
    else:
        reference_date = to_naive_utc(reference_date)
    cutoff = reference_date - _WINDOWS[time_range]
    return [r for r in results if r.date >= cutoff]


# ═══════════════════════════════════════════════════════════════════
#  PROMEDIOS POR MATERIA
# ═══════════════════════════════════════════════════════════════════

def subject_averages(results: Iterable[ExamResult]) -> list[SubjectScore]:
    """
    Media aritmética de cada materia sobre los resultados que la tienen.

    Orden: promedio descendente; empates en orden de aparición
    (sorted es estable). Una materia ausente en un deneme no aporta
    nada a ese deneme (no se rellena con cero).
    """
    totals: dict[str, list[float]] = {}
    for result in results:
        for score in result.subject_scores:
            acc = totals.setdefault(score.subject, [0.0, 0])
            acc[0] += score.score
            acc[1] += 1

    averages = [
        SubjectScore(subject=subject, score=total / count)
        for subject, (total, count) in totals.items()
    ]
    return sorted(averages, key=lambda s: -s.score)


def _per_subject_scores(
    results: Sequence[ExamResult],
    averaging: SubjectAveraging,
) -> dict[str, float]:
    if averaging is SubjectAveraging.MEAN:
        return {s.subject: s.score for s in subject_averages(results)}

    # RUNNING_PAIRWISE: (acumulado + nuevo) / 2, dependiente del orden
    running: dict[str, float] = {}
    for result in results:
        for score in result.subject_scores:
            if score.subject in running:
                running[score.subject] = (running[score.subject] + score.score) / 2
            else:
                running[score.subject] = score.score
    return running


def _first_extreme(scores: dict[str, float], best: bool) -> tuple[str, float]:
    """Máximo/mínimo; en empate gana la primera materia encontrada."""
    chosen_subject, chosen_score = "", 0.0
    for i, (subject, score) in enumerate(scores.items()):
        if i == 0 or (score > chosen_score if best else score < chosen_score):
            chosen_subject, chosen_score = subject, score
    return chosen_subject, chosen_score


# ═══════════════════════════════════════════════════════════════════
#  RESUMEN DE PROGRESO
# ═══════════════════════════════════════════════════════════════════

def progress_summary(
    results: Iterable[ExamResult],
    time_range: TimeRange | str = TimeRange.ALL_TIME,
    reference_date: Optional[datetime] = None,
    averaging: SubjectAveraging | str = SubjectAveraging.MEAN,
) -> ProgressSummary:
    """
    Resumen de progreso sobre los resultados dentro de time_range.

    Pasos:
      1. Filtrar por rango temporal.
      2. Vacío → ProgressSummary en cero.
      3. Medias de net y de porcentaje.
      4. Mejor/peor materia según `averaging`.
      5. improvement = pct(más reciente) - pct(más antiguo).
    """
    averaging = SubjectAveraging(averaging)
    filtered = filter_by_time_range(results, time_range, reference_date)
    if not filtered:
        return _EMPTY_SUMMARY

    n = len(filtered)
    average_net = sum(r.net_score for r in filtered) / n
    average_pct = sum(r.score_percentage for r in filtered) / n

    per_subject = _per_subject_scores(filtered, averaging)
    best_subject, best_score = _first_extreme(per_subject, best=True)
    worst_subject, worst_score = _first_extreme(per_subject, best=False)

    improvement = 0.0
    if n >= 2:
        chronological = sorted(filtered, key=lambda r: r.date)
        improvement = (
            chronological[-1].score_percentage - chronological[0].score_percentage
        )

    return ProgressSummary(
        average_net_score=average_net,
        average_percentage=average_pct,
        best_subject=best_subject,
        best_subject_score=best_score,
        worst_subject=worst_subject,
        worst_subject_score=worst_score,
        improvement=improvement,
        test_count=n,
    )


# ═══════════════════════════════════════════════════════════════════
#  TENDENCIA POR MATERIA
# ═══════════════════════════════════════════════════════════════════

def subject_trend(
    subject: str,
    results: Iterable[ExamResult],
    threshold: float = DEFAULT_TREND_THRESHOLD,
) -> SubjectTrend:
    """
    Compara el primer y el último net de la materia en orden cronológico.

    Menos de 2 apariciones → STABLE.
    """
    scores = []
    for result in sorted(results, key=lambda r: r.date):
        score = result.score_for(subject)
        if score is not None:
            scores.append(score.score)

    if len(scores) < 2:
        return SubjectTrend.STABLE

    difference = scores[-1] - scores[0]
    if difference >= threshold:
        return SubjectTrend.IMPROVING
    if difference <= -threshold:
        return SubjectTrend.DECLINING
    return SubjectTrend.STABLE


def _utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)
