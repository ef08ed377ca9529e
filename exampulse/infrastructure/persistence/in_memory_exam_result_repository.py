"""
ExamPulse – In-memory ExamResult repository
=============================================
Almacén de resultados que vive lo que vive el proceso.

DISEÑO:
  - Lista ordenada por fecha descendente tras cada alta (el orden de
    la app: el deneme más reciente arriba). El sort es estable, así
    que dos denemes del mismo día conservan el orden de carga.
  - Índice por id para lookup O(1).
  - Capacidad limitada (max_results) → protección de memoria. Al
    superarla se descartan los resultados más antiguos.

THREADING:
  Todo corre en un solo event-loop asyncio. No se necesitan locks.
"""

from __future__ import annotations

from typing import List, Optional

from exampulse.domain.entities.exam_result import ExamResult
from exampulse.domain.exceptions.domain_errors import DuplicateExamResultError
from exampulse.domain.repositories.exam_result_repository import IExamResultRepository
from exampulse.shared.logging.logger import get_logger

logger = get_logger("persistence.memory")

DEFAULT_MAX_RESULTS = 1000


class InMemoryExamResultRepository(IExamResultRepository):
    """
    Invariantes:
      - ids únicos.
      - _results siempre ordenada por date descendente.
      - len(_results) <= max_results.
    """

    def __init__(self, max_results: int = DEFAULT_MAX_RESULTS) -> None:
        self._max_results = max_results
        self._results: list[ExamResult] = []
        self._by_id: dict[str, ExamResult] = {}

    # ════════════════════════════════════════════════════════════════
    #  ESCRITURA
    # ════════════════════════════════════════════════════════════════

    def add(self, result: ExamResult) -> None:
        if result.id in self._by_id:
            raise DuplicateExamResultError(result.id)

        # Se ordena una lista nueva: si el sort falla el estado queda intacto
        results = sorted([*self._results, result], key=lambda r: r.date, reverse=True)
        self._results = results
        self._by_id[result.id] = result

        while len(self._results) > self._max_results:
            dropped = self._results.pop()
            del self._by_id[dropped.id]
            logger.info("Capacidad alcanzada, descartado %s (%s)", dropped.id, dropped.date.date())

    def clear(self) -> None:
        self._results.clear()
        self._by_id.clear()

    # ════════════════════════════════════════════════════════════════
    #  CONSULTAS
    # ════════════════════════════════════════════════════════════════

    def get(self, result_id: str) -> Optional[ExamResult]:
        return self._by_id.get(result_id)

    def list_all(self) -> List[ExamResult]:
        return list(self._results)

    def count(self) -> int:
        return len(self._results)
