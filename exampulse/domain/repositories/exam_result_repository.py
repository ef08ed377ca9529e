"""
ExamPulse – Domain Repository Interface: ExamResult
=====================================================
Contrato para cualquier almacén de resultados (en memoria hoy).

ORDEN:
  list_all() devuelve los resultados ordenados por fecha descendente
  (el más reciente primero), igual que la lista de la app.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from exampulse.domain.entities.exam_result import ExamResult


class IExamResultRepository(ABC):
    """Interfaz abstracta para repositorio de resultados."""

    @abstractmethod
    def add(self, result: ExamResult) -> None:
        """
        Agrega un resultado y reordena por fecha descendente.

        Raises:
            DuplicateExamResultError: si el id ya existe.
        """

    @abstractmethod
    def get(self, result_id: str) -> Optional[ExamResult]:
        """Resultado por id, None si no existe."""

    @abstractmethod
    def list_all(self) -> List[ExamResult]:
        """Todos los resultados, más reciente primero."""

    @abstractmethod
    def count(self) -> int:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass
