"""
Record Exam Result Use Case.

Caso de uso para registrar un deneme desde la hoja de respuestas.
"""

from __future__ import annotations

from exampulse.application.dto.analytics_dto import RecordExamResultRequestDTO
from exampulse.domain.entities.exam_result import ExamResult
from exampulse.domain.repositories.exam_result_repository import IExamResultRepository
from exampulse.domain.services.exam_catalog import build_exam_result
from exampulse.shared.logging.logger import get_logger

logger = get_logger("usecase.record_result")


class RecordExamResultUseCase:
    """
    Caso de uso: Registrar un resultado.

    Construye el ExamResult con el catálogo (recorte a límites, net por
    materia) y lo agrega al repositorio. Los errores de validación se
    propagan tal cual al caller.
    """

    def __init__(self, repository: IExamResultRepository):
        self._repository = repository

    def execute(self, request: RecordExamResultRequestDTO) -> ExamResult:
        result = build_exam_result(
            name=request.name,
            exam_type=request.exam_type,
            date=request.date,
            answers=request.answers,
        )
        self._repository.add(result)

        logger.info(
            "Resultado registrado | id=%s type=%s net=%.2f pct=%.1f%% total=%d",
            result.id, result.exam_type.value, result.net_score,
            result.score_percentage, self._repository.count(),
        )
        return result
