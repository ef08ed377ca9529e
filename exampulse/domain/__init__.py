"""
ExamPulse – Domain Layer
===========================
Núcleo del sistema. Sin frameworks (FastAPI, pydantic).

Este módulo contiene:
- entities/: ExamResult, SubjectScore, ExamType
- value_objects/: ProgressSummary y enumeraciones de analítica
- services/: Analítica de resultados y catálogo de exámenes
- repositories/: Interfaces abstractas (ABCs)
- exceptions/: Excepciones de dominio

REGLA DE DEPENDENCIA:
Este módulo NO puede importar de:
- infrastructure/
- presentation/
- application/
"""

from exampulse.domain.entities.exam_result import ExamResult, ExamType, SubjectScore
from exampulse.domain.value_objects.progress_summary import ProgressSummary

__all__ = [
    "ExamResult",
    "ExamType",
    "SubjectScore",
    "ProgressSummary",
]
