"""
ExamPulse – Application Layer
================================
Capa de casos de uso y orquestación.

Este módulo contiene:
- use_cases/: Casos de uso (orquestadores de dominio)
- dto/: Data Transfer Objects

REGLA DE DEPENDENCIA:
Esta capa puede importar de domain/ y shared/.

NO puede importar de:
- infrastructure/ (implementaciones concretas)
- presentation/ (API)
"""

from exampulse.application.use_cases.record_exam_result_usecase import RecordExamResultUseCase
from exampulse.application.use_cases.exam_analytics_usecase import ExamAnalyticsUseCase

__all__ = [
    "RecordExamResultUseCase",
    "ExamAnalyticsUseCase",
]
