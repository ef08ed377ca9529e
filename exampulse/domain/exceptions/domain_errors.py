"""
ExamPulse – Domain Exceptions
================================
Excepciones específicas del dominio de negocio.

La analítica NO lanza excepciones por falta de datos: un conjunto
vacío produce un resumen en cero. Estas excepciones cubren la
construcción y el almacenamiento de resultados.

JERARQUÍA:
    DomainError (base)
    ├── ValidationError
    │   └── InvalidExamResultError
    ├── ExamResultNotFoundError
    └── DuplicateExamResultError
"""

from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Excepción base para errores de dominio."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self) -> dict:
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainError):
    """Error de validación general de datos de entrada."""

    def __init__(self, message: str, field: str = None, value: Any = None):
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field
        self.value = value


class InvalidExamResultError(ValidationError):
    """Un ExamResult viola sus invariantes (conteos, total de preguntas)."""

    def __init__(self, message: str, field: str = None, value: Any = None):
        super().__init__(message, field=field, value=value)
        self.code = "INVALID_EXAM_RESULT"


class ExamResultNotFoundError(DomainError):
    """No existe un resultado con el id solicitado."""

    def __init__(self, result_id: str):
        super().__init__(f"Resultado no encontrado: {result_id}", code="RESULT_NOT_FOUND")
        self.result_id = result_id


class DuplicateExamResultError(DomainError):
    """Ya existe un resultado almacenado con el mismo id."""

    def __init__(self, result_id: str):
        super().__init__(f"Resultado duplicado: {result_id}", code="DUPLICATE_RESULT")
        self.result_id = result_id
